"""No-op Git wrapper for dry-run mode."""

from pathlib import Path

from flow.gateway.git.abc import Git
from flow.output import user_output


class DryRunGit(Git):
    """No-op wrapper that prevents execution of mutating git operations.

    Queries pass through to the wrapped implementation. Fetch also passes
    through since it only updates remote-tracking refs and the checkout
    decision depends on it.

    Usage:
        real_git = RealGit()
        noop_git = DryRunGit(real_git)

        # Prints message instead of checking out
        noop_git.checkout_branch(cwd, "feature")
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Query Operations (pass-through delegation)
    # ============================================================================

    def is_inside_work_tree(self, cwd: Path) -> bool:
        return self._wrapped.is_inside_work_tree(cwd)

    def get_repository_root(self, cwd: Path) -> Path:
        return self._wrapped.get_repository_root(cwd)

    def list_remotes(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_remotes(repo_root)

    def branch_exists_on_remote(self, repo_root: Path, remote: str, branch: str) -> bool:
        return self._wrapped.branch_exists_on_remote(repo_root, remote, branch)

    def local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        return self._wrapped.local_branch_exists(repo_root, branch)

    def remote_tracking_branch_exists(self, repo_root: Path, remote: str, branch: str) -> bool:
        return self._wrapped.remote_tracking_branch_exists(repo_root, remote, branch)

    def fetch_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        self._wrapped.fetch_branch(repo_root, remote, branch)

    # ============================================================================
    # Mutations (print instead of execute)
    # ============================================================================

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        user_output(f"[DRY RUN] Would run: git checkout {branch}")

    def checkout_new_tracking_branch(self, cwd: Path, branch: str, remote_ref: str) -> None:
        user_output(f"[DRY RUN] Would run: git checkout -b {branch} {remote_ref}")

    def checkout_new_branch(self, cwd: Path, branch: str) -> None:
        user_output(f"[DRY RUN] Would run: git checkout -b {branch}")

    def clone(self, url: str, destination: Path) -> None:
        user_output(f"[DRY RUN] Would run: git clone {url} {destination}")
