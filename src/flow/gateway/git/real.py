"""Production implementation of Git using subprocess."""

import subprocess
from pathlib import Path

from flow.gateway.git.abc import Git
from flow.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context

# Timeout in seconds for network-touching git operations (ls-remote, fetch, clone).
# Prevents indefinite hangs on network issues or credential prompts.
_GIT_NETWORK_TIMEOUT = 120

# Placed before user-supplied names so git never parses them as options (git >= 2.24).
_END_OF_OPTIONS = "--end-of-options"


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def is_inside_work_tree(self, cwd: Path) -> bool:
        result = subprocess.run(
            ["git", "rev-parse", "--is-inside-work-tree"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0 and result.stdout.strip() == "true"

    def get_repository_root(self, cwd: Path) -> Path:
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--show-toplevel"],
            operation_context="find repository root",
            cwd=cwd,
        )
        return Path(result.stdout.strip())

    def list_remotes(self, repo_root: Path) -> list[str]:
        result = run_subprocess_with_context(
            cmd=["git", "remote"],
            operation_context="list remotes",
            cwd=repo_root,
        )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def branch_exists_on_remote(self, repo_root: Path, remote: str, branch: str) -> bool:
        """Check if a branch exists on a remote via `git ls-remote --heads`.

        ls-remote matches patterns by trailing path components, so
        "feature" would also match "other/feature". Compare full refs instead.
        """
        full_ref = f"refs/heads/{branch}"
        result = run_subprocess_with_context(
            cmd=["git", "ls-remote", "--heads", remote, full_ref],
            operation_context=f"check branch '{branch}' on remote '{remote}'",
            cwd=repo_root,
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )
        for line in result.stdout.splitlines():
            parts = line.split("\t", 1)
            if len(parts) == 2 and parts[1].strip() == full_ref:
                return True
        return False

    def local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        return self._ref_exists(repo_root, f"refs/heads/{branch}")

    def remote_tracking_branch_exists(self, repo_root: Path, remote: str, branch: str) -> bool:
        return self._ref_exists(repo_root, f"refs/remotes/{remote}/{branch}")

    def _ref_exists(self, repo_root: Path, ref: str) -> bool:
        result = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", ref],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0

    def fetch_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        """Fetch a specific branch from a remote."""
        run_subprocess_with_context(
            cmd=["git", "fetch", _END_OF_OPTIONS, remote, branch],
            operation_context=f"fetch branch '{branch}' from remote '{remote}'",
            cwd=repo_root,
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        run_subprocess_with_context(
            cmd=["git", "checkout", _END_OF_OPTIONS, branch],
            operation_context=f"checkout branch '{branch}'",
            cwd=cwd,
        )

    def checkout_new_tracking_branch(self, cwd: Path, branch: str, remote_ref: str) -> None:
        run_subprocess_with_context(
            cmd=["git", "checkout", "-b", branch, _END_OF_OPTIONS, remote_ref],
            operation_context=f"create branch '{branch}' tracking '{remote_ref}'",
            cwd=cwd,
        )

    def checkout_new_branch(self, cwd: Path, branch: str) -> None:
        run_subprocess_with_context(
            cmd=["git", "checkout", "-b", branch],
            operation_context=f"create branch '{branch}'",
            cwd=cwd,
        )

    def clone(self, url: str, destination: Path) -> None:
        run_subprocess_with_context(
            cmd=["git", "clone", _END_OF_OPTIONS, url, str(destination)],
            operation_context=f"clone '{url}'",
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )
