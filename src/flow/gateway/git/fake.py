"""Fake implementation of Git for testing."""

from __future__ import annotations

from pathlib import Path

from flow.gateway.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of Git.

    State Management:
    -----------------
    This fake maintains mutable state to simulate git's stateful behavior.
    fetch_branch copies a branch from remote_branches into the
    remote-tracking refs, and checkout operations create local branches, so
    state changes are visible to later calls within the same test.

    Constructor Injection:
    ---------------------
    - remotes: Mapping of repo_root -> remote names in listing order
    - remote_branches: Mapping of repo_root -> {remote: [branch, ...]} on the server
    - remote_tracking_branches: Mapping of repo_root -> ["origin/main", ...] already fetched
    - local_branches: Mapping of repo_root -> list of local branch names
    - current_branches: Mapping of cwd -> current branch (updated by checkout)
    - repository_roots: Mapping of cwd -> repository root (absent means not a repo)
    - list_remotes_raises: Exception to raise from list_remotes()
    - remote_probe_raises: Exception to raise from branch_exists_on_remote()
    - fetch_raises: Exception to raise from fetch_branch()
    - clone_raises: Exception to raise from clone()

    Mutation Tracking:
    -----------------
    This fake tracks mutations for test assertions via read-only properties:
    - remote_probes: (remote, branch) tuples from branch_exists_on_remote()
    - fetched_branches: (remote, branch) tuples from fetch_branch()
    - checked_out_branches: (cwd, branch) tuples from checkout_branch()
    - created_tracking_branches: (branch, remote_ref) tuples
    - created_branches: (cwd, branch) tuples from checkout_new_branch()
    - cloned_repositories: (url, destination) tuples from clone()
    """

    def __init__(
        self,
        *,
        remotes: dict[Path, list[str]] | None = None,
        remote_branches: dict[Path, dict[str, list[str]]] | None = None,
        remote_tracking_branches: dict[Path, list[str]] | None = None,
        local_branches: dict[Path, list[str]] | None = None,
        current_branches: dict[Path, str | None] | None = None,
        repository_roots: dict[Path, Path] | None = None,
        list_remotes_raises: Exception | None = None,
        remote_probe_raises: Exception | None = None,
        fetch_raises: Exception | None = None,
        clone_raises: Exception | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            remotes: Mapping of repo_root -> remote names in listing order
            remote_branches: Mapping of repo_root -> {remote: branches on the server}
            remote_tracking_branches: Mapping of repo_root -> fetched "<remote>/<branch>" refs
            local_branches: Mapping of repo_root -> local branch names
            current_branches: Mapping of cwd -> current branch
            repository_roots: Mapping of cwd -> repository root
            list_remotes_raises: Exception to raise when listing remotes
            remote_probe_raises: Exception to raise when probing a remote
            fetch_raises: Exception to raise when fetching
            clone_raises: Exception to raise when cloning
        """
        self._remotes = remotes if remotes is not None else {}
        self._remote_branches = remote_branches if remote_branches is not None else {}
        self._remote_tracking_branches = (
            remote_tracking_branches if remote_tracking_branches is not None else {}
        )
        self._local_branches = local_branches if local_branches is not None else {}
        self._current_branches = current_branches if current_branches is not None else {}
        self._repository_roots = repository_roots if repository_roots is not None else {}
        self._list_remotes_raises = list_remotes_raises
        self._remote_probe_raises = remote_probe_raises
        self._fetch_raises = fetch_raises
        self._clone_raises = clone_raises

        # Mutation tracking
        self._remote_probes: list[tuple[str, str]] = []
        self._fetched_branches: list[tuple[str, str]] = []
        self._checked_out_branches: list[tuple[Path, str]] = []
        self._created_tracking_branches: list[tuple[str, str]] = []
        self._created_branches: list[tuple[Path, str]] = []
        self._cloned_repositories: list[tuple[str, Path]] = []

    # ============================================================================
    # Repository Queries
    # ============================================================================

    def is_inside_work_tree(self, cwd: Path) -> bool:
        return cwd in self._repository_roots

    def get_repository_root(self, cwd: Path) -> Path:
        if cwd not in self._repository_roots:
            raise RuntimeError(f"Failed to find repository root\nNot a git repository: {cwd}")
        return self._repository_roots[cwd]

    def list_remotes(self, repo_root: Path) -> list[str]:
        if self._list_remotes_raises is not None:
            raise self._list_remotes_raises
        return list(self._remotes.get(repo_root, []))

    # ============================================================================
    # Branch Queries
    # ============================================================================

    def branch_exists_on_remote(self, repo_root: Path, remote: str, branch: str) -> bool:
        self._remote_probes.append((remote, branch))
        if self._remote_probe_raises is not None:
            raise self._remote_probe_raises
        return branch in self._remote_branches.get(repo_root, {}).get(remote, [])

    def local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        return branch in self._local_branches.get(repo_root, [])

    def remote_tracking_branch_exists(self, repo_root: Path, remote: str, branch: str) -> bool:
        return f"{remote}/{branch}" in self._remote_tracking_branches.get(repo_root, [])

    # ============================================================================
    # Mutations
    # ============================================================================

    def fetch_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        """Record the fetch and copy the server branch into remote-tracking refs."""
        self._fetched_branches.append((remote, branch))
        if self._fetch_raises is not None:
            raise self._fetch_raises
        if branch in self._remote_branches.get(repo_root, {}).get(remote, []):
            tracking = self._remote_tracking_branches.setdefault(repo_root, [])
            remote_ref = f"{remote}/{branch}"
            if remote_ref not in tracking:
                tracking.append(remote_ref)

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        self._checked_out_branches.append((cwd, branch))
        self._current_branches[cwd] = branch

    def checkout_new_tracking_branch(self, cwd: Path, branch: str, remote_ref: str) -> None:
        self._created_tracking_branches.append((branch, remote_ref))
        self._add_local_branch(cwd, branch)
        self._current_branches[cwd] = branch

    def checkout_new_branch(self, cwd: Path, branch: str) -> None:
        self._created_branches.append((cwd, branch))
        self._add_local_branch(cwd, branch)
        self._current_branches[cwd] = branch

    def clone(self, url: str, destination: Path) -> None:
        if self._clone_raises is not None:
            raise self._clone_raises
        self._cloned_repositories.append((url, destination))

    def _add_local_branch(self, cwd: Path, branch: str) -> None:
        repo_root = self._repository_roots.get(cwd, cwd)
        branches = self._local_branches.setdefault(repo_root, [])
        if branch not in branches:
            branches.append(branch)

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    def current_branch(self, cwd: Path) -> str | None:
        """Current branch for cwd, as updated by checkout operations."""
        return self._current_branches.get(cwd)

    @property
    def remote_probes(self) -> list[tuple[str, str]]:
        """Read-only access to (remote, branch) probes for test assertions."""
        return list(self._remote_probes)

    @property
    def fetched_branches(self) -> list[tuple[str, str]]:
        """Read-only access to fetched branches for test assertions.

        Returns list of (remote, branch) tuples.
        """
        return list(self._fetched_branches)

    @property
    def checked_out_branches(self) -> list[tuple[Path, str]]:
        """Read-only access to (cwd, branch) checkouts for test assertions."""
        return list(self._checked_out_branches)

    @property
    def created_tracking_branches(self) -> list[tuple[str, str]]:
        """Read-only access to (branch, remote_ref) tracking branches for test assertions."""
        return list(self._created_tracking_branches)

    @property
    def created_branches(self) -> list[tuple[Path, str]]:
        """Read-only access to (cwd, branch) new branches for test assertions."""
        return list(self._created_branches)

    @property
    def cloned_repositories(self) -> list[tuple[str, Path]]:
        """Read-only access to (url, destination) clones for test assertions."""
        return list(self._cloned_repositories)
