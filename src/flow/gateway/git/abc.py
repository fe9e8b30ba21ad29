"""Abstract base class for git operations used by flow.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation with mutation tracking for tests
- DryRunGit: Wrapper that prints mutations instead of running them
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real, fake, dry-run) must implement this interface.
    Network-touching queries raise RuntimeError on transport failure so that
    callers can tell "branch absent" apart from "could not ask".
    """

    # ============================================================================
    # Repository Queries
    # ============================================================================

    @abstractmethod
    def is_inside_work_tree(self, cwd: Path) -> bool:
        """Return True if cwd is inside a git working tree."""
        ...

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path:
        """Get the top-level directory of the working tree containing cwd.

        Raises:
            RuntimeError: If cwd is not inside a git working tree
        """
        ...

    @abstractmethod
    def list_remotes(self, repo_root: Path) -> list[str]:
        """List configured remote names in the order git reports them.

        Returns:
            Remote names; empty if the repository has no remotes
        """
        ...

    # ============================================================================
    # Branch Queries
    # ============================================================================

    @abstractmethod
    def branch_exists_on_remote(self, repo_root: Path, remote: str, branch: str) -> bool:
        """Check if a branch head exists on a remote (one network round trip).

        Raises:
            RuntimeError: If the remote cannot be queried
        """
        ...

    @abstractmethod
    def local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check if refs/heads/<branch> exists."""
        ...

    @abstractmethod
    def remote_tracking_branch_exists(self, repo_root: Path, remote: str, branch: str) -> bool:
        """Check if refs/remotes/<remote>/<branch> exists."""
        ...

    # ============================================================================
    # Mutations
    # ============================================================================

    @abstractmethod
    def fetch_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        """Fetch a specific branch from a remote.

        Raises:
            RuntimeError: If git fetch fails
        """
        ...

    @abstractmethod
    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout an existing local branch."""
        ...

    @abstractmethod
    def checkout_new_tracking_branch(self, cwd: Path, branch: str, remote_ref: str) -> None:
        """Create a local branch tracking remote_ref and check it out.

        Command: git checkout -b <branch> <remote_ref>
        """
        ...

    @abstractmethod
    def checkout_new_branch(self, cwd: Path, branch: str) -> None:
        """Create a local branch at HEAD and check it out.

        Command: git checkout -b <branch>
        """
        ...

    @abstractmethod
    def clone(self, url: str, destination: Path) -> None:
        """Clone a repository into destination.

        Raises:
            RuntimeError: If git clone fails
        """
        ...
