"""Types for branch reference resolution and GitHub URL parsing.

Results follow the NonIdealState pattern: operations return either a
success type (RefSpec, ResolvedCheckout, GitHubRepoRef) or one of the
frozen error dataclasses below.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from flow.non_ideal_state import NonIdealState


class CheckoutMode(Enum):
    """How a resolved branch is materialized in the working tree."""

    SWITCH_EXISTING_LOCAL = "switch-existing-local"
    CREATE_FROM_REMOTE = "create-from-remote"


@dataclass(frozen=True)
class RefSpec:
    """Parsed user input for a checkout.

    Attributes:
        candidates: Plausible branch names, most authoritative first. Never empty.
        pinned_remote: Remote named explicitly in `remote/branch` form, if any
        from_url: True when the input was a GitHub tree URL (candidates get probed)
    """

    candidates: tuple[str, ...]
    pinned_remote: str | None
    from_url: bool


@dataclass(frozen=True)
class ResolvedCheckout:
    """Final checkout decision for a branch on a remote."""

    remote: str
    branch: str
    mode: CheckoutMode

    @property
    def remote_ref(self) -> str:
        return f"{self.remote}/{self.branch}"


@dataclass(frozen=True)
class GitHubRepoRef:
    """Owner/repo pair parsed from a GitHub URL, with the URL to clone from."""

    owner: str
    repo: str
    clone_url: str


# ============================================================================
# Non-ideal states
# ============================================================================


@dataclass(frozen=True)
class EmptyBranchName(NonIdealState):
    """Error: the branch specification is empty after trimming."""

    @property
    def error_type(self) -> str:
        return "empty-branch-name"

    @property
    def message(self) -> str:
        return "Branch name cannot be empty"


@dataclass(frozen=True)
class InvalidUrl(NonIdealState):
    """Error: the input looks like a URL but cannot be parsed."""

    url: str
    reason: str

    @property
    def error_type(self) -> str:
        return "invalid-url"

    @property
    def message(self) -> str:
        return f"Could not parse URL '{self.url}': {self.reason}"


@dataclass(frozen=True)
class UnsupportedHost(NonIdealState):
    """Error: the URL does not point at github.com."""

    host: str

    @property
    def error_type(self) -> str:
        return "unsupported-host"

    @property
    def message(self) -> str:
        return f"Expected github.com host, got '{self.host}'"


@dataclass(frozen=True)
class UnsupportedPath(NonIdealState):
    """Error: the URL path is not /<owner>/<repo>/tree/<branch-path>."""

    path: str

    @property
    def error_type(self) -> str:
        return "unsupported-path"

    @property
    def message(self) -> str:
        return f"Unsupported GitHub tree URL path '{self.path}'"


@dataclass(frozen=True)
class NoBranchCandidates(NonIdealState):
    """Error: no branch name could be decoded from the URL."""

    url: str

    @property
    def error_type(self) -> str:
        return "no-branch-candidates"

    @property
    def message(self) -> str:
        return f"Could not determine branch name from GitHub tree URL '{self.url}'"


@dataclass(frozen=True)
class NoRemotesConfigured(NonIdealState):
    """Error: the repository has no git remotes."""

    @property
    def error_type(self) -> str:
        return "no-remotes-configured"

    @property
    def message(self) -> str:
        return "No git remotes configured"


@dataclass(frozen=True)
class RemoteNotFound(NonIdealState):
    """Error: the requested remote is not configured."""

    remote: str
    available: tuple[str, ...]

    @property
    def error_type(self) -> str:
        return "remote-not-found"

    @property
    def message(self) -> str:
        if not self.available:
            return f"Git remote '{self.remote}' not found"
        return (
            f"Git remote '{self.remote}' not found "
            f"(configured remotes: {', '.join(self.available)})"
        )


@dataclass(frozen=True)
class RemoteProbeFailed(NonIdealState):
    """Error: checking whether a branch exists on a remote failed."""

    remote: str
    branch: str
    detail: str

    @property
    def error_type(self) -> str:
        return "remote-probe-failed"

    @property
    def message(self) -> str:
        return f"Could not check branch '{self.branch}' on remote '{self.remote}': {self.detail}"


@dataclass(frozen=True)
class InvalidBranchName(NonIdealState):
    """Error: the input is not something git accepts as a branch name."""

    branch: str
    reason: str

    @property
    def error_type(self) -> str:
        return "invalid-branch-name"

    @property
    def message(self) -> str:
        return f"Invalid branch name '{self.branch}': {self.reason}"


@dataclass(frozen=True)
class RemoteListingFailed(NonIdealState):
    """Error: `git remote` itself failed."""

    detail: str

    @property
    def error_type(self) -> str:
        return "remote-listing-failed"

    @property
    def message(self) -> str:
        return f"Could not list git remotes: {self.detail}"


@dataclass(frozen=True)
class FetchFailed(NonIdealState):
    """Error: `git fetch <remote> <branch>` failed."""

    remote: str
    branch: str
    detail: str

    @property
    def error_type(self) -> str:
        return "fetch-failed"

    @property
    def message(self) -> str:
        return f"git fetch {self.remote} {self.branch} failed: {self.detail}"


@dataclass(frozen=True)
class BranchNotFound(NonIdealState):
    """Error: neither a local branch nor the remote-tracking ref exists after fetch."""

    remote: str
    branch: str

    @property
    def error_type(self) -> str:
        return "branch-not-found"

    @property
    def message(self) -> str:
        return f"Remote branch {self.remote}/{self.branch} not found"


@dataclass(frozen=True)
class InvalidRepositoryPath(NonIdealState):
    """Error: a GitHub repository reference is not <owner>/<repo>."""

    path: str
    reason: str

    @property
    def error_type(self) -> str:
        return "invalid-repository-path"

    @property
    def message(self) -> str:
        return f"Invalid GitHub repository path '{self.path}': {self.reason}"


@dataclass(frozen=True)
class DestinationExists(NonIdealState):
    """Error: the clone destination is already present."""

    path: Path
    is_directory: bool

    @property
    def error_type(self) -> str:
        return "destination-exists"

    @property
    def message(self) -> str:
        if self.is_directory:
            return f"Destination {self.path} already exists"
        return f"Destination {self.path} exists and is not a directory"


@dataclass(frozen=True)
class InvalidClipboardBranch(NonIdealState):
    """Error: the clipboard does not hold a usable branch name."""

    branch: str
    reason: str

    @property
    def error_type(self) -> str:
        return "invalid-clipboard-branch"

    @property
    def message(self) -> str:
        if not self.branch:
            return self.reason
        return f"Clipboard branch '{self.branch}': {self.reason}"
