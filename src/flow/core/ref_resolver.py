"""Resolve a branch specification into a concrete checkout.

A specification is one of:
- a bare branch name: `feature/login-fix`
- remote shorthand: `upstream/feature/login-fix` (only when `upstream` is a remote)
- a GitHub tree URL: `https://github.com/acme/widgets/tree/feature/login-fix`

Resolution is a sequence of blocking git round trips with no caching and no
retries: list remotes, probe URL candidates one at a time, fetch, then
inspect local and remote-tracking refs. The first candidate that exists on
the chosen remote wins; if none exists the first candidate is used and the
fetch reports the real error.
"""

import logging
from pathlib import Path

from flow.core.branch_name import branch_name_problem
from flow.core.github_url import is_http_url, parse_github_tree_url
from flow.core.types import (
    BranchNotFound,
    CheckoutMode,
    EmptyBranchName,
    FetchFailed,
    InvalidBranchName,
    InvalidUrl,
    NoBranchCandidates,
    NoRemotesConfigured,
    RefSpec,
    RemoteListingFailed,
    RemoteNotFound,
    RemoteProbeFailed,
    ResolvedCheckout,
    UnsupportedHost,
    UnsupportedPath,
)
from flow.gateway.git.abc import Git

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"

RefSpecError = (
    EmptyBranchName
    | InvalidBranchName
    | InvalidUrl
    | UnsupportedHost
    | UnsupportedPath
    | NoBranchCandidates
    | RemoteNotFound
)

ResolveError = (
    RefSpecError
    | RemoteListingFailed
    | NoRemotesConfigured
    | RemoteProbeFailed
    | FetchFailed
    | BranchNotFound
)


def parse_ref_spec(
    raw: str,
    remotes: list[str],
    *,
    strict_remote_prefix: bool = False,
) -> RefSpec | RefSpecError:
    """Classify user input and extract ordered branch candidates.

    For direct specs the text before the first `/` pins a remote only when
    it names a configured remote and something follows the slash. Otherwise
    the whole string is one branch name, since branch names may contain
    slashes. With strict_remote_prefix, an unknown prefix is reported as
    RemoteNotFound instead. A name git would reject as a branch (for example
    one starting with `-`) is InvalidBranchName.

    Args:
        raw: User input; surrounding whitespace is ignored
        remotes: Configured remote names
        strict_remote_prefix: Report `x/y` as RemoteNotFound when `x` is not a
            configured remote, instead of treating `x/y` as one branch name

    Returns:
        RefSpec with at least one non-empty candidate, or a non-ideal state
    """
    spec = raw.strip()
    if not spec:
        return EmptyBranchName()

    if is_http_url(spec):
        candidates = parse_github_tree_url(spec)
        if not isinstance(candidates, list):
            return candidates
        return RefSpec(candidates=tuple(candidates), pinned_remote=None, from_url=True)

    prefix, slash, remainder = spec.partition("/")
    if slash and prefix:
        if prefix in remotes:
            branch = remainder.strip()
            # `origin/` is an empty branch on origin, not a branch named "origin/"
            if not branch:
                return EmptyBranchName()
            problem = branch_name_problem(branch)
            if problem is not None:
                return InvalidBranchName(branch=branch, reason=problem)
            return RefSpec(candidates=(branch,), pinned_remote=prefix, from_url=False)
        if strict_remote_prefix and remainder:
            return RemoteNotFound(remote=prefix, available=tuple(remotes))

    problem = branch_name_problem(spec)
    if problem is not None:
        return InvalidBranchName(branch=spec, reason=problem)
    return RefSpec(candidates=(spec,), pinned_remote=None, from_url=False)


def select_remote(
    remotes: list[str],
    pinned: str | None,
    *,
    preferred: str = DEFAULT_REMOTE,
) -> str | RemoteNotFound | NoRemotesConfigured:
    """Choose the remote to fetch from.

    A pinned remote must be configured; it is never substituted. Without a
    pin, `preferred` wins if configured, otherwise the first listed remote
    (listing order, not alphabetical).
    """
    if not remotes:
        return NoRemotesConfigured()

    if pinned is not None:
        if pinned not in remotes:
            return RemoteNotFound(remote=pinned, available=tuple(remotes))
        return pinned

    if preferred in remotes:
        return preferred
    return remotes[0]


def pick_branch_candidate(
    git: Git,
    repo_root: Path,
    remote: str,
    candidates: tuple[str, ...],
) -> str | RemoteProbeFailed:
    """Return the first candidate that exists on the remote.

    Candidates are probed sequentially in order. When none exists, the first
    candidate is returned so that the fetch surfaces the real error.
    """
    for candidate in candidates:
        try:
            exists = git.branch_exists_on_remote(repo_root, remote, candidate)
        except RuntimeError as e:
            return RemoteProbeFailed(remote=remote, branch=candidate, detail=str(e))
        logger.debug("Probe %s/%s: %s", remote, candidate, "found" if exists else "absent")
        if exists:
            return candidate

    logger.debug("No candidate found on %s, falling back to '%s'", remote, candidates[0])
    return candidates[0]


def resolve_checkout(
    git: Git,
    repo_root: Path,
    raw: str,
    *,
    preferred_remote: str = DEFAULT_REMOTE,
    strict_remote_prefix: bool = False,
) -> ResolvedCheckout | ResolveError:
    """Resolve a branch specification and fetch it, without touching the working tree.

    Args:
        git: Git gateway used for listing, probing, fetching and ref lookups
        repo_root: Repository root
        raw: Branch name, `remote/branch`, or GitHub tree URL
        preferred_remote: Remote used when the input does not pin one
        strict_remote_prefix: See parse_ref_spec

    Returns:
        ResolvedCheckout describing the remote, branch and checkout mode,
        or a non-ideal state
    """
    if not raw.strip():
        return EmptyBranchName()

    try:
        remotes = git.list_remotes(repo_root)
    except RuntimeError as e:
        return RemoteListingFailed(detail=str(e))
    spec = parse_ref_spec(raw, remotes, strict_remote_prefix=strict_remote_prefix)
    if not isinstance(spec, RefSpec):
        return spec
    logger.debug("Branch candidates for %r: %s", raw, list(spec.candidates))

    remote = select_remote(remotes, spec.pinned_remote, preferred=preferred_remote)
    if not isinstance(remote, str):
        return remote
    logger.debug("Selected remote '%s' from %s", remote, remotes)

    if spec.from_url:
        branch = pick_branch_candidate(git, repo_root, remote, spec.candidates)
        if not isinstance(branch, str):
            return branch
    else:
        branch = spec.candidates[0]

    try:
        git.fetch_branch(repo_root, remote, branch)
    except RuntimeError as e:
        return FetchFailed(remote=remote, branch=branch, detail=str(e))

    if git.local_branch_exists(repo_root, branch):
        mode = CheckoutMode.SWITCH_EXISTING_LOCAL
    elif git.remote_tracking_branch_exists(repo_root, remote, branch):
        mode = CheckoutMode.CREATE_FROM_REMOTE
    else:
        return BranchNotFound(remote=remote, branch=branch)

    return ResolvedCheckout(remote=remote, branch=branch, mode=mode)


def apply_checkout(git: Git, cwd: Path, resolved: ResolvedCheckout) -> None:
    """Check out a resolved branch, creating a tracking branch if needed."""
    if resolved.mode is CheckoutMode.SWITCH_EXISTING_LOCAL:
        git.checkout_branch(cwd, resolved.branch)
    else:
        git.checkout_new_tracking_branch(cwd, resolved.branch, resolved.remote_ref)
