"""Parsing of GitHub web URLs into branch candidates and clone targets."""

import re
from urllib.parse import parse_qs, unquote, urlsplit

from flow.core.branch_name import is_valid_branch_name
from flow.core.types import (
    GitHubRepoRef,
    InvalidRepositoryPath,
    InvalidUrl,
    NoBranchCandidates,
    UnsupportedHost,
    UnsupportedPath,
)

GITHUB_HOSTS = frozenset({"github.com", "www.github.com"})
SSH_PREFIX = "git@"
GITHUB_SSH_PREFIX = "git@github.com:"

# A '%' must introduce exactly two hex digits
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_http_url(raw: str) -> bool:
    """Return True if the input should be treated as a web URL."""
    return raw.startswith("http://") or raw.startswith("https://")


def percent_decode(value: str) -> str | None:
    """Strictly percent-decode a URL component.

    Returns:
        The decoded string, or None if the value has a malformed escape or
        does not decode to valid UTF-8.
    """
    if _BAD_PERCENT_ESCAPE.search(value):
        return None
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return None


def parse_github_tree_url(
    raw: str,
) -> list[str] | InvalidUrl | UnsupportedHost | UnsupportedPath | NoBranchCandidates:
    """Build ordered branch candidates from a GitHub tree URL.

    GitHub does not mark where the branch name ends and the file path begins
    in `/<owner>/<repo>/tree/<rest>`, so every prefix of <rest> is a
    candidate, shortest first. A `ref` query parameter is the most
    authoritative hint and goes first. Duplicates keep their first position.
    Candidates git would not accept as branch names are dropped, so nothing
    returned here can be mistaken for a command-line option.

    Args:
        raw: URL such as https://github.com/acme/widgets/tree/feature/login-fix

    Returns:
        Non-empty list of decoded candidates, or a non-ideal state
    """
    try:
        parts = urlsplit(raw)
        host = parts.hostname or ""
    except ValueError as e:
        return InvalidUrl(url=raw, reason=str(e))

    if not parts.netloc:
        return InvalidUrl(url=raw, reason="missing host")

    if host.lower() not in GITHUB_HOSTS:
        return UnsupportedHost(host=parts.netloc)

    segments = parts.path.strip("/").split("/")
    if len(segments) < 4 or segments[2].lower() != "tree":
        return UnsupportedPath(path=parts.path)

    branch_segments = segments[3:]
    candidates: list[str] = []

    def add_candidate(candidate: str | None) -> None:
        if candidate is None or candidate in candidates:
            return
        if not is_valid_branch_name(candidate):
            return
        candidates.append(candidate)

    ref_values = parse_qs(parts.query).get("ref")
    if ref_values:
        add_candidate(percent_decode(ref_values[0]))

    for length in range(1, len(branch_segments) + 1):
        add_candidate(percent_decode("/".join(branch_segments[:length])))

    if not candidates:
        return NoBranchCandidates(url=raw)

    return candidates


def _split_owner_repo(path: str) -> tuple[str, str] | InvalidRepositoryPath:
    trimmed = path.strip("/")
    if not trimmed:
        return InvalidRepositoryPath(path=path, reason="expected <owner>/<repo>")

    parts = trimmed.split("/")
    if len(parts) < 2:
        return InvalidRepositoryPath(path=path, reason="expected <owner>/<repo>")
    if len(parts) > 2:
        return InvalidRepositoryPath(path=path, reason="unexpected extra path components")

    owner = parts[0]
    repo = parts[1].removesuffix(".git")
    if not owner or not repo:
        return InvalidRepositoryPath(path=path, reason="owner and repo must be non-empty")
    return owner, repo


def parse_github_clone_info(
    raw: str,
) -> GitHubRepoRef | InvalidUrl | UnsupportedHost | InvalidRepositoryPath:
    """Parse a clone target from an SSH URL, an https URL, or `owner/repo`.

    SSH inputs are cloned verbatim; everything else is normalized to
    https://github.com/<owner>/<repo>.
    """
    if raw.startswith(SSH_PREFIX):
        if not raw.startswith(GITHUB_SSH_PREFIX):
            return UnsupportedHost(host=raw.removeprefix(SSH_PREFIX).split(":", 1)[0])
        split = _split_owner_repo(raw.removeprefix(GITHUB_SSH_PREFIX))
        if isinstance(split, InvalidRepositoryPath):
            return split
        owner, repo = split
        return GitHubRepoRef(owner=owner, repo=repo, clone_url=raw)

    if is_http_url(raw):
        try:
            parts = urlsplit(raw)
            host = parts.hostname or ""
        except ValueError as e:
            return InvalidUrl(url=raw, reason=str(e))
        if host.lower() != "github.com":
            return UnsupportedHost(host=parts.netloc)
        split = _split_owner_repo(parts.path)
    else:
        split = _split_owner_repo(raw)

    if isinstance(split, InvalidRepositoryPath):
        return split
    owner, repo = split
    return GitHubRepoRef(owner=owner, repo=repo, clone_url=f"https://github.com/{owner}/{repo}")
