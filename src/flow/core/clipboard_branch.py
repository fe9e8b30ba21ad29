"""Branch names taken from the clipboard."""

from flow.core.branch_name import branch_name_problem
from flow.core.types import InvalidClipboardBranch

_QUOTES = "\"'"


def extract_branch_name(raw: str) -> str:
    """Return the first non-blank line, trimmed and stripped of surrounding quotes."""
    for line in raw.splitlines():
        trimmed = line.strip()
        if trimmed:
            return trimmed.strip(_QUOTES)
    return raw.strip().strip(_QUOTES)


def validate_clipboard_branch(branch: str) -> str | InvalidClipboardBranch:
    """Check that a clipboard branch looks like `<owner>/<ticket-number>-...`.

    Returns:
        The branch unchanged if valid, otherwise InvalidClipboardBranch
    """
    if not branch:
        return InvalidClipboardBranch(branch="", reason="Clipboard does not contain a branch name")
    if "/" not in branch:
        return InvalidClipboardBranch(
            branch=branch, reason="must contain a '/' (e.g. owner/feature)"
        )
    if not any(ch.isdigit() for ch in branch):
        return InvalidClipboardBranch(
            branch=branch, reason="must include a number (e.g. ticket id)"
        )
    if " " in branch or "\t" in branch:
        return InvalidClipboardBranch(
            branch=branch, reason="cannot contain spaces; replace them with '-' if needed"
        )
    problem = branch_name_problem(branch)
    if problem is not None:
        return InvalidClipboardBranch(branch=branch, reason=problem)
    return branch
