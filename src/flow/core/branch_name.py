"""Git branch name validation.

Follows the rules of `git check-ref-format --branch`. Names that pass can
be handed to git as positional arguments without being read as options.
"""

_FORBIDDEN_CHARS = frozenset(" ~^:?*[\\")


def branch_name_problem(name: str) -> str | None:
    """Return why name is not a valid git branch name, or None if it is."""
    if not name:
        return "name is empty"
    if name.startswith("-"):
        return "cannot start with '-'"
    if name == "@":
        return "cannot be '@'"
    if name.startswith("/") or name.endswith("/"):
        return "cannot start or end with '/'"
    if name.endswith("."):
        return "cannot end with '.'"
    for token in ("..", "//", "@{"):
        if token in name:
            return f"cannot contain '{token}'"
    for ch in name:
        if ch in _FORBIDDEN_CHARS or ord(ch) < 0x20 or ord(ch) == 0x7F:
            return f"cannot contain {ch!r}"
    for component in name.split("/"):
        if component.startswith("."):
            return "path components cannot start with '.'"
        if component.endswith(".lock"):
            return "path components cannot end with '.lock'"
    return None


def is_valid_branch_name(name: str) -> bool:
    return branch_name_problem(name) is None
