"""Tests for git branch name validation."""

import pytest

from flow.core.branch_name import branch_name_problem, is_valid_branch_name


@pytest.mark.parametrize(
    "name",
    ["main", "feature/login-fix", "release/9.0", "nikiv/123-fix", "café", "v1.2.3"],
)
def test_accepts_ordinary_branch_names(name: str) -> None:
    assert is_valid_branch_name(name)
    assert branch_name_problem(name) is None


@pytest.mark.parametrize(
    ("name", "reason_fragment"),
    [
        ("", "empty"),
        ("--upload-pack=touch x", "cannot start with '-'"),
        ("-b", "cannot start with '-'"),
        ("@", "cannot be '@'"),
        ("/foo", "start or end with '/'"),
        ("foo/", "start or end with '/'"),
        ("foo.", "cannot end with '.'"),
        ("a..b", "'..'"),
        ("a//b", "'//'"),
        ("a@{1}", "'@{'"),
        ("a b", "cannot contain ' '"),
        ("a:b", "cannot contain ':'"),
        ("a~1", "cannot contain '~'"),
        ("a\x01b", "cannot contain"),
        ("feature/.hidden", "cannot start with '.'"),
        ("feature/x.lock", "'.lock'"),
    ],
)
def test_rejects_names_git_refuses(name: str, reason_fragment: str) -> None:
    problem = branch_name_problem(name)

    assert problem is not None
    assert reason_fragment in problem
    assert not is_valid_branch_name(name)
