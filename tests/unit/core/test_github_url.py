"""Tests for GitHub URL parsing."""

import pytest

from flow.core.github_url import (
    is_http_url,
    parse_github_clone_info,
    parse_github_tree_url,
    percent_decode,
)
from flow.core.types import (
    GitHubRepoRef,
    InvalidRepositoryPath,
    InvalidUrl,
    NoBranchCandidates,
    UnsupportedHost,
    UnsupportedPath,
)


class TestParseGitHubTreeUrl:
    """Tests for parse_github_tree_url."""

    def test_builds_one_candidate_per_prefix_shortest_first(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/tree/feature/login-fix")

        assert result == ["feature", "feature/login-fix"]

    def test_ref_query_goes_first(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/tree/main?ref=release/9.0")

        assert result == ["release/9.0", "main"]

    def test_encoded_ref_query_is_decoded(self) -> None:
        result = parse_github_tree_url(
            "https://github.com/acme/widgets/tree/main?ref=release%2F9.0"
        )

        assert result == ["release/9.0", "main"]

    def test_ref_duplicate_of_path_candidate_keeps_first_position(self) -> None:
        result = parse_github_tree_url(
            "https://github.com/acme/widgets/tree/feature/login-fix/src?ref=feature/login-fix"
        )

        assert result == ["feature/login-fix", "feature", "feature/login-fix/src"]

    def test_other_query_parameters_and_fragment_are_ignored(self) -> None:
        result = parse_github_tree_url(
            "https://github.com/acme/widgets/tree/main/docs?tab=readme#install"
        )

        assert result == ["main", "main/docs"]

    def test_percent_encoded_segments_are_decoded(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/tree/fix%2Dthings")

        assert result == ["fix-things"]

    def test_prefix_with_malformed_escape_is_skipped(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/tree/main/bad%zz/more")

        assert result == ["main"]

    def test_option_like_ref_query_is_dropped(self) -> None:
        result = parse_github_tree_url(
            "https://github.com/acme/widgets/tree/main?ref=--upload-pack%3Dtouch%20x"
        )

        assert result == ["main"]

    def test_option_like_path_leaves_no_candidates(self) -> None:
        result = parse_github_tree_url(
            "https://github.com/acme/widgets/tree/--upload-pack=touch%20x%3Bgit-upload-pack/src"
        )

        assert isinstance(result, NoBranchCandidates)

    def test_invalid_prefix_is_skipped_but_valid_longer_prefix_kept(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/tree/v1./notes")

        assert result == ["v1./notes"]

    def test_www_host_is_accepted(self) -> None:
        result = parse_github_tree_url("https://www.github.com/acme/widgets/tree/main")

        assert result == ["main"]

    def test_tree_segment_is_case_insensitive(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/TREE/main")

        assert result == ["main"]

    def test_trailing_slash_is_ignored(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/tree/main/")

        assert result == ["main"]

    def test_missing_tree_segment_is_unsupported_path(self) -> None:
        result = parse_github_tree_url("https://github.com/acme")

        assert isinstance(result, UnsupportedPath)
        assert result.error_type == "unsupported-path"

    def test_blob_url_is_unsupported_path(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/blob/main/README.md")

        assert isinstance(result, UnsupportedPath)

    def test_tree_without_branch_is_unsupported_path(self) -> None:
        result = parse_github_tree_url("https://github.com/acme/widgets/tree")

        assert isinstance(result, UnsupportedPath)

    def test_other_host_is_unsupported(self) -> None:
        result = parse_github_tree_url("https://gitlab.com/acme/widgets/tree/main")

        assert isinstance(result, UnsupportedHost)
        assert "gitlab.com" in result.message

    def test_missing_host_is_invalid_url(self) -> None:
        result = parse_github_tree_url("https:///acme/widgets/tree/main")

        assert isinstance(result, InvalidUrl)

    def test_malformed_ipv6_host_is_invalid_url(self) -> None:
        result = parse_github_tree_url("https://[github.com/acme/widgets/tree/main")

        assert isinstance(result, InvalidUrl)
        assert result.error_type == "invalid-url"


class TestPercentDecode:
    """Tests for percent_decode."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("plain", "plain"),
            ("a%2Fb", "a/b"),
            ("caf%C3%A9", "café"),
            ("100%", None),
            ("%zz", None),
            ("%ff", None),
        ],
    )
    def test_decoding(self, raw: str, expected: str | None) -> None:
        assert percent_decode(raw) == expected


def test_is_http_url() -> None:
    assert is_http_url("https://github.com/a/b")
    assert is_http_url("http://github.com/a/b")
    assert not is_http_url("origin/main")
    assert not is_http_url("git@github.com:a/b.git")


class TestParseGitHubCloneInfo:
    """Tests for parse_github_clone_info."""

    def test_https_url(self) -> None:
        result = parse_github_clone_info("https://github.com/acme/widgets")

        assert result == GitHubRepoRef(
            owner="acme", repo="widgets", clone_url="https://github.com/acme/widgets"
        )

    def test_https_url_strips_dot_git(self) -> None:
        result = parse_github_clone_info("https://github.com/acme/widgets.git")

        assert isinstance(result, GitHubRepoRef)
        assert result.repo == "widgets"
        assert result.clone_url == "https://github.com/acme/widgets"

    def test_ssh_url_is_cloned_verbatim(self) -> None:
        result = parse_github_clone_info("git@github.com:acme/widgets.git")

        assert result == GitHubRepoRef(
            owner="acme", repo="widgets", clone_url="git@github.com:acme/widgets.git"
        )

    def test_owner_repo_shorthand(self) -> None:
        result = parse_github_clone_info("acme/widgets")

        assert isinstance(result, GitHubRepoRef)
        assert result.clone_url == "https://github.com/acme/widgets"

    def test_ssh_other_host_is_unsupported(self) -> None:
        result = parse_github_clone_info("git@gitlab.com:acme/widgets.git")

        assert isinstance(result, UnsupportedHost)
        assert result.host == "gitlab.com"

    def test_https_other_host_is_unsupported(self) -> None:
        result = parse_github_clone_info("https://gitlab.com/acme/widgets")

        assert isinstance(result, UnsupportedHost)

    def test_extra_path_components_are_rejected(self) -> None:
        result = parse_github_clone_info("https://github.com/acme/widgets/tree/main")

        assert isinstance(result, InvalidRepositoryPath)
        assert "extra path components" in result.message

    def test_missing_repo_is_rejected(self) -> None:
        result = parse_github_clone_info("acme")

        assert isinstance(result, InvalidRepositoryPath)

    def test_repo_that_is_only_dot_git_is_rejected(self) -> None:
        result = parse_github_clone_info("acme/.git")

        assert isinstance(result, InvalidRepositoryPath)
