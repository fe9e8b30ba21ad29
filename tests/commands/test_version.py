"""Tests for the version command and top-level help."""

import pytest
from click.testing import CliRunner

from flow.cli.cli import cli
from flow.cli.commands import version as version_module
from tests.fakes.context import create_test_context


def test_version_prints_installed_version(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(version_module, "get_current_version", lambda: "1.2.3")
    runner = CliRunner()

    result = runner.invoke(cli, ["version"], obj=create_test_context())

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "1.2.3"


def test_help_lists_commands_once_with_aliases() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["--help"], obj=create_test_context())

    assert result.exit_code == 0, result.output
    assert "checkout (co, gitCheckout)" in result.output
    assert "branch-from-clipboard (branchFromClipboard)" in result.output
    assert "clone" in result.output
    assert "\n  co " not in result.output


def test_short_help_flag() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-h"], obj=create_test_context())

    assert result.exit_code == 0
    assert "Usage:" in result.output
