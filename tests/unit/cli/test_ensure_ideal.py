"""Tests for EnsureIdeal."""

import pytest

from flow.cli.ensure_ideal import EnsureIdeal
from flow.core.types import BranchNotFound, CheckoutMode, ResolvedCheckout


def test_ideal_value_is_returned_unchanged() -> None:
    resolved = ResolvedCheckout(
        remote="origin", branch="main", mode=CheckoutMode.SWITCH_EXISTING_LOCAL
    )

    assert EnsureIdeal.ideal_state(resolved) is resolved


def test_non_ideal_state_exits_with_message(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        EnsureIdeal.ideal_state(BranchNotFound(remote="origin", branch="ghost"))

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Error: " in err
    assert "Remote branch origin/ghost not found" in err
