"""CLI error handling for non-ideal-state type narrowing.

Operations in flow.core return `T | NonIdealState`. Commands pass those
results through EnsureIdeal, which exits with a user-friendly error for
the non-ideal case and hands back the narrowed value otherwise.
"""

from __future__ import annotations

from typing import TypeVar

import click

from flow.non_ideal_state import NonIdealState
from flow.output import user_output

T = TypeVar("T")


class EnsureIdeal:
    """Helper class for narrowing non-ideal-state discriminated unions."""

    @staticmethod
    def ideal_state(result: T | NonIdealState) -> T:
        """Ensure result is not a NonIdealState, otherwise exit with error.

        Args:
            result: Value that may be a NonIdealState

        Returns:
            The value unchanged if not NonIdealState (with narrowed type T)

        Raises:
            SystemExit: If result is NonIdealState (with exit code 1)

        Example:
            >>> spec = EnsureIdeal.ideal_state(parse_ref_spec(raw, remotes))
            >>> # spec is now guaranteed to be RefSpec
        """
        if isinstance(result, NonIdealState):
            user_output(click.style("Error: ", fg="red") + result.message)
            raise SystemExit(1)
        return result
