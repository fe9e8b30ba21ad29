"""Base type for expected failures returned instead of raised.

Operations that can fail for ordinary reasons (bad input, a missing remote,
a rejected fetch) return `Result | SomeNonIdealState`. Callers narrow the
union with isinstance checks, or with EnsureIdeal at the CLI boundary.

Every implementation exposes:
- error_type: a stable kebab-case identifier for the failure kind
- message: a human-readable description suitable for printing
"""


class NonIdealState:
    """Marker base class for non-ideal results.

    Subclasses are frozen dataclasses. They provide `message` either as a
    field or as a property computed from their fields.
    """

    @property
    def error_type(self) -> str:
        raise NotImplementedError

    @property
    def message(self) -> str:
        raise NotImplementedError
