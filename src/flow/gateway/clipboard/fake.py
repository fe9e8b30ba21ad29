"""Fake clipboard for testing."""

from flow.gateway.clipboard.abc import Clipboard


class FakeClipboard(Clipboard):
    """In-memory clipboard with configurable contents or failure.

    Constructor Injection:
    ---------------------
    - text: Clipboard contents returned by read_text()
    - read_raises: Exception to raise from read_text()
    """

    def __init__(self, *, text: str = "", read_raises: Exception | None = None) -> None:
        self._text = text
        self._read_raises = read_raises
        self._read_count = 0

    def read_text(self) -> str:
        self._read_count += 1
        if self._read_raises is not None:
            raise self._read_raises
        return self._text

    @property
    def read_count(self) -> int:
        """Number of read_text() calls, for test assertions."""
        return self._read_count
