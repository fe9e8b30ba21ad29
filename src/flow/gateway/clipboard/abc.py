"""Abstract base class for reading the system clipboard."""

from abc import ABC, abstractmethod


class Clipboard(ABC):
    """Abstract interface for clipboard access."""

    @abstractmethod
    def read_text(self) -> str:
        """Read the clipboard contents as text.

        Raises:
            RuntimeError: If no clipboard utility is available or it fails
        """
        ...
