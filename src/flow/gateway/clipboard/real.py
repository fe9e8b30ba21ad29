"""Production clipboard implementation using platform paste utilities."""

import logging
import shutil

from flow.gateway.clipboard.abc import Clipboard
from flow.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# Tried in order; the first one installed and succeeding wins
PASTE_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbpaste",),
    ("wl-paste",),
    ("xclip", "-selection", "clipboard", "-o"),
)


class RealClipboard(Clipboard):
    """Reads the clipboard via pbpaste, wl-paste or xclip."""

    def read_text(self) -> str:
        last_error: RuntimeError | None = None
        for command in PASTE_COMMANDS:
            if shutil.which(command[0]) is None:
                continue
            try:
                result = run_subprocess_with_context(
                    cmd=list(command),
                    operation_context=f"read clipboard with {command[0]}",
                )
            except RuntimeError as e:
                logger.debug("Clipboard command %s failed: %s", command[0], e)
                last_error = e
                continue
            return result.stdout

        if last_error is not None:
            raise last_error
        raise RuntimeError("No clipboard utility found (tried pbpaste, wl-paste, xclip)")
