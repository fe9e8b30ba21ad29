"""Subprocess helpers that attach operation context to failures."""

import logging
import os
import subprocess
import time
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Copy the current environment with git's interactive prompts disabled.

    Network git commands otherwise block forever waiting for credentials
    when no terminal is attached.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    timeout: float | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, converting failures into RuntimeError with context.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human description of the operation (e.g. "fetch branch 'x'")
        cwd: Working directory for the command
        check: If False, a non-zero exit status is returned instead of raised
        timeout: Seconds before the command is killed
        env: Environment for the child process

    Returns:
        CompletedProcess with text stdout/stderr

    Raises:
        RuntimeError: If the command exits non-zero (when check=True) or times out
        FileNotFoundError: If the executable is not installed
    """
    description = " ".join(cmd)
    logger.debug("Running: %s (cwd=%s)", description, cwd)
    start = time.monotonic()
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=check,
            timeout=timeout,
            env=env,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        msg = f"Failed to {operation_context}\nCommand: {description}\nExit code: {e.returncode}"
        if stderr:
            msg += f"\nstderr: {stderr}"
        raise RuntimeError(msg) from e
    except subprocess.TimeoutExpired as e:
        msg = f"Failed to {operation_context}\nCommand: {description}\nTimed out after {timeout}s"
        raise RuntimeError(msg) from e

    elapsed = time.monotonic() - start
    logger.debug("Finished: %s (exit %d, %.2fs)", description, result.returncode, elapsed)
    return result
