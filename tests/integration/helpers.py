"""Helpers for driving real git in integration tests."""

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

_GIT_IDENTITY = {
    "GIT_AUTHOR_NAME": "Flow Test",
    "GIT_AUTHOR_EMAIL": "flow@example.com",
    "GIT_COMMITTER_NAME": "Flow Test",
    "GIT_COMMITTER_EMAIL": "flow@example.com",
}


def run_git(cwd: Path, *args: str) -> str:
    env = {**os.environ, **_GIT_IDENTITY}
    result = subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True, env=env
    )
    return result.stdout


@dataclass(frozen=True)
class GitWorld:
    """A working clone and the bare repository it calls `origin`."""

    work: Path
    remote: Path

    def push_branch(self, branch: str) -> None:
        """Create branch on the remote without leaving it checked out locally."""
        run_git(self.work, "push", "origin", f"HEAD:refs/heads/{branch}")
