import shutil
from pathlib import Path

import pytest

from tests.integration.helpers import GitWorld, run_git


@pytest.fixture
def git_world(tmp_path: Path) -> GitWorld:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    remote = tmp_path / "remote.git"
    work = tmp_path / "work"
    run_git(tmp_path, "init", "--bare", "--initial-branch=main", str(remote))
    run_git(tmp_path, "init", "--initial-branch=main", str(work))
    (work / "README.md").write_text("hello\n", encoding="utf-8")
    run_git(work, "add", "README.md")
    run_git(work, "commit", "-m", "initial")
    run_git(work, "remote", "add", "origin", str(remote))
    run_git(work, "push", "origin", "main")
    return GitWorld(work=work.resolve(), remote=remote)
