"""Factory functions for creating test contexts."""

from pathlib import Path

from flow.core.config_store import FlowConfig
from flow.core.context import FlowContext
from flow.gateway.clipboard.fake import FakeClipboard
from flow.gateway.git.abc import Git
from flow.gateway.git.fake import FakeGit
from tests.fakes.config_store import FakeConfigStore

REPO_ROOT = Path("/repo")


def create_test_context(
    git: Git | None = None,
    clipboard: FakeClipboard | None = None,
    config_store: FakeConfigStore | None = None,
    config: FlowConfig | None = None,
    cwd: Path | None = None,
    dry_run: bool = False,
) -> FlowContext:
    """Create test context with optional pre-configured fakes.

    Args:
        git: Optional Git (usually FakeGit). If None, creates a
            FakeGit whose only repository is REPO_ROOT with an `origin` remote.
        clipboard: Optional FakeClipboard. If None, creates an empty one.
        config_store: Optional FakeConfigStore. If None, one serving `config`.
        config: Optional FlowConfig. If None, defaults.
        cwd: Working directory. If None, REPO_ROOT.
        dry_run: Whether to set dry_run mode

    Example:
        >>> git = FakeGit(remotes={REPO_ROOT: ["origin"]}, repository_roots={REPO_ROOT: REPO_ROOT})
        >>> ctx = create_test_context(git=git)
    """
    resolved_config = config if config is not None else FlowConfig()
    if git is None:
        git = FakeGit(remotes={REPO_ROOT: ["origin"]}, repository_roots={REPO_ROOT: REPO_ROOT})
    if config_store is None:
        config_store = FakeConfigStore(config=resolved_config)
    return FlowContext.for_test(
        git=git,
        clipboard=clipboard if clipboard is not None else FakeClipboard(),
        config_store=config_store,
        config=resolved_config,
        cwd=cwd if cwd is not None else REPO_ROOT,
        dry_run=dry_run,
    )
