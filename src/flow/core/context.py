"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from flow.core.config_store import ConfigStore, FlowConfig, RealConfigStore
from flow.gateway.clipboard.abc import Clipboard
from flow.gateway.clipboard.real import RealClipboard
from flow.gateway.git.abc import Git
from flow.gateway.git.dry_run import DryRunGit
from flow.gateway.git.real import RealGit


@dataclass(frozen=True)
class FlowContext:
    """Immutable context holding all dependencies for flow commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime. Tests build one
    with fakes and pass it to CliRunner.invoke(obj=...).
    """

    git: Git
    clipboard: Clipboard
    config_store: ConfigStore
    config: FlowConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        *,
        git: Git | None = None,
        clipboard: Clipboard | None = None,
        config_store: ConfigStore | None = None,
        config: FlowConfig | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "FlowContext":
        """Create a context with fake defaults for anything not supplied.

        cwd defaults to Path("/test/default/cwd") to prevent accidental use
        of the real working directory in tests.
        """
        from flow.gateway.clipboard.fake import FakeClipboard
        from flow.gateway.git.fake import FakeGit

        if config_store is None:
            config_store = RealConfigStore(Path("/test/default/config.toml"))

        return FlowContext(
            git=git if git is not None else FakeGit(),
            clipboard=clipboard if clipboard is not None else FakeClipboard(),
            config_store=config_store,
            config=config if config is not None else FlowConfig(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, config_store: ConfigStore | None = None) -> FlowContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If the config file exists but is invalid
    """
    store = config_store if config_store is not None else RealConfigStore()
    git: Git = RealGit()
    if dry_run:
        git = DryRunGit(git)

    return FlowContext(
        git=git,
        clipboard=RealClipboard(),
        config_store=store,
        config=store.load(),
        cwd=Path.cwd(),
        dry_run=dry_run,
    )
