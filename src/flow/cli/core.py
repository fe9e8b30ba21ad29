"""Shared helpers for commands that operate inside a repository."""

from pathlib import Path

from flow.core.context import FlowContext
from flow.output import user_output


def discover_repo_root(ctx: FlowContext) -> Path:
    """Return the repository root containing ctx.cwd, or exit if not in a repo."""
    if not ctx.git.is_inside_work_tree(ctx.cwd):
        user_output(f"Error: Not inside a git repository: {ctx.cwd}")
        raise SystemExit(1)
    return ctx.git.get_repository_root(ctx.cwd)
