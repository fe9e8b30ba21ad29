"""Checkout command - switch to a branch given by name, remote/name, or GitHub URL."""

import logging

import click

from flow.cli.alias import alias
from flow.cli.core import discover_repo_root
from flow.cli.ensure_ideal import EnsureIdeal
from flow.core.context import FlowContext
from flow.core.ref_resolver import apply_checkout, resolve_checkout
from flow.core.types import CheckoutMode, EmptyBranchName
from flow.output import user_output

logger = logging.getLogger(__name__)


@alias("co", "gitCheckout")
@click.command("checkout")
@click.argument("branch", metavar="BRANCH")
@click.pass_obj
def checkout_cmd(ctx: FlowContext, branch: str) -> None:
    """Check out BRANCH from its remote, creating a local tracking branch if needed.

    BRANCH may be a branch name, REMOTE/BRANCH for a configured remote, or a
    GitHub tree URL such as https://github.com/owner/repo/tree/feature/x.
    For URLs, each possible split between branch name and file path is
    checked against the remote and the first existing branch is used.
    """
    if not branch.strip():
        EnsureIdeal.ideal_state(EmptyBranchName())

    repo_root = discover_repo_root(ctx)
    resolved = EnsureIdeal.ideal_state(
        resolve_checkout(
            ctx.git,
            repo_root,
            branch,
            preferred_remote=ctx.config.preferred_remote,
            strict_remote_prefix=ctx.config.strict_remote_prefix,
        )
    )
    logger.debug("Resolved %r to %s (%s)", branch, resolved.remote_ref, resolved.mode.value)

    try:
        apply_checkout(ctx.git, ctx.cwd, resolved)
    except RuntimeError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None

    styled_branch = click.style(resolved.branch, fg="yellow")
    if resolved.mode is CheckoutMode.SWITCH_EXISTING_LOCAL:
        user_output(f"✔️ Switched to {styled_branch}")
    else:
        styled_ref = click.style(resolved.remote_ref, fg="cyan")
        user_output(f"✔️ Created {styled_branch} tracking {styled_ref}")
