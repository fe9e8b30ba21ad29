"""Create or switch to a branch whose name is on the clipboard."""

import click

from flow.cli.alias import alias
from flow.cli.core import discover_repo_root
from flow.cli.ensure_ideal import EnsureIdeal
from flow.core.clipboard_branch import extract_branch_name, validate_clipboard_branch
from flow.core.context import FlowContext
from flow.output import user_output


@alias("branchFromClipboard")
@click.command("branch-from-clipboard")
@click.pass_obj
def branch_from_clipboard_cmd(ctx: FlowContext) -> None:
    """Create a git branch named by the clipboard, or switch to it if it exists.

    The name must contain a '/', include a number, and have no whitespace,
    e.g. owner/1234-fix-login.
    """
    repo_root = discover_repo_root(ctx)

    try:
        raw = ctx.clipboard.read_text()
    except RuntimeError as e:
        user_output(click.style("Error: ", fg="red") + f"Could not read clipboard: {e}")
        raise SystemExit(1) from None

    branch = EnsureIdeal.ideal_state(validate_clipboard_branch(extract_branch_name(raw)))
    styled_branch = click.style(branch, fg="yellow")

    try:
        if ctx.git.local_branch_exists(repo_root, branch):
            ctx.git.checkout_branch(ctx.cwd, branch)
            user_output(f"✔️ Switched to {styled_branch}")
            return
        ctx.git.checkout_new_branch(ctx.cwd, branch)
    except RuntimeError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None

    user_output(f"✔️ Created and switched to {styled_branch}")
