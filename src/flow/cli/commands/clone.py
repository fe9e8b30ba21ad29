"""Clone command - clone a GitHub repository into <clone_root>/<owner>/<repo>."""

from pathlib import Path

import click

from flow.cli.ensure_ideal import EnsureIdeal
from flow.core.context import FlowContext
from flow.core.github_url import parse_github_clone_info
from flow.core.types import DestinationExists
from flow.output import user_output


def clone_destination(clone_root: Path, owner: str, repo: str) -> Path:
    return clone_root / owner / repo


@click.command("clone")
@click.argument("repository", metavar="GITHUB_URL")
@click.pass_obj
def clone_cmd(ctx: FlowContext, repository: str) -> None:
    """Clone a GitHub repository into <clone_root>/<owner>/<repo>.

    GITHUB_URL may be https://github.com/owner/repo, git@github.com:owner/repo.git,
    or owner/repo. The destination must not already exist.
    """
    target = repository.strip()
    if not target:
        user_output("Usage: flow clone <github-url>")
        user_output(click.style("Error: ", fg="red") + "GitHub URL cannot be empty")
        raise SystemExit(1)

    repo_ref = EnsureIdeal.ideal_state(parse_github_clone_info(target))
    destination = clone_destination(ctx.config.clone_root, repo_ref.owner, repo_ref.repo)

    if destination.exists():
        EnsureIdeal.ideal_state(
            DestinationExists(path=destination, is_directory=destination.is_dir())
        )

    if not ctx.dry_run:
        destination.parent.mkdir(parents=True, exist_ok=True)

    try:
        ctx.git.clone(repo_ref.clone_url, destination)
    except RuntimeError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None

    user_output(f"✔️ Cloned to {destination}")
