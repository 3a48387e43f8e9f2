"""CLI entry point for git-weave."""

from pathlib import Path

import click

from .log import configure_logging


@click.group()
@click.option(
    "-C",
    "--repo",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run as if started in this directory",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every git command")
@click.pass_context
def cli(ctx: click.Context, repo: Path | None, verbose: bool) -> None:
    """Git-weave: everyday git workflow helpers.

    Pull the canonical working branch, push with upstream set up on demand,
    find where a branch forked, summarize its changes, and switch branches
    from a menu.
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["repo"] = repo


# Import and register commands
from .commands.sync import pull, push
from .commands.branch import current, fork_point, select
from .commands.devnote import devnote

cli.add_command(pull)
cli.add_command(push)
cli.add_command(current)
cli.add_command(fork_point)
cli.add_command(select)
cli.add_command(devnote)


if __name__ == "__main__":
    cli()
