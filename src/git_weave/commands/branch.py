import click

from .. import presentation
from ..operations import AncestorTracker, BranchSelector, WeaveConfigManager
from ..presentation import Message, MessageKind
from ._shared import get_config, get_executor, reporting_errors


@click.command()
@click.pass_context
def current(ctx: click.Context) -> None:
    """Print the current branch, or the commit when HEAD is detached."""
    executor = get_executor(ctx)
    with reporting_errors(ctx):
        executor.ensure_repository()
        branch = executor.get_current_branch()

    presentation.info(branch)


@click.command("fork-point")
@click.argument("forked")
@click.argument("original", required=False)
@click.pass_context
def fork_point(ctx: click.Context, forked: str, original: str | None) -> None:
    """Print the commit where FORKED left ORIGINAL.

    FORKED: Feature branch
    ORIGINAL: Baseline branch (default: dvlp, else main)
    """
    executor = get_executor(ctx)
    with reporting_errors(ctx):
        executor.ensure_repository()
        if original is None:
            config_manager = WeaveConfigManager(executor)
            original = config_manager.resolve_canonical_branch(get_config(ctx))
        commit = AncestorTracker(executor).fork_point(forked, original)

    if commit is None:
        presentation.emit(
            Message(MessageKind.NOTICE, f"'{forked}' and '{original}' share no history")
        )
        return
    presentation.info(commit)


def _read_choice() -> str:
    return click.prompt("Choice", default="", show_default=False)


@click.command()
@click.option(
    "-l",
    "--max-length",
    type=int,
    default=None,
    help="Truncate branch names longer than this",
)
@click.pass_context
def select(ctx: click.Context, max_length: int | None) -> None:
    """Pick a branch from a numbered menu and check it out."""
    with reporting_errors(ctx):
        selector = BranchSelector(
            get_executor(ctx),
            get_config(ctx),
            read_input=_read_choice,
            report=presentation.emit,
            max_length=max_length,
        )
        choice = selector.run()

    if choice is not None:
        presentation.info(f"Checked out {choice}")
