import click

from .. import presentation
from ..operations import DevNoteGenerator
from ..presentation import Message, MessageKind
from ._shared import get_config, get_executor, reporting_errors

COMPLETE_BANNER = "*** Development is complete ***"


@click.command()
@click.argument("branch", required=False)
@click.pass_context
def devnote(ctx: click.Context, branch: str | None) -> None:
    """Summarize the files BRANCH changed since it forked.

    BRANCH: Branch to describe (default: current branch)
    """
    with reporting_errors(ctx):
        generator = DevNoteGenerator(get_executor(ctx), get_config(ctx))
        note = generator.generate(branch)

    if note.complete:
        presentation.emit(Message(MessageKind.BANNER, COMPLETE_BANNER))
    for line in note.render():
        presentation.emit(Message(MessageKind.NOTE, line))
