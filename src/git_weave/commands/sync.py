import click

from .. import presentation
from ..operations import PullOrchestrator, PushOrchestrator
from ..presentation import Message, MessageKind
from ._shared import get_config, get_executor, reporting_errors


@click.command()
@click.pass_context
def pull(ctx: click.Context) -> None:
    """Check out and pull the canonical working branch (dvlp, else main)."""
    with reporting_errors(ctx):
        orchestrator = PullOrchestrator(get_executor(ctx), get_config(ctx))
        branch = orchestrator.run()

    presentation.info(f"Pulled {branch}")


@click.command()
@click.pass_context
def push(ctx: click.Context) -> None:
    """Push the current branch, setting its upstream if git asks for one."""
    with reporting_errors(ctx):
        orchestrator = PushOrchestrator(get_executor(ctx), get_config(ctx))
        outcome = orchestrator.run()

    if outcome.recovery is not None:
        presentation.info(f"Retried with: git {' '.join(outcome.recovery)}")

    output = outcome.output.rstrip("\n")
    if outcome.succeeded:
        if output:
            presentation.info(output)
        return

    presentation.emit(Message(MessageKind.ERROR, output or "git push failed"))
    ctx.exit(outcome.returncode or 1)
