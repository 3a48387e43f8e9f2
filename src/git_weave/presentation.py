"""Terminal output for git-weave.

Operations hand over plain ``Message`` values; colour and stream choice are
decided here and nowhere else.
"""

from dataclasses import dataclass
from enum import Enum

import click

from git_weave.errors import WeaveError


class MessageKind(Enum):
    INFO = "info"
    NOTICE = "notice"
    ERROR = "error"
    NOTE = "note"
    BANNER = "banner"


@dataclass(frozen=True, slots=True)
class Message:
    kind: MessageKind
    text: str


_STYLES: dict[MessageKind, dict[str, object]] = {
    MessageKind.INFO: {},
    MessageKind.NOTICE: {"fg": "yellow"},
    MessageKind.ERROR: {"fg": "red"},
    MessageKind.NOTE: {"fg": "cyan"},
    MessageKind.BANNER: {"fg": "green", "bold": True},
}

_TO_STDERR = {MessageKind.NOTICE, MessageKind.ERROR}


def emit(message: Message) -> None:
    """Write a message to the stream and colour its kind calls for."""
    click.secho(
        message.text,
        err=message.kind in _TO_STDERR,
        **_STYLES[message.kind],  # type: ignore[arg-type]
    )


def info(text: str) -> None:
    emit(Message(MessageKind.INFO, text))


def from_error(exc: WeaveError) -> Message:
    """Turn a domain error into a one-line message."""
    kind = MessageKind.NOTICE if exc.informational else MessageKind.ERROR
    return Message(kind, str(exc).splitlines()[0] if str(exc) else type(exc).__name__)
