"""Numbered menus and the small validators they rely on."""

import re
from collections.abc import Sequence

from git_weave.errors import InvalidLengthError, NoOptionsError

ELLIPSIS = "..."

_INTEGER = re.compile(r"^[+-]?\d+$")


def is_integer(value: object) -> bool:
    """Check if a value is an int or a string spelling one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return bool(_INTEGER.match(value.strip()))
    return False


def check_length(length: object) -> int:
    """Return ``length`` as an int.

    Raises:
        InvalidLengthError: ``length`` is not a non-negative integer.
    """
    if not is_integer(length) or int(length) < 0:  # type: ignore[call-overload]
        raise InvalidLengthError(f"Invalid length: {length!r}")
    return int(length)  # type: ignore[call-overload]


def truncate(text: str, length: int | str) -> str:
    """Cut ``text`` to ``length`` characters, marking the cut with an ellipsis."""
    limit = check_length(length)
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def render_menu(
    options: Sequence[str],
    max_length: int | str | None = None,
) -> list[str]:
    """Format a prompt and its numbered options.

    The first element is the prompt, printed as is. The rest become
    ``  N)  item`` lines numbered from 1.

    Raises:
        NoOptionsError: Nothing follows the prompt.
        InvalidLengthError: ``max_length`` is not a non-negative integer.
    """
    if max_length is not None:
        check_length(max_length)
    if len(options) < 2:
        raise NoOptionsError("No options to choose from")

    prompt, *items = options
    lines = [prompt]
    for number, item in enumerate(items, start=1):
        if max_length is not None:
            item = truncate(item, max_length)
        lines.append(f"  {number})  {item}")
    return lines
