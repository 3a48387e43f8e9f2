"""Shared utilities for commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from .. import presentation
from ..errors import WeaveError
from ..operations import GitExecutor, WeaveConfig, WeaveConfigManager


def get_executor(ctx: click.Context) -> GitExecutor:
    """Return the executor for this invocation, creating it on first use."""
    state = ctx.ensure_object(dict)
    if "executor" not in state:
        state["executor"] = GitExecutor(cwd=state.get("repo"))
    return state["executor"]


def get_config(ctx: click.Context) -> WeaveConfig:
    """Return the weave config for this invocation, loading it on first use."""
    state = ctx.ensure_object(dict)
    if "config" not in state:
        state["config"] = WeaveConfigManager(get_executor(ctx)).load()
    return state["config"]


@contextmanager
def reporting_errors(ctx: click.Context) -> Iterator[None]:
    """Print a WeaveError as one line and exit with its code."""
    try:
        yield
    except WeaveError as e:
        presentation.emit(presentation.from_error(e))
        ctx.exit(e.exit_code)
