"""Interactive branch checkout menu."""

import logging
from collections.abc import Callable

from git_weave.errors import (
    GitCommandError,
    NotARepositoryError,
    UnrecognizedOptionError,
    WeaveError,
)
from git_weave.menu import check_length, is_integer, render_menu
from git_weave.operations.config import WeaveConfig
from git_weave.operations.executor import GitExecutor
from git_weave.operations.pull import PullOrchestrator
from git_weave.presentation import Message, MessageKind

logger = logging.getLogger(__name__)

PROMPT = "Select a branch to check out:"
QUIT = "Quit"
KEEP_BRANCH = "main"


def _is_listable(line: str) -> bool:
    # "* current" is checked out here, "+ other" in another worktree;
    # "origin/HEAD -> origin/main" is an alias
    return not line.startswith(("*", "+")) and "->" not in line


class BranchSelector:
    """Let the user pick a branch from a numbered list and check it out."""

    def __init__(
        self,
        executor: GitExecutor,
        config: WeaveConfig,
        read_input: Callable[[], str],
        report: Callable[[Message], None],
        max_length: int | str | None = None,
    ):
        if max_length is not None:
            check_length(max_length)
        self.executor = executor
        self.config = config
        self.read_input = read_input
        self.report = report
        self.max_length = max_length
        self.pull = PullOrchestrator(executor, config)

    def refresh(self) -> None:
        """Pull the canonical branch and clear out stale branches.

        Raises:
            NotARepositoryError: The pull failed for any reason.
        """
        try:
            self.pull.run()
        except NotARepositoryError:
            raise
        except WeaveError as e:
            logger.debug("pull failed: %s", e)
            raise NotARepositoryError(str(e)) from e

        for remote in self.executor.list_remotes():
            self.executor.prune_remote(remote)

        for branch in self.executor.list_gone_branches():
            if branch == KEEP_BRANCH:
                continue
            try:
                self.executor.delete_branch(branch)
            except GitCommandError as e:
                # Unmerged work keeps the branch around
                logger.debug("kept %s: %s", branch, e)

    def options(self) -> list[str]:
        """Build the menu: prompt, local then remote branches, then Quit."""
        branches = [
            line
            for line in self.executor.list_branches()
            + self.executor.list_branches(remote=True)
            if _is_listable(line)
        ]
        return [PROMPT, *branches, QUIT]

    def _checkout_name(self, option: str) -> str:
        remote, _, short = option.partition("/")
        if short and remote in self.executor.list_remotes():
            return short
        return option

    def choose(self, options: list[str], answer: str) -> str | None:
        """Interpret one line of input against the menu.

        Returns the chosen branch, or None for quit.

        Raises:
            UnrecognizedOptionError: The input names no option.
        """
        answer = answer.strip()
        quit_index = len(options) - 1
        if answer[:1] in ("q", "Q"):
            return None
        if is_integer(answer):
            index = int(answer)
            if index == quit_index:
                return None
            if 1 <= index < quit_index:
                return options[index]
        raise UnrecognizedOptionError(f"Unrecognized option: {answer!r}")

    def run(self, skip_refresh: bool = False) -> str | None:
        """Show the menu until the user picks a branch or quits.

        Returns the branch checked out, or None if the user quit.
        """
        while True:
            if not skip_refresh:
                self.refresh()

            options = self.options()
            for line in render_menu(options, self.max_length):
                self.report(Message(MessageKind.INFO, line))

            try:
                choice = self.choose(options, self.read_input())
            except UnrecognizedOptionError as e:
                self.report(Message(MessageKind.ERROR, str(e)))
                skip_refresh = True
                continue

            if choice is None:
                return None

            self.executor.checkout(self._checkout_name(choice))
            return choice
