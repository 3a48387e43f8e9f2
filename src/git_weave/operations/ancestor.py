"""Stable fork-point computation between two branches."""

import logging
from collections.abc import Sequence

from git_weave.errors import UnknownBranchError
from git_weave.operations.executor import GitExecutor

logger = logging.getLogger(__name__)


def stable_fork_point(
    forked_history: Sequence[str],
    original_history: Sequence[str],
) -> str | None:
    """Return the newest commit shared by two first-parent histories.

    Both sequences are most-recent-first. Once two first-parent chains meet
    they are identical all the way down, so the shared commits are a common
    suffix. Walking back from the oldest end until the sequences disagree
    finds the point where ``forked`` left ``original``.

    Merging ``forked`` back into ``original`` only puts a merge commit on top
    of ``original``'s first-parent chain, so the answer does not move, unlike
    ``git merge-base`` which would then return the tip of ``forked``.

    Returns None when the histories share nothing.
    """
    fork_point = None
    for forked_commit, original_commit in zip(
        reversed(forked_history), reversed(original_history)
    ):
        if forked_commit != original_commit:
            break
        fork_point = forked_commit
    return fork_point


class AncestorTracker:
    """Find where a branch forked from its baseline."""

    def __init__(self, executor: GitExecutor):
        self.executor = executor

    def _history(self, branch: str) -> list[str]:
        if not self.executor.branch_exists(branch):
            raise UnknownBranchError(f"Branch '{branch}' does not exist")
        return self.executor.first_parent_history(branch)

    def fork_point(self, forked: str, original: str) -> str | None:
        """Compute the stable fork point of ``forked`` from ``original``."""
        forked_history = self._history(forked)
        original_history = self._history(original)

        fork_point = stable_fork_point(forked_history, original_history)
        if fork_point is None:
            logger.debug("%s and %s share no history", forked, original)
        return fork_point
