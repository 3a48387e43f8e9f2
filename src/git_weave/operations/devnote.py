"""Summarize what a branch changed since it forked."""

import logging
from dataclasses import dataclass

from git_weave.errors import NoDifferencesError, UnknownBranchError
from git_weave.operations.ancestor import AncestorTracker
from git_weave.operations.config import WeaveConfig, WeaveConfigManager
from git_weave.operations.executor import GitExecutor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DevNote:
    """Files changed on a branch relative to its baseline."""

    repository: str
    branch: str
    baseline: str
    fork_point: str | None
    files: tuple[str, ...]
    complete: bool = False

    def render(self) -> list[str]:
        if self.fork_point is None:
            compared = (
                f"Compared against: nothing (no history shared with {self.baseline})"
            )
        else:
            compared = f"Compared against: {self.baseline}"
        lines = [
            f"Repository: {self.repository}",
            f"Branch: {self.branch}",
            compared,
            "Files changed:",
        ]
        lines.extend(f"  {path}" for path in self.files)
        return lines


class DevNoteGenerator:
    """Build a DevNote for a branch."""

    def __init__(self, executor: GitExecutor, config: WeaveConfig):
        self.executor = executor
        self.config = config

    def generate(self, branch: str | None = None) -> DevNote:
        """Collect the files ``branch`` changed since leaving its baseline.

        Args:
            branch: Branch to describe; defaults to the current branch.

        Raises:
            NotARepositoryError: Outside a git work tree.
            UnknownBranchError: ``branch`` does not exist.
            NoCanonicalBranchError: No baseline branch exists.
            NoDifferencesError: The branch changes nothing.
        """
        self.executor.ensure_repository()

        if branch is None:
            branch = self.executor.get_current_branch()
        elif not self.executor.branch_exists(branch):
            raise UnknownBranchError(f"Branch '{branch}' does not exist")

        config_manager = WeaveConfigManager(self.executor)
        baseline = config_manager.resolve_canonical_branch(self.config)

        tracker = AncestorTracker(self.executor)
        fork_point = tracker.fork_point(branch, baseline)

        if fork_point is None:
            logger.debug("no baseline for %s, listing every tracked file", branch)
            files = self.executor.tracked_files(branch)
        else:
            files = self.executor.diff_file_list(fork_point, branch)

        if not files:
            raise NoDifferencesError(
                f"No differences between '{branch}' and '{baseline}'"
            )

        repository = config_manager.repository_name(self.config)
        return DevNote(
            repository=repository,
            branch=branch,
            baseline=baseline,
            fork_point=fork_point,
            files=tuple(files),
            complete=repository in self.config.complete_repos,
        )
