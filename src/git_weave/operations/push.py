"""Push the current branch, recovering from a missing upstream."""

import logging
from dataclasses import dataclass

from git_weave.errors import ProtectedBranchError
from git_weave.operations.config import WeaveConfig
from git_weave.operations.executor import GitExecutor
from git_weave.operations.push_hint import PushHintParser, UpstreamHintParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PushOutcome:
    """Final result of a push, including any recovery attempt."""

    succeeded: bool
    output: str
    returncode: int = 0
    recovery: tuple[str, ...] | None = None


def _combined_output(stdout: str | None, stderr: str | None) -> str:
    return (stdout or "") + (stderr or "")


class PushOrchestrator:
    """Push with a single tool-suggested retry."""

    def __init__(
        self,
        executor: GitExecutor,
        config: WeaveConfig,
        hint_parser: PushHintParser | None = None,
    ):
        self.executor = executor
        self.config = config
        self.hint_parser = hint_parser or UpstreamHintParser()

    def run(self) -> PushOutcome:
        """Push the current branch.

        A failed push is retried at most once, and only with the command git
        itself suggested. Without a suggestion the original failure is
        returned unchanged.

        Raises:
            NotARepositoryError: Outside a git work tree.
            ProtectedBranchError: The current branch may not be pushed.
        """
        self.executor.ensure_repository()

        branch = self.executor.get_current_branch()
        if self.config.is_protected(branch):
            raise ProtectedBranchError(f"Pushing to '{branch}' is not allowed")

        result = self.executor.push()
        output = _combined_output(result.stdout, result.stderr)
        if result.returncode == 0:
            return PushOutcome(succeeded=True, output=output)

        suggestion = self.hint_parser.suggest(output)
        if suggestion is None:
            logger.debug("push failed with no suggested remedy")
            return PushOutcome(
                succeeded=False, output=output, returncode=result.returncode
            )

        logger.debug("retrying with suggested command: git %s", " ".join(suggestion))
        retry = self.executor.run(suggestion, check=False, capture=True)
        return PushOutcome(
            succeeded=retry.returncode == 0,
            output=_combined_output(retry.stdout, retry.stderr),
            returncode=retry.returncode,
            recovery=tuple(suggestion),
        )
