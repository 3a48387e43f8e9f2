"""Synchronize the canonical working branch."""

import logging

from git_weave.operations.config import WeaveConfig, WeaveConfigManager
from git_weave.operations.executor import GitExecutor

logger = logging.getLogger(__name__)


class PullOrchestrator:
    """Check out the canonical branch and pull it."""

    def __init__(self, executor: GitExecutor, config: WeaveConfig):
        self.executor = executor
        self.config = config

    def run(self) -> str:
        """Pull the canonical branch and return its name.

        Raises:
            NotARepositoryError: Outside a git work tree.
            NoCanonicalBranchError: None of the canonical branches exist.
            GitCommandError: Checkout or pull failed.
        """
        self.executor.ensure_repository()

        config_manager = WeaveConfigManager(self.executor)
        branch = config_manager.resolve_canonical_branch(self.config)

        logger.debug("pulling canonical branch %s", branch)
        self.executor.checkout(branch)
        self.executor.pull()
        return branch
