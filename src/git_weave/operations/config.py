"""Configuration management for git-weave."""

from dataclasses import dataclass

from git_weave.errors import NoCanonicalBranchError
from git_weave.operations.executor import GitExecutor

DEFAULT_PROTECTED_BRANCHES = ("dvlp", "acct", "sit", "main")
DEFAULT_CANONICAL_BRANCHES = ("dvlp", "main")
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True, slots=True)
class WeaveConfig:
    """Immutable settings for one invocation."""

    protected_branches: tuple[str, ...] = DEFAULT_PROTECTED_BRANCHES
    canonical_branches: tuple[str, ...] = DEFAULT_CANONICAL_BRANCHES
    complete_repos: tuple[str, ...] = ()
    remote: str = DEFAULT_REMOTE

    def is_protected(self, branch: str) -> bool:
        return branch in self.protected_branches


class WeaveConfigManager:
    """Read weave settings from git config."""

    CONFIG_PREFIX = "weave."

    def __init__(self, executor: GitExecutor):
        self.executor = executor

    def _get_config_key(self, name: str) -> str:
        return f"{self.CONFIG_PREFIX}{name}"

    def _get_list(self, name: str, default: tuple[str, ...]) -> tuple[str, ...]:
        values = self.executor.get_config_all(self._get_config_key(name))
        return tuple(values) if values else default

    def load(self) -> WeaveConfig:
        """Build a WeaveConfig, falling back to defaults for unset keys."""
        remote = self.executor.get_config(self._get_config_key("remote"))
        return WeaveConfig(
            protected_branches=self._get_list(
                "protectedBranch", DEFAULT_PROTECTED_BRANCHES
            ),
            canonical_branches=self._get_list(
                "canonicalBranch", DEFAULT_CANONICAL_BRANCHES
            ),
            complete_repos=self._get_list("completeRepo", ()),
            remote=remote or DEFAULT_REMOTE,
        )

    def resolve_canonical_branch(self, config: WeaveConfig) -> str:
        """Return the first canonical branch that exists locally."""
        for branch in config.canonical_branches:
            if self.executor.local_branch_exists(branch):
                return branch

        raise NoCanonicalBranchError(
            "No canonical working branch found. "
            f"Expected one of: {', '.join(config.canonical_branches)}"
        )

    def repository_name(self, config: WeaveConfig) -> str:
        """Derive a display name from the remote URL's final path segment."""
        url = self.executor.get_config(f"remote.{config.remote}.url")
        if not url:
            return self.executor.toplevel().name
        return repository_name_from_url(url)


def repository_name_from_url(url: str) -> str:
    """Return the last path segment of a remote URL without ``.git``.

    Handles both ``https://host/owner/repo.git`` and scp-like
    ``git@host:owner/repo.git`` forms.
    """
    tail = url.rstrip("/").replace(":", "/").rsplit("/", 1)[-1]
    if tail.endswith(".git"):
        tail = tail[: -len(".git")]
    return tail
