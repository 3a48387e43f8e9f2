"""Git command execution for git-weave."""

import logging
import subprocess
from pathlib import Path

from git_weave.errors import GitCommandError, NotARepositoryError

logger = logging.getLogger(__name__)


class GitExecutor:
    """Execute git commands with proper error handling."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd

    def run(
        self,
        args: list[str],
        check: bool = True,
        capture: bool = False,
    ) -> subprocess.CompletedProcess[str]:
        """Run a git command and always return a CompletedProcess.

        With ``capture=False`` git writes straight to the terminal, so its own
        progress and error text reach the user unmodified.

        Raises:
            GitCommandError: If ``check`` is set and git exits non-zero.
        """
        cmd = ["git"] + args
        logger.debug("running %s", " ".join(cmd))
        result = subprocess.run(
            cmd,
            cwd=self.cwd,
            check=False,
            capture_output=capture,
            text=True,
        )
        logger.debug("%s exited with %s", " ".join(cmd), result.returncode)

        if check and result.returncode != 0:
            raise GitCommandError(args, result.returncode, result.stderr or "")
        return result

    def is_repository(self) -> bool:
        """Check if the working directory is inside a git work tree."""
        result = self.run(
            ["rev-parse", "--is-inside-work-tree"], check=False, capture=True
        )
        return result.returncode == 0 and result.stdout.strip() == "true"

    def ensure_repository(self) -> None:
        """Ensure the working directory is inside a git work tree."""
        if not self.is_repository():
            where = self.cwd if self.cwd is not None else Path.cwd()
            raise NotARepositoryError(f"Not a git repository: {where}")

    def get_current_branch(self) -> str:
        """Get current branch name, or the commit id when HEAD is detached."""
        result = self.run(["rev-parse", "--abbrev-ref", "HEAD"], capture=True)
        branch = result.stdout.strip()
        if branch == "HEAD":
            result = self.run(["rev-parse", "HEAD"], capture=True)
            return result.stdout.strip()
        return branch

    def branch_exists(self, branch: str) -> bool:
        """Check if a name resolves to a commit."""
        result = self.run(
            ["rev-parse", "--verify", "--quiet", f"{branch}^{{commit}}"],
            check=False,
            capture=True,
        )
        return result.returncode == 0

    def local_branch_exists(self, branch: str) -> bool:
        """Check if a local branch exists."""
        result = self.run(
            ["rev-parse", "--verify", "--quiet", f"refs/heads/{branch}"],
            check=False,
            capture=True,
        )
        return result.returncode == 0

    def checkout(self, branch: str) -> None:
        """Checkout a branch."""
        self.run(["checkout", branch])

    def pull(self) -> None:
        """Pull the current branch from its upstream."""
        self.run(["pull"])

    def push(self, args: list[str] | None = None) -> subprocess.CompletedProcess[str]:
        """Push, capturing output so callers can inspect failures."""
        return self.run(["push"] + (args or []), check=False, capture=True)

    def first_parent_history(self, branch: str) -> list[str]:
        """List commits reachable by first parents, most recent first."""
        result = self.run(
            ["rev-list", "--first-parent", branch, "--"], capture=True
        )
        return result.stdout.split()

    def diff_file_list(self, base: str, tip: str) -> list[str]:
        """List paths that differ between two commits."""
        result = self.run(["diff", "--name-only", base, tip, "--"], capture=True)
        return [line for line in result.stdout.splitlines() if line]

    def tracked_files(self, branch: str) -> list[str]:
        """List every path tracked at a branch tip."""
        result = self.run(["ls-tree", "-r", "--name-only", branch], capture=True)
        return [line for line in result.stdout.splitlines() if line]

    def list_branches(self, remote: bool = False) -> list[str]:
        """List branch lines as ``git branch`` prints them, trimmed."""
        args = ["branch", "--no-color"]
        if remote:
            args.append("-r")
        result = self.run(args, capture=True)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def list_remotes(self) -> list[str]:
        """List configured remote names."""
        result = self.run(["remote"], capture=True)
        return result.stdout.split()

    def prune_remote(self, remote: str) -> None:
        """Drop remote-tracking refs that no longer exist on the remote."""
        self.run(["remote", "prune", remote], capture=True)

    def list_gone_branches(self) -> list[str]:
        """List local branches whose upstream has been deleted."""
        result = self.run(
            [
                "for-each-ref",
                "--format=%(refname:short) %(upstream:track)",
                "refs/heads",
            ],
            capture=True,
        )
        gone = []
        for line in result.stdout.splitlines():
            name, _, track = line.partition(" ")
            if track.strip() == "[gone]":
                gone.append(name)
        return gone

    def delete_branch(self, branch: str, force: bool = False) -> None:
        """Delete a branch."""
        args = ["branch", "-D" if force else "-d", branch]
        self.run(args, capture=True)

    def get_config(self, key: str) -> str | None:
        """Get a git config value, or None when unset."""
        result = self.run(["config", "--get", key], capture=True, check=False)
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def get_config_all(self, key: str) -> list[str]:
        """Get every value of a multi-valued git config key."""
        result = self.run(["config", "--get-all", key], capture=True, check=False)
        if result.returncode != 0:
            return []
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def set_config(self, key: str, value: str) -> None:
        """Set a git config value."""
        self.run(["config", key, value], capture=True)

    def add_config(self, key: str, value: str) -> None:
        """Append a value to a multi-valued git config key."""
        self.run(["config", "--add", key, value], capture=True)

    def toplevel(self) -> Path:
        """Get the root directory of the work tree."""
        result = self.run(["rev-parse", "--show-toplevel"], capture=True)
        return Path(result.stdout.strip())
