"""Custom exceptions for git-weave."""


class WeaveError(Exception):
    """Base exception for all weave errors."""

    exit_code: int = 1
    informational: bool = False


class GitCommandError(WeaveError):
    """Raised when an underlying git command fails."""

    def __init__(self, args: list[str], returncode: int, stderr: str = ""):
        self.command = ["git", *args]
        self.returncode = returncode
        self.stderr = stderr
        message = f"git {' '.join(args)} failed with exit status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class NotARepositoryError(WeaveError):
    """Raised when the working directory is not inside a git work tree."""

    exit_code: int = 3


class UnknownBranchError(WeaveError):
    """Raised when a branch name cannot be resolved."""

    exit_code: int = 4


class NoCanonicalBranchError(WeaveError):
    """Raised when none of the canonical working branches exist."""

    exit_code: int = 5


class ProtectedBranchError(WeaveError):
    """Raised when pushing a protected branch is attempted."""

    exit_code: int = 6


class NoDifferencesError(WeaveError):
    """Raised when a branch has no file changes against its baseline."""

    exit_code: int = 7
    informational: bool = True


class UnrecognizedOptionError(WeaveError):
    """Raised when menu input does not name an option."""

    exit_code: int = 8


class InvalidLengthError(WeaveError):
    """Raised when a truncation length is not a non-negative integer."""

    exit_code: int = 9


class NoOptionsError(WeaveError):
    """Raised when a menu has nothing to choose from."""

    exit_code: int = 10
