"""Extract the remedy git suggests when a push has no upstream.

When the current branch has no upstream, ``git push`` fails with text like::

    fatal: The current branch feature has no upstream branch.
    To push the current branch and set the remote as upstream, use

        git push --set-upstream origin feature

The suggestion is indented and on a line of its own. Parsers are kept behind
the ``PushHintParser`` protocol so another strategy can replace this one if
git changes its wording.
"""

import re
import shlex
from typing import Protocol


class PushHintParser(Protocol):
    """Turn failed push output into a command to retry, if any."""

    version: int

    def suggest(self, output: str) -> list[str] | None:
        """Return git arguments (without ``git``) or None when no remedy applies."""
        ...


class UpstreamHintParser:
    """Parse git's missing-upstream hint."""

    version = 1

    SIGNATURE = "has no upstream branch"
    _SUGGESTION = re.compile(r"^[ \t]+git[ \t]+(push[ \t].*?)[ \t]*$", re.MULTILINE)

    def suggest(self, output: str) -> list[str] | None:
        if self.SIGNATURE not in output:
            return None
        for match in self._SUGGESTION.finditer(output):
            args = shlex.split(match.group(1))
            # HEAD:<ref> targets a differently named branch, not a missing upstream
            if any(arg.startswith("HEAD:") for arg in args):
                continue
            return args
        return None
