from git_weave.operations.config import WeaveConfig, WeaveConfigManager

from .executor import GitExecutor
from .ancestor import AncestorTracker, stable_fork_point
from .pull import PullOrchestrator
from .push import PushOrchestrator, PushOutcome
from .push_hint import PushHintParser, UpstreamHintParser
from .devnote import DevNote, DevNoteGenerator
from .selector import BranchSelector
