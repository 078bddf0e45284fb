from .core.commands import Command, command_factory
from .core.errors import (
    CommandError,
    NotReversibleError,
    StepOutOfRangeError,
    UnsupportedOperationError,
)
from .core.stack import HistoryItem, Mode, Stack
from .version import version_string as __version__

__all__ = [
    "Command",
    "command_factory",
    "CommandError",
    "HistoryItem",
    "Mode",
    "NotReversibleError",
    "Stack",
    "StepOutOfRangeError",
    "UnsupportedOperationError",
]
