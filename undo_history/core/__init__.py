from .callbacks import CallbackList, Observable
from .commands import Command, CommandLike, command_factory
from .enumerable import Enumerable
from .errors import (
    CommandError,
    NotReversibleError,
    StepOutOfRangeError,
    UnsupportedOperationError,
)
from .stack import HistoryItem, Mode, Stack
