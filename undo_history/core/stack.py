# -*- coding: utf-8 -*-
import dataclasses
import enum
import logging
import typing as t

import arrow

from undo_history.core.callbacks import Listener, Observable
from undo_history.core.commands import Action, Command, CommandLike
from undo_history.core.enumerable import Enumerable
from undo_history.core.errors import NotReversibleError, StepOutOfRangeError

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    PerCommandUndo = enum.auto()
    RedoFromStart = enum.auto()


@dataclasses.dataclass(frozen=True)
class HistoryItem:
    """
    Snapshot of one history entry, eg. for rendering an action-history list.
    """

    index: int
    command: CommandLike
    applied: bool
    pushed_at: arrow.Arrow

    @property
    def name(self) -> str:
        return getattr(self.command, "name", "")


def _reset_action(
    redo: t.Union[CommandLike, Action, None]
) -> t.Optional[Action]:
    if redo is None:
        return None
    if isinstance(redo, Command):
        # only the action is used, `Command.execute` would push onto its stack
        return redo.execute_action
    execute_action = getattr(redo, "execute_action", None)
    if callable(execute_action):
        return execute_action
    if callable(redo):
        return redo
    raise TypeError(
        f"redo must be a command-like object or a callable, not {redo!r}"
    )


class Stack:
    """
    Ordered history of executed commands with a pointer.

    The entries `[0, pointer)` are applied, the entries `[pointer, length)`
    are undone and can be redone. Pushing a new command drops everything at
    and above the pointer.

    There are two modes, selected at construction:
      - per-command undo (default): `undo` calls the undo action of the entry
        below the pointer, `redo` calls the execute action of the entry at the
        pointer.
      - redo-from-start (a `redo` reset action is given): `undo`, `redo` and
        `step_to` never call an undo action. They call the reset action once
        and then replay the execute actions of all applied entries.

    Every change of the history is announced to the subscribed listeners,
    which get the stack as only argument.

    If an action raises while the stack replays several entries (`step_to`,
    or any replay in redo-from-start mode), the remaining entries are not
    replayed and the pointer stays where it was already moved. Nothing is
    rolled back, the stack should not be used anymore after that.
    """

    def __init__(
        self,
        redo: t.Union[CommandLike, Action, None] = None,
        max_commands: t.Optional[int] = None,
    ) -> None:
        self._reset = _reset_action(redo)

        if max_commands is not None:
            if max_commands <= 0:
                raise ValueError(f"{max_commands=} must be a positive number")
            if self._reset is not None:
                raise ValueError(
                    "max_commands cannot be used together with a redo action, "
                    "the replay needs the complete history"
                )
        self._max_commands = max_commands

        self._history: t.List[CommandLike] = []
        self._pushed_at: t.List[arrow.Arrow] = []
        self._pointer = 0

        self._observable: Observable["Stack"] = Observable()
        self._entries: Enumerable[CommandLike] = Enumerable(lambda: self._history)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} mode={self.mode.name} "
            f"pointer={self._pointer} length={self.length}>"
        )

    # ---------------------------------------------------------------- state
    @property
    def mode(self) -> Mode:
        if self._reset is None:
            return Mode.PerCommandUndo
        return Mode.RedoFromStart

    @property
    def redo_from_start(self) -> bool:
        return self._reset is not None

    @property
    def max_commands(self) -> t.Optional[int]:
        return self._max_commands

    @property
    def length(self) -> int:
        return len(self._history)

    @property
    def pointer(self) -> int:
        """
        Number of applied entries. This is also the index of the entry that
        the next `redo` applies.
        """
        return self._pointer

    @property
    def current_command(self) -> t.Optional[CommandLike]:
        """
        The entry that the next `undo` reverts, if any.
        """
        if self._pointer == 0:
            return None
        return self._history[self._pointer - 1]

    @property
    def next_command(self) -> t.Optional[CommandLike]:
        """
        The entry that the next `redo` applies, if any.
        """
        if self._pointer >= len(self._history):
            return None
        return self._history[self._pointer]

    def can_undo(self) -> bool:
        current_command = self.current_command
        if current_command is None:
            return False
        if self._reset is not None:
            return True
        return getattr(current_command, "undo_action", None) is not None

    def can_redo(self) -> bool:
        return self._pointer < len(self._history)

    # ---------------------------------------------------- observe / iterate
    def subscribe(self, listener: Listener["Stack"]) -> Listener["Stack"]:
        return self._observable.subscribe(listener)

    def unsubscribe(self, listener: Listener["Stack"]) -> None:
        self._observable.unsubscribe(listener)

    def _notify(self) -> None:
        self._observable.notify(self)

    @property
    def entries(self) -> Enumerable[CommandLike]:
        return self._entries

    def __len__(self) -> int:
        return len(self._history)

    def __iter__(self) -> t.Iterator[CommandLike]:
        return iter(self._entries)

    def __getitem__(self, index):
        if isinstance(index, int):
            return self._history[index]
        return self._entries[index]

    def for_each(self, callback: t.Callable[[CommandLike, int], t.Any]) -> None:
        self._entries.for_each(callback)

    def history(self) -> t.List[HistoryItem]:
        return [
            HistoryItem(
                index=index,
                command=command,
                applied=index < self._pointer,
                pushed_at=pushed_at,
            )
            for index, (command, pushed_at) in enumerate(
                zip(self._history, self._pushed_at)
            )
        ]

    # ------------------------------------------------------------ mutations
    def push(self, command: CommandLike) -> None:
        """
        Store an already executed command.

        Any entry that has been undone is chopped off the history first.
        """
        if not callable(getattr(command, "execute_action", None)):
            raise TypeError(f"{command!r} has no callable execute_action")

        # We must chop off the current 'branch', so that
        # we're at the end of the command list.
        dropped = len(self._history) - self._pointer
        if dropped:
            del self._history[self._pointer :]
            del self._pushed_at[self._pointer :]
            logger.debug("Dropped %d undone command(s) from history", dropped)

        self._history.append(command)
        self._pushed_at.append(arrow.utcnow())

        # Limit history length. Remove first commands from history
        # if an overflow occures
        if self._max_commands is not None and len(self._history) > self._max_commands:
            del self._history[0]
            del self._pushed_at[0]

        self._pointer = len(self._history)
        logger.debug(
            "Pushed %r (pointer=%d, length=%d)",
            command,
            self._pointer,
            len(self._history),
        )
        self._notify()

    def submit(self, command: CommandLike) -> None:
        """
        Execute a command that is not bound to this stack and store it.
        """
        command.execute_action()
        self.push(command)

    def undo(self) -> bool:
        """
        Undo the last applied command. Returns `False` if there is nothing to
        undo.
        """
        if self._pointer == 0:
            return False

        if self._reset is None:
            index = self._pointer - 1
            command = self._history[index]
            undo_action = getattr(command, "undo_action", None)
            if undo_action is None:
                raise NotReversibleError(index, getattr(command, "name", ""))
            undo_action()
            self._pointer = index
        else:
            self._pointer -= 1
            self._replay()

        logger.debug("Undo (pointer=%d, length=%d)", self._pointer, self.length)
        self._notify()
        return True

    def redo(self) -> bool:
        """
        Apply the next undone command. Returns `False` if there is nothing to
        redo.
        """
        if self._pointer >= len(self._history):
            return False

        if self._reset is None:
            self._history[self._pointer].execute_action()
            self._pointer += 1
        else:
            self._pointer += 1
            self._replay()

        logger.debug("Redo (pointer=%d, length=%d)", self._pointer, self.length)
        self._notify()
        return True

    def step_to(self, target: int) -> None:
        """
        Undo or redo until `pointer == target`.

        In redo-from-start mode the reset action is called only once and the
        entries `[0, target)` are replayed once.
        """
        if (
            not isinstance(target, int)
            or isinstance(target, bool)
            or not 0 <= target <= len(self._history)
        ):
            raise StepOutOfRangeError(target, len(self._history))

        if target == self._pointer:
            return

        logger.debug("Step from %d to %d", self._pointer, target)

        if self._reset is not None:
            self._pointer = target
            self._replay()
            self._notify()
            return

        while self._pointer > target:
            self.undo()
        while self._pointer < target:
            self.redo()

    def clear(self) -> None:
        """
        Delete all entries and set the pointer to 0.
        """
        self._history.clear()
        self._pushed_at.clear()
        self._pointer = 0
        logger.debug("History cleared")
        self._notify()

    def _replay(self) -> None:
        if self._reset is None:
            raise ValueError("replay needs a redo action, stack mode is out of sync")
        self._reset()
        for index in range(self._pointer):
            try:
                self._history[index].execute_action()
            except Exception:
                logger.warning(
                    "Replay aborted at entry %d of %d, the stack is inconsistent",
                    index,
                    self._pointer,
                )
                raise
        logger.debug("Replayed %d command(s) from start", self._pointer)
