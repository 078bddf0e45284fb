# -*- coding: utf-8 -*-


class CommandError(Exception):
    pass


class UnsupportedOperationError(CommandError, NotImplementedError):
    """
    Raised when a command is undone directly, but it has no undo action.
    """


class NotReversibleError(UnsupportedOperationError):
    """
    Raised by `Stack.undo` when the entry below the pointer has no undo action.
    The pointer is not moved in this case.
    """

    def __init__(self, index: int, name: str = "") -> None:
        self.index = index
        self.name = name
        label = f" '{name}'" if name else ""
        super().__init__(f"history entry {index}{label} has no undo action")


class StepOutOfRangeError(CommandError, IndexError):
    def __init__(self, target: object, length: int) -> None:
        self.target = target
        self.length = length
        super().__init__(f"step target {target!r} is not in range [0, {length}]")
