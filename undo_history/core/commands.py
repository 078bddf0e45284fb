# -*- coding: utf-8 -*-
import functools
import logging
import typing as t

from typing_extensions import ParamSpec, Protocol

from undo_history.core.errors import UnsupportedOperationError

if t.TYPE_CHECKING:
    from undo_history.core.stack import Stack

logger = logging.getLogger(__name__)

P = ParamSpec("P")

Action = t.Callable[[], t.Any]

# methods that are hooked into the stack bookkeeping
_SEALED_METHODS = ("execute", "undo")


class CommandLike(Protocol):
    """
    Everything a `Stack` needs from an entry. `undo_action` may be `None`
    or missing, such an entry cannot be undone in per-command mode.
    """

    @property
    def execute_action(self) -> Action:
        ...

    @property
    def undo_action(self) -> t.Optional[Action]:
        ...


class Command:
    """
    Wraps an action and an optional reverse action.

    If a stack is given, every `execute()` pushes the command onto that stack
    after the action has run. The behaviour of a command is defined only
    through the actions given to the constructor: `execute` and `undo` must
    not be overridden in subclasses (this raises a `TypeError` when the
    subclass is created). Compute all parameters of the actions before
    creating the command, so that executing it again gives the same result.

    Example::

        >>> counter = [0]
        >>> def inc(): counter[0] += 1
        >>> def dec(): counter[0] -= 1
        >>> stack = Stack()
        >>> Command(inc, undo=dec, stack=stack).execute()
        >>> counter[0], stack.length, stack.pointer
        (1, 1, 1)
    """

    def __init_subclass__(cls, **kwargs: t.Any) -> None:
        super().__init_subclass__(**kwargs)
        overridden = [name for name in _SEALED_METHODS if name in vars(cls)]
        if overridden:
            raise TypeError(
                f"{cls.__name__} must not override {', '.join(overridden)}; "
                f"pass the actions to Command.__init__ instead"
            )

    def __init__(
        self,
        execute: Action,
        undo: t.Optional[Action] = None,
        stack: t.Optional["Stack"] = None,
        name: str = "",
    ) -> None:
        if not callable(execute):
            raise TypeError(f"execute action must be callable, not {execute!r}")
        if undo is not None and not callable(undo):
            raise TypeError(f"undo action must be callable or None, not {undo!r}")

        self._execute_action = execute
        self._undo_action = undo
        self._stack = stack
        self.name: str = name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} can_undo={self.can_undo}>"

    @property
    def execute_action(self) -> Action:
        return self._execute_action

    @property
    def undo_action(self) -> t.Optional[Action]:
        return self._undo_action

    @property
    def stack(self) -> t.Optional["Stack"]:
        """
        The stack this command reports to (fixed at construction).
        """
        return self._stack

    @property
    def can_undo(self) -> bool:
        return self._undo_action is not None

    def execute(self) -> None:
        """
        Run the execute action and push this command onto the bound stack.

        If the action raises, nothing is pushed.
        """
        self._execute_action()
        if self._stack is not None:
            self._stack.push(self)

    def undo(self) -> None:
        """
        Run the undo action. This does not touch the bound stack, use
        `Stack.undo` for that.
        """
        if self._undo_action is None:
            raise UnsupportedOperationError(
                f"command {self.name!r} has no undo action"
            )
        self._undo_action()


class CommandSpec(t.TypedDict, total=False):
    execute: Action
    undo: t.Optional[Action]
    name: str


def command_factory(
    build: t.Callable[P, CommandSpec]
) -> t.Callable[..., Command]:
    """
    Turn a function that computes the actions of a command into a factory
    for commands.

    `build` gets all arguments of the factory except `stack` and returns a
    mapping with the keys `execute` (required), `undo` and `name`. Everything
    the actions depend on is computed once in `build`.

    Example::

        >>> @command_factory
        ... def append_item(items, value):
        ...     return {
        ...         "execute": lambda: items.append(value),
        ...         "undo": items.pop,
        ...         "name": f"Append {value}",
        ...     }
        >>> cmd = append_item([], 5, stack=stack)
    """

    @functools.wraps(build)
    def factory(*args: t.Any, stack: t.Optional["Stack"] = None, **kwargs: t.Any):
        spec = build(*args, **kwargs)
        if "execute" not in spec:
            raise TypeError(f"{build.__name__}() did not return an 'execute' action")
        cmd = Command(
            spec["execute"],
            undo=spec.get("undo"),
            stack=stack,
            name=spec.get("name", build.__name__),
        )
        logger.debug("Created command %r with %s()", cmd.name, build.__name__)
        return cmd

    return factory
