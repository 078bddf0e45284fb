# -*- coding: utf-8 -*-
import typing as t

from typing_extensions import ParamSpec

P = ParamSpec("P")


class CallbackList(t.Generic[P]):
    def __init__(self):
        self._callbacks: t.List[t.Callable[P, None]] = []

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, callback: object) -> bool:
        return callback in self._callbacks

    def append(self, callback: t.Callable[P, None]):
        """
        Add new callback function to the list (ignore duplicates)
        """
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def remove(self, callback: t.Callable[P, None]):
        """
        Remove callback function from the list.
        """
        self._callbacks.remove(callback)

    def clear(self):
        """
        Clear the complete list.
        """
        self._callbacks.clear()

    def fire(self, *args: P.args, **kwargs: P.kwargs):
        """
        Call all callback functions, with the given parameters.

        The list is copied first, so a callback may remove itself (or others)
        while the callbacks are fired.
        """
        for callback in list(self._callbacks):
            callback(*args, **kwargs)


S = t.TypeVar("S")
Listener = t.Callable[[S], None]


class Observable(t.Generic[S]):
    """
    Publish/subscribe helper that is held by the observed object.

    Every listener is called with the observed object (the "subject"),
    synchronously and in the order of subscription.
    """

    def __init__(self) -> None:
        self._listeners: "CallbackList[[S]]" = CallbackList()

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners

    def subscribe(self, listener: Listener[S]) -> Listener[S]:
        """
        Register a listener. Returns the listener, so this can be used as
        decorator.
        """
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener[S]) -> None:
        """
        Remove a listener. Raises `ValueError` if it was never subscribed.
        """
        self._listeners.remove(listener)

    def unsubscribe_all(self) -> None:
        self._listeners.clear()

    def notify(self, subject: S) -> None:
        self._listeners.fire(subject)
