# -*- coding: utf-8 -*-
import typing as t

T = t.TypeVar("T")


class Enumerable(t.Generic[T]):
    """
    Read-only, restartable view over a sequence that is owned by someone else.

    `source` is called for every traversal, so each traversal works on a
    snapshot of the items that exist at call time. Changing the owner while
    iterating does not affect an iteration that is already running.
    """

    def __init__(self, source: t.Callable[[], t.Sequence[T]]) -> None:
        self._source = source

    def _snapshot(self) -> t.List[T]:
        return list(self._source())

    def __iter__(self) -> t.Iterator[T]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        return len(self._source())

    @t.overload
    def __getitem__(self, index: int) -> T:
        ...

    @t.overload
    def __getitem__(self, index: slice) -> t.List[T]:
        ...

    def __getitem__(self, index):
        return self._snapshot()[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._snapshot()!r})"

    def enumerate(self) -> t.Iterator[t.Tuple[int, T]]:
        """
        Iterate `(index, item)` pairs of the current items.
        """
        return enumerate(self._snapshot())

    def for_each(self, callback: t.Callable[[T, int], t.Any]) -> None:
        """
        Call `callback(item, index)` for every item, in order.
        """
        for index, item in self.enumerate():
            callback(item, index)

    def to_list(self) -> t.List[T]:
        return self._snapshot()
