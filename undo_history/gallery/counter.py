import typing as t

from undo_history.core.commands import command_factory
from undo_history.core.stack import Stack

from . import GalleryItem


class Counter:
    def __init__(self, value: int = 0) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Counter({self.value})"


@command_factory
def increment_command(counter: Counter, step: int = 1):
    def execute():
        counter.value += step

    def undo():
        counter.value -= step

    return {"execute": execute, "undo": undo, "name": f"Increment by {step}"}


def build() -> t.Tuple[Stack, Counter]:
    stack = Stack()
    counter = Counter()
    increment_command(counter, stack=stack).execute()
    increment_command(counter, step=2, stack=stack).execute()
    return stack, counter


gallery_item = GalleryItem(
    name="counter",
    description="Counter that is incremented and decremented in lockstep with undo/redo.",
    build=build,
)
