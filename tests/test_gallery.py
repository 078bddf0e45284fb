import pytest

from undo_history.gallery import get_gallery_items
from undo_history.gallery.counter import Counter, increment_command


def test_gallery_items():
    assert set(get_gallery_items()) == {"counter", "canvas"}


@pytest.mark.parametrize("name", ["counter", "canvas"])
def test_build_and_step(name):
    stack, _ = get_gallery_items()[name].build()
    length = stack.length
    assert stack.pointer == length

    stack.step_to(0)
    stack.step_to(length)

    assert stack.pointer == length
    assert stack.length == length


def test_counter_gallery():
    stack, counter = get_gallery_items()["counter"].build()
    assert counter.value == 3

    stack.undo()
    assert counter.value == 1
    assert [item.name for item in stack.history()] == [
        "Increment by 1",
        "Increment by 2",
    ]


def test_canvas_gallery():
    stack, canvas = get_gallery_items()["canvas"].build()
    squares = list(canvas.squares)
    assert len(squares) == 3

    stack.step_to(0)
    assert canvas.squares == []

    stack.step_to(3)
    assert canvas.squares == squares


def test_increment_command():
    counter = Counter(10)
    cmd = increment_command(counter, step=5)
    cmd.execute()
    cmd.undo()
    assert counter.value == 10
