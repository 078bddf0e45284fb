import logging
import random

import pytest

from undo_history import Command, Mode, Stack
from undo_history.gallery.canvas import (
    WHITE,
    Canvas,
    clear_command,
    draw_square_command,
)


class Recorder:
    """
    Records every call of the reset action and the replayed entries.
    """

    def __init__(self):
        self.calls = []

    def reset(self):
        self.calls.append("reset")

    def command(self, name, stack=None):
        def execute():
            self.calls.append(name)

        def undo():
            raise AssertionError("undo action must not be called")

        return Command(execute, undo=undo, stack=stack, name=name)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def stack(recorder):
    stack = Stack(redo=recorder.reset)
    for name in ("a", "b", "c"):
        recorder.command(name, stack).execute()
    recorder.calls.clear()
    return stack


class TestMode:
    def test_mode(self, stack):
        assert stack.mode is Mode.RedoFromStart
        assert stack.redo_from_start

    def test_reset_command_is_not_pushed(self):
        reset_stack = Stack()
        reset = Command(lambda: None, stack=reset_stack)
        stack = Stack(redo=reset)
        stack.push(Command(lambda: None))

        stack.undo()

        assert reset_stack.length == 0

    def test_command_like_reset(self, recorder):
        class ResetEntry:
            undo_action = None

            def __init__(self, calls):
                self.calls = calls

            def execute_action(self):
                self.calls.append("reset")

        stack = Stack(redo=ResetEntry(recorder.calls))
        assert stack.redo_from_start

        recorder.command("a", stack).execute()
        stack.undo()

        assert recorder.calls == ["a", "reset"]

    def test_invalid_redo(self):
        with pytest.raises(TypeError):
            Stack(redo="reset")


class TestReplay:
    def test_undo_replays_prefix(self, stack, recorder):
        stack.undo()
        assert stack.pointer == 2
        assert recorder.calls == ["reset", "a", "b"]

    def test_undo_to_zero_only_resets(self, stack, recorder):
        stack.step_to(1)
        recorder.calls.clear()
        stack.undo()
        assert stack.pointer == 0
        assert recorder.calls == ["reset"]

    def test_redo_replays_prefix(self, stack, recorder):
        stack.undo()
        stack.undo()
        recorder.calls.clear()

        stack.redo()

        assert stack.pointer == 2
        assert recorder.calls == ["reset", "a", "b"]

    def test_entries_without_undo_action(self, recorder):
        stack = Stack(redo=recorder.reset)
        stack.submit(Command(lambda: recorder.calls.append("x")))
        recorder.calls.clear()

        assert stack.can_undo()
        stack.undo()

        assert recorder.calls == ["reset"]

    def test_boundaries_are_noops(self, stack, recorder):
        assert stack.redo() is False
        stack.step_to(0)
        recorder.calls.clear()
        assert stack.undo() is False
        assert recorder.calls == []

    def test_one_notification_per_step(self, stack):
        received = []
        stack.subscribe(lambda s: received.append(s.pointer))

        assert stack.redo() is False
        stack.undo()
        stack.undo()
        stack.redo()
        stack.step_to(0)
        assert stack.undo() is False

        assert received == [2, 1, 2, 0]

    def test_step_to_resets_once(self, stack, recorder):
        received = []
        stack.subscribe(received.append)

        stack.step_to(1)

        assert stack.pointer == 1
        assert recorder.calls == ["reset", "a"]
        assert received == [stack]

    def test_step_to_end(self, stack, recorder):
        stack.step_to(0)
        recorder.calls.clear()

        stack.step_to(3)

        assert recorder.calls == ["reset", "a", "b", "c"]

    def test_step_to_zero(self, stack, recorder):
        stack.step_to(0)
        assert recorder.calls == ["reset"]

    def test_push_after_undo_truncates(self, stack, recorder):
        stack.step_to(1)
        recorder.command("d", stack).execute()
        assert stack.length == 2
        assert stack.pointer == 2
        assert [cmd.name for cmd in stack] == ["a", "d"]

    def test_failing_replay_keeps_moved_pointer(self, recorder, caplog):
        stack = Stack(redo=recorder.reset)

        def fail():
            raise RuntimeError("broken action")

        stack.push(Command(lambda: None))
        stack.push(Command(fail))
        stack.push(Command(lambda: None))

        with caplog.at_level(logging.WARNING):
            with pytest.raises(RuntimeError, match="broken action"):
                stack.undo()

        assert stack.pointer == 2
        assert "Replay aborted at entry 1" in caplog.text


class TestCanvas:
    def test_draw_squares_and_step(self):
        canvas = Canvas()
        stack = Stack(redo=clear_command(canvas))
        rng = random.Random(42)
        for _ in range(3):
            draw_square_command(canvas, rng, stack=stack).execute()
        drawn = list(canvas.squares)
        assert (stack.length, stack.pointer) == (3, 3)

        stack.step_to(1)
        assert canvas.background == WHITE
        assert canvas.squares == drawn[:1]

        stack.step_to(3)
        assert canvas.squares == drawn

    def test_square_is_chosen_once(self):
        canvas = Canvas()
        cmd = draw_square_command(canvas, random.Random(7))
        cmd.execute()
        cmd.execute()
        assert canvas.squares[0] == canvas.squares[1]
