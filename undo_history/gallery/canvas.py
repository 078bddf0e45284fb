import dataclasses
import random
import typing as t

from undo_history.core.commands import Command, command_factory
from undo_history.core.stack import Stack

from . import GalleryItem

WHITE = "#ffffff"


@dataclasses.dataclass(frozen=True)
class Square:
    x: int
    y: int
    size: int
    color: str


@dataclasses.dataclass
class Canvas:
    """
    In-memory drawing surface: a background colour and the squares drawn on it.
    """

    width: int = 640
    height: int = 480
    background: str = WHITE
    squares: t.List[Square] = dataclasses.field(default_factory=list)

    def fill(self, color: str) -> None:
        self.background = color
        self.squares.clear()

    def draw(self, square: Square) -> None:
        self.squares.append(square)


def clear_command(canvas: Canvas, color: str = WHITE) -> Command:
    """
    Reset action for a redo-from-start stack.
    """
    return Command(lambda: canvas.fill(color), name="Clear canvas")


@command_factory
def draw_square_command(
    canvas: Canvas, rng: t.Optional[random.Random] = None, size: int = 20
):
    # the position is chosen once, so every replay draws the same square
    rng = rng or random.Random()
    square = Square(
        x=rng.randrange(0, canvas.width - size),
        y=rng.randrange(0, canvas.height - size),
        size=size,
        color="#{:06x}".format(rng.randrange(0x1000000)),
    )
    return {
        "execute": lambda: canvas.draw(square),
        "name": f"Square at ({square.x}, {square.y})",
    }


def build() -> t.Tuple[Stack, Canvas]:
    canvas = Canvas()
    stack = Stack(redo=clear_command(canvas))
    rng = random.Random(1)
    for _ in range(3):
        draw_square_command(canvas, rng, stack=stack).execute()
    return stack, canvas


gallery_item = GalleryItem(
    name="canvas",
    description="Squares on a canvas, undone by clearing it and drawing the history again.",
    build=build,
)
