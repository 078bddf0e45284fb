import dataclasses
import typing as t

from undo_history.core.stack import Stack


@dataclasses.dataclass
class GalleryItem:
    name: str
    description: str
    # returns the stack and the model that the commands of the stack change
    build: t.Callable[[], t.Tuple[Stack, t.Any]]


def get_gallery_items() -> t.Dict[str, GalleryItem]:
    from . import canvas, counter

    return {
        item.name: item for item in (counter.gallery_item, canvas.gallery_item)
    }
