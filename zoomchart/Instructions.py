from dataclasses import dataclass
from typing import List, TYPE_CHECKING, Union

from zoomchart.Base import Alignment

if TYPE_CHECKING:
    from zoomchart.Base import ColorType


@dataclass(frozen=True)
class DrawLine:
    x1: int
    y1: int
    x2: int
    y2: int
    color: "ColorType"


@dataclass(frozen=True)
class DrawRect:
    """
    A filled rectangle with an edge, in UI coordinate (origin at top-left, y grows downwards)
    """
    x: int
    y: int
    width: int
    height: int
    fill_color: "ColorType"
    edge_color: "ColorType"

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class DrawText:
    """
    Text whose baseline starts at (x, y).
    For Alignment.CENTER, x is the horizontal center of the text, the painter measures the text itself.
    """
    x: int
    y: int
    text: str
    color: "ColorType"
    alignment: Alignment = Alignment.LEFT


Instruction = Union[DrawLine, DrawRect, DrawText]
InstructionList = List[Instruction]
