from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from zoomchart.Base import DrawConfig
    from zoomchart.Instructions import InstructionList


@dataclass(frozen=True)
class HitResult:
    index: int
    value: float


class DrawerBase(ABC):
    """
    Draws one layer of a chart.

    Call order for every paint:
    ```
    for drawer in drawers:
        config = drawer.prepare_draw(config)
    for drawer in drawers:
        instructions += drawer.draw(config)
    ```
    """

    def __init__(self):
        self._values: Sequence[Optional[float]] = ()

    def set_values(self, values: Sequence[Optional[float]]):
        self._values = values

    def prepare_draw(self, config: "DrawConfig") -> "DrawConfig":
        """
        May be called several times before draw(). Adjust config if the drawer needs it.
        """
        return config

    @abstractmethod
    def draw(self, config: "DrawConfig") -> "InstructionList":
        """
        Return drawing instructions in UI coordinate.
        config.drawing_cache is always set when this is called.
        """
        raise NotImplementedError()


class Drawable(ABC):
    """
    Anything that can be painted by a widget and answer what is under the pointer.
    Implementations do not depend on any widget class.
    """

    @abstractmethod
    def render(self, width: int, height: int) -> "InstructionList":
        raise NotImplementedError()

    @abstractmethod
    def hit_test(self, x: float, y: float) -> Optional[HitResult]:
        raise NotImplementedError()
