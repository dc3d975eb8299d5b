from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, TYPE_CHECKING

from zoomchart.Base import Alignment, Orientation
from zoomchart.Instructions import DrawLine, DrawText

if TYPE_CHECKING:
    from zoomchart.Base import ColorType, ExtraDrawConfig
    from zoomchart.Instructions import InstructionList


class AxisBase(ABC):

    def __init__(self, orientation: "Orientation"):
        self.orientation = orientation

        self.axis_color: "ColorType" = "black"
        self.grid_color: "ColorType" = "gray"
        self.label_color: "ColorType" = "black"

    def draw_axis(self, config: "ExtraDrawConfig") -> "InstructionList":
        if self.axis_color is None:
            return []
        drawing_cache = config.drawing_cache
        if self.orientation is Orientation.VERTICAL:
            return [DrawLine(drawing_cache.plot_left, drawing_cache.plot_top,
                             drawing_cache.plot_left, drawing_cache.plot_bottom,
                             self.axis_color)]
        return [DrawLine(drawing_cache.plot_left, drawing_cache.plot_bottom,
                         drawing_cache.plot_right, drawing_cache.plot_bottom,
                         self.axis_color)]

    @abstractmethod
    def draw_grids(self, config: "ExtraDrawConfig") -> "InstructionList":
        raise NotImplementedError()

    @abstractmethod
    def draw_ticks(self, config: "ExtraDrawConfig") -> "InstructionList":
        raise NotImplementedError()


@dataclass()
class ValueTick:
    value: float
    ui_y: int


class ValueAxisY(AxisBase):
    """
    Evenly spaced value labels from 0 to max_value, with a horizontal grid line for every label above 0.
    """

    def __init__(self):
        super().__init__(Orientation.VERTICAL)
        self.tick_count = 5
        self.format: str = "%.0f"
        self.label_offset = (-35, 5)

    def ticks(self, config: "ExtraDrawConfig") -> List[ValueTick]:
        drawing_cache = config.drawing_cache
        step = config.max_value / self.tick_count
        ticks = []
        for k in range(self.tick_count + 1):
            value = step * k
            ticks.append(ValueTick(value, drawing_cache.value_to_ui_y(value, config.max_value)))
        return ticks

    def draw_grids(self, config: "ExtraDrawConfig") -> "InstructionList":
        if self.grid_color is None:
            return []
        drawing_cache = config.drawing_cache
        # the lowest tick lies on the x axis
        return [DrawLine(drawing_cache.plot_left, tick.ui_y,
                         drawing_cache.plot_right, tick.ui_y,
                         self.grid_color)
                for tick in self.ticks(config)[1:]]

    def draw_ticks(self, config: "ExtraDrawConfig") -> "InstructionList":
        if self.label_color is None:
            return []
        left = config.drawing_cache.plot_left + self.label_offset[0]
        return [DrawText(left, tick.ui_y + self.label_offset[1],
                         self.label_for_value(tick.value),
                         self.label_color)
                for tick in self.ticks(config)]

    def label_for_value(self, value: float) -> str:
        return self.format % value


class ItemAxisX(AxisBase):
    """
    Labels every n-th bar, or every bar once bars are wider than min_bar_width.
    Labels are centered under their bar. Bars without value get no label.
    """

    def __init__(self):
        super().__init__(Orientation.HORIZONTAL)
        self.format = "Item %d"
        self.label_every = 10
        self.min_bar_width = 20
        self.label_offset = 20
        self.values: Sequence[Optional[float]] = ()

    def is_labeled(self, index: int, bar_width: int) -> bool:
        return index % self.label_every == 0 or bar_width > self.min_bar_width

    def draw_grids(self, config: "ExtraDrawConfig") -> "InstructionList":
        return []

    def draw_ticks(self, config: "ExtraDrawConfig") -> "InstructionList":
        if self.label_color is None:
            return []
        drawing_cache = config.drawing_cache
        text_y = drawing_cache.plot_bottom + self.label_offset
        output = []
        for i in range(config.begin, config.end):
            if self.values[i] is None or not self.is_labeled(i, config.bar_width):
                continue
            left = drawing_cache.bar_left(i, config.bar_width, config.bar_spacing)
            output.append(DrawText(left + config.bar_width // 2, text_y,
                                   self.label_for_index(i),
                                   self.label_color,
                                   Alignment.CENTER))
        return output

    def label_for_index(self, index: int) -> str:
        return self.format % (index + 1)
