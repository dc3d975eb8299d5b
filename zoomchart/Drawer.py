from typing import List, Optional, Sequence, TYPE_CHECKING

from PyQt5.QtGui import QColor

from zoomchart.Base import BAR_COLOR, BAR_EDGE_COLOR
from zoomchart.DrawerBase import DrawerBase
from zoomchart.Instructions import DrawRect

if TYPE_CHECKING:
    from zoomchart.Base import ColorType, DrawConfig
    from zoomchart.Instructions import InstructionList


class BarChartDrawer(DrawerBase):
    """
    Drawer to present one vertical bar per value.

    A None value draws nothing but still takes its slot, so the bars after it keep their position.
    Negative values are drawn with a height of 0.
    """

    def __init__(self):
        super().__init__()
        self.body_color: "ColorType" = QColor(BAR_COLOR)
        self.edge_color: "ColorType" = BAR_EDGE_COLOR

        self.use_cache = True

        # cached variables for draw
        self._cache_rects: List[Optional[DrawRect]] = []
        self._cache_key = None

    def set_values(self, values: Sequence[Optional[float]]):
        super().set_values(values)
        self.clear_cache()

    def draw(self, config: "DrawConfig") -> "InstructionList":
        key = self._geometry_key(config)
        if not self.use_cache or key != self._cache_key:
            self.clear_cache()
            self._generate_cache(config)
            self._cache_key = key
        return [i for i in self._cache_rects[config.begin:config.end] if i]

    def clear_cache(self):
        self._cache_key = None
        self._cache_rects = []

    def bar_rect(self, index: int, config: "DrawConfig") -> Optional[DrawRect]:
        value = self._values[index]
        if value is None:
            return None
        drawing_cache = config.drawing_cache
        height = max(drawing_cache.value_to_height(value, config.max_value), 0)
        return DrawRect(
            x=drawing_cache.bar_left(index, config.bar_width, config.bar_spacing),
            y=drawing_cache.plot_bottom - height,
            width=config.bar_width,
            height=height,
            fill_color=self.body_color,
            edge_color=self.edge_color,
        )

    def _generate_cache(self, config: "DrawConfig"):
        self._cache_rects = [self.bar_rect(i, config) for i in range(len(self._values))]

    def _geometry_key(self, config: "DrawConfig"):
        drawing_cache = config.drawing_cache
        return (config.bar_width,
                config.bar_spacing,
                config.max_value,
                drawing_cache.plot_left,
                drawing_cache.plot_top,
                drawing_cache.plot_height,
                self.body_color,
                self.edge_color,
                )
