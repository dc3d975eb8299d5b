import logging
import math
from copy import copy
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, TYPE_CHECKING, Tuple

from zoomchart.Axis import ItemAxisX, ValueAxisY
from zoomchart.Base import (
    DrawingCache,
    ExtraDrawConfig,
    MAX_ZOOM_LEVEL,
    MIN_ZOOM_LEVEL,
    PREFERRED_HEIGHT,
    bar_spacing_for_zoom,
    bar_width_for_zoom,
)
from zoomchart.Drawer import BarChartDrawer
from zoomchart.DrawerBase import Drawable, HitResult

if TYPE_CHECKING:
    from zoomchart.Instructions import InstructionList

logger = logging.getLogger(__name__)

ValuesType = Tuple[Optional[float], ...]


def _to_value(value) -> Optional[float]:
    """NaN and infinities are treated the same as a missing value"""
    if value is None:
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def max_value_of(values: Iterable[Optional[float]]) -> float:
    """
    The largest value, or 1 if there is no value above 0, so it can always be divided by.
    """
    result = 0.0
    for value in values:
        if value is not None and value > result:
            result = value
    if result == 0:
        result = 1.0
    return result


@dataclass
class ChartState:
    values: ValuesType = ()
    max_value: float = 1.0
    zoom_level: int = MIN_ZOOM_LEVEL

    @property
    def bar_width(self) -> int:
        return bar_width_for_zoom(self.zoom_level)

    @property
    def bar_spacing(self) -> int:
        return bar_spacing_for_zoom(self.zoom_level)

    @property
    def step(self) -> int:
        """distance between the left edges of two neighbouring bars"""
        return self.bar_width + self.bar_spacing


class ChartRenderer(Drawable):
    """
    Owns the values and the zoom level of a bar chart, and turns them into drawing instructions.

    Every mutation notifies the change listeners, the host should then re-measure and repaint.
    Zoom commands beyond [MIN_ZOOM_LEVEL, MAX_ZOOM_LEVEL] are ignored.
    """

    def __init__(self, values: Iterable[Optional[float]] = ()):
        self._draw_config = ExtraDrawConfig()
        self._state = ChartState()
        self._last_size = (0, PREFERRED_HEIGHT)
        self._change_listeners: List[Callable[[], None]] = []

        self.drawer = BarChartDrawer()
        self.axis_x = ItemAxisX()
        self.axis_y = ValueAxisY()
        self.axis_y.grid_color = "gray"
        self.axis_y.label_color = "gray"

        self._apply_values(values)

    @property
    def draw_config(self) -> "ExtraDrawConfig":
        return self._draw_config

    @property
    def state(self) -> "ChartState":
        """A copy of the current state"""
        return replace(self._state)

    @property
    def values(self) -> ValuesType:
        return self._state.values

    @property
    def max_value(self) -> float:
        return self._state.max_value

    @property
    def zoom_level(self) -> int:
        return self._state.zoom_level

    @property
    def bar_width(self) -> int:
        return self._state.bar_width

    @property
    def bar_spacing(self) -> int:
        return self._state.bar_spacing

    def add_change_listener(self, listener: Callable[[], None]):
        self._change_listeners.append(listener)

    def remove_change_listener(self, listener: Callable[[], None]):
        self._change_listeners.remove(listener)

    #########################################################################
    # Commands
    #########################################################################
    def set_data(self, values: Iterable[Optional[float]]):
        self._apply_values(values)
        logger.debug("data replaced: %d values, max value %s",
                     len(self._state.values), self._state.max_value)
        self._notify_changed()

    def zoom_in(self):
        self._set_zoom_level(self._state.zoom_level + 1)

    def zoom_out(self):
        self._set_zoom_level(self._state.zoom_level - 1)

    def reset_zoom(self):
        self._state.zoom_level = MIN_ZOOM_LEVEL
        logger.debug("zoom reset")
        self._notify_changed()

    #########################################################################
    # Queries
    #########################################################################
    def preferred_content_width(self, available_width: int) -> int:
        """
        Never narrower than available_width, but wide enough to show every bar at the current zoom level.
        """
        state = self._state
        content_width = len(state.values) * state.step + state.bar_spacing
        return max(available_width, content_width)

    def preferred_content_height(self) -> int:
        return PREFERRED_HEIGHT

    def render(self, width: int, height: int) -> "InstructionList":
        config = self._prepare_config(width, height)
        self._last_size = (width, height)

        output: "InstructionList" = []
        for axis in self.axis_y, self.axis_x:
            output += axis.draw_axis(config)
        for axis in self.axis_y, self.axis_x:
            output += axis.draw_grids(config)
        output += self.axis_y.draw_ticks(config)
        if config.has_showing_data:
            output += self.drawer.draw(config)
            output += self.axis_x.draw_ticks(config)
        return output

    def hit_test(self, x: float, y: float, canvas_height: Optional[int] = None) -> Optional[HitResult]:
        """
        Find the bar under (x, y).
        :param canvas_height: height of the painted area, defaults to the height of the last render()
        :return: None if there is no bar, or the bar has no value
        """
        if canvas_height is None:
            canvas_height = self._last_size[1]
        left, top, _, bottom = self._draw_config.paddings
        plot_height = max(canvas_height - top - bottom, 0)
        if x < left or not top <= y <= top + plot_height:
            return None

        state = self._state
        index = int((x - left) // state.step)
        if index >= len(state.values):
            return None

        bar_start = left + index * state.step
        if not bar_start <= x <= bar_start + state.bar_width:
            return None

        value = state.values[index]
        if value is None:
            return None
        return HitResult(index, value)

    def tooltip_text(self, x: float, y: float, canvas_height: Optional[int] = None) -> Optional[str]:
        hit = self.hit_test(x, y, canvas_height)
        if hit is None:
            return None
        return f"Item {hit.index + 1}: {hit.value:.2f}"

    #########################################################################
    # Private methods
    #########################################################################
    def _apply_values(self, values: Iterable[Optional[float]]):
        state = self._state
        state.values = tuple(_to_value(v) for v in values)
        state.max_value = max_value_of(state.values)
        state.zoom_level = MIN_ZOOM_LEVEL
        self.drawer.set_values(state.values)
        self.axis_x.values = state.values

    def _set_zoom_level(self, zoom_level: int):
        if not MIN_ZOOM_LEVEL <= zoom_level <= MAX_ZOOM_LEVEL:
            logger.debug("zoom level %d out of range, ignored", zoom_level)
            return
        logger.debug("zoom level %d -> %d", self._state.zoom_level, zoom_level)
        self._state.zoom_level = zoom_level
        self._notify_changed()

    def _notify_changed(self):
        for listener in list(self._change_listeners):
            listener()

    def _prepare_config(self, width: int, height: int) -> "ExtraDrawConfig":
        """
        Copy the config, so the stored one is never changed while rendering
        """
        config: "ExtraDrawConfig" = copy(self._draw_config)
        state = self._state

        config.width, config.height = width, height
        config.begin, config.end = 0, len(state.values)
        config.bar_width = state.bar_width
        config.bar_spacing = state.bar_spacing
        config.max_value = state.max_value
        config.has_showing_data = config.end - config.begin > 0

        self.drawer.body_color = config.bar_color
        self.drawer.edge_color = config.bar_edge_color

        config.drawing_cache = self._prepare_drawing_cache(config)
        return config

    def _prepare_drawing_cache(self, config: "ExtraDrawConfig") -> "DrawingCache":
        left, top, right, bottom = config.paddings
        drawing_cache = DrawingCache()
        drawing_cache.plot_left = left
        drawing_cache.plot_top = top
        drawing_cache.plot_right = config.width - right - config.bar_spacing
        drawing_cache.plot_height = max(config.height - top - bottom, 0)
        return drawing_cache
