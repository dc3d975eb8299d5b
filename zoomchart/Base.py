from enum import Enum
from typing import Optional, Union

from PyQt5.QtGui import QColor

ColorType = Union[
    str,  # "red", "#RGB", "#RRGGBB", "#AARRGGBB", "#RRRGGGBBB", "#RRRRGGGGBBBB"
    int,  # Qt.GlobalColor
    QColor,  # QtGui.QColor
    None,  # Don't draw
]

# geometry constants, in pixels
LEFT_MARGIN = 40
TOP_MARGIN = 20
BOTTOM_MARGIN = 30
PREFERRED_HEIGHT = 400

# default colors of the bars
BAR_COLOR = QColor(60, 140, 220)
BAR_EDGE_COLOR = "#404040"

MIN_ZOOM_LEVEL = 1
MAX_ZOOM_LEVEL = 5


def bar_width_for_zoom(zoom_level: int) -> int:
    return 15 + 5 * (zoom_level - 1)


def bar_spacing_for_zoom(zoom_level: int) -> int:
    return 5 + 2 * (zoom_level - 1)


class Orientation(Enum):
    HORIZONTAL = 1
    VERTICAL = 2


class Alignment(Enum):
    """
    horizontal alignment of a text relative to its anchor point
    """
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class DrawingCache:
    def __init__(self):
        # intermediate variables to speed up calculation
        self.plot_left: int = 0
        self.plot_top: int = 0
        self.plot_right: int = 0  # right end of axis and grid lines
        self.plot_height: int = 0  # height of the area holding the bars

    @property
    def plot_bottom(self) -> int:
        return self.plot_top + self.plot_height

    def value_to_height(self, value: float, max_value: float) -> int:
        """
        convert a data value into a pixel height inside the plot area.
        Halves round to even (round() semantics), so 2.5 pixels become 2 and 7.5 become 8.
        """
        return round(value / max_value * self.plot_height)

    def value_to_ui_y(self, value: float, max_value: float) -> int:
        """
        convert a data value into a y coordinate in UI coordinate(origin at top-left)
        """
        return self.plot_bottom - self.value_to_height(value, max_value)

    def bar_left(self, index: int, bar_width: int, bar_spacing: int) -> int:
        return self.plot_left + bar_spacing + index * (bar_width + bar_spacing)


class DrawConfig:

    def __init__(self):
        self.begin: int = 0  # first item to draw
        self.end: int = 0  # last item to draw + 1, items drawn are [begin, end)
        self.width: int = 0
        self.height: int = PREFERRED_HEIGHT
        self.paddings = (LEFT_MARGIN, TOP_MARGIN, 0, BOTTOM_MARGIN)  # left, top, right, bottom

        self.bar_width: int = bar_width_for_zoom(MIN_ZOOM_LEVEL)
        self.bar_spacing: int = bar_spacing_for_zoom(MIN_ZOOM_LEVEL)
        self.max_value: float = 1

        self.drawing_cache: Optional["DrawingCache"] = None


class ExtraDrawConfig(DrawConfig):
    """
    Set a color to None to skip drawing that part.
    """

    def __init__(self):
        super().__init__()
        self.bar_color: "ColorType" = QColor(BAR_COLOR)
        self.bar_edge_color: "ColorType" = BAR_EDGE_COLOR
        self.background_color: "ColorType" = "white"

        self.has_showing_data: bool = False
