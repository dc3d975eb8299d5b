import logging
from typing import Iterable, Optional

from PyQt5.QtCore import QPoint, QSize, Qt
from PyQt5.QtGui import QColor, QFontMetrics, QMouseEvent, QPaintEvent, QPainter, QPen
from PyQt5.QtWidgets import QToolTip, QWidget

from zoomchart.Base import Alignment
from zoomchart.ChartRenderer import ChartRenderer
from zoomchart.Instructions import DrawLine, DrawRect, DrawText, InstructionList

logger = logging.getLogger(__name__)


def paint_instructions(painter: "QPainter", instructions: "InstructionList"):
    """
    Replay drawing instructions on a QPainter. Parts with a None color are skipped.
    """
    metrics = QFontMetrics(painter.font())
    for instruction in instructions:
        if isinstance(instruction, DrawRect):
            _paint_rect(painter, instruction)
        elif isinstance(instruction, DrawLine):
            if instruction.color is not None:
                painter.setPen(QPen(QColor(instruction.color)))
                painter.drawLine(instruction.x1, instruction.y1, instruction.x2, instruction.y2)
        elif isinstance(instruction, DrawText):
            if instruction.color is not None:
                x = instruction.x
                if instruction.alignment is Alignment.CENTER:
                    x -= metrics.horizontalAdvance(instruction.text) // 2
                elif instruction.alignment is Alignment.RIGHT:
                    x -= metrics.horizontalAdvance(instruction.text)
                painter.setPen(QPen(QColor(instruction.color)))
                painter.drawText(x, instruction.y, instruction.text)


def _paint_rect(painter: "QPainter", rect: "DrawRect"):
    if rect.fill_color is not None:
        painter.fillRect(rect.x, rect.y, rect.width, rect.height, QColor(rect.fill_color))
    if rect.edge_color is not None:
        painter.setBrush(Qt.NoBrush)
        painter.setPen(QPen(QColor(rect.edge_color)))
        painter.drawRect(rect.x, rect.y, rect.width, rect.height)


class BarChartWidget(QWidget):
    """
    Shows a ChartRenderer, and a tooltip with the value of the bar under the cursor.

    The widget asks to be at least as wide as all the bars at the current zoom level,
    put it into a QScrollArea with widgetResizable set to scroll through the bars.
    """

    def __init__(self, values: Iterable[Optional[float]] = (), parent=None):
        super().__init__(parent)
        self.renderer = ChartRenderer(values)
        self.renderer.add_change_listener(self._on_renderer_changed)
        self._tooltip_text: Optional[str] = None

        self.setMouseTracking(True)
        self._update_minimum_size()

    @property
    def tooltip_text(self) -> Optional[str]:
        """text of the tooltip currently shown, None if hidden"""
        return self._tooltip_text

    def set_data(self, values: Iterable[Optional[float]]):
        self.renderer.set_data(values)

    def zoom_in(self):
        self.renderer.zoom_in()

    def zoom_out(self):
        self.renderer.zoom_out()

    def reset_zoom(self):
        self.renderer.reset_zoom()

    def available_width(self) -> int:
        """width of the viewport holding this widget, or 0 without a parent"""
        parent = self.parentWidget()
        if parent is None:
            return 0
        return parent.width()

    #########################################################################
    # Re-implemented protected methods
    #########################################################################
    def sizeHint(self) -> "QSize":
        renderer = self.renderer
        return QSize(renderer.preferred_content_width(self.available_width()),
                     renderer.preferred_content_height())

    def minimumSizeHint(self) -> "QSize":
        renderer = self.renderer
        return QSize(renderer.preferred_content_width(0), renderer.preferred_content_height())

    def paintEvent(self, event: "QPaintEvent"):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        background_color = self.renderer.draw_config.background_color
        if background_color is not None:
            painter.fillRect(self.rect(), QColor(background_color))

        paint_instructions(painter, self.renderer.render(self.width(), self.height()))

        painter.end()
        event.accept()

    def mouseMoveEvent(self, event: "QMouseEvent"):
        pos = event.pos()
        text = self.renderer.tooltip_text(pos.x(), pos.y(), self.height())
        self._show_tooltip(text, event.globalPos())
        super().mouseMoveEvent(event)

    def leaveEvent(self, event):
        self._show_tooltip(None)
        super().leaveEvent(event)

    #########################################################################
    # Private methods
    #########################################################################
    def _show_tooltip(self, text: Optional[str], global_pos: Optional["QPoint"] = None):
        if text == self._tooltip_text and (text is None or QToolTip.isVisible()):
            return
        self._tooltip_text = text
        if text is None:
            QToolTip.hideText()
        else:
            QToolTip.showText(global_pos, text, self)

    def _on_renderer_changed(self):
        self._show_tooltip(None)
        self._update_minimum_size()
        self.updateGeometry()
        self.update()

    def _update_minimum_size(self):
        size = self.minimumSizeHint()
        logger.debug("content size %dx%d", size.width(), size.height())
        self.setMinimumSize(size)
