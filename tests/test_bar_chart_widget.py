"""Tests for the Qt widget showing a ChartRenderer."""
import pytest
from PyQt5.QtCore import QEvent, QPointF, QSize, Qt
from PyQt5.QtGui import QColor, QMouseEvent
from PyQt5.QtWidgets import QScrollArea

from zoomchart import BarChartWidget


def _move_to(widget, x, y):
    event = QMouseEvent(QEvent.MouseMove, QPointF(x, y), Qt.NoButton, Qt.NoButton, Qt.NoModifier)
    widget.mouseMoveEvent(event)


@pytest.fixture
def chart(qtbot):
    widget = BarChartWidget([100, None, 50])
    qtbot.addWidget(widget)
    widget.resize(500, 400)
    return widget


def test_size_hints_without_parent(chart):
    assert chart.minimumSizeHint() == QSize(65, 400)
    assert chart.sizeHint() == QSize(65, 400)
    assert chart.minimumWidth() == 65


def test_zoom_updates_minimum_size(chart):
    chart.zoom_in()
    assert chart.renderer.zoom_level == 2
    assert chart.minimumWidth() == 3 * 27 + 7
    chart.reset_zoom()
    assert chart.minimumWidth() == 65


def test_zoom_out_passthrough(chart):
    chart.zoom_in()
    chart.zoom_out()
    assert chart.renderer.zoom_level == 1


def test_size_hint_inside_scroll_area(qtbot):
    area = QScrollArea()
    qtbot.addWidget(area)
    chart = BarChartWidget([1] * 50)
    area.setWidget(chart)
    area.setWidgetResizable(True)
    area.viewport().resize(300, 400)

    assert chart.available_width() == 300
    assert chart.sizeHint().width() == 50 * 20 + 5

    chart.set_data([1, 2])
    assert chart.sizeHint().width() == 300


def test_set_data_resets_zoom(chart):
    chart.zoom_in()
    chart.set_data([1, 2, 3, 4])
    assert chart.renderer.zoom_level == 1
    assert chart.minimumWidth() == 4 * 20 + 5


def test_tooltip_follows_cursor(chart):
    _move_to(chart, 45, 100)
    assert chart.tooltip_text == "Item 1: 100.00"

    _move_to(chart, 85, 100)
    assert chart.tooltip_text == "Item 3: 50.00"

    _move_to(chart, 57, 100)
    assert chart.tooltip_text is None

    _move_to(chart, 65, 100)
    assert chart.tooltip_text is None


def test_tooltip_cleared_on_leave(chart):
    _move_to(chart, 45, 100)
    chart.leaveEvent(QEvent(QEvent.Leave))
    assert chart.tooltip_text is None


def test_tooltip_cleared_on_zoom(chart):
    _move_to(chart, 45, 100)
    chart.zoom_in()
    assert chart.tooltip_text is None


def test_paint_draws_bars(chart):
    image = chart.grab().toImage()
    # y=320 lies between the grid lines at 300 and 370
    assert image.pixelColor(52, 320) == QColor(60, 140, 220)
    # background between the bars
    assert image.pixelColor(72, 320) == QColor("white")


class FakeToolTip:
    visible = False
    shown = []

    @classmethod
    def showText(cls, pos, text, widget):
        cls.visible = True
        cls.shown.append(text)

    @classmethod
    def hideText(cls):
        cls.visible = False

    @classmethod
    def isVisible(cls):
        return cls.visible


def test_tooltip_shown_again_after_qt_hides_it(chart, monkeypatch):
    FakeToolTip.visible = False
    FakeToolTip.shown = []
    monkeypatch.setattr("zoomchart.BarChart.QToolTip", FakeToolTip)

    _move_to(chart, 45, 100)
    _move_to(chart, 46, 100)
    assert FakeToolTip.shown == ["Item 1: 100.00"]

    # expiry timer or a click hides the tip while the cursor stays on the bar
    FakeToolTip.hideText()
    _move_to(chart, 47, 100)
    assert FakeToolTip.shown == ["Item 1: 100.00", "Item 1: 100.00"]
    assert FakeToolTip.isVisible()
