"""Tests for the demo window wiring buttons to the chart."""
import pytest
from PyQt5.QtCore import Qt

from zoomchart import DataSource
from zoomchart.main import MainWindow, parse_args


@pytest.fixture
def window(qtbot):
    main_window = MainWindow(DataSource(count=30, seed=3))
    qtbot.addWidget(main_window)
    return main_window


def test_window_setup(window):
    assert window.windowTitle() == "Simple Bar Chart Visualization"
    assert window.scroll_area.widget() is window.chart
    assert window.scroll_area.horizontalScrollBarPolicy() == Qt.ScrollBarAlwaysOn
    assert window.scroll_area.verticalScrollBarPolicy() == Qt.ScrollBarAlwaysOff
    assert len(window.chart.renderer.values) == 30


def test_zoom_buttons(window):
    renderer = window.chart.renderer
    window.zoom_in_button.click()
    window.zoom_in_button.click()
    assert renderer.zoom_level == 3

    window.zoom_out_button.click()
    assert renderer.zoom_level == 2

    window.reset_zoom_button.click()
    assert renderer.zoom_level == 1


def test_zoom_button_clamps(window):
    for _ in range(8):
        window.zoom_in_button.click()
    assert window.chart.renderer.zoom_level == 5
    for _ in range(8):
        window.zoom_out_button.click()
    assert window.chart.renderer.zoom_level == 1


def test_regenerate_button(window):
    renderer = window.chart.renderer
    before = renderer.values
    window.zoom_in_button.click()

    window.regenerate_button.click()

    assert renderer.zoom_level == 1
    assert len(renderer.values) == 30
    assert renderer.values != before
    assert renderer.max_value == max(renderer.values)
    assert all(50 <= v < 200 for v in renderer.values)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.points == 200
    assert args.seed is None
    assert not args.verbose


def test_parse_args_options():
    args = parse_args(["--points", "12", "--seed", "9", "-v"])
    assert (args.points, args.seed, args.verbose) == (12, 9, True)
