import argparse
import logging
import sys
from typing import List, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor, QFont, QPalette
from PyQt5.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from zoomchart.BarChart import BarChartWidget
from zoomchart.DataSource import DEFAULT_COUNT, DataSource

logger = logging.getLogger(__name__)

BUTTON_COLOR = QColor(70, 130, 180)  # SteelBlue
REGENERATE_BUTTON_COLOR = QColor(60, 179, 113)  # MediumSeaGreen
BUTTON_TEXT_COLOR = QColor("white")


def _styled_button(text: str, background: "QColor") -> "QPushButton":
    button = QPushButton(text)
    button.setFont(QFont("Arial", 12, QFont.Bold))
    button.setFocusPolicy(Qt.NoFocus)
    button.setStyleSheet(
        f"QPushButton {{ background-color: {background.name()}; color: {BUTTON_TEXT_COLOR.name()};"
        f" padding: 4px 10px; }}"
    )
    return button


class MainWindow(QMainWindow):

    def __init__(self, data_source: "DataSource", parent=None):
        super().__init__(parent)
        self.data_source = data_source
        self.chart = BarChartWidget(data_source)

        self._init_ui()

        data_source.data_replaced.connect(self.on_data_replaced)

    def _init_ui(self):
        self.setWindowTitle("Simple Bar Chart Visualization")
        self.resize(800, 600)

        # chart: scroll horizontally only
        scroll_area = QScrollArea()
        scroll_area.setWidget(self.chart)
        scroll_area.setWidgetResizable(True)
        scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOn)
        scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        scroll_area.horizontalScrollBar().setSingleStep(20)
        scroll_area.setBackgroundRole(QPalette.Base)

        # control layout
        zoom_in_button = _styled_button("Zoom In (Show Less)", BUTTON_COLOR)
        zoom_out_button = _styled_button("Zoom Out (Show More)", BUTTON_COLOR)
        reset_zoom_button = _styled_button("Reset Zoom", BUTTON_COLOR)
        regenerate_button = _styled_button("Regenerate Data", REGENERATE_BUTTON_COLOR)

        zoom_in_button.clicked.connect(self.chart.zoom_in)
        zoom_out_button.clicked.connect(self.chart.zoom_out)
        reset_zoom_button.clicked.connect(self.chart.reset_zoom)
        regenerate_button.clicked.connect(self.data_source.regenerate)

        control_layout = QHBoxLayout()
        control_layout.setContentsMargins(10, 10, 10, 10)
        control_layout.setSpacing(10)
        control_layout.addStretch(1)
        for button in zoom_in_button, zoom_out_button, reset_zoom_button, regenerate_button:
            control_layout.addWidget(button)
        control_layout.addStretch(1)

        # main layout
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(scroll_area, 1)
        main_layout.addLayout(control_layout)

        w = QWidget()
        w.setLayout(main_layout)
        self.setCentralWidget(w)

        self.scroll_area = scroll_area
        self.zoom_in_button = zoom_in_button
        self.zoom_out_button = zoom_out_button
        self.reset_zoom_button = reset_zoom_button
        self.regenerate_button = regenerate_button

    def on_data_replaced(self):
        logger.info("showing %d new values", len(self.data_source))
        self.chart.set_data(self.data_source)


def parse_args(argv: Optional[List[str]] = None) -> "argparse.Namespace":
    parser = argparse.ArgumentParser(description="Scrollable, zoomable bar chart of random values.")
    parser.add_argument("--points", type=int, default=DEFAULT_COUNT,
                        help="number of values to generate (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed of the random generator")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug messages")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])

    data_source = DataSource(count=args.points, seed=args.seed)
    main_window = MainWindow(data_source)
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
