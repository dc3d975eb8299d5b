from PyQt5.QtWidgets import (
    QApplication,
    QScrollArea,
)

from zoomchart import BarChartWidget


def main():
    app = QApplication([])

    chart = BarChartWidget([100, None, 50, 130, 90, 110, 120])
    chart.renderer.draw_config.bar_color = "orange"
    chart.renderer.axis_x.label_color = "blue"
    chart.renderer.axis_y.grid_color = "lightgray"
    chart.zoom_in()
    chart.zoom_in()

    scroll_area = QScrollArea()
    scroll_area.setWidget(chart)
    scroll_area.setWidgetResizable(True)
    scroll_area.resize(600, 420)
    scroll_area.show()

    app.exec()


if __name__ == "__main__":
    main()
