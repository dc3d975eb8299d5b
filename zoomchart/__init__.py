from zoomchart.Axis import AxisBase, ItemAxisX, ValueAxisY
from zoomchart.BarChart import BarChartWidget, paint_instructions
from zoomchart.Base import Alignment, ColorType, DrawConfig, ExtraDrawConfig, Orientation
from zoomchart.ChartRenderer import ChartRenderer, ChartState, max_value_of
from zoomchart.DataSource import DataSource, random_values
from zoomchart.Drawer import BarChartDrawer
from zoomchart.DrawerBase import Drawable, DrawerBase, HitResult
from zoomchart.Instructions import DrawLine, DrawRect, DrawText, Instruction

__version__ = "0.1.0"
