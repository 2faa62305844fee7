"""Coordinate-system charting core
===============================

Object graph for charts plotted on coordinate systems: axes, charts, data
providers, the coordinate systems that tie them together, and the render
session that gathers everything a serializer needs.

Public API
----------
CoordinateSystem
    Abstract base for coordinate systems.
RectangularCoordinate, PolarCoordinate
    Concrete coordinate systems.
XAxis, YAxis, AngleAxis, RadiusAxis
    Axes.
LineChart, BarChart, ScatterChart, MarkArea
    Charts and overlays.
DataProvider, CategoryData, MarkAreaData
    Data sources.
RenderSession
    Render-pass driver and part collector.
"""

from .axis import AngleAxis, Axis, AxisWrapper, RadiusAxis, XAxis, YAxis
from .chart import BarChart, Chart, LineChart, MarkArea, ScatterChart
from .coordinate import AxisView, CoordinateSystem
from .core.config import Polar, Position
from .core.errors import QChartError, QChartValidationError
from .data import CategoryData, DataProvider, MarkAreaData
from .render import RenderPlan, RenderSession
from .systems import PolarCoordinate, RectangularCoordinate

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "AxisWrapper",
    "AxisView",
    "XAxis",
    "YAxis",
    "AngleAxis",
    "RadiusAxis",
    "Chart",
    "LineChart",
    "BarChart",
    "ScatterChart",
    "MarkArea",
    "CoordinateSystem",
    "RectangularCoordinate",
    "PolarCoordinate",
    "DataProvider",
    "CategoryData",
    "MarkAreaData",
    "Polar",
    "Position",
    "RenderSession",
    "RenderPlan",
    "QChartError",
    "QChartValidationError",
    "__version__",
]
