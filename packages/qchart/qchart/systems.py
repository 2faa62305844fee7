"""qchart: Concrete Coordinate Systems
---------------------------------------------------------
``RectangularCoordinate`` plots charts against X and Y axes;
``PolarCoordinate`` plots them against a radius and an angle axis and is
placed by center and radius instead of an absolute position.
"""

from __future__ import annotations

from .axis import AngleAxis, RadiusAxis, XAxis, YAxis
from .coordinate import CoordinateSystem
from .core.errors import QChartValidationError
from .core.protocols import HasPolarProperty

__all__ = [
    "RectangularCoordinate",
    "PolarCoordinate",
]


class RectangularCoordinate(CoordinateSystem):
    """Rectangular (cartesian) coordinate system."""

    def __init__(self, x_axis: XAxis | None = None, y_axis: YAxis | None = None):
        super().__init__()
        self.add_axis(x_axis, y_axis)

    def validate(self) -> None:
        if self.has_no_axis_of_type(XAxis):
            raise QChartValidationError("No X-axis defined")
        if self.has_no_axis_of_type(YAxis):
            raise QChartValidationError("No Y-axis defined")
        super().validate()

    def system_name(self) -> str:
        return "cartesian2d"

    def axes_data(self) -> tuple[str, ...]:
        return ("x", "y")


class PolarCoordinate(HasPolarProperty, CoordinateSystem):
    """Polar coordinate system."""

    def __init__(
        self, radius_axis: RadiusAxis | None = None, angle_axis: AngleAxis | None = None
    ):
        super().__init__()
        self.add_axis(radius_axis, angle_axis)

    def validate(self) -> None:
        if self.has_no_axis_of_type(RadiusAxis):
            raise QChartValidationError("No radius axis defined")
        if self.has_no_axis_of_type(AngleAxis):
            raise QChartValidationError("No angle axis defined")
        super().validate()

    def system_name(self) -> str:
        return "polar"

    def axes_data(self) -> tuple[str, ...]:
        return ("radius", "angle")
