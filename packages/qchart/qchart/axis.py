"""qchart: Axes
---------------------------------------------------------
Axes are the dimensions of a coordinate system. An axis validates its own
configuration and, when a coordinate system asks for it, produces an
``AxisWrapper``: the part that carries the axis' rendering index for that
coordinate system.

Public API
----------
``Axis`` : Abstract base for all axes
``XAxis``, ``YAxis`` : Rectangular axes (both ``XYAxis``)
``AngleAxis``, ``RadiusAxis`` : Polar axes
``AxisWrapper`` : Axis bound to a coordinate system
"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Any, ClassVar

from .core.errors import QChartValidationError

if TYPE_CHECKING:
    from .coordinate import CoordinateSystem
    from .core.protocols import PartCollector

__all__ = [
    "Axis",
    "XYAxis",
    "XAxis",
    "YAxis",
    "AngleAxis",
    "RadiusAxis",
    "AxisWrapper",
    "DATA_TYPES",
]

DATA_TYPES = ("number", "category", "time", "log")


class Axis(ABC):
    """Abstract axis.

    Parameters
    ----------
    data_type : str
        One of ``DATA_TYPES``.
    name : str, optional
        Axis title.
    min, max : float, optional
        Fixed range; the renderer picks the range when unset.
    inverse : bool
        Draw values in decreasing order.

    Attributes
    ----------
    render_context : PartCollector or None
        Collector of the render pass currently using this axis.

    """

    part_family: ClassVar[str] = "axis"

    def __init__(
        self,
        data_type: str = "number",
        name: str | None = None,
        min: float | None = None,
        max: float | None = None,
        inverse: bool = False,
    ):
        self.data_type = data_type
        self.name = name
        self.min = min
        self.max = max
        self.inverse = inverse
        self.render_context: PartCollector | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, data_type={self.data_type!r})"

    def validate(self) -> None:
        """Check the axis configuration.

        Raises
        ------
        QChartValidationError
            If the data type is unknown, the range is empty or inverted, or a
            log axis has a non-positive minimum.

        """
        label = self.name or type(self).__name__
        if self.data_type not in DATA_TYPES:
            raise QChartValidationError(
                f"{label}: unknown data type '{self.data_type}'"
            )
        if self.min is not None and self.max is not None and self.min >= self.max:
            raise QChartValidationError(
                f"{label}: minimum {self.min} must be below maximum {self.max}"
            )
        if self.data_type == "log" and self.min is not None and self.min <= 0:
            raise QChartValidationError(
                f"{label}: log axis minimum must be positive, got {self.min}"
            )

    def wrap(self, coordinate_system: CoordinateSystem) -> AxisWrapper:
        return AxisWrapper(self, coordinate_system)


class XYAxis(Axis, ABC):
    """Axis of a rectangular coordinate system."""


class XAxis(XYAxis):
    part_family: ClassVar[str] = "xAxis"


class YAxis(XYAxis):
    part_family: ClassVar[str] = "yAxis"


class AngleAxis(Axis):
    part_family: ClassVar[str] = "angleAxis"

    def __init__(self, data_type: str = "category", start_angle: float = 90, **kwargs):
        super().__init__(data_type, **kwargs)
        self.start_angle = start_angle


class RadiusAxis(Axis):
    part_family: ClassVar[str] = "radiusAxis"


class AxisWrapper:
    """An axis as seen from one coordinate system.

    The wrapper is what the render pass indexes, so the same axis object can
    carry a different rendering index in each coordinate system it belongs to.
    """

    def __init__(self, axis: Axis, coordinate_system: CoordinateSystem):
        self.axis = axis
        self.coordinate_system = coordinate_system
        self.rendering_index = -1

    @property
    def part_family(self) -> str:
        return self.axis.part_family

    def __repr__(self) -> str:
        return f"AxisWrapper({self.axis!r}, index={self.rendering_index})"

    def describe(self) -> dict[str, Any]:
        info: dict[str, Any] = {
            "kind": self.part_family,
            "index": self.rendering_index,
            "name": self.axis.name,
            "type": self.axis.data_type,
        }
        system_name = self.coordinate_system.system_name()
        if system_name:
            info[f"{system_name}Index"] = self.coordinate_system.rendering_index
        if self.axis.min is not None:
            info["min"] = self.axis.min
        if self.axis.max is not None:
            info["max"] = self.axis.max
        if self.axis.inverse:
            info["inverse"] = True
        return info
