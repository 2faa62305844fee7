"""qchart: Charts
---------------------------------------------------------
Charts are plotted on a coordinate system. A chart keeps a back-reference to
the coordinate system it is attached to and shares that system's axis list;
both are maintained by ``CoordinateSystem.add`` and ``CoordinateSystem.remove``.

Public API
----------
``Chart`` : Abstract base for charts drawn on a coordinate system
``LineChart``, ``BarChart``, ``ScatterChart`` : Concrete chart types
``MarkArea`` : Highlighted regions overlaid on a chart
"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Any, ClassVar

from .core.errors import QChartValidationError
from .data import DataProvider, MarkAreaData

if TYPE_CHECKING:
    from .axis import Axis
    from .coordinate import CoordinateSystem

__all__ = [
    "Chart",
    "LineChart",
    "BarChart",
    "ScatterChart",
    "MarkArea",
]


class MarkArea:
    """Regions highlighted on top of a chart.

    Only the region data takes part in a render pass.
    """

    def __init__(self, name: str | None = None, data: MarkAreaData | None = None):
        self.name = name
        self.data = data if data is not None else MarkAreaData(name=name)

    def add_region(self, start: Any, end: Any) -> MarkArea:
        self.data.add_region(start, end)
        return self


class Chart(ABC):
    """Abstract chart.

    Parameters
    ----------
    *data : DataProvider
        Data providers in the order the chart type expects them (for example
        x values then y values).
    axes : sequence of Axis, optional
        Axes this chart is plotted against, in the order named by the
        coordinate system's ``axes_data()``.
    name : str, optional
        Series name.

    Attributes
    ----------
    coordinate_system : CoordinateSystem or None
        Owner, set by ``CoordinateSystem.add``.
    axes : list of Axis or None
        The owner's axis list, shared by reference.

    """

    part_family: ClassVar[str] = "series"
    chart_type: ClassVar[str] = "chart"

    def __init__(
        self,
        *data: DataProvider,
        axes: tuple[Axis, ...] | list[Axis] = (),
        name: str | None = None,
    ):
        self.name = name
        self.rendering_index = -1
        self.coordinate_system: CoordinateSystem | None = None
        self.axes: list[Axis] | None = None
        self.bound_axes: tuple[Axis, ...] = tuple(axes)
        self._data: list[DataProvider] = [d for d in data if d is not None]
        self._mark_area: MarkArea | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def get_data(self) -> tuple[DataProvider, ...]:
        return tuple(self._data)

    def get_mark_area(self, create: bool = False) -> MarkArea | None:
        if self._mark_area is None and create:
            self._mark_area = MarkArea(name=self.name)
        return self._mark_area

    def set_mark_area(self, mark_area: MarkArea | None) -> None:
        self._mark_area = mark_area

    def declare_data(self, data_set: set[DataProvider]) -> None:
        """Add every data provider this chart uses to ``data_set``."""
        data_set.update(self._data)
        if self._mark_area is not None:
            data_set.add(self._mark_area.data)

    def validate(self) -> None:
        """Check that the chart can be plotted.

        Raises
        ------
        QChartValidationError
            If the chart is detached, has no data, or is bound to an axis that
            its coordinate system does not own.

        """
        label = self.name or type(self).__name__
        if self.coordinate_system is None or self.axes is None:
            raise QChartValidationError(f"{label}: not attached to a coordinate system")
        if not self._data:
            raise QChartValidationError(f"{label}: no data")
        for axis in self.bound_axes:
            if axis not in self.axes:
                raise QChartValidationError(
                    f"{label}: {axis!r} is not part of its coordinate system"
                )

    def describe(self) -> dict[str, Any]:
        info: dict[str, Any] = {
            "kind": self.part_family,
            "index": self.rendering_index,
            "type": self.chart_type,
            "name": self.name,
            "data": [d.rendering_index for d in self._data],
        }
        cs = self.coordinate_system
        if cs is None:
            return info
        info["coordinateSystem"] = cs.system_name()
        for axis_name, axis in zip(cs.axes_data() or (), self.bound_axes):
            # Axes the system does not own have no index in this pass.
            if axis in cs.axes:
                info[f"{axis_name}AxisIndex"] = cs.get_axis_rendering_index(axis)
        if self._mark_area is not None:
            info["markArea"] = self._mark_area.data.rendering_index
        return info


class LineChart(Chart):
    chart_type: ClassVar[str] = "line"

    def __init__(self, *data: DataProvider, smooth: bool = False, **kwargs: Any):
        super().__init__(*data, **kwargs)
        self.smooth = smooth


class BarChart(Chart):
    chart_type: ClassVar[str] = "bar"

    def __init__(self, *data: DataProvider, stack: str | None = None, **kwargs: Any):
        super().__init__(*data, **kwargs)
        self.stack = stack


class ScatterChart(Chart):
    chart_type: ClassVar[str] = "scatter"
