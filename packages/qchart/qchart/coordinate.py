"""qchart: Coordinate Systems
---------------------------------------------------------
Abstract coordinate system. Most charts are plotted on a coordinate system;
one or more compatible charts can share the same one. The coordinate system
owns its axes and charts, keeps each chart's back-references in step, and
during a render pass hands the render session everything it needs: the charts,
their data, their mark-area data and the axes wrapped for this system.

Public API
----------
``CoordinateSystem`` : Abstract base for coordinate systems
``AxisView`` : Re-iterable, type-filtered view over a system's axes

Notes
-----
- Not thread-safe; a coordinate system is assumed to be driven by one caller.
- Wrapped axes are computed once per axis and cached for the lifetime of the
  coordinate system. Changing an axis after its first render does not
  refresh the cached wrapper.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from .axis import Axis, AxisWrapper
from .core.config import Position
from .core.errors import get_logger

if TYPE_CHECKING:
    from .chart import Chart
    from .core.protocols import PartCollector
    from .data import DataProvider

__all__ = [
    "CoordinateSystem",
    "AxisView",
]

logger = get_logger()

_A = TypeVar("_A", bound=Axis)


class AxisView(Generic[_A]):
    """Axes of one type, in insertion order.

    The view reads the live axis list on every iteration, so it can be
    iterated repeatedly and reflects axes added or removed in between.
    """

    def __init__(self, axes: list[Axis], kind: type[_A]):
        self._axes = axes
        self._kind = kind

    def __iter__(self) -> Iterator[_A]:
        return (a for a in self._axes if isinstance(a, self._kind))

    def first(self) -> _A | None:
        return next(iter(self), None)

    def is_empty(self) -> bool:
        return self.first() is None


class CoordinateSystem(ABC):
    """Abstract coordinate system.

    Attributes
    ----------
    axes : list of Axis
        Axes in insertion order, without duplicates. Attached charts hold a
        reference to this same list.
    wrapped_axes : dict
        Cache of ``AxisWrapper`` per axis, filled on first use.
    polar : bool
        Capability flag; ``True`` for polar systems, which have no absolute
        position.

    """

    part_family: ClassVar[str] = "coordinate"
    polar: ClassVar[bool] = False

    def __init__(self) -> None:
        self.axes: list[Axis] = []
        self.wrapped_axes: dict[Axis, AxisWrapper] = {}
        self.rendering_index = -1
        self._position: Position | None = None
        self._charts: list[Chart] = []

    @property
    def charts(self) -> tuple[Chart, ...]:
        return tuple(self._charts)

    # -------------------------------------------------------------------------
    # Charts
    # -------------------------------------------------------------------------

    def add(self, *charts: Chart) -> None:
        """Add charts to plot on this coordinate system.

        A chart already attached to a coordinate system (this one included) is
        removed from it first, so each chart has exactly one owner.
        """
        for chart in charts:
            if chart is None:
                continue
            if chart.coordinate_system is not None:
                logger.debug(f"Moving {chart!r} off {chart.coordinate_system!r}")
                chart.coordinate_system.remove(chart)
            self._charts.append(chart)
            chart.coordinate_system = self
            chart.axes = self.axes

    def remove(self, *charts: Chart) -> None:
        """Remove charts from this coordinate system.

        The chart's axis list reference is cleared only while it still points
        at this system's axes.
        """
        for chart in charts:
            if chart is None:
                continue
            if chart in self._charts:
                self._charts.remove(chart)
            chart.coordinate_system = None
            if chart.axes is self.axes:
                chart.axes = None

    # -------------------------------------------------------------------------
    # Axes
    # -------------------------------------------------------------------------

    def add_axis(self, *axes: Axis) -> None:
        for axis in axes:
            if axis is not None and axis not in self.axes:
                self.axes.append(axis)

    def remove_axis(self, *axes: Axis) -> None:
        for axis in axes:
            if axis is not None and axis in self.axes:
                self.axes.remove(axis)

    def axes_of_type(self, kind: type[_A]) -> AxisView[_A]:
        return AxisView(self.axes, kind)

    def has_no_axis_of_type(self, kind: type[Axis]) -> bool:
        return self.axes_of_type(kind).is_empty()

    def validate(self) -> None:
        """Validate every axis in order, stopping at the first failure.

        Raises
        ------
        QChartValidationError
            Raised unchanged from the first axis that fails.

        """
        for axis in self.axes:
            axis.validate()

    # -------------------------------------------------------------------------
    # Render pass
    # -------------------------------------------------------------------------

    def collect_parts(self, collector: PartCollector) -> None:
        """Register charts, their data and the wrapped axes with ``collector``.

        Chart-derived parts come first, in chart order, followed by the
        wrapped axes in axis order.
        """
        for chart in self._charts:
            collector.add_parts(chart)
            collector.add_parts(*chart.get_data())
            mark_area = chart.get_mark_area(False)
            if mark_area is not None:
                collector.add_parts(mark_area.data)
        for axis in self.axes:
            axis.render_context = collector
            collector.add_parts(self._wrap(axis))

    def collect_data_providers(self, data_set: set[DataProvider]) -> None:
        for chart in self._charts:
            chart.declare_data(data_set)

    def _wrap(self, axis: Axis) -> AxisWrapper:
        wrapper = self.wrapped_axes.get(axis)
        if wrapper is None:
            wrapper = axis.wrap(self)
            self.wrapped_axes[axis] = wrapper
        return wrapper

    def get_axis_rendering_index(self, axis: Axis) -> int:
        return self._wrap(axis).rendering_index

    # -------------------------------------------------------------------------
    # Position
    # -------------------------------------------------------------------------

    def supports_position(self) -> bool:
        return not self.polar

    def get_position(self, create: bool = False) -> Position | None:
        """Get the position, creating an empty one when ``create`` is set.

        Always ``None`` for coordinate systems without positioning support.
        """
        if not self.supports_position():
            return None
        if self._position is None and create:
            self._position = Position()
        return self._position

    def set_position(self, position: Position | None) -> None:
        if not self.supports_position():
            return
        self._position = position

    # -------------------------------------------------------------------------
    # Serialization hooks
    # -------------------------------------------------------------------------

    def system_name(self) -> str | None:
        return None

    def axes_data(self) -> tuple[str, ...] | None:
        return None

    def describe(self) -> dict[str, Any]:
        info: dict[str, Any] = {
            "kind": self.part_family,
            "index": self.rendering_index,
            "system": self.system_name(),
            "axes": len(self.axes),
            "charts": len(self._charts),
        }
        position = self.get_position(False)
        if position is not None and not position.is_empty():
            info["position"] = position.model_dump(exclude_none=True)
        return info

    def __repr__(self) -> str:
        return f"{type(self).__name__}(axes={len(self.axes)}, charts={len(self._charts)})"
