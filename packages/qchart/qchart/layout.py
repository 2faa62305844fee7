"""qchart: Layout Files
---------------------------------------------------------
Describe a coordinate system, its axes and charts in YAML and build the object
graph from it.

Example layout::

    coordinate: rectangular
    position: {left: 40, top: "10%"}
    axes:
      - {id: month, type: x, data_type: category, name: Month}
      - {id: sales, type: y, name: Sales}
    charts:
      - type: bar
        name: Sales
        axes: [month, sales]
        data:
          - {values: [Jan, Feb, Mar], category: true}
          - {values: [120, 200, 150]}
        mark_area:
          name: Promotion
          regions: [[Feb, Mar]]

Public API
----------
``LayoutSpec`` : Root model of a layout file
``load_layout`` : Read and validate a layout file
``build_layout`` : Create a populated coordinate system from a ``LayoutSpec``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .axis import AngleAxis, Axis, RadiusAxis, XAxis, YAxis
from .chart import BarChart, Chart, LineChart, MarkArea, ScatterChart
from .coordinate import CoordinateSystem
from .core.config import Polar, Position
from .core.errors import QChartConfigError, get_logger
from .core.utils import load_yaml_file
from .data import CategoryData, DataProvider, MarkAreaData
from .systems import PolarCoordinate, RectangularCoordinate

__all__ = [
    "AxisSpec",
    "DataSpec",
    "MarkAreaSpec",
    "ChartSpec",
    "LayoutSpec",
    "load_layout",
    "build_layout",
]

logger = get_logger()

_AXIS_TYPES: dict[str, type[Axis]] = {
    "x": XAxis,
    "y": YAxis,
    "angle": AngleAxis,
    "radius": RadiusAxis,
}

_CHART_TYPES: dict[str, type[Chart]] = {
    "line": LineChart,
    "bar": BarChart,
    "scatter": ScatterChart,
}

_SYSTEM_AXES = {
    "rectangular": {"x", "y"},
    "polar": {"angle", "radius"},
}


class AxisSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Identifier referenced by charts")
    type: Literal["x", "y", "angle", "radius"]
    data_type: Literal["number", "category", "time", "log"] | None = None
    name: str | None = None
    min: float | None = None
    max: float | None = None
    inverse: bool = False


class DataSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    values: list[Any]
    name: str | None = None
    category: bool = False


class MarkAreaSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    regions: list[tuple[Any, Any]] = Field(default_factory=list)


class ChartSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["line", "bar", "scatter"]
    name: str | None = None
    axes: list[str] = Field(default_factory=list)
    data: list[DataSpec] = Field(..., min_length=1)
    mark_area: MarkAreaSpec | None = None


class LayoutSpec(BaseModel):
    """Root model of a layout file."""

    model_config = ConfigDict(extra="forbid")

    coordinate: Literal["rectangular", "polar"] = "rectangular"
    position: Position | None = None
    polar: Polar | None = None
    axes: list[AxisSpec] = Field(default_factory=list)
    charts: list[ChartSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check(self) -> LayoutSpec:
        ids = [a.id for a in self.axes]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate axis ids: {', '.join(duplicates)}")
        allowed = _SYSTEM_AXES[self.coordinate]
        for axis in self.axes:
            if axis.type not in allowed:
                raise ValueError(
                    f"axis '{axis.id}' of type '{axis.type}' cannot be used "
                    f"on a {self.coordinate} coordinate system"
                )
        for chart in self.charts:
            unknown = [a for a in chart.axes if a not in ids]
            if unknown:
                raise ValueError(
                    f"chart '{chart.name or chart.type}' refers to unknown "
                    f"axes: {', '.join(unknown)}"
                )
        if self.coordinate == "polar" and self.position is not None:
            raise ValueError("polar coordinate systems take 'polar', not 'position'")
        if self.coordinate == "rectangular" and self.polar is not None:
            raise ValueError("'polar' is only valid for polar coordinate systems")
        return self


def load_layout(path: str | Path) -> LayoutSpec:
    """Read and validate a layout file.

    Raises
    ------
    QChartIOError
        If the file does not exist
    QChartConfigError
        If the file is not valid YAML or does not describe a valid layout

    """
    raw = load_yaml_file(Path(path))
    try:
        return LayoutSpec.model_validate(raw)
    except ValidationError as e:
        raise QChartConfigError(f"Invalid layout {path}: {e}") from e


def _make_axis(spec: AxisSpec) -> Axis:
    kwargs: dict[str, Any] = {
        "name": spec.name,
        "min": spec.min,
        "max": spec.max,
        "inverse": spec.inverse,
    }
    if spec.data_type is not None:
        kwargs["data_type"] = spec.data_type
    return _AXIS_TYPES[spec.type](**kwargs)


def _make_chart(spec: ChartSpec, axes: dict[str, Axis]) -> Chart:
    data: list[DataProvider] = []
    region_data: MarkAreaData | None = None
    try:
        for d in spec.data:
            provider_type = CategoryData if d.category else DataProvider
            data.append(provider_type(d.values, name=d.name))
        if spec.mark_area is not None:
            region_data = MarkAreaData(
                spec.mark_area.regions, name=spec.mark_area.name
            )
    except ValueError as e:
        raise QChartConfigError(
            f"Invalid data for chart '{spec.name or spec.type}': {e}"
        ) from e

    chart = _CHART_TYPES[spec.type](
        *data, axes=[axes[a] for a in spec.axes], name=spec.name
    )
    if region_data is not None:
        chart.set_mark_area(MarkArea(spec.mark_area.name, region_data))
    return chart


def build_layout(spec: LayoutSpec) -> CoordinateSystem:
    """Create a coordinate system populated with the layout's axes and charts."""
    axes = {a.id: _make_axis(a) for a in spec.axes}

    cs: CoordinateSystem
    if spec.coordinate == "polar":
        polar_cs = PolarCoordinate()
        if spec.polar is not None:
            polar_cs.set_polar(spec.polar)
        cs = polar_cs
    else:
        cs = RectangularCoordinate()
        if spec.position is not None:
            cs.set_position(spec.position)

    cs.add_axis(*axes.values())
    cs.add(*(_make_chart(c, axes) for c in spec.charts))
    logger.debug(
        f"Built {cs!r} from layout ({len(spec.axes)} axes, {len(spec.charts)} charts)"
    )
    return cs
