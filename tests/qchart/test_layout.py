"""Tests for layout-file loading and building."""

import pytest
from qchart.axis import XAxis, YAxis
from qchart.chart import BarChart
from qchart.core.errors import QChartConfigError, QChartIOError
from qchart.data import CategoryData
from qchart.layout import LayoutSpec, build_layout, load_layout
from qchart.systems import PolarCoordinate, RectangularCoordinate


def test_load_and_build_rectangular(write_yaml, sales_layout):
    path = write_yaml("sales.yaml", sales_layout)
    cs = build_layout(load_layout(path))

    assert isinstance(cs, RectangularCoordinate)
    x, y = cs.axes
    assert isinstance(x, XAxis) and x.data_type == "category" and x.name == "Month"
    assert isinstance(y, YAxis) and y.min == 0
    (chart,) = cs.charts
    assert isinstance(chart, BarChart)
    assert chart.bound_axes == (x, y)
    labels, values = chart.get_data()
    assert isinstance(labels, CategoryData)
    assert values.to_numpy().tolist() == [120.0, 200.0, 150.0]
    assert chart.get_mark_area().data.to_numpy().tolist() == [["Feb", "Mar"]]
    assert cs.get_position().top == "10%"
    cs.validate()
    chart.validate()


def test_build_polar():
    spec = LayoutSpec.model_validate(
        {
            "coordinate": "polar",
            "polar": {"outer_radius": "60%"},
            "axes": [{"id": "r", "type": "radius"}, {"id": "a", "type": "angle"}],
            "charts": [
                {"type": "line", "axes": ["r", "a"], "data": [{"values": [1, 2]}]}
            ],
        }
    )
    cs = build_layout(spec)
    assert isinstance(cs, PolarCoordinate)
    assert cs.get_polar().outer_radius == "60%"
    assert cs.axes[1].data_type == "category"
    cs.validate()


@pytest.mark.parametrize(
    "change, message",
    [
        (lambda d: d["axes"].append(dict(d["axes"][0])), "duplicate axis ids"),
        (lambda d: d["charts"][0].update(axes=["month", "nope"]), "unknown"),
        (lambda d: d["axes"].append({"id": "r", "type": "radius"}), "cannot be used"),
        (lambda d: d.update(polar={"outer_radius": 10}), "only valid for polar"),
        (lambda d: d["charts"][0].update(data=[]), "data"),
        (lambda d: d.update(legend=True), "legend"),
    ],
)
def test_invalid_layouts(write_yaml, sales_layout, change, message):
    change(sales_layout)
    path = write_yaml("bad.yaml", sales_layout)
    with pytest.raises(QChartConfigError, match=message):
        load_layout(path)


def test_polar_layout_rejects_position():
    with pytest.raises(ValueError, match="not 'position'"):
        LayoutSpec.model_validate({"coordinate": "polar", "position": {"left": 1}})


def test_missing_layout_file(tmp_path):
    with pytest.raises(QChartIOError):
        load_layout(tmp_path / "missing.yaml")


def test_non_mapping_layout(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(QChartConfigError, match="mapping"):
        load_layout(path)


def test_non_numeric_values_without_category(write_yaml, sales_layout):
    del sales_layout["charts"][0]["data"][0]["category"]
    path = write_yaml("labels.yaml", sales_layout)
    spec = load_layout(path)
    with pytest.raises(QChartConfigError, match="Invalid data for chart 'Sales'"):
        build_layout(spec)
