from __future__ import annotations

from qchart.axis import XAxis
from qchart.chart import LineChart
from qchart.core.protocols import ComponentPart, HasData, PartCollector
from qchart.data import DataProvider
from qchart.render import RenderSession
from qchart.systems import PolarCoordinate, RectangularCoordinate


def test_parts_satisfy_component_protocol():
    cs = RectangularCoordinate(XAxis())
    parts = [cs, LineChart(DataProvider([1])), DataProvider([1]), cs._wrap(cs.axes[0])]
    for part in parts:
        assert isinstance(part, ComponentPart)


def test_session_is_a_collector():
    assert isinstance(RenderSession(), PartCollector)


def test_coordinate_systems_declare_data():
    assert isinstance(RectangularCoordinate(), HasData)
    assert isinstance(PolarCoordinate(), HasData)


def test_polar_flag_is_a_capability():
    assert PolarCoordinate.polar is True
    assert RectangularCoordinate.polar is False
