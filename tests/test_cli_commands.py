"""Tests for CLI commands using Typer's CliRunner."""

import json

from qchart.main import app
from typer.testing import CliRunner

runner = CliRunner()


def test_validate_ok(write_yaml, sales_layout):
    path = write_yaml("sales.yaml", sales_layout)
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 0
    assert "OK (2 axes, 1 charts)" in result.stdout


def test_validate_reports_axis_error(write_yaml, sales_layout):
    sales_layout["axes"][1].update(min=10, max=1)
    path = write_yaml("bad.yaml", sales_layout)
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1


def test_validate_missing_file(tmp_path):
    result = runner.invoke(app, ["validate", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1


def test_inspect_lists_parts(write_yaml, sales_layout):
    path = write_yaml("sales.yaml", sales_layout)
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 0
    assert "xAxis" in result.stdout
    assert "Total: 7 part(s), 3 data provider(s)" in result.stdout


def test_inspect_json(write_yaml, sales_layout):
    path = write_yaml("sales.yaml", sales_layout)
    result = runner.invoke(app, ["inspect", "--json", str(path)])
    assert result.exit_code == 0
    parts = json.loads(result.stdout)
    kinds = [p["kind"] for p in parts]
    assert kinds == [
        "coordinate",
        "series",
        "dataset",
        "dataset",
        "dataset",
        "xAxis",
        "yAxis",
    ]
    series = parts[1]
    assert series["xAxisIndex"] == 0 and series["yAxisIndex"] == 0
    assert series["markArea"] == 2


def test_validate_reports_bad_data(write_yaml, sales_layout):
    del sales_layout["charts"][0]["data"][0]["category"]
    path = write_yaml("labels.yaml", sales_layout)
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert "Invalid layout" in result.output


def test_inspect_reports_bad_data(write_yaml, sales_layout):
    del sales_layout["charts"][0]["data"][0]["category"]
    path = write_yaml("labels.yaml", sales_layout)
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 1
    assert "Render failed" in result.output
