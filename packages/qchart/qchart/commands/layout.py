"""qchart: Layout CLI Commands
---------------------------------------------------------
Commands that load a layout file, build its coordinate system and report on
it.

Public API
----------
``validate`` : Build and validate a layout
``inspect`` : Run a render pass and list the collected parts
"""

import json
from pathlib import Path

import typer

from qchart.core.config_loader import load_system_config
from qchart.core.errors import QChartError, get_logger
from qchart.layout import build_layout, load_layout
from qchart.render import RenderSession


def validate(
    layout: Path = typer.Argument(..., help="Path to a layout YAML file"),
):
    """Build the layout and validate its coordinate system."""
    log = get_logger()
    try:
        cs = build_layout(load_layout(layout))
        cs.validate()
        for chart in cs.charts:
            chart.validate()
    except QChartError as e:
        log.error(str(e))
        typer.echo(f"Invalid layout: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{layout}: OK ({len(cs.axes)} axes, {len(cs.charts)} charts)")


def inspect(
    layout: Path = typer.Argument(..., help="Path to a layout YAML file"),
    as_json: bool = typer.Option(False, "--json", help="Print parts as JSON"),
):
    """Run a render pass over the layout and list the collected parts."""
    log = get_logger()
    system_cfg = load_system_config()
    try:
        cs = build_layout(load_layout(layout))
        plan = RenderSession(cs, config=system_cfg.render).build()
    except QChartError as e:
        log.error(str(e))
        typer.echo(f"Render failed: {e}", err=True)
        raise typer.Exit(code=1)

    described = plan.describe()
    if as_json:
        typer.echo(json.dumps(described, indent=2, default=str))
        return

    for info in described:
        label = info.get("name") or info.get("type") or info.get("system") or ""
        typer.echo(f"{info['kind']:<12} #{info['index']:<3} {label}")
    typer.echo(
        f"\nTotal: {len(plan.parts)} part(s), "
        f"{len(plan.data_providers)} data provider(s)"
    )
