"""qchart: CLI Entry Point
---------------------------------------------------------
Initializes the Typer application behind the ``qchart`` console script and
registers its commands.

Public API
----------
``app`` : The main Typer application instance.
"""

import typer

from .commands import layout as layout_cmd
from .core.config_loader import load_system_config
from .core.errors import QChartConfigError, configure_logging

app = typer.Typer(help="qchart CLI")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    log_file: str | None = typer.Option(None, help="Write logs to file path"),
    log_json: bool = typer.Option(False, help="Log in JSON format"),
):
    """qchart command line interface."""
    try:
        defaults = load_system_config().logging
    except QChartConfigError as e:
        typer.echo(f"Invalid system configuration: {e}", err=True)
        raise typer.Exit(code=1)
    configure_logging(
        verbose=verbose or defaults.verbose,
        log_file=log_file or defaults.log_file,
        as_json=log_json or defaults.as_json,
    )


app.command("validate")(layout_cmd.validate)
app.command("inspect")(layout_cmd.inspect)
