"""qchart: Core Subpackage
--------------------------
Errors, logging, configuration models and protocols shared by the chart
object graph.
"""

from .config import Polar, Position, SystemConfig
from .errors import (
    QChartConfigError,
    QChartError,
    QChartIOError,
    QChartValidationError,
    configure_logging,
    get_logger,
)

__all__ = [
    "Polar",
    "Position",
    "SystemConfig",
    "QChartError",
    "QChartValidationError",
    "QChartConfigError",
    "QChartIOError",
    "configure_logging",
    "get_logger",
]
