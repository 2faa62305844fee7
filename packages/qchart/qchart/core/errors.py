"""qchart: Error Taxonomy and Logging
---------------------------------

Error hierarchy and shared logger for the qchart package.

Error Hierarchy
---------------
- QChartError: Base exception for all qchart errors
- QChartValidationError: Chart configuration errors surfaced by ``validate()``
- QChartConfigError: System configuration and layout-file errors
- QChartIOError: File access errors

Warning Hierarchy
-----------------
- QChartWarning: Base warning for all qchart warnings

Logging
-------
The shared logger is named "qchart" and can be configured for console and
file output with optional JSON formatting. Python warnings are captured into
logging with adjustable levels.
"""

import logging
import os

__all__ = [
    "QChartError",
    "QChartValidationError",
    "QChartConfigError",
    "QChartIOError",
    "QChartWarning",
    "get_logger",
    "configure_logging",
]


# =============================================================================
# Exception Hierarchy
# =============================================================================


class QChartError(Exception):
    """Base exception for all qchart errors.

    Examples
    --------
    >>> try:
    ...     coordinate_system.validate()
    ... except QChartError as e:
    ...     print(f"Chart error occurred: {e}")

    """

    pass


class QChartValidationError(QChartError):
    """Chart configuration errors.

    Raised by ``validate()`` on axes, charts and coordinate systems when the
    object graph cannot be rendered as configured. Examples: axis minimum
    above its maximum, a chart bound to an axis its coordinate system does
    not own, a rectangular system without a Y axis.
    """

    pass


class QChartConfigError(QChartError):
    """Configuration-related errors.

    Raised when system configuration or a layout file fails to validate.
    """

    pass


class QChartIOError(QChartError):
    """File access errors (missing or unreadable files)."""

    pass


# =============================================================================
# Warning Hierarchy
# =============================================================================


class QChartWarning(Warning):
    """Base warning for all qchart warnings."""

    pass


# =============================================================================
# Logger Configuration
# =============================================================================

_logger: logging.Logger | None = None

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s",'
    '"logger":"%(name)s","msg":"%(message)s"}'
)


def get_logger() -> logging.Logger:
    """Get the shared qchart logger instance.

    Returns
    -------
    logging.Logger
        The singleton logger named "qchart" configured at INFO level by
        default with a console handler. Handlers are created lazily on first use.

    Examples
    --------
    >>> logger = get_logger()
    >>> logger.name
    'qchart'

    """
    global _logger
    if _logger is None:
        _logger = logging.getLogger("qchart")
        _logger.setLevel(logging.INFO)
        if not _logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter(_TEXT_FORMAT))
            _logger.addHandler(h)
    return _logger


def configure_logging(
    verbose: bool = False,
    log_file: str | None = None,
    as_json: bool = False,
    suppress_warnings: bool = False,
) -> None:
    """Configure the shared logger outputs and warning capture.

    Parameters
    ----------
    verbose : bool, default False
        When True, set logger level to DEBUG; otherwise INFO.
    log_file : str or None, default None
        Optional file path to append logs. Unwritable paths are reported on
        the console handler and otherwise ignored.
    as_json : bool, default False
        Emit logs in a compact JSON line format when True; otherwise plain text.
    suppress_warnings : bool, default False
        Route Python warnings into logging and raise their level to ERROR when
        True; otherwise capture warnings at WARNING level.

    """
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    fmt = logging.Formatter(_JSON_FORMAT if as_json else _TEXT_FORMAT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        try:
            fh = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Cannot write log file {log_file}: {e}")
        else:
            fh.setFormatter(fmt)
            logger.addHandler(fh)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(
        logging.ERROR if suppress_warnings else logging.WARNING
    )
