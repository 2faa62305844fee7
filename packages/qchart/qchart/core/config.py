"""qchart: Configuration Models
---------------------------------------------------------
Pydantic models for placement data and for system-level configuration
(``system.yaml``).

Public API
----------
``Position`` : Absolute placement of a coordinate system
``Polar`` : Center and radius of a polar coordinate system
``LoggingConfig`` : Logger defaults applied by the CLI
``RenderConfig`` : Render-pass switches
``SystemConfig`` : Root configuration model

Notes
-----
- Placement values are either pixel counts or percentage strings (``"10%"``)
- System config supports multi-level override: package defaults, user config,
  environment, explicit path (see ``config_loader``)
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "Position",
    "Polar",
    "LoggingConfig",
    "RenderConfig",
    "SystemConfig",
]

_PERCENT = re.compile(r"^\d+(\.\d+)?%$")


def _check_size(v: int | str | None) -> int | str | None:
    if v is None:
        return v
    if isinstance(v, str):
        if not _PERCENT.match(v.strip()):
            raise ValueError(f"Size must be pixels or a percentage, got '{v}'")
        return v.strip()
    if v < 0:
        raise ValueError("Size cannot be negative")
    return v


class Position(BaseModel):
    """Absolute placement of a coordinate system within the chart area.

    Each edge is a pixel count or a percentage of the container. Unset edges
    are left to the renderer.
    """

    model_config = ConfigDict(validate_assignment=True)

    left: int | str | None = None
    right: int | str | None = None
    top: int | str | None = None
    bottom: int | str | None = None
    width: int | str | None = None
    height: int | str | None = None

    @field_validator("left", "right", "top", "bottom", "width", "height")
    @classmethod
    def validate_size(cls, v: int | str | None) -> int | str | None:
        return _check_size(v)

    def is_empty(self) -> bool:
        return all(v is None for v in self.model_dump().values())


class Polar(BaseModel):
    """Placement of a polar coordinate system."""

    model_config = ConfigDict(validate_assignment=True)

    center: tuple[int | str, int | str] = ("50%", "50%")
    inner_radius: int | str = 0
    outer_radius: int | str = "75%"

    @field_validator("inner_radius", "outer_radius")
    @classmethod
    def validate_radius(cls, v: int | str) -> int | str:
        return _check_size(v)


class LoggingConfig(BaseModel):
    """Defaults for ``configure_logging`` when the CLI gives no flags."""

    verbose: bool = False
    as_json: bool = False
    log_file: str | None = None


class RenderConfig(BaseModel):
    """Switches for the render pass."""

    validate_components: bool = Field(
        default=True,
        description="Validate every component before collecting parts.",
    )


class SystemConfig(BaseModel):
    """System-wide configuration parameters.

    Loaded from ``system.yaml`` and its overrides by
    ``qchart.core.config_loader.load_system_config``.
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
