"""qchart: Protocol Definitions
---------------------------------------------------------
Structural contracts shared by coordinate systems, axes, charts and the render
session. Protocols use duck typing: any object with the listed members can take
part in a render pass without inheriting from these classes.

Public API
----------
``ComponentPart`` : Anything the render session indexes and describes
``PartCollector`` : Sink receiving parts during ``collect_parts``
``HasData`` : Components that declare the data providers they use
``HasPolarProperty`` : Capability mixin for polar coordinate systems

Notes
-----
- ``part_family`` groups parts for rendering-index assignment; indices restart
  at 0 in each family.
- ``HasPolarProperty`` is a capability, not a type check: coordinate systems
  consult the ``polar`` flag it sets.
"""

from typing import Any, ClassVar, Protocol, runtime_checkable

from .config import Polar

__all__ = [
    "ComponentPart",
    "PartCollector",
    "HasData",
    "HasPolarProperty",
]


@runtime_checkable
class ComponentPart(Protocol):
    """Protocol for parts registered with a collector.

    Attributes
    ----------
    part_family : str
        Group used for rendering-index assignment (e.g. ``"xAxis"``).
    rendering_index : int
        Position within the family, ``-1`` until a render pass assigns it.

    """

    part_family: ClassVar[str]
    rendering_index: int

    def describe(self) -> dict[str, Any]:
        """Return a plain dictionary summarising this part."""
        ...


@runtime_checkable
class PartCollector(Protocol):
    """Protocol for the sink passed to ``collect_parts``."""

    def add_parts(self, *parts: Any) -> None:
        """Register parts; ``None`` entries and repeats are ignored."""
        ...


@runtime_checkable
class HasData(Protocol):
    """Protocol for components that use data providers."""

    def collect_data_providers(self, data_set: set[Any]) -> None: ...


class HasPolarProperty:
    """Capability mixin for polar coordinate systems.

    Sets the ``polar`` flag, which suppresses absolute x/y positioning, and
    supplies the polar placement (center and radius) in its place.
    """

    polar: ClassVar[bool] = True
    _polar: Polar | None = None

    def get_polar(self, create: bool = False) -> Polar | None:
        """Get the polar placement, creating a default one when asked."""
        if self._polar is None and create:
            self._polar = Polar()
        return self._polar

    def set_polar(self, polar: Polar | None) -> None:
        self._polar = polar
