"""qchart: Render Session
---------------------------------------------------------
Drives one render pass over a set of top-level components (coordinate systems)
and collects everything they contribute.

Public API
----------
``RenderSession`` : Part collector and render-pass driver
``RenderPlan`` : Outcome of a render pass

Notes
-----
A render pass runs in four steps:

1. Validate every component and the charts attached to it (first failure
   aborts the pass)
2. Collect parts (components first, then what each contributes)
3. Collect the data providers the components declare
4. Assign rendering indices, counting from 0 within each part family
"""

from __future__ import annotations

import warnings
from collections import defaultdict
from typing import Any

from .core.config import RenderConfig
from .core.errors import QChartWarning, get_logger
from .core.protocols import ComponentPart, HasData

__all__ = [
    "RenderSession",
    "RenderPlan",
]

logger = get_logger()


class RenderPlan:
    """Parts gathered by a render pass, in collection order."""

    def __init__(self, parts: list[Any], data_providers: list[Any]):
        self._parts = parts
        self._data_providers = data_providers

    @property
    def parts(self) -> list[Any]:
        return self._parts

    @property
    def data_providers(self) -> list[Any]:
        return self._data_providers

    def families(self) -> dict[str, list[Any]]:
        grouped: dict[str, list[Any]] = defaultdict(list)
        for part in self._parts:
            grouped[part.part_family].append(part)
        return dict(grouped)

    def describe(self) -> list[dict[str, Any]]:
        return [part.describe() for part in self._parts]


class RenderSession:
    """Collector for one or more render passes.

    Parameters
    ----------
    *components : Any
        Top-level components, typically coordinate systems.
    config : RenderConfig, optional
        Render switches; defaults validate every component.

    Examples
    --------
    >>> session = RenderSession(RectangularCoordinate(XAxis(), YAxis()))
    >>> plan = session.build()  # doctest: +SKIP

    """

    def __init__(self, *components: Any, config: RenderConfig | None = None):
        self.config = config or RenderConfig()
        self._components: list[Any] = []
        self._parts: list[ComponentPart] = []
        self._part_ids: set[int] = set()
        self.add(*components)

    @property
    def components(self) -> tuple[Any, ...]:
        return tuple(self._components)

    def add(self, *components: Any) -> None:
        for component in components:
            if component is not None and component not in self._components:
                self._components.append(component)

    def remove(self, *components: Any) -> None:
        for component in components:
            if component in self._components:
                self._components.remove(component)

    def add_parts(self, *parts: ComponentPart) -> None:
        """Record parts once each, by identity, in the order first seen.

        Raises
        ------
        TypeError
            If a part has no family, rendering index or ``describe()``.

        """
        for part in parts:
            if part is None or id(part) in self._part_ids:
                continue
            if not isinstance(part, ComponentPart):
                raise TypeError(f"{part!r} is not a component part")
            self._part_ids.add(id(part))
            self._parts.append(part)

    def build(self) -> RenderPlan:
        """Run a render pass.

        Returns
        -------
        RenderPlan
            Collected parts and data providers with rendering indices set.

        Raises
        ------
        QChartValidationError
            Raised unchanged from the first component or chart that fails
            validation.

        """
        self._parts = []
        self._part_ids = set()

        if self.config.validate_components:
            for component in self._components:
                component.validate()
                for chart in getattr(component, "charts", ()):
                    chart.validate()

        for component in self._components:
            self.add_parts(component)
            component.collect_parts(self)

        data_set: set[Any] = set()
        for component in self._components:
            if isinstance(component, HasData):
                component.collect_data_providers(data_set)
        data_providers = [p for p in self._parts if p in data_set]
        if len(data_providers) != len(data_set):
            msg = (
                f"{len(data_set) - len(data_providers)} declared data provider(s) "
                "were not collected as parts and have no rendering index"
            )
            warnings.warn(msg, QChartWarning, stacklevel=2)
            logger.warning(msg)

        counters: dict[str, int] = defaultdict(int)
        for part in self._parts:
            family = part.part_family
            part.rendering_index = counters[family]
            counters[family] += 1

        logger.debug(
            f"Render pass collected {len(self._parts)} parts in "
            f"{len(counters)} families from {len(self._components)} components"
        )
        return RenderPlan(list(self._parts), data_providers)
