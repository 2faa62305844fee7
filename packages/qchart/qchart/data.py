"""qchart: Data Providers
---------------------------------------------------------
Numpy-backed data sources plotted by charts. Each provider is a component part
in the ``"dataset"`` family, so a render pass gives it a rendering index that
charts can refer to.

Public API
----------
``DataProvider`` : One-dimensional series of values
``CategoryData`` : Series of category labels
``MarkAreaData`` : ``(start, end)`` pairs spanning highlighted regions
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

import numpy as np

__all__ = [
    "DataProvider",
    "CategoryData",
    "MarkAreaData",
]


class DataProvider:
    """A named one-dimensional series of values.

    Parameters
    ----------
    values : Iterable
        Values to plot; converted with ``numpy.asarray``.
    name : str, optional
        Label used when the data is described.

    """

    part_family: ClassVar[str] = "dataset"
    data_type: ClassVar[str] = "number"

    def __init__(self, values: Iterable[Any] = (), name: str | None = None):
        self.name = name
        self.rendering_index = -1
        self._values = self._coerce(values)

    def _coerce(self, values: Iterable[Any]) -> np.ndarray:
        return np.asarray(list(values), dtype=float)

    def to_numpy(self) -> np.ndarray:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, size={len(self)})"

    def describe(self) -> dict[str, Any]:
        return {
            "kind": self.part_family,
            "index": self.rendering_index,
            "name": self.name,
            "type": self.data_type,
            "size": len(self),
        }


class CategoryData(DataProvider):
    """Category labels, stored as a numpy string array."""

    data_type: ClassVar[str] = "category"

    def _coerce(self, values: Iterable[Any]) -> np.ndarray:
        return np.asarray([str(v) for v in values], dtype=str)


class MarkAreaData(DataProvider):
    """Regions of a mark area, one ``(start, end)`` row per region."""

    data_type: ClassVar[str] = "range"

    def _coerce(self, values: Iterable[Any]) -> np.ndarray:
        rows = [tuple(v) for v in values]
        if any(len(r) != 2 for r in rows):
            raise ValueError("Mark area regions must be (start, end) pairs")
        return np.asarray(rows, dtype=object).reshape(len(rows), 2)

    def add_region(self, start: Any, end: Any) -> None:
        row = np.asarray([(start, end)], dtype=object)
        self._values = np.concatenate([self._values, row])
