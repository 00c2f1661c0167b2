"""Module: allocation.py

Author: Michael Economou
Date: 2026-10-02

Value types for the three-panel split: the percentage Allocation triple,
the closed set of layout variants and the edge-resize direction tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LayoutVariant(str, Enum):
    """Layout mode selecting default sizing and the persistence key."""

    REGULAR = "regular"
    WIDE = "wide"
    INPUTLESS = "inputless"
    DRAGLESS = "dragless"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: LayoutVariant | str | None) -> LayoutVariant | str:
        """Return the enum member for known tags, the lowercased tag otherwise.

        None maps to REGULAR. Unrecognised tags are kept as plain strings so
        they still get their own storage key.
        """
        if value is None:
            return cls.REGULAR
        if isinstance(value, cls):
            return value
        tag = str(value).lower()
        try:
            return cls(tag)
        except ValueError:
            return tag

    @staticmethod
    def tag_of(value: LayoutVariant | str) -> str:
        return value.value if isinstance(value, LayoutVariant) else str(value)


class ResizeDirection(str, Enum):
    """Which outer edge of the main panel is being dragged."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Allocation:
    """Panel widths as percentages of the container width."""

    left: float
    main: float
    right: float

    @property
    def total(self) -> float:
        return self.left + self.main + self.right

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.left, self.main, self.right)

    def to_dict(self) -> dict[str, float]:
        return {"left": self.left, "main": self.main, "right": self.right}

    def replace(self, **changes: float) -> Allocation:
        values = self.to_dict()
        values.update(changes)
        return Allocation(**values)

    @classmethod
    def from_mapping(cls, data: Any) -> Allocation | None:
        """Build an Allocation from a parsed mapping.

        Returns None if ``data`` is not a mapping or any of the three fields
        is missing or not a real number (booleans included, and integers too
        large for a float). Range checks are left to the caller.
        """
        if not isinstance(data, dict):
            return None

        values = {}
        for key in ("left", "main", "right"):
            value = data.get(key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return None
            try:
                values[key] = float(value)
            except OverflowError:
                return None

        return cls(**values)
