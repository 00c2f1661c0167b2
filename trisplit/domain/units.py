"""Module: units.py

Author: Michael Economou
Date: 2026-10-02

Pixel <-> percentage conversion against a container width.
Both directions degrade to 0 while the width is unknown.
"""

import math


def _usable_width(container_width) -> bool:
    return (
        isinstance(container_width, (int, float))
        and not isinstance(container_width, bool)
        and math.isfinite(container_width)
        and container_width > 0
    )


class UnitConverter:
    """Stateless conversions between pixels and percent of container width."""

    @staticmethod
    def to_pixels(percentage: float, container_width: float | None) -> float:
        if not _usable_width(container_width):
            return 0.0
        return percentage / 100 * container_width

    @staticmethod
    def to_percentage(pixels: float, container_width: float | None) -> float:
        # Guard keeps division by zero and inf/nan out of the allocation
        if not _usable_width(container_width):
            return 0.0
        return pixels / container_width * 100
