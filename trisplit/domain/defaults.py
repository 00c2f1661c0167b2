"""Module: defaults.py

Author: Michael Economou
Date: 2026-10-02

Variant-specific default allocations.

With a known container width the main panel gets the variant's default pixel
width and the remaining space goes to the outer panels (all of it to the
right panel for the inputless variant). With an unknown width a fixed
percentage triple is used instead.
"""

from __future__ import annotations

from trisplit.config import DEFAULT_MAIN_WIDTH_PX, FALLBACK_ALLOCATIONS
from trisplit.domain.allocation import Allocation, LayoutVariant
from trisplit.domain.units import UnitConverter


class DefaultAllocationProvider:
    """Produces the default Allocation for a variant and container width."""

    def __init__(self, converter: UnitConverter | None = None):
        self._converter = converter or UnitConverter()

    @staticmethod
    def default_main_pixels(variant: LayoutVariant | str | None) -> int:
        tag = LayoutVariant.tag_of(LayoutVariant.coerce(variant))
        return DEFAULT_MAIN_WIDTH_PX.get(tag, DEFAULT_MAIN_WIDTH_PX[LayoutVariant.REGULAR.value])

    def default_for(
        self, variant: LayoutVariant | str | None, container_width: float | None
    ) -> Allocation:
        """Return the default allocation for ``variant``.

        Args:
            variant: Layout variant; unknown tags fall back to regular sizing
            container_width: Current container width in pixels (0/None = unknown)

        Returns:
            Allocation: A triple summing to 100
        """
        variant = LayoutVariant.coerce(variant)
        main = self._converter.to_percentage(self.default_main_pixels(variant), container_width)

        if main <= 0:
            return self.fallback_for(variant)

        if variant is LayoutVariant.INPUTLESS:
            return Allocation(left=0.0, main=main, right=100 - main)

        panels = (100 - main) / 2
        return Allocation(left=panels, main=main, right=panels)

    @staticmethod
    def fallback_for(variant: LayoutVariant | str | None) -> Allocation:
        """Fixed percentages used while the container width is unknown."""
        variant = LayoutVariant.coerce(variant)
        if variant is LayoutVariant.INPUTLESS:
            left, main, right = FALLBACK_ALLOCATIONS["inputless"]
        elif variant is LayoutVariant.WIDE:
            left, main, right = FALLBACK_ALLOCATIONS["wide"]
        else:
            left, main, right = FALLBACK_ALLOCATIONS["regular"]
        return Allocation(left=left, main=main, right=right)
