"""Module: layout_state.py

Author: Michael Economou
Date: 2026-10-02

LayoutState - the live panel allocation of one container.

Holds the current percentage allocation together with the container width,
variant and left-panel flag it is interpreted against. Every write goes
through the Normalizer, so the exposed allocation is always valid.
One instance per container; there is no global layout state.
"""

from __future__ import annotations

from collections.abc import Callable

from trisplit.app.state.observable import ObservableValue
from trisplit.domain.allocation import Allocation, LayoutVariant
from trisplit.domain.normalizer import Normalizer, PanelMinimums
from trisplit.domain.units import UnitConverter

AllocationListener = Callable[[Allocation, Allocation], None]


class LayoutState:
    """Single source of truth for a container's panel allocation."""

    def __init__(
        self,
        container_width: ObservableValue[float],
        variant: ObservableValue[LayoutVariant | str],
        has_input_panel: ObservableValue[bool],
        normalizer: Normalizer | None = None,
        converter: UnitConverter | None = None,
    ):
        self.converter = converter or UnitConverter()
        self.normalizer = normalizer or Normalizer(self.converter)
        self._container_width = container_width
        self._variant = variant
        self._has_input_panel = has_input_panel
        self._allocation = ObservableValue(
            self.normalizer.normalize(Allocation(40.0, 20.0, 40.0), 0, self.has_input_panel)
        )

    # =====================================
    # Inputs
    # =====================================

    @property
    def container_width(self) -> float:
        return self._container_width.value or 0

    @property
    def variant(self) -> LayoutVariant | str:
        return LayoutVariant.coerce(self._variant.value)

    @property
    def has_input_panel(self) -> bool:
        return bool(self._has_input_panel.value)

    @property
    def minimums(self) -> PanelMinimums:
        return self.normalizer.minimums(self.container_width, self.has_input_panel)

    # =====================================
    # Allocation
    # =====================================

    @property
    def allocation(self) -> Allocation:
        return self._allocation.value

    @property
    def allocation_pixels(self) -> Allocation:
        """Current allocation in pixels (all 0 while the width is unknown)."""
        width = self.container_width
        current = self.allocation
        return Allocation(
            left=self.converter.to_pixels(current.left, width),
            main=self.converter.to_pixels(current.main, width),
            right=self.converter.to_pixels(current.right, width),
        )

    def normalize(self, candidate: Allocation) -> Allocation:
        return self.normalizer.normalize(candidate, self.container_width, self.has_input_panel)

    def commit(self, candidate: Allocation) -> Allocation:
        """Normalize ``candidate`` and make it the current allocation."""
        normalized = self.normalize(candidate)
        self._allocation.set(normalized)
        return normalized

    def renormalize(self) -> Allocation:
        """Re-clamp the current allocation against the current container."""
        return self.commit(self.allocation)

    def subscribe(self, listener: AllocationListener) -> Callable[[], None]:
        """Call ``listener(new, old)`` whenever the allocation changes."""
        return self._allocation.subscribe(listener)
