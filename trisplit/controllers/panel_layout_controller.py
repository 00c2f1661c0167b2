"""Module: panel_layout_controller.py

Author: Michael Economou
Date: 2026-10-02

PanelLayoutController - owns the LayoutState of one three-panel container.

Wires the external signals (container width, layout variant) to the
allocation engine:
- construction and every variant change run a load cycle
  (stored allocation if valid, else the variant default, normalized)
- a width change from unknown to known runs a load cycle
- any other width change only re-normalizes the current allocation
- a width change to unknown (0) is ignored

Call close() when the container is discarded to drop all subscriptions.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from trisplit.app.ports.key_value_store import KeyValueStorePort
from trisplit.app.services.layout_persistence import LayoutPersistence
from trisplit.app.state.layout_state import AllocationListener, LayoutState
from trisplit.app.state.observable import ObservableValue
from trisplit.controllers.resize_controller import ResizeController
from trisplit.domain.allocation import Allocation, LayoutVariant, ResizeDirection
from trisplit.domain.defaults import DefaultAllocationProvider
from trisplit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _as_observable(value: Any) -> ObservableValue:
    return value if isinstance(value, ObservableValue) else ObservableValue(value)


class PanelLayoutController:
    """Public surface of the allocation engine for a single container."""

    def __init__(
        self,
        store: KeyValueStorePort,
        container_width: ObservableValue[float] | float = 0,
        variant: ObservableValue[LayoutVariant | str] | LayoutVariant | str = LayoutVariant.REGULAR,
        has_input_panel: ObservableValue[bool] | bool = True,
    ):
        """
        Initialize the controller and run the first load cycle.

        Args:
            store: Key/value store holding persisted allocations
            container_width: Container width in pixels, or an observable of it
            variant: Layout variant, or an observable of it
            has_input_panel: Whether a left (input) panel is present
        """
        self.container_width_source = _as_observable(container_width)
        self.variant_source = _as_observable(variant)
        self.has_input_panel_source = _as_observable(has_input_panel)

        self.state = LayoutState(
            self.container_width_source, self.variant_source, self.has_input_panel_source
        )
        self.persistence = LayoutPersistence(store)
        self.defaults = DefaultAllocationProvider(self.state.converter)
        self.resize_controller = ResizeController(self.state, self.persistence)

        self._unsubscribers: list[Callable[[], None]] = [
            self.container_width_source.subscribe(self._on_container_width_changed),
            self.variant_source.subscribe(self._on_variant_changed),
        ]
        self._closed = False

        self.load()

        logger.debug(
            "[PanelLayoutController] Initialized (%s, width=%s)",
            LayoutVariant.tag_of(self.state.variant),
            self.state.container_width,
            extra={"dev_only": True},
        )

    # =====================================
    # Read-only views
    # =====================================

    @property
    def container_width(self) -> float:
        return self.state.container_width

    @property
    def allocation(self) -> Allocation:
        return self.state.allocation

    @property
    def allocation_pixels(self) -> Allocation:
        return self.state.allocation_pixels

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: AllocationListener) -> Callable[[], None]:
        """Observe allocation changes; returns an unsubscribe callable."""
        unsubscribe = self.state.subscribe(listener)
        self._unsubscribers.append(unsubscribe)
        return unsubscribe

    # =====================================
    # Load cycle
    # =====================================

    def default_allocation(self) -> Allocation:
        return self.defaults.default_for(self.state.variant, self.state.container_width)

    def load(self) -> Allocation:
        """Replace the allocation with the stored (or default) one for the variant."""
        loaded = self.persistence.load(
            self.state.variant, self.default_allocation(), self.state.normalize
        )
        return self.state.commit(loaded)

    def _on_container_width_changed(self, new_width: float, old_width: float) -> None:
        if not new_width:
            return

        if not old_width:
            logger.debug(
                "[PanelLayoutController] Container width known (%s), loading",
                new_width,
                extra={"dev_only": True},
            )
            self.load()
        else:
            self.state.renormalize()

    def _on_variant_changed(self, new_variant: Any, old_variant: Any) -> None:
        logger.debug(
            "[PanelLayoutController] Variant %s -> %s", old_variant, new_variant, extra={"dev_only": True}
        )
        self.load()

    # =====================================
    # Gestures
    # =====================================

    def on_resize(self, width: float, direction: ResizeDirection | str) -> bool:
        return self.resize_controller.on_resize(width, direction)

    def on_drag(self, position: Sequence[float]) -> bool:
        return self.resize_controller.on_drag(position)

    def on_resize_end(self) -> None:
        self.resize_controller.on_resize_end()

    # =====================================
    # Teardown
    # =====================================

    def close(self) -> None:
        """Unregister every observer. Safe to call more than once."""
        if self._closed:
            return
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self._closed = True
        logger.debug("[PanelLayoutController] Closed", extra={"dev_only": True})
