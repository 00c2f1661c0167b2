"""Module: qt_panel_layout.py

Author: Michael Economou
Date: 2026-10-02

QtPanelLayout - Qt-aware wrapper around PanelLayoutController.

Re-emits allocation, container width and variant changes as signals and
exposes the gestures as slots, so splitter handles and drag areas can be
connected directly.

Signals:
    allocation_changed: Emitted with the new Allocation (percentages)
    container_width_changed: Emitted with the new container width (float)
    variant_changed: Emitted with the new variant tag (str)
"""

from __future__ import annotations

from trisplit.app.ports.key_value_store import KeyValueStorePort
from trisplit.app.state.observable import ObservableValue
from trisplit.controllers.panel_layout_controller import PanelLayoutController
from trisplit.domain.allocation import Allocation, LayoutVariant
from trisplit.ui.behaviors.container_width_behavior import ContainerWidthBehavior
from trisplit.ui.qt_imports import QObject, QWidget, pyqtSignal, pyqtSlot
from trisplit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class QtPanelLayout(QObject):
    """Signal/slot surface for one container's panel layout."""

    allocation_changed = pyqtSignal(object)  # Allocation
    container_width_changed = pyqtSignal(float)
    variant_changed = pyqtSignal(str)

    def __init__(self, controller: PanelLayoutController, parent: QObject | None = None):
        """
        Initialize QtPanelLayout.

        Args:
            controller: The controller to wrap (owned by the caller)
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self._controller = controller
        self._behavior: ContainerWidthBehavior | None = None
        self._unsubscribers = [
            controller.subscribe(self._emit_allocation),
            controller.container_width_source.subscribe(self._emit_container_width),
            controller.variant_source.subscribe(self._emit_variant),
        ]

    @classmethod
    def for_widget(
        cls,
        widget: QWidget,
        store: KeyValueStorePort,
        variant: LayoutVariant | str = LayoutVariant.REGULAR,
        has_input_panel: bool = True,
    ) -> QtPanelLayout:
        """Build a controller whose container width follows ``widget``.

        The width starts unknown and becomes known with the first resize
        event the widget receives. Call close() when the widget goes away.
        """
        width = ObservableValue(0.0)
        controller = PanelLayoutController(store, width, variant, has_input_panel)
        layout = cls(controller, parent=widget)
        layout._behavior = ContainerWidthBehavior(widget, width)
        return layout

    @property
    def controller(self) -> PanelLayoutController:
        return self._controller

    @property
    def allocation(self) -> Allocation:
        return self._controller.allocation

    @property
    def allocation_pixels(self) -> Allocation:
        return self._controller.allocation_pixels

    # =====================================
    # Slots
    # =====================================

    @pyqtSlot(float, str)
    def on_resize(self, width: float, direction: str) -> None:
        self._controller.on_resize(width, direction)

    @pyqtSlot(float, float)
    def on_drag(self, x: float, y: float = 0.0) -> None:
        self._controller.on_drag((x, y))

    @pyqtSlot()
    def on_resize_end(self) -> None:
        self._controller.on_resize_end()

    @pyqtSlot(float)
    def set_container_width(self, width: float) -> None:
        self._controller.container_width_source.set(width)

    @pyqtSlot(str)
    def set_variant(self, variant: str) -> None:
        self._controller.variant_source.set(LayoutVariant.coerce(variant))

    def detach(self) -> None:
        """Stop relaying controller changes."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        logger.debug("[QtPanelLayout] Detached", extra={"dev_only": True})

    def close(self) -> None:
        """Detach signals, stop observing the widget and close the controller."""
        self.detach()
        if self._behavior is not None:
            self._behavior.detach()
            self._behavior = None
        self._controller.close()

    # =====================================
    # Relays
    # =====================================

    def _emit_allocation(self, new: Allocation, _old: Allocation) -> None:
        self.allocation_changed.emit(new)

    def _emit_container_width(self, new: float, _old: float) -> None:
        self.container_width_changed.emit(float(new or 0))

    def _emit_variant(self, new, _old) -> None:
        self.variant_changed.emit(LayoutVariant.tag_of(LayoutVariant.coerce(new)))
