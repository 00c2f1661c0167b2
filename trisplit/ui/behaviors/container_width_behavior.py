"""Module: container_width_behavior.py

Author: Michael Economou
Date: 2026-10-02

Feeds a container widget's width into a width observable.
Installs an event filter on the widget and forwards the width of every
resize event.
"""

from __future__ import annotations

from trisplit.app.state.observable import ObservableValue
from trisplit.ui.qt_imports import QEvent, QObject, QResizeEvent, QWidget
from trisplit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ContainerWidthBehavior(QObject):
    """Observes a QWidget's width for a PanelLayoutController."""

    def __init__(self, widget: QWidget, width: ObservableValue[float]):
        """Initialize the behavior.

        Args:
            widget: The container holding the three panels
            width: Observable receiving the container width in pixels

        """
        super().__init__(widget)
        self._widget = widget
        self._width = width
        self._attached = True

        self._widget.installEventFilter(self)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        """Forward resize events of the container; never consumes them."""
        if obj is self._widget and event.type() == QEvent.Resize:
            size = event.size() if isinstance(event, QResizeEvent) else self._widget.size()
            self._width.set(float(max(0, size.width())))
        return super().eventFilter(obj, event)

    def detach(self) -> None:
        """Remove the event filter. Safe to call more than once."""
        if not self._attached:
            return
        self._widget.removeEventFilter(self)
        self._attached = False
        logger.debug("[ContainerWidthBehavior] Detached", extra={"dev_only": True})
