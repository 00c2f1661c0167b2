"""Module: resize_controller.py

Author: Michael Economou
Date: 2026-10-02

ResizeController - edge-resize and divider-drag gestures.

Both gestures are computed from the current LayoutState only; no gesture
state is carried between calls. A step that would push an outer panel below
its floor is rejected and leaves the allocation untouched.
"""

from __future__ import annotations

from collections.abc import Sequence

from trisplit.app.services.layout_persistence import LayoutPersistence
from trisplit.app.state.layout_state import LayoutState
from trisplit.config import SUM_TOLERANCE
from trisplit.domain.allocation import Allocation, ResizeDirection
from trisplit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ResizeController:
    """Applies resize and drag gestures to a LayoutState."""

    def __init__(self, state: LayoutState, persistence: LayoutPersistence):
        """
        Initialize the ResizeController.

        Args:
            state: LayoutState to mutate
            persistence: Where the allocation is stored when a resize ends
        """
        self._state = state
        self._persistence = persistence

    def on_resize(self, width: float, direction: ResizeDirection | str) -> bool:
        """
        Resize the main panel by dragging one of its outer edges.

        The panel on the dragged side absorbs the change; the opposite
        panel keeps its width.

        Args:
            width: New main panel width in pixels
            direction: Edge being dragged ("left" or "right")

        Returns:
            True if the allocation was updated, False if the step was rejected
        """
        try:
            direction = ResizeDirection(direction)
        except ValueError:
            logger.debug(
                "[ResizeController] Ignoring resize with direction %r",
                direction,
                extra={"dev_only": True},
            )
            return False

        state = self._state
        minimums = state.minimums
        current = state.allocation

        new_main = max(minimums.main, state.converter.to_percentage(width, state.container_width))
        diff = new_main - current.main

        if direction is ResizeDirection.LEFT:
            potential = current.left - diff
            floor = minimums.left
        else:
            potential = current.right - diff
            floor = minimums.right

        if potential < floor:
            logger.debug(
                "[ResizeController] Rejected %s resize: %.2f%% below floor %.2f%%",
                direction.value,
                potential,
                floor,
                extra={"dev_only": True},
            )
            return False

        if direction is ResizeDirection.LEFT:
            candidate = Allocation(left=max(floor, potential), main=new_main, right=current.right)
        else:
            candidate = Allocation(left=current.left, main=new_main, right=max(floor, potential))

        state.commit(candidate)
        return True

    def on_drag(self, position: Sequence[float]) -> bool:
        """
        Move the main panel as a block, centering it under the pointer.

        Args:
            position: Pointer position ``(x, y)`` in pixels; only x is used

        Returns:
            True if the allocation was updated, False if the step was rejected
        """
        state = self._state
        minimums = state.minimums
        main = state.allocation.main

        pointer = state.converter.to_percentage(position[0], state.container_width)
        new_left = max(minimums.left, pointer - main / 2)
        new_right = max(minimums.right, 100 - new_left - main)

        # Drag must not overflow; the normalizer would otherwise trim the outer panels
        if new_left + main + new_right > 100 + SUM_TOLERANCE:
            logger.debug(
                "[ResizeController] Rejected drag to x=%s", position[0], extra={"dev_only": True}
            )
            return False

        state.commit(Allocation(left=new_left, main=main, right=new_right))
        return True

    def on_resize_end(self) -> None:
        """Persist the current allocation for the active variant."""
        self._persistence.save(self._state.variant, self._state.allocation)
