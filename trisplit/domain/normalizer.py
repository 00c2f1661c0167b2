"""Module: normalizer.py

Author: Michael Economou
Date: 2026-10-02

Turns any candidate (left, main, right) triple into a valid Allocation.

Steps:
1. Sanitize: non-finite or negative values become 0.
2. Clamp each panel up to its floor (pixel minimum converted to percent).
3. Overflow above 100 is trimmed from the outer panels, proportionally to
   their clamped widths. A panel that hits its floor passes the rest of its
   share to the other outer panel. The main panel is never trimmed, so when
   main plus both outer floors exceed 100 the excess stays.
4. A shortfall below 100 is added to the outer panels the same way.

Normalizing a valid allocation returns it unchanged, so it is safe to
re-run on every container width change.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from trisplit.config import MIN_MAIN_PANEL_WIDTH_PX, MIN_PANEL_WIDTH_PX, SUM_TOLERANCE
from trisplit.domain.allocation import Allocation
from trisplit.domain.units import UnitConverter


@dataclass(frozen=True)
class PanelMinimums:
    """Per-panel floors in percent of the container width."""

    left: float
    main: float
    right: float
    has_left_panel: bool = True

    @classmethod
    def none(cls, has_left_panel: bool = True) -> PanelMinimums:
        return cls(0.0, 0.0, 0.0, has_left_panel)


def _sanitize(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def _split(amount: float, left: float, right: float, has_left_panel: bool) -> tuple[float, float]:
    """Split ``amount`` between the outer panels proportionally to their widths."""
    outer = left + right
    if outer > 0:
        share_left = left / outer * amount
    elif has_left_panel:
        share_left = amount / 2
    else:
        share_left = 0.0
    return share_left, amount - share_left


def safe_panel_width(candidate: Allocation, minimums: PanelMinimums) -> Allocation:
    """Return a valid allocation for ``candidate`` under ``minimums``."""
    left = max(minimums.left, _sanitize(candidate.left))
    main = max(minimums.main, _sanitize(candidate.main))
    right = max(minimums.right, _sanitize(candidate.right))

    total = left + main + right

    if total > 100 + SUM_TOLERANCE and left + right > 0:
        overflow = total - 100
        trim_left, trim_right = _split(overflow, left, right, minimums.has_left_panel)

        new_left = max(minimums.left, left - trim_left)
        new_right = max(minimums.right, right - trim_right)

        # Whatever a floored panel could not give up is taken from the other one
        unpaid = overflow - (left - new_left) - (right - new_right)
        if unpaid > 0:
            if new_left > minimums.left:
                new_left = max(minimums.left, new_left - unpaid)
            elif new_right > minimums.right:
                new_right = max(minimums.right, new_right - unpaid)

        left, right = new_left, new_right

    elif total < 100 - SUM_TOLERANCE:
        grow_left, grow_right = _split(100 - total, left, right, minimums.has_left_panel)
        left += grow_left
        right += grow_right

    return Allocation(left=left, main=main, right=right)


class Normalizer:
    """Computes panel floors for a container and applies safe_panel_width."""

    def __init__(self, converter: UnitConverter | None = None):
        self._converter = converter or UnitConverter()

    def minimums(self, container_width: float | None, has_left_panel: bool = True) -> PanelMinimums:
        """Panel floors for ``container_width``; all 0 while the width is unknown."""
        min_panel = self._converter.to_percentage(MIN_PANEL_WIDTH_PX, container_width)
        min_main = self._converter.to_percentage(MIN_MAIN_PANEL_WIDTH_PX, container_width)
        return PanelMinimums(
            left=min_panel if has_left_panel else 0.0,
            main=min_main,
            right=min_panel,
            has_left_panel=has_left_panel,
        )

    def normalize(
        self,
        candidate: Allocation,
        container_width: float | None,
        has_left_panel: bool = True,
    ) -> Allocation:
        return safe_panel_width(candidate, self.minimums(container_width, has_left_panel))
