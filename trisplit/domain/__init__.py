"""Domain layer - pure panel allocation logic without Qt dependencies.

Author: Michael Economou
Date: 2026-10-02
"""

from trisplit.domain.allocation import Allocation, LayoutVariant, ResizeDirection
from trisplit.domain.defaults import DefaultAllocationProvider
from trisplit.domain.normalizer import Normalizer, PanelMinimums
from trisplit.domain.units import UnitConverter

__all__ = [
    "Allocation",
    "DefaultAllocationProvider",
    "LayoutVariant",
    "Normalizer",
    "PanelMinimums",
    "ResizeDirection",
    "UnitConverter",
]
