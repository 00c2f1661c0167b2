"""Controllers - gesture handling and lifecycle wiring for panel layouts.

Author: Michael Economou
Date: 2026-10-02
"""

from trisplit.controllers.panel_layout_controller import PanelLayoutController
from trisplit.controllers.resize_controller import ResizeController

__all__ = [
    "PanelLayoutController",
    "ResizeController",
]
