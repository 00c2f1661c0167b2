"""Qt-free state containers.

Author: Michael Economou
Date: 2026-10-02
"""

from trisplit.app.state.layout_state import LayoutState
from trisplit.app.state.observable import ObservableValue

__all__ = [
    "LayoutState",
    "ObservableValue",
]
