"""Qt adapters exposing Qt-free state through signals."""

from trisplit.ui.adapters.qt_panel_layout import QtPanelLayout

__all__ = [
    "QtPanelLayout",
]
