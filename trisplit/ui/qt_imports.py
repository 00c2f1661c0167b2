"""Module: qt_imports.py

Author: Michael Economou
Date: 2026-10-02

Centralized PyQt5 imports for the Qt integration layer.
"""

from PyQt5.QtCore import QEvent, QObject, QSettings, pyqtSignal, pyqtSlot
from PyQt5.QtGui import QResizeEvent
from PyQt5.QtWidgets import QWidget

__all__ = [
    "QEvent",
    "QObject",
    "QResizeEvent",
    "QSettings",
    "QWidget",
    "pyqtSignal",
    "pyqtSlot",
]
