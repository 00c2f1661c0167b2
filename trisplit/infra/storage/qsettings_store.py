"""Module: qsettings_store.py

Author: Michael Economou
Date: 2026-10-02

KeyValueStorePort backed by QSettings (registry / plist / ini per platform).
"""

from __future__ import annotations

from trisplit.config import APP_AUTHOR, APP_NAME
from trisplit.ui.qt_imports import QSettings


class QSettingsKeyValueStore:
    """Stores allocations through QSettings under an optional group."""

    def __init__(self, settings: QSettings | None = None, group: str = "panel_layout"):
        self._settings = settings if settings is not None else QSettings(APP_AUTHOR, APP_NAME)
        self._group = group

    @property
    def settings(self) -> QSettings:
        return self._settings

    def _key(self, key: str) -> str:
        return f"{self._group}/{key}" if self._group else key

    def get(self, key: str) -> str | None:
        value = self._settings.value(self._key(key))
        if value is None:
            return None
        if isinstance(value, list):
            # INI backend may split unquoted comma-separated strings
            return ", ".join(str(part) for part in value)
        return value if isinstance(value, str) else str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(self._key(key), value)
        self._settings.sync()

    def delete(self, key: str) -> None:
        self._settings.remove(self._key(key))
        self._settings.sync()
