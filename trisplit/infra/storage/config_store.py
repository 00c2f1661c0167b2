"""Module: config_store.py

Author: Michael Economou
Date: 2026-10-02

KeyValueStorePort on top of a JSONConfigManager category, so panel
allocations live in the application's config.json next to other settings.
"""

from __future__ import annotations

import json

from trisplit.config import PANEL_LAYOUT_CONFIG_CATEGORY
from trisplit.utils.logging.logger_factory import get_cached_logger
from trisplit.utils.shared.json_config_manager import JSONConfigManager

logger = get_cached_logger(__name__)


class ConfigKeyValueStore:
    """Stores string values as entries of one config category."""

    def __init__(
        self,
        manager: JSONConfigManager,
        category_name: str = PANEL_LAYOUT_CONFIG_CATEGORY,
        autosave: bool = True,
    ):
        """
        Args:
            manager: Config manager owning the config file
            category_name: Category the values are stored under (created if missing)
            autosave: Write the config file after every set/delete
        """
        self._manager = manager
        self._category = manager.get_category(category_name, create_if_not_exists=True)
        self._autosave = autosave

    def get(self, key: str) -> str | None:
        value = self._category.get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else json.dumps(value)

    def set(self, key: str, value: str) -> None:
        self._category.set(key, value)
        self._persist()

    def delete(self, key: str) -> None:
        if self._category.remove(key):
            self._persist()

    def _persist(self) -> None:
        if self._autosave and not self._manager.save():
            logger.warning("[ConfigKeyValueStore] Config file not written for '%s'", self._category.name)
