"""Module: json_config_manager.py

Author: Michael Economou
Date: 2026-10-02

json_config_manager.py
JSON-based configuration manager.
Handles JSON serialization and deserialization of configuration categories,
with a backup of the previous file on every save and thread-safe access.
"""

import json
import shutil
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from trisplit.config import APP_NAME, APP_VERSION, PANEL_LAYOUT_CONFIG_CATEGORY
from trisplit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ConfigCategory:
    """Base class for configuration categories with defaults."""

    def __init__(self, name: str, defaults: dict[str, Any]):
        """Initialize configuration category with name and default values."""
        self.name = name
        self.defaults = defaults
        self._data = defaults.copy()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with fallback to default."""
        return self._data.get(key, default if default is not None else self.defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self._data[key] = value

    def remove(self, key: str) -> bool:
        """Remove a value. Returns True if the key was present."""
        if key in self._data:
            del self._data[key]
            return True
        return False

    def reset(self) -> None:
        """Reset all values to defaults."""
        self._data = self.defaults.copy()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self._data.copy()

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load from dictionary, applying defaults for missing keys."""
        self._data = self.defaults.copy()
        self._data.update(data)


class PanelLayoutConfig(ConfigCategory):
    """Persisted panel allocations, one serialized entry per layout variant."""

    def __init__(self) -> None:
        super().__init__(PANEL_LAYOUT_CONFIG_CATEGORY, {})


class JSONConfigManager:
    """JSON-based configuration manager with per-category sections."""

    def __init__(self, app_name: str = "app", config_dir: str | None = None):
        """Initialize configuration manager with app name and config directory."""
        self.app_name = app_name
        self.config_dir = Path(config_dir or self._get_default_config_dir())
        self.config_file = self.config_dir / "config.json"
        self.backup_file = self.config_dir / "config.json.bak"

        self._lock = threading.RLock()
        self._categories: dict[str, ConfigCategory] = {}

        self.config_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            "[JSONConfigManager] Initialized for '%s' with dir: %s",
            app_name,
            self.config_dir,
            extra={"dev_only": True},
        )

    def _get_default_config_dir(self) -> str:
        """Get default configuration directory using AppPaths."""
        from trisplit.utils.paths import AppPaths

        return str(AppPaths.get_user_data_dir())

    def register_category(self, category: ConfigCategory) -> None:
        """Register a configuration category."""
        with self._lock:
            self._categories[category.name] = category

    def get_category(
        self, category_name: str, create_if_not_exists: bool = False
    ) -> ConfigCategory | None:
        """Get configuration category by name."""
        category = self._categories.get(category_name)
        if not category and create_if_not_exists:
            logger.debug("Category '%s' not found, creating it dynamically.", category_name)
            new_category = ConfigCategory(category_name, {})
            self.register_category(new_category)
            return new_category
        return category

    def list_categories(self) -> list[str]:
        """Get list of registered category names."""
        return list(self._categories.keys())

    def load(self) -> bool:
        """Load configuration from JSON file."""
        with self._lock:
            try:
                if not self.config_file.exists():
                    logger.info(
                        "[JSONConfigManager] No config file found, using defaults",
                        extra={"dev_only": True},
                    )
                    return True

                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)

                for category_name, category in self._categories.items():
                    if isinstance(data.get(category_name), dict):
                        category.from_dict(data[category_name])

                logger.info(
                    "[JSONConfigManager] Configuration loaded successfully",
                    extra={"dev_only": True},
                )
                return True

            except Exception as e:
                logger.error("[JSONConfigManager] Failed to load configuration: %s", e)
                return False

    def save(self, create_backup: bool = True) -> bool:
        """Save configuration to JSON file."""
        with self._lock:
            try:
                if create_backup and self.config_file.exists():
                    shutil.copy2(self.config_file, self.backup_file)

                data: dict[str, Any] = {
                    name: category.to_dict() for name, category in self._categories.items()
                }
                data["_metadata"] = {
                    "last_saved": datetime.now().isoformat(),
                    "version": f"v{APP_VERSION}",
                    "app_name": self.app_name,
                }

                with open(self.config_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)

                logger.debug("[JSONConfigManager] Configuration saved successfully")
                return True

            except Exception as e:
                logger.error("[JSONConfigManager] Failed to save configuration: %s", e)
                return False

    def get_config_info(self) -> dict[str, Any]:
        """Get information about configuration file and categories."""
        info: dict[str, Any] = {
            "config_file": str(self.config_file),
            "backup_file": str(self.backup_file),
            "file_exists": self.config_file.exists(),
            "backup_exists": self.backup_file.exists(),
            "app_name": self.app_name,
            "categories": {name: len(cat.to_dict()) for name, cat in self._categories.items()},
        }

        if self.config_file.exists():
            stat = self.config_file.stat()
            info["file_size"] = stat.st_size
            info["last_modified"] = datetime.fromtimestamp(stat.st_mtime).isoformat()

        return info


def create_app_config_manager(
    app_name: str = APP_NAME, config_dir: str | None = None
) -> JSONConfigManager:
    """Create a JSONConfigManager with the panel layout category and load it."""
    manager = JSONConfigManager(app_name=app_name, config_dir=config_dir)

    manager.register_category(PanelLayoutConfig())

    manager.load()
    return manager
