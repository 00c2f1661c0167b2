"""Module: paths.py

Author: Michael Economou
Date: 2026-10-02

Per-platform user data directory for trisplit.

- Windows: %LOCALAPPDATA%/trisplit/
- Linux: $XDG_DATA_HOME/trisplit/ or ~/.local/share/trisplit/
- macOS: ~/Library/Application Support/trisplit/
"""

import os
import platform
from pathlib import Path

from trisplit.config import APP_NAME
from trisplit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class AppPaths:
    """Centralized path management. Directories are created on first access."""

    _user_data_dir: Path | None = None

    @classmethod
    def _get_platform_data_dir(cls) -> Path:
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("LOCALAPPDATA")
            if not base:
                base = str(Path(os.environ.get("USERPROFILE", "")) / "AppData" / "Local")
            return Path(base) / APP_NAME

        if system == "Darwin":
            return Path.home() / "Library" / "Application Support" / APP_NAME

        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            return Path(xdg_data) / APP_NAME
        return Path.home() / ".local" / "share" / APP_NAME

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Get the user data directory, creating it if needed."""
        if cls._user_data_dir is None:
            cls._user_data_dir = cls._get_platform_data_dir()
            cls._user_data_dir.mkdir(parents=True, exist_ok=True)
            logger.debug("[AppPaths] User data dir: %s", cls._user_data_dir, extra={"dev_only": True})
        return cls._user_data_dir

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_user_data_dir() / "config.json"

    @classmethod
    def get_logs_dir(cls) -> Path:
        logs_dir = cls.get_user_data_dir() / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir

    @classmethod
    def reset(cls) -> None:
        """Forget the cached directory (for testing)."""
        cls._user_data_dir = None
