"""Module: trisplit.config

Author: Michael Economou
Date: 2026-10-02

Configuration package for trisplit.

- app: Application info, debug flags, logging
- layout: Panel floors, default widths, fallbacks, persistence keys

All settings are re-exported from this module:
    from trisplit.config import MIN_PANEL_WIDTH_PX, APP_NAME
"""

from trisplit.config.app import *  # noqa: F401, F403
from trisplit.config.layout import *  # noqa: F401, F403
