"""Module: trisplit.config.layout

Author: Michael Economou
Date: 2026-10-02

Panel sizing constants: pixel floors, per-variant default widths,
fallback percentages and persistence settings.
"""

# =====================================
# PANEL SIZE CONSTRAINTS (pixels)
# =====================================

MIN_MAIN_PANEL_WIDTH_PX = 368
MIN_PANEL_WIDTH_PX = 120

DEFAULT_MAIN_WIDTH_PX = {
    "regular": 420,
    "wide": 640,
    "inputless": 480,
    "dragless": 420,
    "unknown": 420,
}

# =====================================
# FALLBACK ALLOCATIONS (percentages)
# =====================================

# Used while the container width is unknown. Each triple already sums to 100.
# inputless: 480px / 1200px ~ 40%, wide: 640px / 1200px ~ 53%,
# regular: 420px / 1200px ~ 35%
FALLBACK_ALLOCATIONS = {
    "inputless": (0.0, 40.0, 60.0),
    "wide": (23.5, 53.0, 23.5),
    "regular": (32.5, 35.0, 32.5),
}

# =====================================
# PERSISTENCE
# =====================================

PANEL_WIDTH_STORAGE_PREFIX = "TRISPLIT_PANEL_WIDTH"

# Stored triples summing above this are discarded (and the key erased)
STORED_TOTAL_LIMIT = 200.0

# Float tolerance for "sums to 100" comparisons
SUM_TOLERANCE = 1e-6

# Config category used by the JSON config backed store
PANEL_LAYOUT_CONFIG_CATEGORY = "panel_layout"
