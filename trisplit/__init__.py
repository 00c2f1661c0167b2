"""trisplit - three-panel width allocation engine.

Keeps a (left, main, right) percentage split valid while the container
resizes, restores a per-variant preferred split from a key/value store and
applies edge-resize and divider-drag gestures.
"""

from trisplit.config.app import APP_VERSION

__version__ = APP_VERSION
