"""Application services."""

from trisplit.app.services.layout_persistence import LayoutPersistence, storage_key

__all__ = [
    "LayoutPersistence",
    "storage_key",
]
