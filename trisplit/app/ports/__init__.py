"""Ports - Protocol interfaces for infrastructure dependencies.

Define interfaces that the infrastructure layer implements:
- KeyValueStorePort (persisted panel allocations)

Author: Michael Economou
Date: 2026-10-02
"""

from trisplit.app.ports.key_value_store import KeyValueStorePort

__all__ = [
    "KeyValueStorePort",
]
