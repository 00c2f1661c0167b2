"""Protocol for the persistent key/value store.

Author: Michael Economou
Date: 2026-10-02
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorePort(Protocol):
    """Synchronous string-keyed store holding serialized allocations.

    Implementations: InMemoryKeyValueStore, ConfigKeyValueStore,
    QSettingsKeyValueStore.
    """

    def get(self, key: str) -> str | None:
        """Return the stored string, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key``. Deleting an absent key is not an error."""
        ...
