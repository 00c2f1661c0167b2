"""Module: memory_store.py

Author: Michael Economou
Date: 2026-10-02

Dict-backed KeyValueStorePort for tests and headless hosts.
"""

from __future__ import annotations


class InMemoryKeyValueStore:
    """In-process key/value store."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()
