"""Key/value store implementations of KeyValueStorePort.

Author: Michael Economou
Date: 2026-10-02

The QSettings backend lives in trisplit.infra.storage.qsettings_store and is
not imported here so that non-Qt hosts do not pull in PyQt5.
"""

from trisplit.infra.storage.config_store import ConfigKeyValueStore
from trisplit.infra.storage.memory_store import InMemoryKeyValueStore

__all__ = [
    "ConfigKeyValueStore",
    "InMemoryKeyValueStore",
]
