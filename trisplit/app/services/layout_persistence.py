"""Module: layout_persistence.py

Author: Michael Economou
Date: 2026-10-02

Loads and stores panel allocations under a variant-qualified key.

Stored data is accepted only if every field is a finite, non-negative number
and the sum stays within STORED_TOTAL_LIMIT. Unparseable data falls back to
the default and is left in place; parseable but invalid data falls back to
the default and the key is erased so it is not reloaded next time.
"""

from __future__ import annotations

import json
import math
from collections.abc import Callable

from trisplit.app.ports.key_value_store import KeyValueStorePort
from trisplit.config import PANEL_WIDTH_STORAGE_PREFIX, STORED_TOTAL_LIMIT
from trisplit.domain.allocation import Allocation, LayoutVariant
from trisplit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

NormalizeFn = Callable[[Allocation], Allocation]


def storage_key(variant: LayoutVariant | str | None, prefix: str = PANEL_WIDTH_STORAGE_PREFIX) -> str:
    """Return the store key for ``variant``, e.g. ``TRISPLIT_PANEL_WIDTH_REGULAR``."""
    tag = LayoutVariant.tag_of(LayoutVariant.coerce(variant))
    return f"{prefix}_{tag.upper()}"


def is_valid_stored(allocation: Allocation) -> bool:
    values = allocation.as_tuple()
    return (
        all(math.isfinite(v) for v in values)
        and all(v >= 0 for v in values)
        and sum(values) <= STORED_TOTAL_LIMIT
    )


class LayoutPersistence:
    """Persists allocations through a KeyValueStorePort."""

    def __init__(self, store: KeyValueStorePort, prefix: str = PANEL_WIDTH_STORAGE_PREFIX):
        self._store = store
        self._prefix = prefix

    @property
    def store(self) -> KeyValueStorePort:
        return self._store

    def key_for(self, variant: LayoutVariant | str | None) -> str:
        return storage_key(variant, self._prefix)

    def save(self, variant: LayoutVariant | str | None, allocation: Allocation) -> None:
        """Serialize ``allocation`` under the variant key (no validation)."""
        key = self.key_for(variant)
        self._store.set(key, json.dumps(allocation.to_dict()))
        logger.debug(
            "[LayoutPersistence] Saved %s: %s", key, allocation.to_dict(), extra={"dev_only": True}
        )

    def load(
        self,
        variant: LayoutVariant | str | None,
        default: Allocation,
        normalize: NormalizeFn,
    ) -> Allocation:
        """Return the stored allocation for ``variant`` or ``default``, normalized.

        Args:
            variant: Layout variant selecting the key
            default: Allocation used when nothing valid is stored
            normalize: Normalizer bound to the current container

        Returns:
            Allocation: normalize(stored) if valid, else normalize(default)
        """
        key = self.key_for(variant)
        raw = self._store.get(key)

        if raw is None or raw == "":
            return normalize(default)

        try:
            parsed = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("[LayoutPersistence] Unreadable value under %s, using defaults: %s", key, e)
            return normalize(default)

        stored = Allocation.from_mapping(parsed)
        if stored is not None and is_valid_stored(stored):
            return normalize(stored)

        logger.warning(
            "[LayoutPersistence] Discarding invalid stored allocation under %s: %r", key, raw
        )
        self._store.delete(key)
        return normalize(default)
