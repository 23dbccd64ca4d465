"""
In-memory catalogue store.

Loaded once at startup from a CatalogueSource and read-only afterwards, so
any number of queries can scan it concurrently without locking.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from src.integrations.contracts.catalogue import CatalogLoadError, CatalogRecord, CatalogueSource

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Ordered, immutable sequence of catalogue records.

    `load_error` is set when the source could not be read; the store is then
    empty and callers should report the failure instead of "no results".
    """

    def __init__(self, records: Iterable[CatalogRecord] = (), load_error: Optional[str] = None):
        self._records: Tuple[CatalogRecord, ...] = tuple(records)
        self.load_error = load_error

    @classmethod
    async def load(cls, source: CatalogueSource) -> "CatalogStore":
        """Fetch the catalogue once. Never raises for source failures."""
        try:
            raw_items = await source.fetch_records()
        except CatalogLoadError as e:
            logger.error("Catalogue load failed (%s): %s", source.description, e)
            return cls(load_error=str(e))

        store = cls.from_raw(raw_items)
        logger.info("Catalogue loaded from %s: %d records", source.description, len(store))
        return store

    @classmethod
    def from_raw(cls, raw_items: Iterable[object]) -> "CatalogStore":
        records = []
        for index, item in enumerate(raw_items):
            if not isinstance(item, dict):
                logger.warning("Skipping catalogue item #%d: expected object, got %s", index, type(item).__name__)
                continue
            records.append(CatalogRecord.from_raw(item))
        return cls(records)

    @property
    def records(self) -> Tuple[CatalogRecord, ...]:
        return self._records

    @property
    def load_failed(self) -> bool:
        return self.load_error is not None

    def get(self, code: str) -> Optional[CatalogRecord]:
        """First record with exactly this code, if any."""
        code = code.strip()
        return next((r for r in self._records if r.code == code), None)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CatalogRecord]:
        return iter(self._records)
