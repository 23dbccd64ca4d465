"""
Keyword search over catalogue names.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from src.integrations.contracts.catalogue import CatalogRecord
from src.search.results import (
    TEXT_RESULTS_CAP,
    NoTextResults,
    QueryResult,
    TextMatches,
    VagueQuery,
    cap_matches,
)

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3


def tokenize(query: str) -> List[str]:
    """Lower-cased whitespace-separated words of at least MIN_TOKEN_LENGTH characters."""
    return [w for w in query.lower().split() if len(w) >= MIN_TOKEN_LENGTH]


def searchable_text(record: CatalogRecord) -> str:
    return f"{record.official_name} {record.elaborated_name}".lower()


class TextSearcher:
    """
    A record matches when ANY keyword is a substring of its official or
    elaborated name. Results keep catalogue order.
    """

    def __init__(self, cap: int = TEXT_RESULTS_CAP):
        self.cap = cap

    def search(self, query: str, catalog: Iterable[CatalogRecord]) -> QueryResult:
        keywords = tokenize(query)
        if not keywords:
            return VagueQuery(query=query)

        matches = [r for r in catalog if any(k in searchable_text(r) for k in keywords)]
        logger.debug("Text search %s: %d matches", keywords, len(matches))

        if not matches:
            return NoTextResults(query=query)
        return TextMatches(query=query, **cap_matches(matches, self.cap))
