"""
Code lookup against the catalogue.

Tiers are tried in order and the first one that finds anything wins:

1. exact      - a record with exactly this code
2. children   - records whose code extends the searched code
3. ancestor   - records under the searched code's parent (last segment dropped)
4. no match

Each tier widens the neighbourhood, so a mistyped or truncated code still
lands the user on nearby positions.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from src.integrations.contracts.catalogue import CatalogRecord
from src.search.results import (
    CODE_RESULTS_CAP,
    ExactMatch,
    NoCodeResults,
    PartialMatches,
    QueryResult,
    SimilarCodes,
    cap_matches,
)

logger = logging.getLogger(__name__)


def parent_code(code: str) -> Optional[str]:
    """Code with its last dot-separated segment dropped; None for a single segment."""
    segments = code.split(".")
    if len(segments) < 2:
        return None
    return ".".join(segments[:-1])


class CodeResolver:
    def __init__(self, cap: int = CODE_RESULTS_CAP):
        self.cap = cap

    def resolve(self, code: str, catalog: Iterable[CatalogRecord]) -> QueryResult:
        code = code.strip()
        records = list(catalog)

        exact = next((r for r in records if r.code == code), None)
        if exact is not None:
            logger.debug("Code %s: exact match", code)
            return ExactMatch(record=exact)

        children = [r for r in records if r.code.startswith(code) and r.code != code]
        if children:
            logger.debug("Code %s: %d child codes", code, len(children))
            return PartialMatches(searched_code=code, **cap_matches(children, self.cap))

        base_code = parent_code(code)
        if base_code is not None:
            # Plain string prefix: base "1.2" also matches "1.25".
            similar: List[CatalogRecord] = [r for r in records if r.code.startswith(base_code)]
            if similar:
                logger.debug("Code %s: %d codes under %s", code, len(similar), base_code)
                return SimilarCodes(searched_code=code, base_code=base_code, **cap_matches(similar, self.cap))

        logger.debug("Code %s: no matches", code)
        return NoCodeResults(searched_code=code)
