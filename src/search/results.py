"""
Query results returned by the search engine.

Each variant carries a `kind` tag so the presentation layer (and the API)
can dispatch on it without isinstance checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Sequence, Tuple, Union

from src.integrations.contracts.catalogue import CatalogRecord

CODE_RESULTS_CAP = 10
TEXT_RESULTS_CAP = 15


def _records(matches: Tuple[CatalogRecord, ...]) -> list:
    return [r.to_dict() for r in matches]


@dataclass(frozen=True)
class ExactMatch:
    kind: ClassVar[str] = "exact_match"
    record: CatalogRecord

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "record": self.record.to_dict()}


@dataclass(frozen=True)
class _TruncatedMatches:
    """Capped list of matches; `total_count` is the count before truncation."""

    matches: Tuple[CatalogRecord, ...] = field(default=())
    truncated: bool = False
    total_count: int = 0

    def _matches_dict(self) -> Dict[str, Any]:
        return {
            "matches": _records(self.matches),
            "truncated": self.truncated,
            "total_count": self.total_count,
        }


@dataclass(frozen=True)
class PartialMatches(_TruncatedMatches):
    kind: ClassVar[str] = "partial_matches"
    searched_code: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "searched_code": self.searched_code, **self._matches_dict()}


@dataclass(frozen=True)
class SimilarCodes(_TruncatedMatches):
    kind: ClassVar[str] = "similar_codes"
    searched_code: str = ""
    base_code: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "searched_code": self.searched_code,
            "base_code": self.base_code,
            **self._matches_dict(),
        }


@dataclass(frozen=True)
class TextMatches(_TruncatedMatches):
    kind: ClassVar[str] = "text_matches"
    query: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "query": self.query, **self._matches_dict()}


@dataclass(frozen=True)
class NoCodeResults:
    kind: ClassVar[str] = "no_code_results"
    searched_code: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "searched_code": self.searched_code}


@dataclass(frozen=True)
class NoTextResults:
    kind: ClassVar[str] = "no_text_results"
    query: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "query": self.query}


@dataclass(frozen=True)
class VagueQuery:
    """Free text with no keyword long enough to search for."""

    kind: ClassVar[str] = "vague_query"
    query: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "query": self.query}


@dataclass(frozen=True)
class EmptyQuery:
    """Nothing was typed at all."""

    kind: ClassVar[str] = "empty_query"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


QueryResult = Union[
    ExactMatch,
    PartialMatches,
    SimilarCodes,
    TextMatches,
    NoCodeResults,
    NoTextResults,
    VagueQuery,
    EmptyQuery,
]


def cap_matches(matches: Sequence[CatalogRecord], cap: int) -> Dict[str, Any]:
    """Keyword arguments for a truncated result built from the full match list."""
    total = len(matches)
    return {
        "matches": tuple(matches[:cap]),
        "truncated": total > cap,
        "total_count": total,
    }
