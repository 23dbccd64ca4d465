"""
Catalogue matching engine.

- classifier: code vs free text
- code_resolver: exact / children / ancestor / none
- text_search: keyword containment
- engine: QueryEngine wiring the above together
"""

from .classifier import InputClassifier, QueryKind
from .code_resolver import CodeResolver
from .engine import QueryEngine
from .results import (
    CODE_RESULTS_CAP,
    TEXT_RESULTS_CAP,
    EmptyQuery,
    ExactMatch,
    NoCodeResults,
    NoTextResults,
    PartialMatches,
    QueryResult,
    SimilarCodes,
    TextMatches,
    VagueQuery,
)
from .text_search import TextSearcher

__all__ = [
    "InputClassifier", "QueryKind", "CodeResolver", "TextSearcher", "QueryEngine",
    "CODE_RESULTS_CAP", "TEXT_RESULTS_CAP",
    "QueryResult", "ExactMatch", "PartialMatches", "SimilarCodes", "TextMatches",
    "NoCodeResults", "NoTextResults", "VagueQuery", "EmptyQuery",
]
