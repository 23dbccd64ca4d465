"""
Query engine: classifies a raw query and dispatches it to code lookup or
keyword search.
"""

from __future__ import annotations

from typing import Iterable, Optional

from src.integrations.contracts.catalogue import CatalogRecord
from src.search.classifier import InputClassifier, QueryKind
from src.search.code_resolver import CodeResolver
from src.search.results import EmptyQuery, QueryResult
from src.search.text_search import TextSearcher


class QueryEngine:
    """
    Pure function of (input, catalogue). Holds only a reference to the
    catalogue, which is never mutated, so it is safe to share between requests.
    """

    def __init__(
        self,
        catalog: Iterable[CatalogRecord],
        classifier: Optional[InputClassifier] = None,
        code_resolver: Optional[CodeResolver] = None,
        text_searcher: Optional[TextSearcher] = None,
    ):
        self.catalog = catalog
        self.classifier = classifier or InputClassifier()
        self.code_resolver = code_resolver or CodeResolver()
        self.text_searcher = text_searcher or TextSearcher()

    def process(self, raw_input: str) -> QueryResult:
        query = (raw_input or "").strip()
        if not query:
            return EmptyQuery()

        if self.classifier.classify(query) is QueryKind.CODE:
            return self.code_resolver.resolve(query, self.catalog)
        return self.text_searcher.search(query, self.catalog)
