import pytest

from src.catalog.store import CatalogStore
from src.search.code_resolver import CodeResolver
from src.search.engine import QueryEngine
from src.search.results import (
    EmptyQuery,
    ExactMatch,
    NoCodeResults,
    NoTextResults,
    SimilarCodes,
    TextMatches,
    VagueQuery,
)


@pytest.fixture
def engine(small_catalog):
    return QueryEngine(small_catalog)


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_nothing_typed_is_empty_query(engine, raw):
    assert isinstance(engine.process(raw), EmptyQuery)


def test_code_goes_to_code_resolver(engine):
    result = engine.process(" 1.2.5 ")
    assert isinstance(result, ExactMatch)
    assert result.record.code == "1.2.5"


def test_ancestor_example(engine):
    result = engine.process("1.2.9")
    assert isinstance(result, SimilarCodes)
    assert [r.code for r in result.matches] == ["1.2", "1.2.5"]


def test_text_goes_to_text_searcher(engine):
    result = engine.process("  Клапан  ")
    assert isinstance(result, TextMatches)
    assert result.query == "Клапан"
    assert [r.code for r in result.matches] == ["1.2.5"]


def test_vague_text_is_not_empty_query(engine):
    result = engine.process("ab")
    assert isinstance(result, VagueQuery)
    assert result.kind != EmptyQuery.kind


def test_mixed_code_and_letters_is_text(engine):
    result = engine.process("1.2a")
    assert isinstance(result, NoTextResults)
    assert result.query == "1.2a"


def test_process_is_idempotent(engine):
    for query in ["1.2", "1.2.9", "клапан", "9", "ab", ""]:
        assert engine.process(query) == engine.process(query)


def test_empty_store_degrades_to_no_results():
    engine = QueryEngine(CatalogStore(load_error="boom"))
    assert isinstance(engine.process("1.2"), NoCodeResults)


def test_custom_resolver_cap(small_catalog):
    engine = QueryEngine(small_catalog, code_resolver=CodeResolver(cap=1))
    result = engine.process("1.2.9")
    assert len(result.matches) == 1
    assert result.total_count == 2
    assert result.truncated is True
