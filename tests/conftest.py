"""Pytest fixtures for catalogue search tests."""

import json

import pytest

from src.catalog.store import CatalogStore
from src.integrations.contracts.catalogue import CatalogRecord


@pytest.fixture
def small_catalog():
    """Pump / valve / filter catalogue used across the search tests."""
    return [
        CatalogRecord(code="1.2", official_name="Насос"),
        CatalogRecord(code="1.2.5", official_name="Клапан"),
        CatalogRecord(code="1.3", official_name="Фильтр"),
    ]


@pytest.fixture
def raw_catalog():
    """Catalogue items as they appear in the source JSON."""
    return [
        {"Код": "1.1", "По1057": "Трость опорная", "ПоЭл": "Трость опорная алюминиевая", "Арт": "10-01"},
        {"Код": "1.2", "По1057": "Трость тактильная", "ПоЭл": "", "Арт": ""},
        {"Код": "6.1.1", "По1057": "Ходунки шагающие", "ПоЭл": "Ходунки складные", "Арт": "61-01"},
    ]


@pytest.fixture
def catalog_file(tmp_path, raw_catalog):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(raw_catalog, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def store(raw_catalog):
    return CatalogStore.from_raw(raw_catalog)


@pytest.fixture
def make_records():
    """Factory for `count` codes prefix.1 .. prefix.N named "Позиция N"."""

    def _make(prefix: str, count: int):
        return [CatalogRecord(code=f"{prefix}.{i}", official_name=f"Позиция {i}") for i in range(1, count + 1)]

    return _make
