import pytest
from pydantic import ValidationError

from src.catalog.source_factory import build_catalogue_source
from src.integrations.clients.mocks.local_catalogue import LocalCatalogueClient
from src.integrations.clients.real_http.http_catalogue import HttpCatalogueClient
from src.utils.config_loader import PROJECT_ROOT, AssistantConfig, load_assistant_config


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ("CATALOG_SOURCE", "CATALOG_PATH", "CATALOG_URL"):
        monkeypatch.delenv(name, raising=False)


def test_default_config_file():
    cfg = load_assistant_config()
    assert cfg.catalog.source == "local"
    assert cfg.catalog.resolved_path() == PROJECT_ROOT / "data" / "catalog.json"
    assert cfg.presentation.shop_site == "vdm.ru"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_assistant_config(tmp_path / "nope.yml")


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    cfg = load_assistant_config(path)
    assert cfg == AssistantConfig()


def test_invalid_source(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("catalog:\n  source: ftp\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_assistant_config(path)


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "cfg.yml"
    path.write_text("catalog:\n  source: local\n  timeout_seconds: 5\n", encoding="utf-8")
    monkeypatch.setenv("CATALOG_SOURCE", "http")
    monkeypatch.setenv("CATALOG_URL", "https://shop.test/catalog.json")
    cfg = load_assistant_config(path)
    assert cfg.catalog.source == "http"
    assert cfg.catalog.url == "https://shop.test/catalog.json"
    assert cfg.catalog.timeout_seconds == 5


def test_absolute_path_kept(tmp_path):
    cfg = AssistantConfig(catalog={"path": str(tmp_path / "c.json")})
    assert cfg.catalog.resolved_path() == tmp_path / "c.json"


def test_source_selection():
    local = build_catalogue_source(AssistantConfig())
    assert isinstance(local, LocalCatalogueClient)

    remote = build_catalogue_source(AssistantConfig(catalog={"source": "http", "url": "https://shop.test/c.json", "timeout_seconds": 3}))
    assert isinstance(remote, HttpCatalogueClient)
    assert remote.url == "https://shop.test/c.json"
    assert remote.timeout_seconds == 3


def test_env_url_reaches_http_source(tmp_path, monkeypatch):
    path = tmp_path / "cfg.yml"
    path.write_text("catalog:\n  source: http\n", encoding="utf-8")
    monkeypatch.setenv("CATALOG_URL", "https://shop.test/env.json")
    source = build_catalogue_source(load_assistant_config(path))
    assert isinstance(source, HttpCatalogueClient)
    assert source.url == "https://shop.test/env.json"
