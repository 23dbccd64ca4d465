import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.integrations.clients.mocks.local_catalogue import LocalCatalogueClient
from src.utils.config_loader import AssistantConfig


@pytest.fixture
def client(catalog_file):
    app = create_app(config=AssistantConfig(), source=LocalCatalogueClient(catalog_file))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_client(tmp_path):
    app = create_app(config=AssistantConfig(), source=LocalCatalogueClient(tmp_path / "missing.json"))
    with TestClient(app) as c:
        yield c


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_health_reports_catalog(client):
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["catalog"] == {"loaded": True, "records": 3, "load_error": None}


def test_chat_code_lookup(client):
    response = client.post("/api/v1/chat", json={"message": "1.1"})
    assert response.status_code == 200
    body = response.json()
    assert body["result"]["kind"] == "exact_match"
    assert body["response"]["card"]["article_number"] == "10-01"
    assert "vdm.ru" in body["response"]["card"]["availability"]
    assert body["timestamp"]


def test_chat_children(client):
    body = client.post("/api/v1/chat", json={"message": "6"}).json()
    assert body["result"]["kind"] == "partial_matches"
    assert [m["code"] for m in body["result"]["matches"]] == ["6.1.1"]


def test_chat_text_search(client):
    body = client.post("/api/v1/chat", json={"message": "трость"}).json()
    assert body["result"]["kind"] == "text_matches"
    assert body["result"]["total_count"] == 2


def test_chat_without_message_is_empty_query(client):
    body = client.post("/api/v1/chat", json={}).json()
    assert body["result"]["kind"] == "empty_query"


def test_catalog_record_endpoint(client):
    response = client.get("/api/v1/catalog/1.2")
    assert response.status_code == 200
    assert response.json()["orderable"] is False

    assert client.get("/api/v1/catalog/9.9").status_code == 404


def test_failed_catalog_load(broken_client):
    health = broken_client.get("/health").json()
    assert health["status"] == "degraded"
    assert health["catalog"]["loaded"] is False

    body = broken_client.post("/api/v1/chat", json={"message": "1.1"}).json()
    assert body["response"]["type"] == "error"
    assert body["result"] is None

    assert broken_client.get("/api/v1/catalog/1.1").status_code == 503
