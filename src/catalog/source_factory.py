"""
Catalogue source selection. The API and the CLI both build their source here.
"""

from src.integrations.clients.mocks.local_catalogue import LocalCatalogueClient
from src.integrations.clients.real_http.http_catalogue import HttpCatalogueClient
from src.integrations.contracts.catalogue import CatalogueSource
from src.utils.config_loader import AssistantConfig


def build_catalogue_source(config: AssistantConfig) -> CatalogueSource:
    if config.catalog.source == "http":
        return HttpCatalogueClient(url=config.catalog.url, timeout_seconds=config.catalog.timeout_seconds)
    return LocalCatalogueClient(config.catalog.resolved_path())
