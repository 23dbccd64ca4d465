"""
Integrations layer.
This package contains all code used to read the product catalogue from
outside the process:
- a JSON file bundled with the app (clients/mocks/local_catalogue.py)
- a JSON document served over HTTP (clients/real_http/http_catalogue.py)

Key rule:
- The search engine MUST NOT read files or call HTTP directly.
- It only sees CatalogRecord values held by src.catalog.CatalogStore.

Switching implementations:
- The selection of local vs HTTP source happens in ONE place
  (src/catalog/source_factory.py, used by src/api/main.py and scripts/run_assistant.py).
"""

from .contracts.catalogue import CatalogLoadError, CatalogRecord, CatalogueSource

__all__ = ["CatalogLoadError", "CatalogRecord", "CatalogueSource"]
