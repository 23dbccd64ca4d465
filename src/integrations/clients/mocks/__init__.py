"""
Local integration clients.

These clients read the catalogue without calling any external API.
They are used when:
- the catalogue ships with the app as data/catalog.json
- we want to run the assistant and its tests without network access

Important:
- Local clients must follow the SAME interface as real HTTP clients
  (src/integrations/contracts/catalogue.py).
"""

from .local_catalogue import LocalCatalogueClient

__all__ = ["LocalCatalogueClient"]
