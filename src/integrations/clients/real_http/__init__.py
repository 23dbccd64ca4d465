"""
Real HTTP integration clients.

These clients fetch the catalogue JSON from a web server once at startup.

Important:
- Must implement the same interface as the local clients
- Must return a JSON array shaped according to src/integrations/contracts/catalogue.py
"""

from .http_catalogue import HttpCatalogueClient

__all__ = ["HttpCatalogueClient"]
