"""
Catalogue storage.

The catalogue is fetched once through a CatalogueSource (src/integrations)
and kept in memory for the lifetime of the process.
"""

from .store import CatalogStore

__all__ = ["CatalogStore"]
