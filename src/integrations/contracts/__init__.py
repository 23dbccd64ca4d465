"""
Contracts (data models).

This folder defines the shapes exchanged with catalogue sources:
- CatalogRecord, the normalized catalogue entry
- CatalogueSource, the interface every source implements

Both local and HTTP clients return data that the store turns into
CatalogRecord values, so the search engine never sees raw JSON keys.
"""
