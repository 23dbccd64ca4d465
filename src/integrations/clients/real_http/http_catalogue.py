"""
HTTP Catalogue Client.

Fetches the catalogue JSON once at startup. A failed fetch is not retried:
the store degrades to an empty catalogue and reports the load error.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from src.integrations.contracts.catalogue import CatalogLoadError, CatalogueSource

logger = logging.getLogger(__name__)


class HttpCatalogueClient(CatalogueSource):
    def __init__(
        self,
        url: Optional[str] = None,
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url or ""
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @property
    def description(self) -> str:
        return f"url {self.url}"

    async def fetch_records(self) -> List[Any]:
        if not self.url:
            raise CatalogLoadError("Catalogue URL is not configured (catalog.url or CATALOG_URL).")

        logger.info("Fetching catalogue from %s", self.url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.get(self.url, headers={"Accept": "application/json"})
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise CatalogLoadError(f"Catalogue request failed with HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CatalogLoadError(f"Catalogue request failed: {type(e).__name__}: {e}") from e
        except ValueError as e:
            raise CatalogLoadError(f"Catalogue response is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise CatalogLoadError(f"Catalogue response must be a JSON array, got {type(data).__name__}")
        return data
