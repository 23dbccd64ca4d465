"""
Local Catalogue Client.

Purpose:
- Reads the catalogue from a JSON file bundled with the app (data/catalog.json)
- Used in development and whenever the catalogue ships as an embedded asset

Swap:
Use clients/real_http/http_catalogue.py when the catalogue is served over HTTP.
The selection happens in src/catalog/source_factory.py only.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from src.integrations.contracts.catalogue import CatalogLoadError, CatalogueSource

logger = logging.getLogger(__name__)


class LocalCatalogueClient(CatalogueSource):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @property
    def description(self) -> str:
        return f"file {self.path}"

    async def fetch_records(self) -> List[Any]:
        logger.info("Reading catalogue from %s", self.path)
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogLoadError(f"Catalogue file not found: {self.path}") from e
        except (OSError, ValueError) as e:
            raise CatalogLoadError(f"Failed to read catalogue file {self.path}: {e}") from e

        if not isinstance(data, list):
            raise CatalogLoadError(f"Catalogue file {self.path} must contain a JSON array, got {type(data).__name__}")
        return data
