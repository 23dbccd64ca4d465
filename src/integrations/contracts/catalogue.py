from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple

"""
Catalogue contracts.

Defines the shape of a catalogue entry (a position of the Order 1057
classification) and the interface every catalogue source implements.

These contracts must be used by both:
- clients/mocks/local_catalogue.py (JSON file shipped with the app)
- clients/real_http/http_catalogue.py (JSON fetched over HTTP at startup)
"""


class CatalogLoadError(Exception):
    """Raised by a catalogue source when the catalogue cannot be read or parsed."""


# Source JSON keys first, English aliases after. First present key wins.
_FIELD_KEYS: Dict[str, Tuple[str, ...]] = {
    "code": ("Код", "code"),
    "official_name": ("По1057", "official_name", "officialName"),
    "elaborated_name": ("ПоЭл", "elaborated_name", "elaboratedName"),
    "article_number": ("Арт", "article_number", "articleNumber"),
}


def _text(raw: Mapping[str, Any], keys: Tuple[str, ...]) -> str:
    for key in keys:
        if key in raw and raw[key] is not None:
            value = raw[key]
            return value if isinstance(value, str) else str(value)
    return ""


@dataclass(frozen=True)
class CatalogRecord:
    code: str
    official_name: str
    elaborated_name: str = ""
    article_number: str = ""     # empty means not orderable

    @property
    def is_orderable(self) -> bool:
        return bool(self.article_number.strip())

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "CatalogRecord":
        """Build a record from one catalogue JSON object; absent fields become ''."""
        return cls(**{name: _text(raw, keys) for name, keys in _FIELD_KEYS.items()})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "official_name": self.official_name,
            "elaborated_name": self.elaborated_name,
            "article_number": self.article_number,
            "orderable": self.is_orderable,
        }


class CatalogueSource(ABC):
    """Data-access collaborator that supplies the raw catalogue once at startup."""

    @abstractmethod
    async def fetch_records(self) -> List[Any]:
        """
        Return the catalogue as a list of raw JSON items, in catalogue order.

        Raises:
            CatalogLoadError: if the catalogue cannot be fetched or is not a JSON array
        """

    @property
    def description(self) -> str:
        return type(self).__name__
