"""
Configuration loader for the catalogue assistant
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "assistant_config.yml"
PROJECT_ROOT = Path(__file__).parent.parent.parent


class CatalogConfig(BaseModel):
    """Where the catalogue is loaded from at startup"""

    source: Literal["local", "http"] = "local"
    path: str = "data/catalog.json"
    url: str = ""
    timeout_seconds: float = Field(default=20.0, gt=0.0, le=120.0)

    def resolved_path(self) -> Path:
        """Relative paths are taken from the project root"""
        p = Path(self.path)
        return p if p.is_absolute() else PROJECT_ROOT / p


class PresentationConfig(BaseModel):
    """Chat response texts"""

    shop_site: str = "vdm.ru"


class APIConfig(BaseModel):
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class AssistantConfig(BaseModel):
    """Complete assistant configuration"""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    presentation: PresentationConfig = Field(default_factory=PresentationConfig)
    api: APIConfig = Field(default_factory=APIConfig)


# Environment variables that override catalog.* settings from the YAML file
_ENV_OVERRIDES = {
    "CATALOG_SOURCE": "source",
    "CATALOG_PATH": "path",
    "CATALOG_URL": "url",
}


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    catalog = dict(data.get("catalog") or {})
    for env_name, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            catalog[key] = value
    if catalog:
        data["catalog"] = catalog
    return data


def load_assistant_config(config_path: Optional[Path] = None) -> AssistantConfig:
    """
    Load and validate assistant configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/assistant_config.yml

    Returns:
        Validated AssistantConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    config_data = _apply_env_overrides(config_data)

    try:
        config = AssistantConfig(**config_data)
        logger.info("Successfully loaded config from %s", config_path)
        return config
    except ValidationError as e:
        logger.error("Config validation failed: %s", e)
        raise
