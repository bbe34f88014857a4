"""
Configuration loader for the vendor marketplace (storage, products, auth, logging).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "marketplace.yml"


class StorageConfig(BaseModel):
    """Where the key-value records live"""

    backend: Literal["memory", "file", "redis"] = "memory"
    path: str = "data/marketplace.json"
    redis_url: Optional[str] = None
    redis_namespace: str = "marketplace"


class ProductsConfig(BaseModel):
    max_image_bytes: int = Field(default=5 * 1024 * 1024, ge=1)


class AuthConfig(BaseModel):
    password_reset_delay: float = Field(default=2.0, ge=0.0)
    sign_in_min_password_length: int = Field(default=6, ge=1)


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class MarketplaceConfig(BaseModel):
    storage: StorageConfig = Field(default_factory=StorageConfig)
    products: ProductsConfig = Field(default_factory=ProductsConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _apply_env_overrides(config: MarketplaceConfig) -> MarketplaceConfig:
    """REDIS_URL and MARKETPLACE_STORAGE_PATH take precedence over the YAML file."""
    if os.getenv("REDIS_URL"):
        config.storage.backend = "redis"
        config.storage.redis_url = os.environ["REDIS_URL"]
    elif os.getenv("MARKETPLACE_STORAGE_PATH"):
        config.storage.backend = "file"
        config.storage.path = os.environ["MARKETPLACE_STORAGE_PATH"]
    return config


def load_marketplace_config(config_path: Optional[Path] = None) -> MarketplaceConfig:
    """
    Load and validate marketplace configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/marketplace.yml;
            when the default file is absent, built-in defaults are used.

    Returns:
        Validated MarketplaceConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.warning("No config file at %s; using defaults", DEFAULT_CONFIG_PATH)
            return _apply_env_overrides(MarketplaceConfig())
        config_path = DEFAULT_CONFIG_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Marketplace config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        config = MarketplaceConfig(**data)
    except ValidationError as e:
        logger.error(f"Marketplace config validation failed: {e}")
        raise

    logger.info(f"Loaded marketplace config from {config_path}")
    return _apply_env_overrides(config)
