"""
Dependency wiring for the marketplace API.

One storage backend and one pair of stores per process, selected from
config/marketplace.yml and the environment (REDIS_URL, MARKETPLACE_STORAGE_PATH).
"""
import logging

from dotenv import load_dotenv
from fastapi import Depends, HTTPException, status

from src.database.models import Vendor
from src.marketplace.catalog_store import CatalogStore
from src.marketplace.controllers.auth_controller import AuthController
from src.marketplace.controllers.product_controller import ProductController
from src.marketplace.credential_store import CredentialStore
from src.marketplace.password_reset import PasswordResetService
from src.utils.config_loader import MarketplaceConfig, StorageConfig, load_marketplace_config

load_dotenv()

logger = logging.getLogger(__name__)


def create_storage(storage_config: StorageConfig):
    """Use Redis or a JSON file when configured, else in-memory storage."""
    if storage_config.backend == "redis":
        from src.database.redis_storage import RedisStorage

        if not storage_config.redis_url:
            raise ValueError("storage.backend is 'redis' but no redis_url/REDIS_URL is set")
        return RedisStorage(url=storage_config.redis_url, namespace=storage_config.redis_namespace)
    if storage_config.backend == "file":
        from src.database.file_storage import FileStorage

        return FileStorage(storage_config.path)

    from src.database.local_storage import LocalStorage

    return LocalStorage()


config = load_marketplace_config()
storage = create_storage(config.storage)
credential_store = CredentialStore(storage)
catalog_store = CatalogStore(storage)


def get_config() -> MarketplaceConfig:
    return config


def get_storage():
    """Dependency for the key-value storage"""
    return storage


def get_credential_store() -> CredentialStore:
    return credential_store


def get_catalog_store() -> CatalogStore:
    return catalog_store


def get_auth_controller(
    credentials: CredentialStore = Depends(get_credential_store),
    cfg: MarketplaceConfig = Depends(get_config),
) -> AuthController:
    return AuthController(credentials, min_password_length=cfg.auth.sign_in_min_password_length)


def get_product_controller(
    catalog: CatalogStore = Depends(get_catalog_store),
    cfg: MarketplaceConfig = Depends(get_config),
) -> ProductController:
    return ProductController(catalog, max_image_bytes=cfg.products.max_image_bytes)


def get_password_reset_service(cfg: MarketplaceConfig = Depends(get_config)) -> PasswordResetService:
    return PasswordResetService(delay=cfg.auth.password_reset_delay)


def require_vendor(credentials: CredentialStore = Depends(get_credential_store)) -> Vendor:
    vendor = credentials.current_vendor
    if vendor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in to manage products",
        )
    return vendor
