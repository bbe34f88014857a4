"""
Product catalog storage.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from src.database.models import Product, ProductInput
from src.database.records import read_records, write_records

logger = logging.getLogger(__name__)

PRODUCTS_KEY = "products"

# Assigned at creation and never patched.
_IMMUTABLE_FIELDS = ("id", "created_at")


class CatalogStore:
    """Owns the product collection.

    Records are held in insertion order. Storage is the only copy: every
    operation reads the `products` entry afresh, so stores sharing one storage
    (API workers, a FileStorage reopened by another process) see each other's
    writes. Every mutation rewrites the whole entry.
    """

    def __init__(self, storage):
        self.storage = storage

    def _load(self) -> List[Product]:
        return read_records(self.storage, PRODUCTS_KEY, Product)

    @property
    def products(self) -> List[Product]:
        return self._load()

    def _save(self, products: List[Product]) -> None:
        write_records(self.storage, PRODUCTS_KEY, products)

    def get(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._load() if p.id == product_id), None)

    def create(self, product_input: ProductInput, owner_id: str) -> Product:
        product = Product(**product_input.model_dump(include=set(ProductInput.model_fields)), vendor_id=owner_id)
        self._save([*self._load(), product])
        logger.info("Vendor %s listed product %s", owner_id, product.id)
        return product

    def update(self, product_id: str, fields: Dict[str, Any]) -> Optional[Product]:
        """Merge `fields` into the product; returns None when no product matches.

        Raises pydantic.ValidationError if the merged record is not valid.
        """
        fields = dict(fields)
        for name in _IMMUTABLE_FIELDS:
            if name in fields:
                logger.warning("Ignoring attempt to change %s of product %s", name, product_id)
                fields.pop(name)

        updated: Optional[Product] = None
        products: List[Product] = []
        for product in self._load():
            if product.id == product_id:
                try:
                    product = Product.model_validate({**product.model_dump(), **fields})
                except ValidationError:
                    logger.info("Rejected invalid update for product %s", product_id)
                    raise
                updated = product
            products.append(product)

        if updated is None:
            logger.debug("Update skipped: no product %s", product_id)
            return None
        self._save(products)
        return updated

    def toggle_stock(self, product_id: str) -> Optional[Product]:
        product = self.get(product_id)
        if product is None:
            return None
        return self.update(product_id, {"in_stock": not product.in_stock})

    def delete(self, product_id: str) -> bool:
        products = self._load()
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            return False
        self._save(remaining)
        logger.info("Deleted product %s", product_id)
        return True

    def list_by_owner(self, owner_id: str) -> List[Product]:
        return [p for p in self._load() if p.vendor_id == owner_id]

    def summary_for_owner(self, owner_id: str) -> Dict[str, int]:
        """Listing counts shown on the vendor dashboard."""
        owned = self.list_by_owner(owner_id)
        in_stock = sum(1 for p in owned if p.in_stock)
        return {
            "total": len(owned),
            "in_stock": in_stock,
            "out_of_stock": len(owned) - in_stock,
        }
