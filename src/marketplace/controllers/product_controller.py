"""Controller for a vendor's product listings."""
from typing import Any, Dict, List, Optional
import logging

from src.database.models import Product
from src.marketplace.catalog_store import CatalogStore
from src.marketplace.product_validation import MAX_IMAGE_BYTES, ImageUpload, validate_product_submission

logger = logging.getLogger(__name__)


class ProductController:
    """Validates listing forms and applies them to the catalog.

    Every operation is scoped to `owner_id`: products belonging to another
    vendor behave as if they did not exist.
    """

    def __init__(self, catalog: CatalogStore, max_image_bytes: int = MAX_IMAGE_BYTES):
        self.catalog = catalog
        self.max_image_bytes = max_image_bytes

    def _owned(self, owner_id: str, product_id: str) -> Optional[Product]:
        product = self.catalog.get(product_id)
        if product is None or product.vendor_id != owner_id:
            return None
        return product

    def list_products(self, owner_id: str) -> List[Product]:
        return self.catalog.list_by_owner(owner_id)

    def get_product(self, owner_id: str, product_id: str) -> Optional[Product]:
        return self._owned(owner_id, product_id)

    def summary(self, owner_id: str) -> Dict[str, int]:
        return self.catalog.summary_for_owner(owner_id)

    def create_product(self, owner_id: str, payload: Dict[str, Any], image: Optional[ImageUpload] = None) -> Product:
        product_input = validate_product_submission(payload, image, max_image_bytes=self.max_image_bytes)
        return self.catalog.create(product_input, owner_id)

    def update_product(
        self,
        owner_id: str,
        product_id: str,
        payload: Dict[str, Any],
        image: Optional[ImageUpload] = None,
    ) -> Optional[Product]:
        """Patch a listing; the merged form is re-validated against its category.

        Null values in `payload` leave the stored field unchanged. Switching
        category drops the stored weight and quantity, as the listing form
        does, so they must be supplied again for the new category.
        """
        product = self._owned(owner_id, product_id)
        if product is None:
            return None
        changes = {k: v for k, v in payload.items() if v is not None}
        current = product.model_dump(exclude={"id", "vendor_id", "created_at"})
        if "category" in changes and changes["category"] != product.category:
            current["weight"] = None
            current["quantity"] = None
        merged = {**current, **changes}
        product_input = validate_product_submission(merged, image, max_image_bytes=self.max_image_bytes)
        return self.catalog.update(product_id, product_input.model_dump())

    def toggle_stock(self, owner_id: str, product_id: str) -> Optional[Product]:
        if self._owned(owner_id, product_id) is None:
            return None
        return self.catalog.toggle_stock(product_id)

    def delete_product(self, owner_id: str, product_id: str) -> bool:
        if self._owned(owner_id, product_id) is None:
            return False
        return self.catalog.delete(product_id)
