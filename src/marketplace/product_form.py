"""
In-progress state of a product listing form.

Holds the raw field values a vendor has typed, the optional uploaded image and
the currently displayed field errors. Editing a field clears its error;
switching category also clears weight and quantity because their units and
bounds change with the category.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from src.database.models import ProductInput
from src.marketplace.categories import CategoryRule, get_category_rule
from src.marketplace.product_validation import (
    MAX_IMAGE_BYTES,
    ImageUpload,
    validate_image_upload,
    validate_product_submission,
)
from src.marketplace.validation import FormValidationError

FORM_FIELDS = (
    "name",
    "description",
    "seller_price",
    "mrp",
    "category",
    "weight",
    "quantity",
    "image_url",
    "in_stock",
)


def _blank_fields() -> Dict[str, Any]:
    fields: Dict[str, Any] = {name: "" for name in FORM_FIELDS}
    fields["in_stock"] = True
    return fields


class ProductForm:
    def __init__(self, max_image_bytes: int = MAX_IMAGE_BYTES):
        self.max_image_bytes = max_image_bytes
        self.fields: Dict[str, Any] = _blank_fields()
        self.errors: Dict[str, str] = {}
        self.image: Optional[ImageUpload] = None

    @property
    def rule(self) -> CategoryRule:
        return get_category_rule(self.fields["category"])

    def set_field(self, name: str, value: Any) -> None:
        if name not in self.fields:
            raise KeyError(name)
        self.fields[name] = value
        self.errors.pop(name, None)

        if name == "category":
            self.fields["weight"] = ""
            self.fields["quantity"] = ""
            self.errors.pop("weight", None)
            self.errors.pop("quantity", None)

    def attach_image(self, image: ImageUpload) -> bool:
        """Keep the upload if it is an acceptable image; otherwise record the error."""
        errors: Dict[str, str] = {}
        if not validate_image_upload(image, errors, max_bytes=self.max_image_bytes):
            self.errors.update(errors)
            return False
        self.image = image
        self.errors.pop("image_url", None)
        return True

    def remove_image(self) -> None:
        self.image = None
        self.fields["image_url"] = ""

    def submit(self) -> ProductInput:
        """Validate the whole form; errors are kept on the form and re-raised."""
        try:
            product = validate_product_submission(self.fields, self.image, max_image_bytes=self.max_image_bytes)
        except FormValidationError as e:
            self.errors = dict(e.field_errors)
            raise
        self.errors = {}
        return product

    def reset(self) -> None:
        self.fields = _blank_fields()
        self.errors = {}
        self.image = None
