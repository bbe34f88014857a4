"""Category-driven validation for the product listing form."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.database.models import ProductInput
from src.marketplace.categories import CategoryRule, get_category_rule, list_categories
from src.marketplace.validation import (
    add_error,
    check_range,
    optional_bool,
    optional_str,
    parse_positive_number,
    raise_if_errors,
    require_str,
    to_number,
    validate_in,
)

MAX_IMAGE_BYTES = 5 * 1024 * 1024


@dataclass
class ImageUpload:
    """An uploaded image file as received from a multipart form."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


def validate_image_upload(image: ImageUpload, errors: Dict[str, str], field: str = "image_url", *, max_bytes: int = MAX_IMAGE_BYTES) -> bool:
    if not (image.content_type or "").startswith("image/"):
        add_error(errors, field, "Please select a valid image file")
        return False
    if image.size > max_bytes:
        add_error(errors, field, f"Image size must be less than {max_bytes // (1024 * 1024)}MB")
        return False
    return True


def _validate_weight(payload: Dict[str, Any], rule: CategoryRule, errors: Dict[str, str]) -> Optional[float]:
    raw = optional_str(payload, "weight")
    if not raw:
        add_error(errors, "weight", "Weight is required for this category")
        return None
    value = to_number(raw)
    if value is None or value <= 0:
        add_error(errors, "weight", "Weight must be a positive number")
        return None
    check_range(value, (rule.weight_min, rule.weight_max), errors, "weight", label="Weight", unit=rule.weight_unit)
    return value


def _validate_quantity(payload: Dict[str, Any], rule: CategoryRule, errors: Dict[str, str]) -> Optional[int]:
    raw = optional_str(payload, "quantity")
    if not raw:
        add_error(errors, "quantity", "Quantity is required for this category")
        return None
    value = to_number(raw)
    if value is None or value <= 0 or not value.is_integer():
        add_error(errors, "quantity", "Quantity must be a positive whole number")
        return None
    check_range(value, (rule.quantity_min, rule.quantity_max), errors, "quantity", label="Quantity", unit=rule.quantity_unit)
    return int(value)


def validate_product_submission(
    payload: Dict[str, Any],
    image: Optional[ImageUpload] = None,
    *,
    max_image_bytes: int = MAX_IMAGE_BYTES,
) -> ProductInput:
    """Validate a listing form and build the record to store.

    Raises FormValidationError with every failing field. Weight and quantity
    are checked against the selected category's rule and stored with that
    rule's units. An uploaded image wins over a typed image URL.
    """
    errors: Dict[str, str] = {}

    name = require_str(payload, "name", errors, label="Product name")
    description = require_str(payload, "description", errors, label="Description")
    seller_price = parse_positive_number(payload, "seller_price", errors, label="Seller price")
    mrp = parse_positive_number(payload, "mrp", errors, label="MRP")
    category = validate_in(payload.get("category"), list_categories(), errors, "category", label="Category")
    rule = get_category_rule(category)

    weight = _validate_weight(payload, rule, errors) if rule.has_weight else None
    quantity = _validate_quantity(payload, rule, errors) if rule.has_quantity else None

    image_url = optional_str(payload, "image_url")
    if image is not None:
        if validate_image_upload(image, errors, max_bytes=max_image_bytes):
            image_url = image.to_data_url()
    elif not image_url:
        add_error(errors, "image_url", "Product image is required (upload file or provide URL)")

    in_stock = optional_bool(payload, "in_stock", errors, default=True, label="In stock")

    raise_if_errors(errors)

    return ProductInput(
        name=name,
        description=description,
        seller_price=seller_price,
        mrp=mrp,
        category=category,
        weight=weight,
        weight_unit=rule.weight_unit if weight is not None else None,
        quantity=quantity,
        quantity_unit=rule.quantity_unit if quantity is not None else None,
        image_url=image_url,
        in_stock=in_stock,
    )
