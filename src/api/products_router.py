"""
Product listing endpoints for the signed-in vendor, plus the category table.
"""
import base64
import binascii
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from src.api.dependencies import get_product_controller, require_vendor
from src.database.models import Vendor
from src.error_handler import ErrorHandler
from src.marketplace.categories import CATEGORY_RULES, get_category_rule, list_categories
from src.marketplace.controllers.product_controller import ProductController
from src.marketplace.product_validation import ImageUpload
from src.marketplace.validation import FormValidationError

api = APIRouter()
error_handler = ErrorHandler()


def _validation_error(e: FormValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail=error_handler.validation_payload(e.field_errors, e.message))


def _image_from_payload(payload: Dict[str, Any]) -> Optional[ImageUpload]:
    """Decode an optional `image_upload` object: {filename, content_type, data (base64)}."""
    upload = payload.pop("image_upload", None)
    if not upload:
        return None
    if not isinstance(upload, dict):
        raise FormValidationError(field_errors={"image_url": "Please select a valid image file"})
    encoded = upload.get("data") or ""
    if not isinstance(encoded, str):
        raise FormValidationError(field_errors={"image_url": "Please select a valid image file"})
    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        raise FormValidationError(field_errors={"image_url": "Please select a valid image file"})
    return ImageUpload(
        filename=str(upload.get("filename") or ""),
        content_type=str(upload.get("content_type") or ""),
        data=data,
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Product not found")


# --------------------------------------------------------------------------- #
# Categories
# --------------------------------------------------------------------------- #
@api.get("/categories", tags=["Categories"])
async def categories():
    return [CATEGORY_RULES[name].to_dict() for name in list_categories()]


@api.get("/categories/{name}", tags=["Categories"])
async def category_rule(name: str):
    # Unknown names resolve to the fallback rule.
    return get_category_rule(name).to_dict()


# --------------------------------------------------------------------------- #
# Products
# --------------------------------------------------------------------------- #
@api.get("/products", tags=["Products"])
async def list_products(vendor: Vendor = Depends(require_vendor), controller: ProductController = Depends(get_product_controller)):
    return [p.model_dump(mode="json") for p in controller.list_products(vendor.id)]


@api.get("/products/summary", tags=["Products"])
async def products_summary(vendor: Vendor = Depends(require_vendor), controller: ProductController = Depends(get_product_controller)):
    return controller.summary(vendor.id)


@api.get("/products/{product_id}", tags=["Products"])
async def get_product(product_id: str, vendor: Vendor = Depends(require_vendor), controller: ProductController = Depends(get_product_controller)):
    product = controller.get_product(vendor.id, product_id)
    if not product:
        raise _not_found()
    return product.model_dump(mode="json")


@api.post("/products", status_code=201, tags=["Products"])
async def create_product(
    payload: dict = Body(...),
    vendor: Vendor = Depends(require_vendor),
    controller: ProductController = Depends(get_product_controller),
):
    try:
        image = _image_from_payload(payload)
        product = controller.create_product(vendor.id, payload, image)
    except FormValidationError as e:
        raise _validation_error(e)
    return product.model_dump(mode="json")


@api.patch("/products/{product_id}", tags=["Products"])
async def update_product(
    product_id: str,
    payload: dict = Body(...),
    vendor: Vendor = Depends(require_vendor),
    controller: ProductController = Depends(get_product_controller),
):
    try:
        image = _image_from_payload(payload)
        product = controller.update_product(vendor.id, product_id, payload, image)
    except FormValidationError as e:
        raise _validation_error(e)
    if not product:
        raise _not_found()
    return product.model_dump(mode="json")


@api.post("/products/{product_id}/toggle-stock", tags=["Products"])
async def toggle_stock(product_id: str, vendor: Vendor = Depends(require_vendor), controller: ProductController = Depends(get_product_controller)):
    product = controller.toggle_stock(vendor.id, product_id)
    if not product:
        raise _not_found()
    return product.model_dump(mode="json")


@api.delete("/products/{product_id}", tags=["Products"])
async def delete_product(product_id: str, vendor: Vendor = Depends(require_vendor), controller: ProductController = Depends(get_product_controller)):
    if not controller.delete_product(vendor.id, product_id):
        raise _not_found()
    return {"deleted": True}
