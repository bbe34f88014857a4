"""
Record models for vendors and products.

Each model corresponds to one persisted collection in the key-value storage
(`vendors`, `products`); `currentVendor` holds a single Vendor with the
password blanked.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


class VendorCandidate(BaseModel):
    """Registration input: a vendor before an id and timestamp are assigned."""

    business_name: str
    email: str
    password: str
    contact_person: str
    phone: str
    address: str


class Vendor(VendorCandidate):
    id: str = Field(default_factory=new_id)
    created_at: datetime = Field(default_factory=_utcnow)

    def without_password(self) -> "Vendor":
        return self.model_copy(update={"password": ""})


class ProductInput(BaseModel):
    """Validated listing-form data, ready to be stored."""

    name: str
    description: str
    seller_price: float = Field(gt=0)
    mrp: float = Field(gt=0, description="Market (maximum retail) price")
    category: str
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    quantity: Optional[int] = None
    quantity_unit: Optional[str] = None
    image_url: str
    in_stock: bool = True


class Product(ProductInput):
    id: str = Field(default_factory=new_id)
    vendor_id: str
    created_at: datetime = Field(default_factory=_utcnow)
