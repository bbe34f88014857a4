#!/usr/bin/env python3
"""
Walk through register → list a product → toggle stock → sign out and print
each stage to the terminal. Uses in-memory storage unless --storage-path is
given, in which case the JSON file is created/reused.

Usage (from repo root):
  python scripts/run_marketplace_demo.py [--storage-path data/demo.json]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.database.file_storage import FileStorage
from src.database.local_storage import LocalStorage
from src.marketplace.catalog_store import CatalogStore
from src.marketplace.controllers.auth_controller import AuthController
from src.marketplace.controllers.product_controller import ProductController
from src.marketplace.credential_store import CredentialStore
from src.marketplace.password_reset import PasswordResetService
from src.marketplace.validation import FormValidationError


def setup_logging():
    """Log to terminal at INFO so every stage is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data: dict | list | str):
    """Print a stage header and data to the terminal."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


async def main():
    parser = argparse.ArgumentParser(description="Vendor marketplace walkthrough")
    parser.add_argument("--storage-path", type=Path, default=None, help="Persist to this JSON file")
    args = parser.parse_args()

    setup_logging()
    storage = FileStorage(args.storage_path) if args.storage_path else LocalStorage()
    credentials = CredentialStore(storage)
    auth = AuthController(credentials)
    products = ProductController(CatalogStore(storage))

    signup = {
        "business_name": "Kashi Puja Bhandar",
        "email": "orders@kashipuja.example",
        "password": "Namaste#2024",
        "contact_person": "Asha Verma",
        "phone": "+91 98765 43210",
        "address": "12 Vishwanath Gali, Varanasi",
    }
    try:
        vendor = auth.sign_up(signup)
    except FormValidationError as e:
        print_stage("SIGN UP REJECTED", e.field_errors)
        vendor = auth.sign_in({"email": signup["email"], "password": signup["password"]})
    print_stage("SIGNED IN VENDOR (session copy)", vendor.model_dump(mode="json"))

    bad_listing = {
        "name": "Panchmukhi Rudraksha Mala",
        "description": "108 + 1 beads, hand knotted",
        "seller_price": "799",
        "mrp": "999",
        "category": "Rudraksha & Malas",
        "weight": "3",
        "quantity": "108",
        "image_url": "https://images.example.com/mala.jpg",
    }
    try:
        products.create_product(vendor.id, bad_listing)
    except FormValidationError as e:
        print_stage("LISTING REJECTED: field errors", e.field_errors)

    listing = {**bad_listing, "weight": "25"}
    product = products.create_product(vendor.id, listing)
    print_stage("PRODUCT LISTED", product.model_dump(mode="json"))

    product = products.toggle_stock(vendor.id, product.id)
    print_stage("STOCK TOGGLED", {"id": product.id, "in_stock": product.in_stock})
    print_stage("DASHBOARD SUMMARY", products.summary(vendor.id))

    reset = await PasswordResetService(delay=0.5).request_reset(signup["email"])
    print_stage("PASSWORD RESET REQUESTED", reset)

    auth.sign_out()
    print_stage("SIGNED OUT", {"authenticated": credentials.is_authenticated})


if __name__ == "__main__":
    asyncio.run(main())
