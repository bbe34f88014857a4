"""Pytest fixtures for the marketplace stores and forms."""

import pytest

from src.database.local_storage import LocalStorage
from src.database.models import VendorCandidate
from src.marketplace.catalog_store import CatalogStore
from src.marketplace.credential_store import CredentialStore


@pytest.fixture
def storage():
    """In-memory key-value storage for tests."""
    return LocalStorage()


@pytest.fixture
def credentials(storage):
    return CredentialStore(storage)


@pytest.fixture
def catalog(storage):
    return CatalogStore(storage)


@pytest.fixture
def vendor_candidate():
    return VendorCandidate(
        business_name="Kashi Puja Bhandar",
        email="orders@kashipuja.example",
        password="Namaste#2024",
        contact_person="Asha Verma",
        phone="+91 98765 43210",
        address="12 Vishwanath Gali, Varanasi",
    )


@pytest.fixture
def signup_payload(vendor_candidate):
    return vendor_candidate.model_dump()


@pytest.fixture
def listing_payload():
    """A fully valid listing form as submitted by the browser (all strings)."""
    return {
        "name": "Panchmukhi Rudraksha Mala",
        "description": "108 + 1 beads, hand knotted",
        "seller_price": "799",
        "mrp": "999",
        "category": "Rudraksha & Malas",
        "weight": "25",
        "quantity": "108",
        "image_url": "https://images.example.com/mala.jpg",
    }
