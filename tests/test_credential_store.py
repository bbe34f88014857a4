"""Vendor registration, sign-in and session persistence."""

import json

import pytest

from src.marketplace.credential_store import (
    SESSION_KEY,
    VENDORS_KEY,
    CredentialStore,
    DuplicateEmailError,
)


def test_register_persists_vendor_and_starts_session(credentials, storage, vendor_candidate):
    session = credentials.register(vendor_candidate)

    stored = json.loads(storage.get_item(VENDORS_KEY))
    assert len(stored) == 1
    assert stored[0]["email"] == vendor_candidate.email
    assert stored[0]["password"] == vendor_candidate.password
    assert stored[0]["id"] == session.id

    assert credentials.is_authenticated
    assert session.password == ""
    assert json.loads(storage.get_item(SESSION_KEY))["password"] == ""


def test_register_assigns_unique_ids(credentials, vendor_candidate):
    first = credentials.register(vendor_candidate)
    second = credentials.register(vendor_candidate.model_copy(update={"email": "second@example.com"}))
    assert first.id != second.id
    assert first.created_at is not None


def test_duplicate_email_is_rejected_and_count_unchanged(credentials, vendor_candidate):
    credentials.register(vendor_candidate)
    with pytest.raises(DuplicateEmailError):
        credentials.register(vendor_candidate.model_copy(update={"business_name": "Another shop"}))
    assert len(credentials.vendors()) == 1


def test_email_matching_is_case_sensitive(credentials, vendor_candidate):
    credentials.register(vendor_candidate)
    upper = vendor_candidate.model_copy(update={"email": vendor_candidate.email.upper()})
    credentials.register(upper)
    assert len(credentials.vendors()) == 2
    credentials.sign_out()
    assert credentials.authenticate(vendor_candidate.email.upper(), vendor_candidate.password) is not None


def test_authenticate_after_register(credentials, vendor_candidate):
    registered = credentials.register(vendor_candidate)
    credentials.sign_out()

    session = credentials.authenticate(vendor_candidate.email, vendor_candidate.password)
    assert session is not None
    assert session.id == registered.id
    assert session.password == ""
    assert credentials.current_vendor == session


def test_wrong_password_fails_without_touching_vendor(credentials, storage, vendor_candidate):
    credentials.register(vendor_candidate)
    credentials.sign_out()
    before = storage.get_item(VENDORS_KEY)

    assert credentials.authenticate(vendor_candidate.email, "not-the-password") is None
    assert credentials.authenticate("nobody@example.com", vendor_candidate.password) is None
    assert not credentials.is_authenticated
    assert storage.get_item(VENDORS_KEY) == before


def test_sign_out_is_idempotent(credentials, storage, vendor_candidate):
    credentials.register(vendor_candidate)
    credentials.sign_out()
    credentials.sign_out()
    assert storage.get_item(SESSION_KEY) is None
    assert credentials.current_vendor is None


def test_session_restored_by_new_store(storage, vendor_candidate):
    CredentialStore(storage).register(vendor_candidate)

    restored = CredentialStore(storage)
    assert restored.is_authenticated
    assert restored.current_vendor.email == vendor_candidate.email
    assert restored.current_vendor.password == ""


def test_corrupt_storage_is_treated_as_empty(storage, vendor_candidate, caplog):
    storage.set_item(VENDORS_KEY, "{not json")
    storage.set_item(SESSION_KEY, "[]")

    store = CredentialStore(storage)
    assert not store.is_authenticated
    assert store.vendors() == []
    assert "not valid JSON" in caplog.text

    store.register(vendor_candidate)
    assert len(store.vendors()) == 1


def test_invalid_vendor_record_is_skipped_and_others_survive_register(storage, vendor_candidate, caplog):
    CredentialStore(storage).register(vendor_candidate)
    stored = json.loads(storage.get_item(VENDORS_KEY))
    storage.set_item(VENDORS_KEY, json.dumps([*stored, {"id": "legacy", "email": "old@example.com"}]))

    store = CredentialStore(storage)
    assert [v.email for v in store.vendors()] == [vendor_candidate.email]
    assert "failed validation" in caplog.text

    store.register(vendor_candidate.model_copy(update={"email": "second@example.com"}))
    persisted = [v["email"] for v in json.loads(storage.get_item(VENDORS_KEY))]
    assert persisted == [vendor_candidate.email, "second@example.com"]
