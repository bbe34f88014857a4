"""
Vendor accounts and the signed-in session.
"""

import logging
from typing import List, Optional

from src.database.models import Vendor, VendorCandidate
from src.database.records import read_record, read_records, write_record, write_records

logger = logging.getLogger(__name__)

VENDORS_KEY = "vendors"
SESSION_KEY = "currentVendor"


class DuplicateEmailError(Exception):
    """Raised when registering an email that another vendor already uses."""

    def __init__(self, email: str):
        super().__init__(f"A vendor with email {email!r} already exists")
        self.email = email


class CredentialStore:
    """Owns the vendor collection and the active session.

    Passwords are kept in plain text in the `vendors` collection; the
    session copy under `currentVendor` always has its password blanked.
    Email comparisons are exact (no case folding).
    """

    def __init__(self, storage):
        self.storage = storage
        self._current: Optional[Vendor] = None
        self.restore_session()

    @property
    def current_vendor(self) -> Optional[Vendor]:
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    def vendors(self) -> List[Vendor]:
        """All registered vendors, re-read from storage."""
        return read_records(self.storage, VENDORS_KEY, Vendor)

    def register(self, candidate: VendorCandidate) -> Vendor:
        """Create a vendor account and sign it in.

        Returns the session copy of the new vendor (password blanked).
        """
        existing = self.vendors()
        if any(v.email == candidate.email for v in existing):
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmailError(candidate.email)

        vendor = Vendor(**candidate.model_dump())
        existing.append(vendor)
        write_records(self.storage, VENDORS_KEY, existing)
        logger.info("Registered vendor %s", vendor.id)

        return self._start_session(vendor)

    def authenticate(self, email: str, password: str) -> Optional[Vendor]:
        """Sign in on an exact email + password match; None otherwise."""
        vendor = next(
            (v for v in self.vendors() if v.email == email and v.password == password),
            None,
        )
        if vendor is None:
            logger.info("Sign-in failed")
            return None
        logger.info("Vendor %s signed in", vendor.id)
        return self._start_session(vendor)

    def sign_out(self) -> None:
        if self._current is not None:
            logger.info("Vendor %s signed out", self._current.id)
        self.storage.remove_item(SESSION_KEY)
        self._current = None

    def restore_session(self) -> Optional[Vendor]:
        """Re-hydrate the session from storage (e.g. after a restart)."""
        self._current = read_record(self.storage, SESSION_KEY, Vendor)
        return self._current

    def _start_session(self, vendor: Vendor) -> Vendor:
        session = vendor.without_password()
        write_record(self.storage, SESSION_KEY, session)
        self._current = session
        return session
