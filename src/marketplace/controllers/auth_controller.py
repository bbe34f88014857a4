"""Controller for vendor sign-up, sign-in and sign-out forms."""
from typing import Any, Dict
import logging

from src.database.models import Vendor, VendorCandidate
from src.marketplace.credential_store import CredentialStore, DuplicateEmailError
from src.marketplace.validation import (
    FormValidationError,
    add_error,
    raise_if_errors,
    require_str,
    validate_email,
    validate_new_password,
    validate_phone,
)

logger = logging.getLogger(__name__)


class AuthController:
    def __init__(self, credentials: CredentialStore, min_password_length: int = 6):
        self.credentials = credentials
        self.min_password_length = min_password_length

    def sign_up(self, payload: Dict[str, Any]) -> Vendor:
        errors: Dict[str, str] = {}
        business_name = require_str(payload, "business_name", errors, label="Business name")
        email = validate_email(payload.get("email"), errors)
        password = validate_new_password(payload.get("password"), errors)
        contact_person = require_str(payload, "contact_person", errors, label="Contact person")
        phone = validate_phone(payload.get("phone"), errors)
        address = require_str(payload, "address", errors, label="Address")
        raise_if_errors(errors)

        candidate = VendorCandidate(
            business_name=business_name,
            email=email,
            password=password,
            contact_person=contact_person,
            phone=phone,
            address=address,
        )
        try:
            return self.credentials.register(candidate)
        except DuplicateEmailError:
            raise FormValidationError(field_errors={"email": "Email already exists"}, message="Email already exists")

    def sign_in(self, payload: Dict[str, Any]) -> Vendor:
        errors: Dict[str, str] = {}
        email = validate_email(payload.get("email"), errors)
        password = "" if payload.get("password") is None else str(payload.get("password"))
        if not password:
            add_error(errors, "password", "Password is required")
        elif len(password) < self.min_password_length:
            add_error(errors, "password", f"Password must be at least {self.min_password_length} characters")
        raise_if_errors(errors)

        vendor = self.credentials.authenticate(email, password)
        if vendor is None:
            # Same message whether the email is unknown or the password is wrong.
            raise FormValidationError(
                field_errors={"password": "Invalid email or password"},
                message="Invalid email or password",
            )
        return vendor

    def sign_out(self) -> None:
        self.credentials.sign_out()
