"""Shared validation for vendor and product form submissions.

Forms are submitted as dictionaries of raw field values (strings from the
browser, or already-typed JSON values from API clients). These validators
collect human-readable messages per field into an `errors` dict rather than
stopping at the first problem, so every highlighted field can be shown at once.

On validation failure, raise `FormValidationError` so the API can return HTTP
422 with structured `field_errors`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple


@dataclass
class FormValidationError(Exception):
    """Exception raised for form validation failures.

    Attributes:
        field_errors: mapping of field name -> human-readable error message.
        message: optional top-level message.
    """

    field_errors: Dict[str, str]
    message: str = "Validation failed"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def _strip(v: Any) -> str:
    return _as_str(v).strip()


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def require_str(payload: Dict[str, Any], field: str, errors: Dict[str, str], *, label: Optional[str] = None) -> str:
    value = _strip(payload.get(field))
    if not value:
        add_error(errors, field, f"{label or field} is required")
    return value


def optional_str(payload: Dict[str, Any], field: str) -> str:
    return _strip(payload.get(field))


def optional_bool(payload: Dict[str, Any], field: str, errors: Dict[str, str], *, default: bool, label: Optional[str] = None) -> bool:
    if field not in payload or payload.get(field) is None:
        return default
    v = payload.get(field)
    if isinstance(v, bool):
        return v
    s = _strip(v).lower()
    if s in ("true", "1", "yes", "y", "on"):
        return True
    if s in ("false", "0", "no", "n", "off"):
        return False
    add_error(errors, field, f"{label or field} must be true/false")
    return default


def to_number(raw: Any) -> Optional[float]:
    """Parse a finite number from a form value; None if it does not parse."""
    if isinstance(raw, bool):
        return None
    try:
        val = float(_strip(raw))
    except (TypeError, ValueError):
        return None
    if not math.isfinite(val):
        return None
    return val


def format_number(value: float) -> str:
    """Render bounds the way a person would type them (5, not 5.0)."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def parse_positive_number(
    payload: Dict[str, Any],
    field: str,
    errors: Dict[str, str],
    *,
    label: Optional[str] = None,
    required: bool = True,
) -> Optional[float]:
    label = label or field
    raw = _strip(payload.get(field))
    if not raw:
        if required:
            add_error(errors, field, f"{label} is required")
        return None
    val = to_number(raw)
    if val is None or val <= 0:
        add_error(errors, field, f"{label} must be a positive number")
        return None
    return val


def check_range(
    value: float,
    bounds: Tuple[Optional[float], Optional[float]],
    errors: Dict[str, str],
    field: str,
    *,
    label: str,
    unit: Optional[str] = None,
) -> None:
    """Inclusive range check; skipped when either bound is missing."""
    low, high = bounds
    if low is None or high is None:
        return
    if value < low or value > high:
        suffix = f" {unit}" if unit else ""
        add_error(errors, field, f"{label} must be between {format_number(low)} and {format_number(high)}{suffix}")


_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")


def validate_email(value: str, errors: Dict[str, str], field: str = "email", *, invalid_message: str = "Email is invalid") -> str:
    # Returned untrimmed; stored emails are compared exactly.
    raw = _as_str(value)
    if not raw.strip():
        add_error(errors, field, "Email is required")
        return raw
    if not _EMAIL_RE.search(raw):
        add_error(errors, field, invalid_message)
    return raw


_PHONE_RE = re.compile(r"^\+?[\d\s\-\(\)]{10,}$")


def validate_phone(value: str, errors: Dict[str, str], field: str = "phone") -> str:
    raw = _strip(value)
    if not raw:
        add_error(errors, field, "Phone number is required")
        return raw
    if not _PHONE_RE.match(raw):
        add_error(errors, field, "Please enter a valid phone number")
    return raw


PASSWORD_REQUIREMENTS: Sequence[Tuple[re.Pattern, str]] = (
    (re.compile(r".{8,}"), "At least 8 characters"),
    (re.compile(r"[A-Z]"), "One uppercase letter"),
    (re.compile(r"[a-z]"), "One lowercase letter"),
    (re.compile(r"\d"), "One number"),
    (re.compile(r"[!@#$%^&*(),.?\":{}|<>]"), "One special character"),
)


def unmet_password_requirements(password: str) -> list[str]:
    return [text for regex, text in PASSWORD_REQUIREMENTS if not regex.search(password or "")]


def validate_new_password(value: Any, errors: Dict[str, str], field: str = "password") -> str:
    raw = _as_str(value)
    if not raw:
        add_error(errors, field, "Password is required")
        return raw
    if unmet_password_requirements(raw):
        add_error(errors, field, "Password does not meet all requirements")
    return raw


def validate_in(value: str, allowed: Iterable[str], errors: Dict[str, str], field: str, *, required: bool = True, label: Optional[str] = None) -> str:
    raw = _strip(value)
    if not raw:
        if required:
            add_error(errors, field, f"{label or field} is required")
        return raw
    if raw not in set(allowed):
        add_error(errors, field, f"{label or field} has an invalid value")
    return raw


def raise_if_errors(errors: Dict[str, str], message: str = "Please correct the highlighted fields") -> None:
    if errors:
        raise FormValidationError(field_errors=errors, message=message)
