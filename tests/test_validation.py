"""Shared form validators."""

import pytest

from src.marketplace.validation import (
    FormValidationError,
    check_range,
    format_number,
    optional_bool,
    raise_if_errors,
    to_number,
    unmet_password_requirements,
    validate_email,
    validate_phone,
)


def test_first_error_per_field_wins():
    errors = {}
    validate_email("", errors)
    validate_email("x", errors)
    assert errors == {"email": "Email is required"}


@pytest.mark.parametrize("phone", ["+91 98765 43210", "(555) 123-4567", "0712345678"])
def test_phone_accepts_common_formats(phone):
    errors = {}
    validate_phone(phone, errors)
    assert errors == {}


def test_phone_too_short():
    errors = {}
    validate_phone("12345", errors)
    assert errors == {"phone": "Please enter a valid phone number"}


def test_password_requirements_listed():
    assert unmet_password_requirements("Namaste#2024") == []
    assert unmet_password_requirements("short") == [
        "At least 8 characters",
        "One uppercase letter",
        "One number",
        "One special character",
    ]


def test_number_helpers():
    assert to_number(" 12.5 ") == 12.5
    assert to_number("inf") is None
    assert to_number(True) is None
    assert format_number(5.0) == "5"
    assert format_number(2.5) == "2.5"


def test_check_range_skips_open_bounds():
    errors = {}
    check_range(1000, (None, 10), errors, "weight", label="Weight")
    assert errors == {}


def test_optional_bool_default_and_invalid():
    errors = {}
    assert optional_bool({}, "in_stock", errors, default=True) is True
    assert optional_bool({"in_stock": "maybe"}, "in_stock", errors, default=True) is True
    assert errors == {"in_stock": "in_stock must be true/false"}


def test_raise_if_errors():
    raise_if_errors({})
    with pytest.raises(FormValidationError) as exc:
        raise_if_errors({"name": "Product name is required"})
    assert exc.value.message == "Please correct the highlighted fields"
