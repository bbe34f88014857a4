"""
Forgot-password handling.

No mail is sent: after validating the address the request resolves once a
fixed delay has elapsed, standing in for the round trip to a mail service.
"""

import asyncio
import logging
from typing import Any, Dict

from src.marketplace.validation import raise_if_errors, validate_email

logger = logging.getLogger(__name__)


class PasswordResetService:
    def __init__(self, delay: float = 2.0):
        self.delay = delay

    async def request_reset(self, email: str) -> Dict[str, Any]:
        errors: Dict[str, str] = {}
        email = validate_email(email, errors, invalid_message="Please enter a valid email address")
        raise_if_errors(errors)

        logger.info("Password reset requested")
        await asyncio.sleep(self.delay)
        return {"email": email, "sent": True}
