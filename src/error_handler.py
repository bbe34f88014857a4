"""Error handling helpers for the marketplace API."""
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception while handling a marketplace request: %s", exc, exc_info=True)
        return {
            "error": "internal_error",
            "message": "Something went wrong while processing your request. Please try again later.",
            "metadata": {"error": str(exc), "context": context or {}},
        }

    def validation_payload(self, field_errors: Dict[str, str], message: str) -> Dict[str, Any]:
        return {
            "error": "validation_error",
            "message": message,
            "field_errors": field_errors,
        }
