"""Error handling helpers for the product summary pipeline."""
from typing import Any, Dict, Optional, Type
import logging

logger = logging.getLogger(__name__)

CASE_LOAD_ERROR_MESSAGE = "Error loading Case."
PRODUCT_LOAD_ERROR_MESSAGE = "Could not load product information."


class SummaryLoadError(Exception):
    """Base class for failures surfaced to the user as an error state."""

    user_message = PRODUCT_LOAD_ERROR_MESSAGE


class CaseLoadError(SummaryLoadError):
    """The case record could not be fetched."""

    user_message = CASE_LOAD_ERROR_MESSAGE


class ProductLoadError(SummaryLoadError):
    """The product summary fetch was rejected."""

    user_message = PRODUCT_LOAD_ERROR_MESSAGE


class ErrorHandler:
    def handle_exception(
        self,
        exc: BaseException,
        context: Optional[Dict[str, Any]] = None,
        *,
        error_type: Type[SummaryLoadError] = ProductLoadError,
    ) -> str:
        """Log a failed load and return the message to show in its place."""
        logger.error(
            "%s while loading product summary: %s (context=%s)",
            error_type.__name__,
            exc,
            context or {},
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return error_type.user_message
