"""
Mock Product Information Client.

Purpose:
- Provides a fake product-information integration used for development/testing
- Does NOT make any network calls
- Returns product summaries from an in-memory table, optionally after a delay

Behavior guidelines:
- Unknown contacts return None (the "no product" case)
- Contacts listed in ``failing_contacts`` raise, to exercise the error state

Swap:
Replace with clients/real_http/product_info.py when PRODUCT_INFO_API_URL is set.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional

from src.integrations.contracts.interfaces import ProductSummaryClient
from src.integrations.contracts.product_summary import ProductSummary
from src.integrations.response_wrappers import normalize_product_summary_response

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS: Dict[str, Dict[str, Any]] = {
    "003-STANDARD": {
        "productName": "Standard",
        "monthlyCost": "0.00",
        "atmFee": "1.7",
        "cardReplacementCost": "10.00",
        "countryCode": "DE",
        "isDefault": True,
    },
    "003-SMART": {
        "productName": "Smart",
        "monthlyCost": "4.90",
        "atmFee": "0",
        "cardReplacementCost": "10.00",
        "countryCode": "DE",
        "isDefault": False,
    },
    "003-METAL": {
        "productName": "Metal",
        "monthlyCost": "16.90",
        "atmFee": "250",
        "cardReplacementCost": "45.00",
        "countryCode": "AT",
        "isDefault": False,
    },
}


class MockProductInfoError(RuntimeError):
    """Raised by the mock for contacts configured to fail."""


class MockProductInfoClient(ProductSummaryClient):
    """In-memory product-information client."""

    def __init__(
        self,
        products: Optional[Dict[str, Optional[Dict[str, Any]]]] = None,
        *,
        latency_seconds: float = 0.0,
        failing_contacts: Iterable[str] = (),
    ) -> None:
        self.products = dict(DEFAULT_PRODUCTS if products is None else products)
        self.latency_seconds = latency_seconds
        self.failing_contacts = set(failing_contacts)
        self.calls: List[str] = []

    async def fetch_product_summary(self, contact_id: str) -> Optional[ProductSummary]:
        self.calls.append(contact_id)
        if self.latency_seconds:
            await asyncio.sleep(self.latency_seconds)

        if contact_id in self.failing_contacts:
            raise MockProductInfoError(f"Product service unavailable for contact {contact_id}")

        raw = self.products.get(contact_id)
        if raw is None:
            logger.debug("Mock product service has no product for contact %s", contact_id)
        return normalize_product_summary_response(raw)
