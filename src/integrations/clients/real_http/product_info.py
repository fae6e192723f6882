"""
Real Product Information HTTP Client.

Purpose:
- Fetches the product summary attached to a contact from the product-information API
- Normalizes the payload into our ProductSummary contract

Usage:
- Wired in src/summary/wiring.py when PRODUCT_INFO_API_URL is configured
- Called by ProductSummaryLoader via the ProductSummaryClient interface

Important:
- Keep this client as the ONLY place where product-information HTTP calls are made.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional
from urllib.parse import quote

import httpx

from src.integrations.contracts.interfaces import ProductSummaryClient
from src.integrations.contracts.product_summary import ProductSummary
from src.integrations.response_wrappers import normalize_product_summary_response

logger = logging.getLogger(__name__)


class RealProductInfoClient(ProductSummaryClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        summary_path: str = "/contacts/{contact_id}/product-summary",
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("PRODUCT_INFO_API_URL", "")).rstrip("/")
        self.api_key = api_key or os.getenv("PRODUCT_INFO_API_KEY", "")
        self.summary_path = summary_path
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        if not self.base_url:
            logger.warning("Product information API URL is not set.")

    async def fetch_product_summary(self, contact_id: str) -> Optional[ProductSummary]:
        if not self.base_url:
            raise ValueError("PRODUCT_INFO_API_URL is not configured.")

        headers: Dict[str, str] = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        url = f"{self.base_url}{self.summary_path.format(contact_id=quote(str(contact_id), safe=''))}"
        try:
            logger.info("Requesting product summary from %s", url)
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url, headers=headers)
                response.raise_for_status()
                data = response.json() if response.content and response.status_code != 204 else None
        except httpx.HTTPStatusError as e:
            logger.error("HTTP error from product information API: %s %s", e.response.status_code, e.response.text)
            raise
        except httpx.RequestError as e:
            logger.error("Request error connecting to product information API: %s", e)
            raise

        logger.info("Received product summary response: status=%s", response.status_code)
        return normalize_product_summary_response(data)
