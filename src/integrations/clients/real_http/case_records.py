"""
Real Case Records HTTP Client.

Reads a support case from the case-management API and exposes its contact
reference. Used when CASE_RECORDS_API_URL is configured.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional
from urllib.parse import quote

import httpx

from src.integrations.contracts.case_records import CaseRecord
from src.integrations.contracts.interfaces import CaseRecordClient
from src.integrations.response_wrappers import normalize_case_record_response

logger = logging.getLogger(__name__)


class RealCaseRecordsClient(CaseRecordClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        record_path: str = "/cases/{case_id}",
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("CASE_RECORDS_API_URL", "")).rstrip("/")
        self.api_key = api_key or os.getenv("CASE_RECORDS_API_KEY", "")
        self.record_path = record_path
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        if not self.base_url:
            logger.warning("Case records API URL is not set.")

    async def get_case_record(self, case_id: str) -> CaseRecord:
        if not self.base_url:
            raise ValueError("CASE_RECORDS_API_URL is not configured.")

        headers: Dict[str, str] = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        url = f"{self.base_url}{self.record_path.format(case_id=quote(str(case_id), safe=''))}"
        try:
            logger.info("Requesting case record from %s", url)
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url, headers=headers)
                response.raise_for_status()
                data = response.json() if response.content else {}
        except httpx.HTTPStatusError as e:
            logger.error("HTTP error from case records API: %s %s", e.response.status_code, e.response.text)
            raise
        except httpx.RequestError as e:
            logger.error("Request error connecting to case records API: %s", e)
            raise

        logger.info("Received case record response: status=%s", response.status_code)
        return normalize_case_record_response(data, fallback_case_id=case_id)
