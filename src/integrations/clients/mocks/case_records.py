"""
Mock Case Records Client.

Serves case records from an in-memory table. Unknown case ids raise, the
same way the record API reports a missing or inaccessible record.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from src.integrations.contracts.case_records import CaseRecord
from src.integrations.contracts.interfaces import CaseRecordClient
from src.integrations.response_wrappers import normalize_case_record_response

DEFAULT_CASES: Dict[str, Dict[str, Any]] = {
    "500-0001": {"contactId": "003-STANDARD"},
    "500-0002": {"contactId": "003-SMART"},
    "500-0003": {"contactId": "003-METAL"},
    "500-0004": {"contactId": None},
    "500-0005": {"contactId": "003-UNKNOWN"},
}


class CaseRecordNotFound(LookupError):
    """Raised when the mock has no record for a case id."""


class MockCaseRecordsClient(CaseRecordClient):
    def __init__(
        self,
        cases: Optional[Dict[str, Dict[str, Any]]] = None,
        *,
        latency_seconds: float = 0.0,
    ) -> None:
        self.cases = dict(DEFAULT_CASES if cases is None else cases)
        self.latency_seconds = latency_seconds
        self.calls: List[str] = []

    async def get_case_record(self, case_id: str) -> CaseRecord:
        self.calls.append(case_id)
        if self.latency_seconds:
            await asyncio.sleep(self.latency_seconds)

        if case_id not in self.cases:
            raise CaseRecordNotFound(f"Case {case_id} not found")
        return normalize_case_record_response(self.cases[case_id], fallback_case_id=case_id)
