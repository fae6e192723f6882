"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- The case-management or product-information APIs are not reachable
- We want to exercise the summary pipeline end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients should return data shaped according to src/integrations/contracts/*

Switching to real:
When endpoints and credentials are provided, src/summary/wiring.py picks the
clients/real_http/* implementations instead.
"""

from .case_records import CaseRecordNotFound, MockCaseRecordsClient
from .product_info import MockProductInfoClient, MockProductInfoError

__all__ = ["CaseRecordNotFound", "MockCaseRecordsClient", "MockProductInfoClient", "MockProductInfoError"]
