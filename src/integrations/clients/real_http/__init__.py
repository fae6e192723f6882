"""
Real HTTP integration clients.

These clients communicate with real external systems via HTTP:
- the case-management API (case records and their contact reference)
- the product-information API (product summary per contact)

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to src/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in src/summary/wiring.py only.
"""

from .case_records import RealCaseRecordsClient
from .product_info import RealProductInfoClient

__all__ = ["RealCaseRecordsClient", "RealProductInfoClient"]
