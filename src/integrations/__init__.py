"""
Integrations layer.
This package contains all code used to communicate with external systems:
- The case-management API (case records and their contact reference)
- The product-information API (product summary per contact)

Key rule:
- The summary pipeline MUST NOT call external APIs directly.
- It should call integration clients (under src/integrations/clients) through
  the interfaces in src/integrations/contracts.
- We use MOCK clients during development and swap to REAL_HTTP clients when APIs are available.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/summary/wiring.py).
"""

from .contracts.case_records import CaseRecord
from .contracts.interfaces import CaseRecordClient, ProductSummaryClient
from .contracts.product_summary import ProductSummary
from .response_wrappers import (
    IntegrationResponseError,
    normalize_case_record_response,
    normalize_product_summary_response,
)

__all__ = [
    # contracts
    "CaseRecord", "CaseRecordClient", "ProductSummary", "ProductSummaryClient",
    # normalisation
    "IntegrationResponseError", "normalize_case_record_response", "normalize_product_summary_response",
]
