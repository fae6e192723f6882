"""
Contracts (data models).

This folder defines the request/response shapes for external integrations:
- Case records (only the contact reference is consumed)
- Product summaries returned by the product-information service
- The abstract client interfaces both mock and real clients implement

Both mock and real HTTP clients should use these contracts so the summary
pipeline relies on stable models, not on ad-hoc dicts.
"""

from .case_records import CaseRecord
from .interfaces import CaseRecordClient, ProductSummaryClient
from .product_summary import ProductSummary

__all__ = ["CaseRecord", "CaseRecordClient", "ProductSummary", "ProductSummaryClient"]
