from abc import ABC, abstractmethod
from typing import Optional

from .case_records import CaseRecord
from .product_summary import ProductSummary


# ---------------------------------------------------------------------------
# Abstract client interfaces
# ---------------------------------------------------------------------------

class CaseRecordClient(ABC):
    """Every case-record source (mock or HTTP) must implement this interface."""

    @abstractmethod
    async def get_case_record(self, case_id: str) -> CaseRecord:
        """Fetch a case record. Raise on any failure."""


class ProductSummaryClient(ABC):
    """Every product-information source (mock or HTTP) must implement this interface."""

    @abstractmethod
    async def fetch_product_summary(self, contact_id: str) -> Optional[ProductSummary]:
        """
        Fetch the product summary for a contact.

        Returns None when the backend has no product for the contact.
        Raises on transport or payload failures.
        """
