"""Pytest fixtures for the product summary pipeline."""

import asyncio
from typing import Dict, List, Optional

import pytest

from src.integrations.clients.mocks import MockCaseRecordsClient, MockProductInfoClient
from src.integrations.contracts.interfaces import ProductSummaryClient
from src.integrations.contracts.product_summary import ProductSummary
from src.summary.controller import ViewStateController
from src.summary.loader import ProductSummaryLoader


class GatedProductClient(ProductSummaryClient):
    """Product client whose calls complete only when the test releases them."""

    def __init__(self) -> None:
        self.calls: List[str] = []
        self._gates: List[asyncio.Future] = []

    async def fetch_product_summary(self, contact_id: str) -> Optional[ProductSummary]:
        self.calls.append(contact_id)
        gate = asyncio.get_running_loop().create_future()
        self._gates.append(gate)
        return await gate

    def resolve(self, index: int, summary: Optional[ProductSummary]) -> None:
        self._gates[index].set_result(summary)

    def reject(self, index: int, exc: BaseException) -> None:
        self._gates[index].set_exception(exc)


def _make_summary(**overrides) -> ProductSummary:
    data: Dict = {
        "productName": "Smart",
        "monthlyCost": "4.90",
        "atmFee": "2",
        "cardReplacementCost": "10.00",
        "countryCode": "DE",
        "isDefault": False,
    }
    data.update(overrides)
    return ProductSummary(**data)


@pytest.fixture
def make_summary():
    return _make_summary


@pytest.fixture
def product_client():
    return MockProductInfoClient()


@pytest.fixture
def case_client():
    return MockCaseRecordsClient()


@pytest.fixture
def gated_client():
    return GatedProductClient()


@pytest.fixture
def loader(product_client):
    return ProductSummaryLoader(product_client)


@pytest.fixture
def controller(case_client, loader):
    return ViewStateController(case_client, loader)
