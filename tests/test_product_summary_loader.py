"""Tests for the product summary loader state machine."""

import asyncio
from decimal import Decimal

import pytest

from src.integrations.clients.mocks import MockProductInfoClient
from src.summary.loader import ProductSummaryLoader
from src.summary.state import EmptyReason, LoadState, LoadStatus


def test_initial_state_is_loading(loader):
    assert loader.state.status is LoadStatus.LOADING
    assert loader.state.rows == ()


@pytest.mark.asyncio
async def test_no_contact_goes_empty_without_remote_call(loader, product_client):
    task = loader.on_contact_resolved(None)

    assert task is None
    assert loader.state.status is LoadStatus.EMPTY
    assert loader.state.empty_reason is EmptyReason.NO_CONTACT
    assert loader.state.error is None
    assert product_client.calls == []


@pytest.mark.asyncio
async def test_contact_loads_single_ready_row(loader, product_client):
    task = loader.on_contact_resolved("003-METAL")
    assert loader.state.is_loading

    await task

    assert product_client.calls == ["003-METAL"]
    assert loader.state.status is LoadStatus.READY
    (row,) = loader.state.rows
    assert row.product_name == "Metal"
    assert row.monthly_cost == Decimal("16.90")
    assert row.atm_fee == Decimal("250")
    assert row.atm_fee_label == "250,00\u00a0€"
    assert row.card_replacement_cost == Decimal("45.00")
    assert row.country_code == "AT"
    assert row.is_default is False


@pytest.mark.asyncio
async def test_zero_fee_row_is_labelled_free(loader):
    await loader.on_contact_resolved("003-SMART")

    assert loader.state.row.atm_fee_label == "Free"


@pytest.mark.asyncio
async def test_service_returning_none_is_silent_empty(loader):
    await loader.on_contact_resolved("003-NOBODY")

    assert loader.state.status is LoadStatus.EMPTY
    assert loader.state.empty_reason is EmptyReason.NO_PRODUCT
    assert loader.state.error is None
    assert loader.state.has_no_rows


@pytest.mark.asyncio
async def test_rejected_fetch_sets_error_and_drops_previous_row():
    client = MockProductInfoClient(failing_contacts={"003-SMART"})
    loader = ProductSummaryLoader(client)

    await loader.on_contact_resolved("003-STANDARD")
    assert loader.state.status is LoadStatus.READY

    await loader.on_contact_resolved("003-SMART")

    assert loader.state.status is LoadStatus.ERROR
    assert loader.state.error == "Could not load product information."
    assert loader.state.rows == ()


@pytest.mark.asyncio
async def test_malformed_payload_is_a_product_load_error():
    client = MockProductInfoClient({"003-BROKEN": {"monthlyCost": "4.90"}})
    loader = ProductSummaryLoader(client)

    await loader.on_contact_resolved("003-BROKEN")

    assert loader.state.error == "Could not load product information."


@pytest.mark.asyncio
async def test_repeated_contact_issues_independent_fetches(loader, product_client):
    first = loader.on_contact_resolved("003-STANDARD")
    second = loader.on_contact_resolved("003-STANDARD")

    await asyncio.gather(first, second)

    assert product_client.calls == ["003-STANDARD", "003-STANDARD"]
    assert loader.state.status is LoadStatus.READY


@pytest.mark.asyncio
async def test_last_completed_response_wins_by_default(gated_client, make_summary):
    # Overlapping fetches are unordered; the later completion overwrites state.
    loader = ProductSummaryLoader(gated_client)

    loader.on_contact_resolved("003-A")
    loader.on_contact_resolved("003-B")
    await asyncio.sleep(0)

    gated_client.resolve(1, make_summary(productName="Newer"))
    await asyncio.sleep(0)
    assert loader.state.row.product_name == "Newer"

    gated_client.resolve(0, make_summary(productName="Older"))
    await loader.aclose()

    assert loader.state.row.product_name == "Older"


@pytest.mark.asyncio
async def test_stale_responses_can_be_discarded(gated_client, make_summary):
    loader = ProductSummaryLoader(gated_client, discard_stale_responses=True)

    loader.on_contact_resolved("003-A")
    loader.on_contact_resolved("003-B")
    await asyncio.sleep(0)

    gated_client.resolve(1, make_summary(productName="Newer"))
    gated_client.reject(0, RuntimeError("late failure"))
    await loader.aclose()

    assert loader.state.status is LoadStatus.READY
    assert loader.state.row.product_name == "Newer"


@pytest.mark.asyncio
async def test_custom_threshold_flows_into_row_label():
    client = MockProductInfoClient({"003-X": {"productName": "X", "atmFee": 150}})
    loader = ProductSummaryLoader(client, percentage_threshold=200)

    await loader.on_contact_resolved("003-X")

    assert loader.state.row.atm_fee_label == "150%"


@pytest.mark.asyncio
async def test_huge_atm_fee_still_produces_ready_row():
    client = MockProductInfoClient({"003-BIG": {"productName": "Big", "atmFee": "1e30"}})
    loader = ProductSummaryLoader(client)

    await loader.on_contact_resolved("003-BIG")

    assert loader.state.status is LoadStatus.READY
    assert loader.state.row.atm_fee_label.endswith(",00\u00a0€")


def test_only_empty_and_rowless_ready_states_have_no_rows():
    assert LoadState.empty(EmptyReason.NO_PRODUCT).has_no_rows is True
    assert LoadState.loading().has_no_rows is False
    assert LoadState.failed("boom").has_no_rows is False
