from decimal import Decimal

import pytest

from src.integrations.response_wrappers import (
    IntegrationResponseError,
    normalize_case_record_response,
    normalize_product_summary_response,
)


def test_product_summary_accepts_camel_and_snake_case():
    camel = normalize_product_summary_response({
        "productName": "Smart",
        "monthlyCost": "4.90",
        "atmFee": 2,
        "cardReplacementCost": "10",
        "countryCode": "DE",
        "isDefault": "true",
    })
    snake = normalize_product_summary_response({
        "product_name": "Smart",
        "monthly_cost": 4.90,
        "atm_fee": "2",
        "card_replacement_cost": 10,
        "country_code": "DE",
        "is_default": True,
    })

    assert camel == snake
    assert camel.monthly_cost == Decimal("4.90")
    assert camel.is_default is True


def test_missing_product_name_is_rejected():
    with pytest.raises(IntegrationResponseError) as exc_info:
        normalize_product_summary_response({"monthlyCost": 1})

    assert exc_info.value.payload == {"monthlyCost": 1}


def test_non_numeric_atm_fee_becomes_none():
    summary = normalize_product_summary_response({"productName": "Smart", "atmFee": "n/a"})

    assert summary.atm_fee is None
    assert summary.monthly_cost is None


def test_non_numeric_cost_is_rejected():
    with pytest.raises(IntegrationResponseError):
        normalize_product_summary_response({"productName": "Smart", "cardReplacementCost": "ten"})


@pytest.mark.parametrize("raw", [None, {}])
def test_absent_product_payload_is_none(raw):
    assert normalize_product_summary_response(raw) is None


def test_non_object_product_payload_is_rejected():
    with pytest.raises(IntegrationResponseError):
        normalize_product_summary_response(["Smart"])


@pytest.mark.parametrize(
    "raw, contact_id",
    [
        ({"contactId": "003-A"}, "003-A"),
        ({"contact_id": "003-B"}, "003-B"),
        ({"ContactId": "003-C"}, "003-C"),
        ({"fields": {"ContactId": {"value": "003-D"}}}, "003-D"),
        ({"fields": {"ContactId": {"value": None}}}, None),
        ({"contactId": ""}, None),
        ({}, None),
    ],
)
def test_case_record_contact_reference(raw, contact_id):
    record = normalize_case_record_response(raw, fallback_case_id="500-1")

    assert record.contact_id == contact_id
    assert record.case_id == "500-1"
