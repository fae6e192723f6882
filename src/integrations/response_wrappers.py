from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import ValidationError

from src.integrations.contracts.case_records import CaseRecord
from src.integrations.contracts.product_summary import ProductSummary
from src.utils.numbers import to_finite_decimal

logger = logging.getLogger(__name__)

_MISSING = object()


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


def normalize_case_record_response(raw: Any, *, fallback_case_id: Optional[str] = None) -> CaseRecord:
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Case record payload must be an object; got {type(raw).__name__}.")

    case_id = _first_non_empty(raw, "caseId", "case_id", "Id", "id", default=fallback_case_id)
    contact_id = _first_non_empty(raw, "contactId", "contact_id", "ContactId", default=None)
    if contact_id is None:
        contact_id = _record_field_value(raw, "ContactId")

    return _build_model(
        CaseRecord,
        {
            "case_id": str(case_id) if case_id is not None else None,
            "contact_id": str(contact_id) if contact_id is not None else None,
        },
        raw,
    )


def normalize_product_summary_response(raw: Any) -> Optional[ProductSummary]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Product summary payload must be an object; got {type(raw).__name__}.")
    if not raw:
        return None

    product_name = _first_non_empty(raw, "productName", "product_name", "name")

    return _build_model(
        ProductSummary,
        {
            "product_name": str(product_name),
            "monthly_cost": _coerce_amount(_first_non_empty(raw, "monthlyCost", "monthly_cost", default=None), "monthly cost"),
            "atm_fee": _coerce_atm_fee(_first_non_empty(raw, "atmFee", "atm_fee", default=None)),
            "card_replacement_cost": _coerce_amount(
                _first_non_empty(raw, "cardReplacementCost", "card_replacement_cost", default=None),
                "card replacement cost",
            ),
            "country_code": _first_non_empty(raw, "countryCode", "country_code", default=None),
            "is_default": _coerce_bool(_first_non_empty(raw, "isDefault", "is_default", default=False)),
        },
        raw,
    )


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = _MISSING) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not _MISSING:
        return default
    raise IntegrationResponseError(f"Missing required field. Checked keys: {', '.join(keys)}", payload=data)


def _record_field_value(raw: Dict[str, Any], field_name: str) -> Any:
    # Record-API envelope: {"fields": {"ContactId": {"value": "003..."}}}
    fields = raw.get("fields")
    if not isinstance(fields, dict):
        return None
    entry = fields.get(field_name)
    if isinstance(entry, dict):
        return entry.get("value")
    return entry


def _coerce_amount(value: Any, label: str) -> Optional[Decimal]:
    if value is None:
        return None
    amount = to_finite_decimal(value)
    if amount is None:
        raise IntegrationResponseError(f"Invalid {label}: {value!r}")
    return amount


def _coerce_atm_fee(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    fee = to_finite_decimal(value)
    if fee is None:
        logger.warning("Ignoring non-numeric atmFee from product service: %r", value)
    return fee


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
