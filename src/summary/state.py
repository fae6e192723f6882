"""
View state for the product summary panel.

Holds the render-ready projection (ViewRow), the single LoadState slot and
the fixed column metadata consumed by the rendering layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from src.integrations.contracts.product_summary import ProductSummary

from .fee_label import PERCENTAGE_THRESHOLD, format_atm_fee

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    LOADING = "LOADING"
    READY = "READY"
    EMPTY = "EMPTY"
    ERROR = "ERROR"


class EmptyReason(str, Enum):
    NO_CASE = "NO_CASE"
    NO_CONTACT = "NO_CONTACT"
    NO_PRODUCT = "NO_PRODUCT"


@dataclass(frozen=True)
class ViewRow:
    """One product summary, ready for display."""

    product_name: str
    monthly_cost: Optional[Decimal]
    atm_fee: Optional[Decimal]
    atm_fee_label: str
    card_replacement_cost: Optional[Decimal]
    country_code: Optional[str]
    is_default: bool

    @classmethod
    def from_summary(
        cls,
        summary: ProductSummary,
        *,
        percentage_threshold: Union[Decimal, float, int] = PERCENTAGE_THRESHOLD,
    ) -> "ViewRow":
        if summary is None:
            raise ValueError("A ViewRow needs a product summary.")
        return cls(
            product_name=summary.product_name,
            monthly_cost=summary.monthly_cost,
            atm_fee=summary.atm_fee,
            atm_fee_label=format_atm_fee(summary.atm_fee, percentage_threshold=percentage_threshold),
            card_replacement_cost=summary.card_replacement_cost,
            country_code=summary.country_code,
            is_default=summary.is_default,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Keys match the ``field_name`` of the display columns."""
        return {
            "productName": self.product_name,
            "monthlyCost": self.monthly_cost,
            "atmFee": self.atm_fee,
            "atmFeeLabel": self.atm_fee_label,
            "cardReplacementCost": self.card_replacement_cost,
            "countryCode": self.country_code,
            "isDefault": self.is_default,
        }


@dataclass(frozen=True)
class LoadState:
    """Exactly one of loading / ready / empty / error."""

    status: LoadStatus
    rows: Tuple[ViewRow, ...] = ()
    error: Optional[str] = None
    empty_reason: Optional[EmptyReason] = None

    def __post_init__(self) -> None:
        if self.status is LoadStatus.READY:
            if len(self.rows) != 1:
                raise ValueError("READY state carries exactly one row.")
        elif self.rows:
            raise ValueError(f"{self.status.value} state cannot carry rows.")
        if (self.error is not None) != (self.status is LoadStatus.ERROR):
            raise ValueError("Only the ERROR state carries a message.")

    @classmethod
    def loading(cls) -> "LoadState":
        return cls(LoadStatus.LOADING)

    @classmethod
    def ready(cls, row: ViewRow) -> "LoadState":
        return cls(LoadStatus.READY, rows=(row,))

    @classmethod
    def empty(cls, reason: EmptyReason) -> "LoadState":
        return cls(LoadStatus.EMPTY, empty_reason=reason)

    @classmethod
    def failed(cls, message: str) -> "LoadState":
        return cls(LoadStatus.ERROR, error=message)

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def row(self) -> Optional[ViewRow]:
        return self.rows[0] if self.rows else None

    @property
    def has_no_rows(self) -> bool:
        return self.status is LoadStatus.EMPTY or (self.status is LoadStatus.READY and not self.rows)


@dataclass(frozen=True)
class ColumnSpec:
    label: str
    field_name: str
    type: str
    type_attributes: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        column: Dict[str, Any] = {"label": self.label, "fieldName": self.field_name, "type": self.type}
        if self.type_attributes:
            column["typeAttributes"] = dict(self.type_attributes)
        return column


_EUR_ATTRIBUTES = {"currencyCode": "EUR", "minimumFractionDigits": 2}

COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("Product", "productName", "text"),
    ColumnSpec("Monthly cost", "monthlyCost", "currency", _EUR_ATTRIBUTES),
    ColumnSpec("ATM fee", "atmFeeLabel", "text"),
    ColumnSpec("Card replacement", "cardReplacementCost", "currency", _EUR_ATTRIBUTES),
)


StateListener = Callable[[LoadState], None]


class StateStore:
    """Single LoadState slot with explicit subscriptions."""

    def __init__(self, initial: Optional[LoadState] = None) -> None:
        self._state = initial or LoadState.loading()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> LoadState:
        return self._state

    def set(self, state: LoadState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Product summary listener %r failed", listener)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
