"""
Product summary contract.

Shape returned by the product-information service for a single contact.
The backend sends camelCase keys; snake_case is accepted as well.

Note on ``atm_fee``:
- The backend does not say whether the fee is a percentage or an amount.
- The presentation layer infers the unit from the magnitude
  (see src/summary/fee_label.py).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductSummary(BaseModel):
    """Financial product attributes attached to a contact's account."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_name: str = Field(alias="productName")
    monthly_cost: Optional[Decimal] = Field(default=None, alias="monthlyCost")
    atm_fee: Optional[Decimal] = Field(default=None, alias="atmFee")
    card_replacement_cost: Optional[Decimal] = Field(default=None, alias="cardReplacementCost")
    country_code: Optional[str] = Field(default=None, alias="countryCode")
    is_default: bool = Field(default=False, alias="isDefault")
