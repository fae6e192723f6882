"""
Product summary panel.

This package wires together:
- summary.fee_label (ATM fee label rule)
- summary.loader (product fetch -> LoadState)
- summary.controller (case id -> contact id -> loader, render-facing state)
- summary.wiring (mock vs real integration clients)
"""

from .controller import ViewStateController
from .fee_label import format_atm_fee
from .loader import ProductSummaryLoader
from .state import COLUMNS, ColumnSpec, EmptyReason, LoadState, LoadStatus, StateStore, ViewRow
from .wiring import build_controller

__all__ = [
    "COLUMNS",
    "ColumnSpec",
    "EmptyReason",
    "LoadState",
    "LoadStatus",
    "ProductSummaryLoader",
    "StateStore",
    "ViewRow",
    "ViewStateController",
    "build_controller",
    "format_atm_fee",
]
