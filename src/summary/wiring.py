"""
Client selection and controller construction.

This is the ONE place that decides between mock and real HTTP clients.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from src.integrations.clients.mocks import MockCaseRecordsClient, MockProductInfoClient
from src.integrations.clients.real_http import RealCaseRecordsClient, RealProductInfoClient
from src.utils.config_loader import ProductSummaryConfig, load_product_summary_config

from .controller import ViewStateController
from .loader import ProductSummaryLoader

logger = logging.getLogger(__name__)


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip().lower() in ("1", "true", "yes")


def build_controller(
    config: Optional[ProductSummaryConfig] = None,
    *,
    use_mocks: Optional[bool] = None,
) -> ViewStateController:
    """Build a ViewStateController wired to mock or real integrations."""
    load_dotenv()
    config = config or load_product_summary_config()

    if use_mocks is None:
        use_mocks = _env_flag("USE_MOCK_INTEGRATIONS")
    if use_mocks is None:
        use_mocks = config.integrations.use_mocks

    if use_mocks:
        logger.info("Product summary panel using mock integrations")
        case_client = MockCaseRecordsClient()
        product_client = MockProductInfoClient()
    else:
        cases = config.integrations.case_records
        products = config.integrations.product_info
        logger.info("Product summary panel using HTTP integrations")
        case_client = RealCaseRecordsClient(
            base_url=cases.base_url(),
            api_key=cases.api_key(),
            timeout_seconds=cases.timeout_seconds,
        )
        product_client = RealProductInfoClient(
            base_url=products.base_url(),
            api_key=products.api_key(),
            timeout_seconds=products.timeout_seconds,
        )

    loader = ProductSummaryLoader(
        product_client,
        percentage_threshold=config.formatting.percentage_threshold,
        discard_stale_responses=config.loader.discard_stale_responses,
    )
    return ViewStateController(case_client, loader)
