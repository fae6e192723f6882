"""
Product summary loader.

Fetches the product summary for a contact and publishes the outcome to the
shared StateStore:

- no contact              -> EMPTY (NO_CONTACT), no remote call
- fetch pending           -> LOADING
- service returned None   -> EMPTY (NO_PRODUCT)
- service returned data   -> READY with one ViewRow
- service raised          -> ERROR "Could not load product information."

Every call with a contact issues a new fetch; nothing is cached or retried.
Overlapping fetches are not ordered: the last one to complete wins, unless
``discard_stale_responses`` is set, in which case only the newest request
may publish.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from typing import Optional, Set, Tuple, Union

from src.error_handler import ErrorHandler, ProductLoadError
from src.integrations.contracts.interfaces import ProductSummaryClient

from .fee_label import PERCENTAGE_THRESHOLD
from .state import EmptyReason, LoadState, StateStore, ViewRow

logger = logging.getLogger(__name__)


class ProductSummaryLoader:
    def __init__(
        self,
        client: ProductSummaryClient,
        store: Optional[StateStore] = None,
        *,
        percentage_threshold: Union[Decimal, float, int] = PERCENTAGE_THRESHOLD,
        discard_stale_responses: bool = False,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self.client = client
        self.store = store or StateStore()
        self.percentage_threshold = percentage_threshold
        self.discard_stale_responses = discard_stale_responses
        self.error_handler = error_handler or ErrorHandler()
        self._sequence = 0
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> LoadState:
        return self.store.state

    def on_contact_resolved(self, contact_id: Optional[str]) -> Optional[asyncio.Task]:
        """Start loading the product for ``contact_id``; returns the fetch task, if any."""
        self._sequence += 1
        if not contact_id:
            logger.info("Case has no contact; product summary is empty")
            self.store.set(LoadState.empty(EmptyReason.NO_CONTACT))
            return None

        self.store.set(LoadState.loading())
        task = asyncio.get_running_loop().create_task(
            self._load(contact_id, self._sequence),
            name=f"product-summary:{contact_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def invalidate(self) -> None:
        """Mark every in-flight fetch as superseded."""
        self._sequence += 1

    def pending(self) -> Tuple[asyncio.Task, ...]:
        return tuple(self._tasks)

    async def aclose(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _load(self, contact_id: str, token: int) -> None:
        try:
            summary = await self.client.fetch_product_summary(contact_id)
            if summary is None:
                state = LoadState.empty(EmptyReason.NO_PRODUCT)
            else:
                state = LoadState.ready(
                    ViewRow.from_summary(summary, percentage_threshold=self.percentage_threshold)
                )
        except Exception as exc:
            if self._is_stale(token):
                logger.debug("Dropping failed product summary for superseded contact %s", contact_id)
                return
            message = self.error_handler.handle_exception(
                exc, {"contact_id": contact_id}, error_type=ProductLoadError
            )
            self.store.set(LoadState.failed(message))
            return

        if self._is_stale(token):
            logger.debug("Dropping product summary for superseded contact %s", contact_id)
            return
        self.store.set(state)

    def _is_stale(self, token: int) -> bool:
        return self.discard_stale_responses and token != self._sequence
