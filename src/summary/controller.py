"""
View state controller for the product summary panel.

Bridges the case record to the product loader:

    set_case_id(case_id)
        -> CaseRecordClient.get_case_record(case_id)
        -> on_case_record_resolved(data=record)  -> loader.on_contact_resolved(contact_id)
        -> on_case_record_resolved(error=exc)    -> ERROR "Error loading Case."

Changing the case id is the only trigger; consumers observe the result
through ``subscribe`` or by reading the properties below.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Set, Tuple, Union

from src.error_handler import CaseLoadError, ErrorHandler
from src.integrations.contracts.case_records import CaseRecord
from src.integrations.contracts.interfaces import CaseRecordClient
from src.integrations.response_wrappers import IntegrationResponseError, normalize_case_record_response

from .loader import ProductSummaryLoader
from .state import COLUMNS, ColumnSpec, EmptyReason, LoadState, StateListener, ViewRow

logger = logging.getLogger(__name__)


class ViewStateController:
    columns: Tuple[ColumnSpec, ...] = COLUMNS

    def __init__(
        self,
        case_records: CaseRecordClient,
        loader: ProductSummaryLoader,
        *,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self.case_records = case_records
        self.loader = loader
        self.store = loader.store
        self.error_handler = error_handler or loader.error_handler
        self._case_id: Optional[str] = None
        self._contact_id: Optional[str] = None
        self._tasks: Set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # Render-facing surface
    # ------------------------------------------------------------------

    @property
    def case_id(self) -> Optional[str]:
        return self._case_id

    @property
    def contact_id(self) -> Optional[str]:
        return self._contact_id

    @property
    def state(self) -> LoadState:
        return self.store.state

    @property
    def rows(self) -> Tuple[ViewRow, ...]:
        return self.state.rows

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    @property
    def has_no_rows(self) -> bool:
        return self.state.has_no_rows

    def snapshot(self) -> Dict[str, Any]:
        """Everything a table renderer needs, as plain data."""
        return {
            "columns": [column.to_dict() for column in self.columns],
            "rows": [row.to_dict() for row in self.rows],
            "isLoading": self.is_loading,
            "error": self.error,
            "hasNoRows": self.has_no_rows,
        }

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        return self.store.subscribe(listener)

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def set_case_id(self, case_id: Optional[str]) -> Optional[asyncio.Task]:
        """Point the panel at a case and start the fetch chain."""
        self._case_id = case_id or None
        self.loader.invalidate()

        if self._case_id is None:
            self._contact_id = None
            self.store.set(LoadState.empty(EmptyReason.NO_CASE))
            return None

        self.store.set(LoadState.loading())
        task = asyncio.get_running_loop().create_task(
            self._fetch_case(self._case_id),
            name=f"case-record:{self._case_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def reload(self) -> Optional[asyncio.Task]:
        return self.set_case_id(self._case_id)

    def on_case_record_resolved(
        self,
        data: Union[CaseRecord, Mapping[str, Any], None] = None,
        error: Optional[BaseException] = None,
    ) -> Optional[asyncio.Task]:
        if error is not None:
            self._contact_id = None
            message = self.error_handler.handle_exception(
                error, {"case_id": self._case_id}, error_type=CaseLoadError
            )
            self.store.set(LoadState.failed(message))
            return None
        if data is None:
            return None

        try:
            self._contact_id = _contact_reference(data, self._case_id)
        except IntegrationResponseError as exc:
            return self.on_case_record_resolved(error=exc)
        return self.loader.on_contact_resolved(self._contact_id)

    async def wait_idle(self) -> None:
        """Wait until no case or product fetch is in flight."""
        while self._tasks or self.loader.pending():
            await asyncio.gather(*self._tasks, *self.loader.pending(), return_exceptions=True)

    async def _fetch_case(self, case_id: str) -> None:
        try:
            record = await self.case_records.get_case_record(case_id)
        except Exception as exc:
            if case_id != self._case_id:
                logger.debug("Ignoring case fetch failure for replaced case %s", case_id)
                return
            self.on_case_record_resolved(error=exc)
            return

        if case_id != self._case_id:
            logger.debug("Ignoring case record for replaced case %s", case_id)
            return
        self.on_case_record_resolved(data=record)


def _contact_reference(data: Union[CaseRecord, Mapping[str, Any]], case_id: Optional[str]) -> Optional[str]:
    if not isinstance(data, CaseRecord):
        data = normalize_case_record_response(dict(data), fallback_case_id=case_id)
    return data.contact_id or None
