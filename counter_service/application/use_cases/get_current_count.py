"""GetCurrentCountUseCase — read the count shown on the counter page."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from counter_service.application.diagnostics import emit
from counter_service.application.identity import resolve_counter_id
from counter_service.application.ports.counter_repo import CounterRepository
from counter_service.application.ports.request_context import RequestContext
from counter_service.application.ports.view_cache import CounterViewCache

logger = logging.getLogger(__name__)


@dataclass
class CurrentCount:
    counter_id: int
    count: int
    cached: bool = False


class GetCurrentCountUseCase:
    def __init__(
        self,
        counter_repo: CounterRepository,
        view_cache: CounterViewCache | None = None,
        log: logging.Logger | None = None,
    ):
        self._counters = counter_repo
        self._views = view_cache
        self._log = log or logger

    async def execute(self, context: RequestContext | None = None) -> CurrentCount:
        """Return the count for the request's counter; 0 if it was never incremented."""
        counter_id = await resolve_counter_id(context, self._log)

        if self._views is not None:
            cached = self._views.get(counter_id)
            if cached is not None:
                return CurrentCount(counter_id=counter_id, count=cached, cached=True)

        counter = await self._counters.get_by_id(counter_id)
        count = counter.count if counter is not None and counter.count is not None else 0
        emit(
            self._log, logging.INFO, "Counter %d fetched successfully", counter_id,
            counter_id=counter_id, count=count,
        )

        if self._views is not None:
            self._views.set(counter_id, count)
        return CurrentCount(counter_id=counter_id, count=count)
