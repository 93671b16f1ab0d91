"""IncrementCounterUseCase — validate → resolve identity → read-modify-write."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from counter_service.application.diagnostics import emit
from counter_service.application.identity import resolve_counter_id
from counter_service.application.ports.counter_repo import CounterRepository
from counter_service.application.ports.request_context import RequestContext
from counter_service.application.ports.view_cache import CounterViewCache
from counter_service.application.validation import validate_increment
from counter_service.domain.entities.counter import Counter
from counter_service.domain.value_objects.enums import FailureKind
from counter_service.domain.value_objects.outcome import (
    INVALID_RESULT_MESSAGE,
    STORE_FAILURE_MESSAGE,
    UNEXPECTED_FAILURE_MESSAGE,
    IncrementOutcome,
    OperationFailed,
    Succeeded,
    ValidationFailed,
)

logger = logging.getLogger(__name__)


class IncrementCounterUseCase:
    """Adds a validated amount (1–3) to one counter.

    Every failure is turned into an outcome variant; nothing is raised to the
    caller and nothing is retried.
    """

    def __init__(
        self,
        counter_repo: CounterRepository,
        view_cache: CounterViewCache | None = None,
        expose_details: bool = False,
        log: logging.Logger | None = None,
    ):
        self._counters = counter_repo
        self._views = view_cache
        self._expose_details = expose_details
        self._log = log or logger

    async def execute(
        self, form: Mapping[str, Any], context: RequestContext | None = None
    ) -> IncrementOutcome:
        """Run one increment.

        Pipeline:
        1. Validate the form (``increment`` in [1, 3])
        2. Resolve the counter id from the request context
        3. Fetch, create or update, commit
        4. Check the written record, log, invalidate the cached view
        """
        try:
            parsed = validate_increment(form)
            if isinstance(parsed, ValidationFailed):
                emit(
                    self._log, logging.WARNING, "Counter validation failed: %s",
                    parsed.issues, errors=parsed.issues,
                )
                return parsed

            counter_id = await resolve_counter_id(context, self._log)
            return await self._apply(counter_id, parsed.increment)
        except Exception as e:
            emit(self._log, logging.ERROR, "Unexpected error in increment_counter: %s", e, error=e)
            return OperationFailed(
                kind=FailureKind.UNEXPECTED,
                error=UNEXPECTED_FAILURE_MESSAGE,
                details=self._details(e),
            )

    async def _apply(self, counter_id: int, increment: int) -> IncrementOutcome:
        try:
            counter = await self._write(counter_id, increment)
        except Exception as e:
            emit(
                self._log, logging.ERROR,
                "Database operation failed for counter %d (+%d): %s", counter_id, increment, e,
                error=e, counter_id=counter_id, increment=increment,
            )
            await self._rollback()
            return OperationFailed(
                kind=FailureKind.STORE_OPERATION,
                error=STORE_FAILURE_MESSAGE,
                details=self._details(e),
            )

        if counter is None or counter.count is None:
            emit(
                self._log, logging.ERROR, "Database returned invalid result: %r", counter,
                result=counter,
            )
            return OperationFailed(kind=FailureKind.STORE_CONSISTENCY, error=INVALID_RESULT_MESSAGE)

        emit(
            self._log, logging.INFO, "Counter %d has been incremented by %d to %d",
            counter_id, increment, counter.count,
            counter_id=counter_id, increment=increment, new_count=counter.count,
        )

        if self._views is not None:
            self._views.invalidate(counter_id)

        return Succeeded(count=counter.count)

    async def _write(self, counter_id: int, increment: int) -> Counter | None:
        # Row lock serializes concurrent increments of an existing counter.
        existing = await self._counters.get_by_id(counter_id, lock=True)
        if existing is not None:
            counter = await self._counters.update(counter_id, existing.incremented_by(increment))
        else:
            counter = await self._counters.create(counter_id, increment)
        await self._counters.commit()
        return counter

    async def _rollback(self) -> None:
        try:
            await self._counters.rollback()
        except Exception as e:
            emit(self._log, logging.ERROR, "Rollback failed: %s", e, error=e)

    def _details(self, error: Exception) -> str | None:
        if not self._expose_details:
            return None
        return f"{type(error).__name__}: {error}"
