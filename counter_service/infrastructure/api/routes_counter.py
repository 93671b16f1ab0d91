"""Counter endpoints — form-driven increment + current count."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from counter_service.application.ports.request_context import RequestContext
from counter_service.application.use_cases.get_current_count import GetCurrentCountUseCase
from counter_service.application.use_cases.increment_counter import IncrementCounterUseCase
from counter_service.domain.value_objects.enums import FailureKind
from counter_service.domain.value_objects.outcome import (
    IncrementOutcome,
    OperationFailed,
    Succeeded,
    ValidationFailed,
)
from counter_service.infrastructure.api.dependencies import (
    get_current_count_uc,
    get_increment_counter_uc,
    get_request_context,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/counter", tags=["counter"])

_FAILURE_STATUS: dict[FailureKind, int] = {
    FailureKind.STORE_OPERATION: 503,
    FailureKind.STORE_CONSISTENCY: 500,
    FailureKind.UNEXPECTED: 500,
}


@router.get("")
async def current_count(
    uc: GetCurrentCountUseCase = Depends(get_current_count_uc),
    context: RequestContext = Depends(get_request_context),
):
    """Current count for the request's counter (0 if never incremented)."""
    result = await uc.execute(context)
    return {"id": result.counter_id, "count": result.count}


@router.post("/increment")
async def increment_counter(
    request: Request,
    uc: IncrementCounterUseCase = Depends(get_increment_counter_uc),
    context: RequestContext = Depends(get_request_context),
):
    """Add the submitted ``increment`` (1–3) to the counter."""
    try:
        form = dict(await request.form())
    except Exception:
        # An unreadable body is treated as an empty form and fails validation.
        logger.warning("Could not parse increment form body", exc_info=True)
        form = {}

    outcome = await uc.execute(form, context)
    return JSONResponse(status_code=_status_for(outcome), content=_outcome_to_dict(outcome))


def _status_for(outcome: IncrementOutcome) -> int:
    if isinstance(outcome, Succeeded):
        return 200
    if isinstance(outcome, ValidationFailed):
        return 422
    return _FAILURE_STATUS.get(outcome.kind, 500)


def _outcome_to_dict(outcome: IncrementOutcome) -> dict:
    if isinstance(outcome, Succeeded):
        return {"count": outcome.count}
    if isinstance(outcome, ValidationFailed):
        return {"errors": outcome.errors}
    if isinstance(outcome, OperationFailed):
        data = {"error": outcome.error}
        if outcome.details is not None:
            data["details"] = outcome.details
        return data
    raise TypeError(f"Unknown increment outcome: {outcome!r}")
