"""Counter identity resolution from the request context."""

from __future__ import annotations

import logging

from counter_service.application.diagnostics import emit
from counter_service.application.ports.request_context import RequestContext
from counter_service.domain.entities.counter import DEFAULT_COUNTER_ID
from counter_service.domain.policies.identity import (
    E2E_ID_HEADER,
    is_blank,
    parse_counter_id,
)

logger = logging.getLogger(__name__)


async def resolve_counter_id(
    context: RequestContext | None, log: logging.Logger | None = None
) -> int:
    """Resolve which counter a request targets.

    `x-e2e-random-id` lets end-to-end tests run isolated counters in parallel.
    Production traffic omits it and always hits counter 0. Never raises.
    """
    log = log or logger
    if context is None:
        return DEFAULT_COUNTER_ID

    try:
        raw = await context.get_header(E2E_ID_HEADER)
    except Exception as e:
        emit(log, logging.ERROR, "Failed to read headers: %s", e, error=e)
        return DEFAULT_COUNTER_ID

    if is_blank(raw):
        return DEFAULT_COUNTER_ID

    counter_id = parse_counter_id(raw)
    if counter_id is None:
        emit(
            log, logging.WARNING, "Invalid %s header value: %r", E2E_ID_HEADER, raw,
            header_value=raw,
        )
        return DEFAULT_COUNTER_ID
    return counter_id
