"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from counter_service.adapters.cache.view_cache import InMemoryCounterViewCache
from counter_service.adapters.persistence.database import get_session
from counter_service.adapters.persistence.repositories import SqlCounterRepository
from counter_service.application.ports.request_context import RequestContext
from counter_service.application.ports.view_cache import CounterViewCache
from counter_service.application.use_cases.get_current_count import GetCurrentCountUseCase
from counter_service.application.use_cases.increment_counter import IncrementCounterUseCase
from counter_service.config import settings
from counter_service.infrastructure.api.request_context import HeaderRequestContext

# Singleton adapters (process-wide state)
_view_cache = InMemoryCounterViewCache(ttl_seconds=settings.view_cache_ttl_seconds)


def get_view_cache() -> CounterViewCache:
    return _view_cache


def get_request_context(request: Request) -> RequestContext:
    return HeaderRequestContext(request.headers)


def get_increment_counter_uc(
    session: AsyncSession = Depends(get_session),
    view_cache: CounterViewCache = Depends(get_view_cache),
) -> IncrementCounterUseCase:
    return IncrementCounterUseCase(
        counter_repo=SqlCounterRepository(session),
        view_cache=view_cache,
        expose_details=settings.is_development,
    )


def get_current_count_uc(
    session: AsyncSession = Depends(get_session),
    view_cache: CounterViewCache = Depends(get_view_cache),
) -> GetCurrentCountUseCase:
    return GetCurrentCountUseCase(
        counter_repo=SqlCounterRepository(session),
        view_cache=view_cache,
    )
