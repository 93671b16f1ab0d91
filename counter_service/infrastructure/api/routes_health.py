"""Health check endpoint: is the counters table usable."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from counter_service.adapters.persistence.database import get_session
from counter_service.adapters.persistence.models import CounterModel
from counter_service.domain.entities.counter import DEFAULT_COUNTER_ID

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Report whether the counters table can be read and the default counter is seeded.

    A missing default counter is not an error (the first increment creates it),
    but it is surfaced so a fresh deployment can be told apart from a seeded one.
    """
    try:
        total = (
            await session.execute(select(func.count()).select_from(CounterModel))
        ).scalar_one()
        seeded = (
            await session.execute(
                select(CounterModel.id).where(CounterModel.id == DEFAULT_COUNTER_ID)
            )
        ).scalar_one_or_none() is not None
    except Exception as e:
        logger.warning("Counters table unavailable: %s", e)
        return {
            "status": "degraded",
            "counters": f"error: {type(e).__name__}",
            "service": "counter-service",
        }

    return {
        "status": "ok",
        "counters": "reachable",
        "counter_rows": total,
        "default_counter_seeded": seeded,
        "service": "counter-service",
    }
