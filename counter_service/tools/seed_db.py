"""Seed the counters table.

Usage:
    python -m counter_service.tools.seed_db
    python -m counter_service.tools.seed_db --id 42
    python -m counter_service.tools.seed_db --drop  # delete all counters first
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from counter_service.adapters.persistence.database import async_session_factory
from counter_service.adapters.persistence.models import CounterModel
from counter_service.domain.entities.counter import DEFAULT_COUNTER_ID

logger = logging.getLogger(__name__)


async def ensure_counter(session: AsyncSession, counter_id: int, drop: bool = False) -> int:
    """Make sure *counter_id* exists; existing rows keep their count.

    Returns the count stored after seeding.
    """
    if drop:
        await session.execute(delete(CounterModel))
        logger.info("Dropped existing counters")

    existing = (
        await session.execute(select(CounterModel).where(CounterModel.id == counter_id))
    ).scalar_one_or_none()
    if existing is not None:
        logger.info("Counter %d already present (count=%d)", counter_id, existing.count)
        return existing.count

    session.add(CounterModel(id=counter_id, count=0))
    await session.flush()
    logger.info("Created counter %d", counter_id)
    return 0


async def seed(counter_id: int = DEFAULT_COUNTER_ID, drop: bool = False) -> int:
    async with async_session_factory() as session:
        count = await ensure_counter(session, counter_id, drop=drop)
        await session.commit()
    return count


def main():
    parser = argparse.ArgumentParser(description="Seed the counter database")
    parser.add_argument(
        "--id", type=int, default=DEFAULT_COUNTER_ID,
        help="Counter id to create (default: 0)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Delete all counters before seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    logger.info("Start seeding...")
    asyncio.run(seed(args.id, drop=args.drop))
    logger.info("Seeding finished.")


if __name__ == "__main__":
    main()
