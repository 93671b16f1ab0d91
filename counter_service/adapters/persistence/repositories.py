"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from counter_service.adapters.persistence.models import CounterModel
from counter_service.application.ports.counter_repo import CounterRepository
from counter_service.domain.entities.counter import Counter


def _counter_to_domain(m: CounterModel) -> Counter:
    return Counter(
        id=m.id,
        count=m.count,
        created_at=m.created_at,
        updated_at=m.updated_at,
    )


class SqlCounterRepository(CounterRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_id(self, counter_id: int, lock: bool = False) -> Counter | None:
        stmt = select(CounterModel).where(CounterModel.id == counter_id)
        if lock:
            stmt = stmt.with_for_update()
        result = await self._s.execute(stmt)
        m = result.scalar_one_or_none()
        return _counter_to_domain(m) if m else None

    async def create(self, counter_id: int, count: int) -> Counter:
        m = CounterModel(id=counter_id, count=count)
        self._s.add(m)
        await self._s.flush()
        await self._s.refresh(m)
        return _counter_to_domain(m)

    async def update(self, counter_id: int, count: int) -> Counter | None:
        m = await self._s.get(CounterModel, counter_id)
        if m is None:
            return None
        m.count = count
        await self._s.flush()
        await self._s.refresh(m)
        return _counter_to_domain(m)

    async def commit(self) -> None:
        await self._s.commit()

    async def rollback(self) -> None:
        await self._s.rollback()
