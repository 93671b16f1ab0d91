"""Port interface for counter persistence."""

from abc import ABC, abstractmethod

from counter_service.domain.entities.counter import Counter


class CounterRepository(ABC):
    @abstractmethod
    async def get_by_id(self, counter_id: int, lock: bool = False) -> Counter | None:
        """Return the counter or None when it was never created.

        With *lock* the row is held until commit/rollback (SELECT ... FOR UPDATE).
        """
        ...

    @abstractmethod
    async def create(self, counter_id: int, count: int) -> Counter:
        ...

    @abstractmethod
    async def update(self, counter_id: int, count: int) -> Counter | None:
        """Replace the stored total. Returns None if the row vanished."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...
