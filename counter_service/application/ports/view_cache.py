"""Port interface for cached counter views."""

from abc import ABC, abstractmethod


class CounterViewCache(ABC):
    @abstractmethod
    def get(self, counter_id: int) -> int | None:
        ...

    @abstractmethod
    def set(self, counter_id: int, count: int) -> None:
        ...

    @abstractmethod
    def invalidate(self, counter_id: int) -> None:
        """Mark the rendered count for *counter_id* as stale."""
        ...
