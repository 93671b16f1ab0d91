"""Port interface for per-request environment (headers)."""

from abc import ABC, abstractmethod


class RequestContext(ABC):
    @abstractmethod
    async def get_header(self, name: str) -> str | None:
        """Return the header value, or None if absent. May raise."""
        ...
