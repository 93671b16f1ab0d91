"""Counter entity — a single accumulated total addressed by id."""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_COUNTER_ID = 0


@dataclass
class Counter:
    id: int
    count: int | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def incremented_by(self, increment: int) -> int:
        """Total after adding *increment* to the stored count."""
        return (self.count or 0) + increment
