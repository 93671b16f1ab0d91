"""Increment outcomes — one tagged variant per response shape."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from counter_service.domain.value_objects.enums import FailureKind

STORE_FAILURE_MESSAGE = "Failed to update counter. Please try again."
INVALID_RESULT_MESSAGE = (
    "Counter update completed but result is invalid. Please refresh and try again."
)
UNEXPECTED_FAILURE_MESSAGE = "An unexpected error occurred. Please try again."


@dataclass(frozen=True)
class Succeeded:
    count: int


@dataclass(frozen=True)
class ValidationFailed:
    """Input rejected before any store access.

    ``errors`` is a field-violation tree:
    ``{"errors": [...], "properties": {"increment": {"errors": [...]}}}``.
    """

    errors: dict[str, Any]
    issues: list[dict[str, Any]] = field(default_factory=list)

    @property
    def kind(self) -> FailureKind:
        return FailureKind.VALIDATION


@dataclass(frozen=True)
class OperationFailed:
    kind: FailureKind
    error: str
    details: str | None = None


IncrementOutcome = Union[Succeeded, ValidationFailed, OperationFailed]
