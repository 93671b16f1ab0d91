"""Increment form validation (pydantic)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from counter_service.domain.value_objects.outcome import ValidationFailed

MIN_INCREMENT = 1
MAX_INCREMENT = 3


class IncrementForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    increment: int = Field(ge=MIN_INCREMENT, le=MAX_INCREMENT)


def treeify_errors(exc: ValidationError) -> dict[str, Any]:
    """Nest pydantic issues by field path.

    Form-level issues land in the root ``errors`` list, field issues under
    ``properties.<field>.errors``.
    """
    tree: dict[str, Any] = {"errors": []}
    for issue in exc.errors():
        node = tree
        for part in issue["loc"]:
            node = node.setdefault("properties", {}).setdefault(str(part), {"errors": []})
        node["errors"].append(issue["msg"])
    return tree


def validate_increment(form: Mapping[str, Any]) -> IncrementForm | ValidationFailed:
    """Validate a raw form submission. Malformed input is returned, never raised."""
    try:
        return IncrementForm.model_validate(dict(form))
    except ValidationError as e:
        issues = [
            {
                "field": ".".join(str(p) for p in issue["loc"]),
                "type": issue["type"],
                "message": issue["msg"],
            }
            for issue in e.errors()
        ]
        return ValidationFailed(errors=treeify_errors(e), issues=issues)
