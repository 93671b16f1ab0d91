"""Tolerant log emission for use cases."""

from __future__ import annotations

import logging
import sys
from typing import Any


def emit(log: logging.Logger, level: int, msg: str, *args: Any, **context: Any) -> None:
    """Log *msg* with *context* attached as record attributes.

    A failing logger never propagates: the record is written to stderr instead.
    """
    try:
        log.log(level, msg, *args, extra=context or None)
    except Exception as log_error:
        try:
            text = msg % args if args else msg
        except (TypeError, ValueError):
            text = msg
        print(
            f"Failed to log {logging.getLevelName(level)} record {text!r} {context}: {log_error!r}",
            file=sys.stderr,
        )
