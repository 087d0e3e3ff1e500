# -*- coding: utf-8 -*-
"""Qt slot safety helpers.

An uncaught exception inside a Qt slot can terminate the app. This decorator
logs the traceback and keeps the event loop alive.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def safe_slot(fn: Callable[..., T]) -> Callable[..., T | None]:
    """Decorator for timer/signal slots."""

    @functools.wraps(fn)
    def wrapper(self: Any, *args: Any) -> T | None:
        try:
            return fn(self, *args)
        except Exception:
            logger.exception("unhandled error in %s.%s", type(self).__name__, fn.__name__)
            return None

    return wrapper
