# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque
from collections.abc import Callable
from functools import wraps

from flask import jsonify, request

from vehicare.shared.config import SecurityConfig
from vehicare.shared.logging import logger

from .request_logger import client_ip


class InMemoryRateLimiter:
    def __init__(self, limit: int, window_seconds: float) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._buckets: dict[str, deque[float]] = defaultdict(deque)
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        now = time.monotonic()
        with self._lock:
            bucket = self._buckets[key]
            # Drop old
            while bucket and (now - bucket[0]) > self._window:
                bucket.popleft()
            if len(bucket) >= self._limit:
                return False
            bucket.append(now)
            return True


def rate_limit(config: SecurityConfig, *, limit: int | None = None, window_seconds: float | None = None):
    """Wrap a view so each client IP gets at most ``limit`` calls per window."""

    limiter = InMemoryRateLimiter(
        limit or config.rate_limit_requests,
        window_seconds or config.rate_limit_window,
    )

    def decorator(f: Callable):
        if not config.enable_rate_limit:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = f"{request.path}:{client_ip()}"
            if not limiter.allow(key):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                return jsonify({"error": "rate_limited"}), 429
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
