# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time

from flask import Flask, g, request

from vehicare.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

_MASKED_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
_MASKED_ARGS = ("password", "token", "secret")


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _masked_headers() -> dict[str, str]:
    return {
        name: _fingerprint(value) if name.lower() in _MASKED_HEADERS else value
        for name, value in request.headers.items()
    }


def _masked_args() -> dict[str, str]:
    return {
        name: "<redacted>" if any(part in name.lower() for part in _MASKED_ARGS) else value
        for name, value in request.args.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    """Tag every request with a correlation id and log its start and end.

    The id comes from ``X-Request-ID`` when the client sends one and is
    echoed back on the response. ``debug_mode`` adds masked headers and
    query arguments to the start line.
    """

    @app.before_request
    def _start() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8)
        g.request_started = time.perf_counter()
        set_correlation_id(g.request_id)
        if debug_mode:
            logger.debug(
                f"http: -> {request.method} {request.path} ip={client_ip()} "
                f"args={_masked_args()} headers={_masked_headers()} "
                f"bytes={request.content_length or 0}"
            )
        else:
            logger.info(f"http: -> {request.method} {request.path} ip={client_ip()}")

    @app.after_request
    def _finish(response):
        started = getattr(g, "request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        response.headers.setdefault(REQUEST_ID_HEADER, getattr(g, "request_id", "-"))
        logger.info(
            f"http: <- {request.method} {request.path} status={response.status_code} "
            f"took={elapsed_ms:.1f}ms caller={getattr(g, 'user_id', None)}"
        )
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"http: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "client_ip", "configure_request_logging"]
