# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Caller identity from the ``Authorization: Bearer`` header.

A missing, malformed or rejected token yields an anonymous caller
(``None``) rather than an HTTP 401.
"""

from __future__ import annotations

from flask import g, request

from vehicare.domain.users.repositories import TokenService
from vehicare.infrastructure.auth.jwt_tokens import user_id_from


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip()
    return ""


class IdentityResolver:
    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def caller_id(self) -> int | None:
        if "user_id" in g:
            return g.user_id
        token = bearer_token()
        user_id = user_id_from(self._tokens.verify(token)) if token else None
        g.user_id = user_id
        return user_id
