# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from typing import Any

import jwt

from vehicare.application.services.clock import Clock, utc_now
from vehicare.domain.users.entities import User
from vehicare.shared.logging import logger

JWT_ALGORITHM = "HS256"
USER_ID_CLAIM = "userId"


class JwtTokenService:
    """Issues and verifies HS256 identity tokens.

    ``verify`` answers with the claim set or ``None``; which check failed
    (signature, issuer, audience, expiry) is only logged at debug level.
    """

    def __init__(
        self,
        *,
        secret: str,
        issuer: str,
        audience: str,
        lifetime_hours: int = 24,
        clock: Clock = utc_now,
    ) -> None:
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._lifetime = timedelta(hours=lifetime_hours)
        self._clock = clock

    def issue(self, user: User) -> str:
        issued_at = self._clock()
        claims: dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "given_name": user.first_name,
            "family_name": user.last_name,
            USER_ID_CLAIM: str(user.id),
            "iss": self._issuer,
            "aud": self._audience,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(claims, self._secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> dict[str, Any] | None:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iss", "aud"]},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"auth.token: rejected reason={type(exc).__name__}")
            return None


def user_id_from(claims: dict[str, Any] | None) -> int | None:
    if not claims:
        return None
    try:
        return int(claims.get(USER_ID_CLAIM, ""))
    except (TypeError, ValueError):
        return None


__all__ = ["JWT_ALGORITHM", "JwtTokenService", "USER_ID_CLAIM", "user_id_from"]
