# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.application.inputs import LoginInput
from vehicare.application.payloads import LoginPayload, join_violations
from vehicare.application.services.user_directory import UserDirectory
from vehicare.application.validators import validate_login
from vehicare.domain.users.repositories import TokenService
from vehicare.shared.logging import logger

INVALID_CREDENTIALS = "Invalid email or password"
ACCOUNT_DISABLED = "Account is disabled"
LOGIN_FAILED = "Login failed"


class LoginUserUseCase:
    def __init__(self, *, directory: UserDirectory, tokens: TokenService) -> None:
        self._directory = directory
        self._tokens = tokens

    def execute(self, data: LoginInput) -> LoginPayload:
        violations = validate_login(data)
        if violations:
            return LoginPayload(error=join_violations(violations), violations=violations)

        try:
            user = self._directory.find_by_email(data.email)
            if user is None:
                logger.info("auth.login: unknown email")
                return LoginPayload(error=INVALID_CREDENTIALS)
            if not user.is_active:
                logger.info(f"auth.login: disabled user_id={user.id}")
                return LoginPayload(error=ACCOUNT_DISABLED)
            if not self._directory.verify_password(data.password, user.password_hash):
                logger.info(f"auth.login: bad password user_id={user.id}")
                return LoginPayload(error=INVALID_CREDENTIALS)

            user = self._directory.touch_last_login(user.id) or user
            token = self._tokens.issue(user)
        except Exception:
            logger.exception("auth.login: failed")
            return LoginPayload(error=LOGIN_FAILED)

        logger.info(f"auth.login: ok user_id={user.id}")
        return LoginPayload(token=token, user=user)
