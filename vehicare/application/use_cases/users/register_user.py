# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.application.inputs import RegisterInput
from vehicare.application.payloads import RegisterPayload, join_violations
from vehicare.application.services.user_directory import UserDirectory
from vehicare.application.validators import validate_register
from vehicare.shared.errors import UniqueViolationError
from vehicare.shared.logging import logger

EMAIL_TAKEN = "User with this email already exists"
REGISTRATION_FAILED = "Registration failed"


class RegisterUserUseCase:
    def __init__(self, *, directory: UserDirectory) -> None:
        self._directory = directory

    def execute(self, data: RegisterInput) -> RegisterPayload:
        violations = validate_register(data)
        if violations:
            return RegisterPayload(error=join_violations(violations), violations=violations)

        try:
            if self._directory.find_by_email(data.email) is not None:
                logger.info("auth.register: duplicate email")
                return RegisterPayload(error=EMAIL_TAKEN)
            user = self._directory.create(
                data.email, data.password, data.first_name.strip(), data.last_name.strip()
            )
        except UniqueViolationError:
            # lost a race with a concurrent registration
            logger.info("auth.register: duplicate email on write")
            return RegisterPayload(error=EMAIL_TAKEN)
        except Exception:
            logger.exception("auth.register: failed")
            return RegisterPayload(error=REGISTRATION_FAILED)

        logger.info(f"auth.register: ok user_id={user.id}")
        return RegisterPayload(user=user)
