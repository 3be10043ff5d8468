# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.domain.users.entities import User
from vehicare.domain.users.repositories import PasswordHasher, UserRepository
from vehicare.shared.logging import logger

from .clock import Clock, utc_now


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserDirectory:
    """Sole writer of user records.

    Emails are stored lower-cased and looked up case-insensitively.
    Passwords only ever reach the store as hashes.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        clock: Clock = utc_now,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._clock = clock

    def find_by_email(self, email: str) -> User | None:
        return self._users.find_by_email(normalize_email(email))

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.find_by_id(user_id)

    def create(self, email: str, raw_password: str, first_name: str, last_name: str) -> User:
        user = User(
            id=0,
            email=normalize_email(email),
            password_hash=self._password_hasher.hash(raw_password),
            first_name=first_name,
            last_name=last_name,
            created_at=self._clock(),
            last_login_at=None,
            is_active=True,
        )
        persisted = self._users.add(user)
        logger.info(f"users.create: ok user_id={persisted.id}")
        return persisted

    def verify_password(self, raw_password: str, stored_hash: str) -> bool:
        return self._password_hasher.verify(raw_password, stored_hash)

    def touch_last_login(self, user_id: int) -> User | None:
        touched = self._users.set_last_login(user_id, self._clock())
        if touched is None:
            logger.debug(f"users.touch_last_login: unknown user_id={user_id}, skipped")
        return touched
