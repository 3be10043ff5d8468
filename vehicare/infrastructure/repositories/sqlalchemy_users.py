# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vehicare.domain.users.entities import User
from vehicare.domain.users.repositories import UserRepository
from vehicare.infrastructure.db.models import UserRow
from vehicare.infrastructure.unit_of_work import unit_of_work_scope
from vehicare.shared.errors import UniqueViolationError

from .mapping import to_user


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> User | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(UserRow)
                .filter(func.lower(UserRow.email) == email.lower())
                .first()
            )
            return to_user(row) if row else None

    def find_by_id(self, user_id: int) -> User | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(UserRow, user_id)
            return to_user(row) if row else None

    def add(self, user: User) -> User:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = UserRow(
                    email=user.email,
                    password_hash=user.password_hash,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    created_at=user.created_at,
                    last_login_at=user.last_login_at,
                    is_active=user.is_active,
                )
                session.add(row)
                session.flush()
                return to_user(row)
        except IntegrityError as exc:
            raise UniqueViolationError("email") from exc

    def set_last_login(self, user_id: int, at: datetime) -> User | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(UserRow, user_id)
            if row is None:
                return None
            row.last_login_at = at
            session.flush()
            return to_user(row)
