# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from vehicare.application.inputs import LoginInput, RegisterInput
from vehicare.domain.users.entities import User

_REQUEST_CONFIG = ConfigDict(validate_by_name=True, validate_by_alias=True, extra="ignore")


class LoginRequestDTO(BaseModel):
    model_config = _REQUEST_CONFIG

    email: str = ""
    password: str = ""

    def to_input(self) -> LoginInput:
        return LoginInput(email=self.email, password=self.password)


class RegisterRequestDTO(BaseModel):
    model_config = _REQUEST_CONFIG

    email: str = ""
    password: str = ""
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")

    def to_input(self) -> RegisterInput:
        return RegisterInput(
            email=self.email,
            password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class UserDTO(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    last_login_at: datetime | None = None
    is_active: bool = True

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            last_login_at=user.last_login_at,
            is_active=user.is_active,
        )


def user_or_none(user: User | None) -> dict | None:
    return UserDTO.from_entity(user).model_dump(mode="json") if user else None
