# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(slots=True, frozen=True)
class RegisterInput:
    email: str
    password: str
    first_name: str
    last_name: str


@dataclass(slots=True, frozen=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True, frozen=True)
class CreateVehicleInput:
    make: str
    model: str
    year: int
    vin: str
    purchase_date: date
    current_mileage: int = 0
    license_plate: str | None = None
    color: str | None = None


_STRING_FIELDS = ("make", "model", "vin", "license_plate", "color")
_VALUE_FIELDS = ("year", "current_mileage", "purchase_date")


def is_provided(value: Any) -> bool:
    """Whether a partial-update field carries a value.

    ``None`` is never provided. An empty string counts as not provided,
    so optional text fields cannot be cleared through an update.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return True


@dataclass(slots=True, frozen=True)
class UpdateVehicleInput:
    id: int
    make: str | None = None
    model: str | None = None
    year: int | None = None
    vin: str | None = None
    license_plate: str | None = None
    current_mileage: int | None = None
    color: str | None = None
    purchase_date: date | None = None

    def provided_changes(self) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        for name in (*_STRING_FIELDS, *_VALUE_FIELDS):
            value = getattr(self, name)
            if is_provided(value):
                changes[name] = value
        return changes
