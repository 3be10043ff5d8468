# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from vehicare.domain.users.entities import User

VIN_LENGTH = 17


@dataclass(slots=True, frozen=True)
class Vehicle:
    """A vehicle owned by exactly one user.

    ``user_id`` never changes after creation. ``owner`` is the resolved
    owning user when the store attached it, otherwise ``None``.
    """

    id: int
    user_id: int
    make: str
    model: str
    year: int
    vin: str
    current_mileage: int
    purchase_date: date
    created_at: datetime
    updated_at: datetime
    license_plate: str | None = None
    color: str | None = None
    owner: User | None = None

    def is_owned_by(self, user_id: int | None) -> bool:
        return user_id is not None and self.user_id == user_id


def normalize_vin(vin: str) -> str:
    return vin.upper()
