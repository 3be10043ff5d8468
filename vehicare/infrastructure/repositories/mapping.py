# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from vehicare.domain.users.entities import User
from vehicare.domain.vehicles.entities import Vehicle
from vehicare.infrastructure.db.models import UserRow, VehicleRow


def as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops the offset on the way back
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def to_user(row: UserRow) -> User:
    return User(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        created_at=as_utc(row.created_at),
        last_login_at=as_utc(row.last_login_at),
        is_active=bool(row.is_active),
    )


def to_vehicle(row: VehicleRow) -> Vehicle:
    return Vehicle(
        id=row.id,
        user_id=row.user_id,
        make=row.make,
        model=row.model,
        year=int(row.year),
        vin=row.vin,
        license_plate=row.license_plate,
        current_mileage=int(row.current_mileage or 0),
        color=row.color,
        purchase_date=row.purchase_date,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        owner=to_user(row.owner) if row.owner is not None else None,
    )
