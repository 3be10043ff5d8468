# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Guarded in-memory storage.

Both repositories share one :class:`InMemoryStore`, whose single lock
serialises every read and write across the users and vehicles maps.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime
from itertools import count

from vehicare.domain.users.entities import User
from vehicare.domain.vehicles.entities import Vehicle
from vehicare.shared.errors import InfrastructureError, UniqueViolationError


@dataclass(slots=True)
class InMemoryStore:
    users: dict[int, User] = field(default_factory=dict)
    vehicles: dict[int, Vehicle] = field(default_factory=dict)
    lock: threading.Lock = field(default_factory=threading.Lock)
    user_ids: count = field(default_factory=lambda: count(1))
    vehicle_ids: count = field(default_factory=lambda: count(1))


class InMemoryUserRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def find_by_email(self, email: str) -> User | None:
        wanted = email.lower()
        with self._store.lock:
            return next(
                (user for user in self._store.users.values() if user.email.lower() == wanted),
                None,
            )

    def find_by_id(self, user_id: int) -> User | None:
        with self._store.lock:
            return self._store.users.get(user_id)

    def add(self, user: User) -> User:
        with self._store.lock:
            wanted = user.email.lower()
            if any(existing.email.lower() == wanted for existing in self._store.users.values()):
                raise UniqueViolationError("email")
            persisted = replace(user, id=next(self._store.user_ids))
            self._store.users[persisted.id] = persisted
            return persisted

    def set_last_login(self, user_id: int, at: datetime) -> User | None:
        with self._store.lock:
            user = self._store.users.get(user_id)
            if user is None:
                return None
            touched = replace(user, last_login_at=at)
            self._store.users[user_id] = touched
            return touched


class InMemoryVehicleRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _with_owner(self, vehicle: Vehicle) -> Vehicle:
        return replace(vehicle, owner=self._store.users.get(vehicle.user_id))

    def _vin_taken(self, vin: str, *, exclude_id: int | None = None) -> bool:
        wanted = vin.upper()
        return any(
            vehicle.vin.upper() == wanted
            for vehicle in self._store.vehicles.values()
            if vehicle.id != exclude_id
        )

    def find_by_id(self, vehicle_id: int) -> Vehicle | None:
        with self._store.lock:
            vehicle = self._store.vehicles.get(vehicle_id)
            return self._with_owner(vehicle) if vehicle else None

    def find_owned(self, vehicle_id: int, owner_id: int) -> Vehicle | None:
        with self._store.lock:
            vehicle = self._store.vehicles.get(vehicle_id)
            if vehicle is None or vehicle.user_id != owner_id:
                return None
            return self._with_owner(vehicle)

    def list_for_user(self, user_id: int) -> Sequence[Vehicle]:
        with self._store.lock:
            owned = [v for v in self._store.vehicles.values() if v.user_id == user_id]
            owned.sort(key=lambda v: (v.created_at, v.id), reverse=True)
            return [self._with_owner(v) for v in owned]

    def add(self, vehicle: Vehicle) -> Vehicle:
        with self._store.lock:
            if vehicle.user_id not in self._store.users:
                raise InfrastructureError(
                    "owner_not_found", context={"user_id": vehicle.user_id}
                )
            if self._vin_taken(vehicle.vin):
                raise UniqueViolationError("vin")
            persisted = replace(vehicle, id=next(self._store.vehicle_ids), owner=None)
            self._store.vehicles[persisted.id] = persisted
            return self._with_owner(persisted)

    def save(self, vehicle: Vehicle) -> Vehicle:
        with self._store.lock:
            if vehicle.id not in self._store.vehicles:
                raise KeyError(vehicle.id)
            if self._vin_taken(vehicle.vin, exclude_id=vehicle.id):
                raise UniqueViolationError("vin")
            stored = replace(vehicle, owner=None)
            self._store.vehicles[stored.id] = stored
            return self._with_owner(stored)

    def delete_owned(self, vehicle_id: int, owner_id: int) -> bool:
        with self._store.lock:
            vehicle = self._store.vehicles.get(vehicle_id)
            if vehicle is None or vehicle.user_id != owner_id:
                return False
            del self._store.vehicles[vehicle_id]
            return True

    def exists_by_vin(self, vin: str) -> bool:
        with self._store.lock:
            return self._vin_taken(vin)


__all__ = ["InMemoryStore", "InMemoryUserRepository", "InMemoryVehicleRepository"]
