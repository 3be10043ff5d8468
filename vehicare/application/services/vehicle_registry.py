# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import replace

from vehicare.application.inputs import CreateVehicleInput, UpdateVehicleInput
from vehicare.domain.vehicles.entities import Vehicle, normalize_vin
from vehicare.domain.vehicles.repositories import VehicleRepository
from vehicare.shared.logging import logger

from .clock import Clock, utc_now


class VehicleRegistry:
    """Sole writer of vehicle records, scoped by owner.

    Lookups that combine an id with an owner return ``None`` (or ``False``)
    both when the vehicle is missing and when someone else owns it, so a
    caller can never tell the two apart.
    """

    def __init__(self, *, vehicles: VehicleRepository, clock: Clock = utc_now) -> None:
        self._vehicles = vehicles
        self._clock = clock

    def find_by_id(self, vehicle_id: int) -> Vehicle | None:
        return self._vehicles.find_by_id(vehicle_id)

    def list_by_user(self, user_id: int) -> list[Vehicle]:
        return list(self._vehicles.list_for_user(user_id))

    def create(self, data: CreateVehicleInput, owner_id: int) -> Vehicle:
        now = self._clock()
        vehicle = Vehicle(
            id=0,
            user_id=owner_id,
            make=data.make,
            model=data.model,
            year=data.year,
            vin=normalize_vin(data.vin),
            license_plate=data.license_plate,
            current_mileage=data.current_mileage,
            color=data.color,
            purchase_date=data.purchase_date,
            created_at=now,
            updated_at=now,
        )
        persisted = self._vehicles.add(vehicle)
        logger.info(f"vehicles.create: ok vehicle_id={persisted.id} owner_id={owner_id}")
        return persisted

    def update(self, data: UpdateVehicleInput, caller_id: int) -> Vehicle | None:
        current = self._vehicles.find_owned(data.id, caller_id)
        if current is None:
            logger.info(f"vehicles.update: not_found_or_not_owned vehicle_id={data.id}")
            return None

        changes = data.provided_changes()
        if "vin" in changes:
            changes["vin"] = normalize_vin(changes["vin"])
        updated = replace(current, **changes, updated_at=self._clock())
        persisted = self._vehicles.save(updated)
        logger.info(
            f"vehicles.update: ok vehicle_id={persisted.id} fields={sorted(changes)}"
        )
        return persisted

    def delete(self, vehicle_id: int, caller_id: int) -> bool:
        deleted = self._vehicles.delete_owned(vehicle_id, caller_id)
        logger.info(f"vehicles.delete: vehicle_id={vehicle_id} deleted={deleted}")
        return deleted

    def exists_by_vin(self, vin: str) -> bool:
        return self._vehicles.exists_by_vin(normalize_vin(vin))
