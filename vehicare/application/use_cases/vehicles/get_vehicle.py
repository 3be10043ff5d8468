# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.application.services.vehicle_registry import VehicleRegistry
from vehicare.domain.vehicles.entities import Vehicle


class GetVehicleUseCase:
    """Returns the vehicle only when the caller owns it."""

    def __init__(self, *, registry: VehicleRegistry) -> None:
        self._registry = registry

    def execute(self, vehicle_id: int, caller_id: int | None) -> Vehicle | None:
        if caller_id is None:
            return None
        vehicle = self._registry.find_by_id(vehicle_id)
        if vehicle is None or not vehicle.is_owned_by(caller_id):
            return None
        return vehicle
