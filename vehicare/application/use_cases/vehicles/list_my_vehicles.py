# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.application.services.vehicle_registry import VehicleRegistry
from vehicare.domain.vehicles.entities import Vehicle


class ListMyVehiclesUseCase:
    def __init__(self, *, registry: VehicleRegistry) -> None:
        self._registry = registry

    def execute(self, caller_id: int | None) -> list[Vehicle]:
        if caller_id is None:
            return []
        return self._registry.list_by_user(caller_id)
