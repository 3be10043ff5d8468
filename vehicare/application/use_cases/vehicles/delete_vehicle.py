# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.application.payloads import DeleteVehiclePayload
from vehicare.application.services.vehicle_registry import VehicleRegistry
from vehicare.shared.logging import logger

from .messages import DELETE_FAILED, DELETE_NOT_FOUND, NOT_AUTHENTICATED


class DeleteVehicleUseCase:
    def __init__(self, *, registry: VehicleRegistry) -> None:
        self._registry = registry

    def execute(self, vehicle_id: int, caller_id: int | None) -> DeleteVehiclePayload:
        if caller_id is None:
            return DeleteVehiclePayload(error=NOT_AUTHENTICATED)

        try:
            deleted = self._registry.delete(vehicle_id, caller_id)
        except Exception:
            logger.exception(f"vehicle.delete: failed vehicle_id={vehicle_id}")
            return DeleteVehiclePayload(error=DELETE_FAILED)

        if not deleted:
            return DeleteVehiclePayload(error=DELETE_NOT_FOUND)
        return DeleteVehiclePayload(deleted_id=vehicle_id)
