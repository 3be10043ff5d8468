# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.application.inputs import CreateVehicleInput
from vehicare.application.payloads import VehiclePayload
from vehicare.application.services.clock import Clock, utc_now
from vehicare.application.services.vehicle_registry import VehicleRegistry
from vehicare.application.validators import validate_create_vehicle
from vehicare.shared.errors import UniqueViolationError
from vehicare.shared.logging import logger

from .messages import CREATE_FAILED, NOT_AUTHENTICATED, VIN_TAKEN


class CreateVehicleUseCase:
    def __init__(self, *, registry: VehicleRegistry, clock: Clock = utc_now) -> None:
        self._registry = registry
        self._clock = clock

    def execute(self, data: CreateVehicleInput, caller_id: int | None) -> VehiclePayload:
        if caller_id is None:
            return VehiclePayload(error=NOT_AUTHENTICATED)

        violations = validate_create_vehicle(data, today=self._clock().date())
        if violations:
            logger.info(f"vehicle.create: invalid fields={[v.field for v in violations]}")
            return VehiclePayload.invalid(violations)

        try:
            if self._registry.exists_by_vin(data.vin):
                logger.info(f"vehicle.create: duplicate vin owner_id={caller_id}")
                return VehiclePayload(error=VIN_TAKEN)
            vehicle = self._registry.create(data, caller_id)
        except UniqueViolationError:
            return VehiclePayload(error=VIN_TAKEN)
        except Exception:
            logger.exception(f"vehicle.create: failed owner_id={caller_id}")
            return VehiclePayload(error=CREATE_FAILED)

        return VehiclePayload(vehicle=vehicle)
