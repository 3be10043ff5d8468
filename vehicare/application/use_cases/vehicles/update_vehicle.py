# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.application.inputs import UpdateVehicleInput, is_provided
from vehicare.application.payloads import VehiclePayload
from vehicare.application.services.clock import Clock, utc_now
from vehicare.application.services.vehicle_registry import VehicleRegistry
from vehicare.application.validators import validate_update_vehicle
from vehicare.shared.errors import UniqueViolationError
from vehicare.shared.logging import logger

from .messages import NOT_AUTHENTICATED, UPDATE_FAILED, UPDATE_NOT_FOUND, VIN_TAKEN


class UpdateVehicleUseCase:
    def __init__(self, *, registry: VehicleRegistry, clock: Clock = utc_now) -> None:
        self._registry = registry
        self._clock = clock

    def execute(self, data: UpdateVehicleInput, caller_id: int | None) -> VehiclePayload:
        if caller_id is None:
            return VehiclePayload(error=NOT_AUTHENTICATED)

        violations = validate_update_vehicle(data, today=self._clock().date())
        if violations:
            logger.info(f"vehicle.update: invalid fields={[v.field for v in violations]}")
            return VehiclePayload.invalid(violations)

        try:
            if is_provided(data.vin) and self._vin_conflicts(data, caller_id):
                return VehiclePayload(error=VIN_TAKEN)
            vehicle = self._registry.update(data, caller_id)
        except UniqueViolationError:
            return VehiclePayload(error=VIN_TAKEN)
        except Exception:
            logger.exception(f"vehicle.update: failed vehicle_id={data.id}")
            return VehiclePayload(error=UPDATE_FAILED)

        if vehicle is None:
            return VehiclePayload(error=UPDATE_NOT_FOUND)
        return VehiclePayload(vehicle=vehicle)

    def _vin_conflicts(self, data: UpdateVehicleInput, caller_id: int) -> bool:
        current = self._registry.find_by_id(data.id)
        if current is None or not current.is_owned_by(caller_id):
            # the registry update reports the not-found outcome
            return False
        if current.vin.upper() == (data.vin or "").upper():
            return False
        taken = self._registry.exists_by_vin(data.vin or "")
        if taken:
            logger.info(f"vehicle.update: duplicate vin vehicle_id={data.id}")
        return taken
