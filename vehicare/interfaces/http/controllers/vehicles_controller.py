# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from vehicare.application.payloads import VehiclePayload
from vehicare.application.use_cases.vehicles.create_vehicle import CreateVehicleUseCase
from vehicare.application.use_cases.vehicles.delete_vehicle import DeleteVehicleUseCase
from vehicare.application.use_cases.vehicles.get_vehicle import GetVehicleUseCase
from vehicare.application.use_cases.vehicles.list_my_vehicles import ListMyVehiclesUseCase
from vehicare.application.use_cases.vehicles.update_vehicle import UpdateVehicleUseCase
from vehicare.interfaces.http.dto.vehicles import (
    CreateVehicleRequestDTO,
    UpdateVehicleRequestDTO,
    vehicle_or_none,
)
from vehicare.interfaces.http.identity import IdentityResolver
from vehicare.shared.errors.validation import raise_validation_error
from vehicare.shared.logging import logger


def _vehicle_payload(payload: VehiclePayload) -> tuple[Response, int]:
    return (
        jsonify(
            {
                "success": payload.success,
                "vehicle": vehicle_or_none(payload.vehicle),
                "error": payload.error,
                "violations": [v.to_dict() for v in payload.violations],
            }
        ),
        200,
    )


class VehiclesController:
    def __init__(
        self,
        *,
        get_vehicle: GetVehicleUseCase,
        list_vehicles: ListMyVehiclesUseCase,
        create_vehicle: CreateVehicleUseCase,
        update_vehicle: UpdateVehicleUseCase,
        delete_vehicle: DeleteVehicleUseCase,
        identity: IdentityResolver,
    ) -> None:
        self._get_vehicle = get_vehicle
        self._list_vehicles = list_vehicles
        self._create_vehicle = create_vehicle
        self._update_vehicle = update_vehicle
        self._delete_vehicle = delete_vehicle
        self._identity = identity

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("vehicles", __name__, url_prefix="/api")
        bp.add_url_rule("/vehicles", view_func=self.list_vehicles, methods=["GET"])
        bp.add_url_rule("/vehicles", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/vehicles/<int:vehicle_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/vehicles/<int:vehicle_id>", view_func=self.update, methods=["PATCH"])
        bp.add_url_rule("/vehicles/<int:vehicle_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    def list_vehicles(self) -> tuple[Response, int]:
        t0 = perf_counter()
        user_id = self._identity.caller_id()
        items = self._list_vehicles.execute(user_id)
        dt = (perf_counter() - t0) * 1000
        logger.info(f"vehicles.list: ok (user_id={user_id}, n={len(items)}, dt_ms={dt:.0f})")
        return jsonify({"items": [vehicle_or_none(v) for v in items]}), 200

    def get(self, vehicle_id: int) -> tuple[Response, int]:
        vehicle = self._get_vehicle.execute(vehicle_id, self._identity.caller_id())
        return jsonify({"vehicle": vehicle_or_none(vehicle)}), 200

    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateVehicleRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        payload = self._create_vehicle.execute(dto.to_input(), self._identity.caller_id())
        return _vehicle_payload(payload)

    def update(self, vehicle_id: int) -> tuple[Response, int]:
        try:
            dto = UpdateVehicleRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        payload = self._update_vehicle.execute(
            dto.to_input(vehicle_id), self._identity.caller_id()
        )
        return _vehicle_payload(payload)

    def delete(self, vehicle_id: int) -> tuple[Response, int]:
        payload = self._delete_vehicle.execute(vehicle_id, self._identity.caller_id())
        return (
            jsonify(
                {
                    "success": payload.success,
                    "deleted_id": payload.deleted_id,
                    "error": payload.error,
                }
            ),
            200,
        )
