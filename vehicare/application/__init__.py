# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .inputs import CreateVehicleInput, LoginInput, RegisterInput, UpdateVehicleInput
from .payloads import DeleteVehiclePayload, LoginPayload, RegisterPayload, VehiclePayload
from .services.user_directory import UserDirectory
from .services.vehicle_registry import VehicleRegistry

__all__ = [
    "CreateVehicleInput",
    "DeleteVehiclePayload",
    "LoginInput",
    "LoginPayload",
    "RegisterInput",
    "RegisterPayload",
    "UpdateVehicleInput",
    "UserDirectory",
    "VehicleRegistry",
    "VehiclePayload",
]
