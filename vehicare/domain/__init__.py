# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import User
from .users.repositories import PasswordHasher, TokenService, UserRepository
from .vehicles.entities import VIN_LENGTH, Vehicle, normalize_vin
from .vehicles.repositories import VehicleRepository

__all__ = [
    "PasswordHasher",
    "TokenService",
    "User",
    "UserRepository",
    "VIN_LENGTH",
    "Vehicle",
    "VehicleRepository",
    "normalize_vin",
]
