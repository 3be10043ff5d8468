# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Vehicle


class VehicleRepository(Protocol):
    def find_by_id(self, vehicle_id: int) -> Vehicle | None: ...
    def find_owned(self, vehicle_id: int, owner_id: int) -> Vehicle | None: ...
    def list_for_user(self, user_id: int) -> Sequence[Vehicle]: ...
    def add(self, vehicle: Vehicle) -> Vehicle: ...
    def save(self, vehicle: Vehicle) -> Vehicle: ...
    def delete_owned(self, vehicle_id: int, owner_id: int) -> bool: ...
    def exists_by_vin(self, vin: str) -> bool: ...
