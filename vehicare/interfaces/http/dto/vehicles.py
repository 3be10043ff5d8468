# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from vehicare.application.inputs import CreateVehicleInput, UpdateVehicleInput
from vehicare.domain.vehicles.entities import Vehicle

from .auth import UserDTO

_REQUEST_CONFIG = ConfigDict(validate_by_name=True, validate_by_alias=True, extra="ignore")


class CreateVehicleRequestDTO(BaseModel):
    """Body of ``POST /api/vehicles``.

    Only the JSON shape is checked here; field rules run in the use case
    so their failures come back in the payload.
    """

    model_config = _REQUEST_CONFIG

    make: str = ""
    model: str = ""
    year: int = 0
    vin: str = Field("", alias="VIN")
    license_plate: str | None = Field(None, alias="licensePlate")
    current_mileage: int = Field(0, alias="currentMileage")
    color: str | None = None
    purchase_date: date = Field(alias="purchaseDate")

    def to_input(self) -> CreateVehicleInput:
        return CreateVehicleInput(
            make=self.make,
            model=self.model,
            year=self.year,
            vin=self.vin,
            license_plate=self.license_plate,
            current_mileage=self.current_mileage,
            color=self.color,
            purchase_date=self.purchase_date,
        )


class UpdateVehicleRequestDTO(BaseModel):
    model_config = _REQUEST_CONFIG

    make: str | None = None
    model: str | None = None
    year: int | None = None
    vin: str | None = Field(None, alias="VIN")
    license_plate: str | None = Field(None, alias="licensePlate")
    current_mileage: int | None = Field(None, alias="currentMileage")
    color: str | None = None
    purchase_date: date | None = Field(None, alias="purchaseDate")

    def to_input(self, vehicle_id: int) -> UpdateVehicleInput:
        return UpdateVehicleInput(
            id=vehicle_id,
            make=self.make,
            model=self.model,
            year=self.year,
            vin=self.vin,
            license_plate=self.license_plate,
            current_mileage=self.current_mileage,
            color=self.color,
            purchase_date=self.purchase_date,
        )


class VehicleDTO(BaseModel):
    id: int
    user_id: int
    make: str
    model: str
    year: int
    vin: str
    license_plate: str | None = None
    current_mileage: int
    color: str | None = None
    purchase_date: date
    created_at: datetime
    updated_at: datetime
    owner: UserDTO | None = None

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> VehicleDTO:
        return cls(
            id=vehicle.id,
            user_id=vehicle.user_id,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            vin=vehicle.vin,
            license_plate=vehicle.license_plate,
            current_mileage=vehicle.current_mileage,
            color=vehicle.color,
            purchase_date=vehicle.purchase_date,
            created_at=vehicle.created_at,
            updated_at=vehicle.updated_at,
            owner=UserDTO.from_entity(vehicle.owner) if vehicle.owner else None,
        )


def vehicle_or_none(vehicle: Vehicle | None) -> dict | None:
    return VehicleDTO.from_entity(vehicle).model_dump(mode="json") if vehicle else None
