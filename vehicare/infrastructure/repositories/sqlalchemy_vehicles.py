# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from vehicare.domain.vehicles.entities import Vehicle
from vehicare.domain.vehicles.repositories import VehicleRepository
from vehicare.infrastructure.db.models import UserRow, VehicleRow
from vehicare.infrastructure.unit_of_work import unit_of_work_scope
from vehicare.shared.errors import InfrastructureError, UniqueViolationError

from .mapping import to_vehicle


def _is_unique_violation(exc: IntegrityError) -> bool:
    # sqlite reports "UNIQUE constraint failed", postgres SQLSTATE 23505
    if getattr(exc.orig, "pgcode", None) == "23505":
        return True
    return "unique" in str(exc.orig).lower()


def _constraint_error(exc: IntegrityError) -> InfrastructureError:
    if _is_unique_violation(exc):
        return UniqueViolationError("vin")
    return InfrastructureError("constraint_violation")


class SqlAlchemyVehicleRepository(VehicleRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_id(self, vehicle_id: int) -> Vehicle | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(VehicleRow)
                .options(joinedload(VehicleRow.owner))
                .filter(VehicleRow.id == vehicle_id)
                .first()
            )
            return to_vehicle(row) if row else None

    def find_owned(self, vehicle_id: int, owner_id: int) -> Vehicle | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(VehicleRow)
                .options(joinedload(VehicleRow.owner))
                .filter(VehicleRow.id == vehicle_id, VehicleRow.user_id == owner_id)
                .first()
            )
            return to_vehicle(row) if row else None

    def list_for_user(self, user_id: int) -> Sequence[Vehicle]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(VehicleRow)
                .options(joinedload(VehicleRow.owner))
                .filter(VehicleRow.user_id == user_id)
                .order_by(VehicleRow.created_at.desc(), VehicleRow.id.desc())
                .all()
            )
            return [to_vehicle(row) for row in rows]

    def add(self, vehicle: Vehicle) -> Vehicle:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                if session.get(UserRow, vehicle.user_id) is None:
                    raise InfrastructureError(
                        "owner_not_found", context={"user_id": vehicle.user_id}
                    )
                row = VehicleRow(
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
                )
                session.add(row)
                session.flush()
                session.refresh(row, attribute_names=["owner"])
                return to_vehicle(row)
        except IntegrityError as exc:
            raise _constraint_error(exc) from exc

    def save(self, vehicle: Vehicle) -> Vehicle:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(VehicleRow, vehicle.id)
                if row is None:
                    raise KeyError(vehicle.id)
                row.make = vehicle.make
                row.model = vehicle.model
                row.year = vehicle.year
                row.vin = vehicle.vin
                row.license_plate = vehicle.license_plate
                row.current_mileage = vehicle.current_mileage
                row.color = vehicle.color
                row.purchase_date = vehicle.purchase_date
                row.updated_at = vehicle.updated_at
                session.flush()
                return to_vehicle(row)
        except IntegrityError as exc:
            raise _constraint_error(exc) from exc

    def delete_owned(self, vehicle_id: int, owner_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            deleted = (
                session.query(VehicleRow)
                .filter(VehicleRow.id == vehicle_id, VehicleRow.user_id == owner_id)
                .delete(synchronize_session=False)
            )
            return deleted > 0

    def exists_by_vin(self, vin: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            found = (
                session.query(VehicleRow.id)
                .filter(func.upper(VehicleRow.vin) == vin.upper())
                .first()
            )
            return found is not None
