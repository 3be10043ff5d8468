from __future__ import annotations

from dataclasses import replace
from datetime import UTC, date, datetime, timedelta

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from conftest import OTHER_VIN, VALID_VIN, FakeClock
from vehicare.application.services.vehicle_registry import VehicleRegistry
from vehicare.application.use_cases.vehicles.create_vehicle import CreateVehicleUseCase
from vehicare.domain.users.entities import User
from vehicare.domain.vehicles.entities import Vehicle
from vehicare.infrastructure.db import build_engine, build_session_factory, init_db
from vehicare.infrastructure.health import check_database
from vehicare.infrastructure.repositories.sqlalchemy_users import SqlAlchemyUserRepository
from vehicare.infrastructure.repositories.sqlalchemy_vehicles import (
    SqlAlchemyVehicleRepository,
    _constraint_error,
)
from vehicare.shared.config import DatabaseConfig
from vehicare.shared.errors import InfrastructureError, UniqueViolationError

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture()
def engine():
    engine = build_engine(DatabaseConfig(url="sqlite://"))
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine) -> sessionmaker[Session]:
    return build_session_factory(engine)


@pytest.fixture()
def users(session_factory) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session_factory)


@pytest.fixture()
def vehicles(session_factory) -> SqlAlchemyVehicleRepository:
    return SqlAlchemyVehicleRepository(session_factory)


def _user(email: str = "jane@example.com") -> User:
    return User(
        id=0,
        email=email,
        password_hash="hashed:secret1",
        first_name="Jane",
        last_name="Doe",
        created_at=NOW,
    )


def _vehicle(owner_id: int, vin: str = VALID_VIN, created_at: datetime = NOW) -> Vehicle:
    return Vehicle(
        id=0,
        user_id=owner_id,
        make="Honda",
        model="Accord",
        year=2020,
        vin=vin,
        current_mileage=100,
        purchase_date=date(2021, 3, 15),
        created_at=created_at,
        updated_at=created_at,
        license_plate=None,
        color="Blue",
    )


def test_user_round_trip_keeps_utc(users: SqlAlchemyUserRepository) -> None:
    created = users.add(_user())

    found = users.find_by_id(created.id)

    assert created.id > 0
    assert found == created
    assert found.created_at == NOW
    assert found.created_at.tzinfo is not None
    assert found.is_active is True


def test_user_email_lookup_is_case_insensitive(users: SqlAlchemyUserRepository) -> None:
    created = users.add(_user("jane@example.com"))

    assert users.find_by_email("JANE@Example.com") == created
    assert users.find_by_email("other@example.com") is None


def test_duplicate_email_raises_unique_violation(users: SqlAlchemyUserRepository) -> None:
    users.add(_user())

    with pytest.raises(UniqueViolationError):
        users.add(_user())


def test_set_last_login(users: SqlAlchemyUserRepository) -> None:
    created = users.add(_user())
    at = NOW + timedelta(hours=1)

    touched = users.set_last_login(created.id, at)

    assert touched.last_login_at == at
    assert users.find_by_id(created.id).last_login_at == at
    assert users.set_last_login(999, at) is None


def test_vehicle_add_resolves_owner(users, vehicles: SqlAlchemyVehicleRepository) -> None:
    owner = users.add(_user())

    vehicle = vehicles.add(_vehicle(owner.id))

    assert vehicle.id > 0
    assert vehicle.owner == owner
    assert vehicles.find_by_id(vehicle.id) == vehicle


def test_vehicle_vin_unique_and_lookup_case_insensitive(users, vehicles) -> None:
    owner = users.add(_user())
    vehicles.add(_vehicle(owner.id))

    assert vehicles.exists_by_vin(VALID_VIN.lower()) is True
    assert vehicles.exists_by_vin(OTHER_VIN) is False
    with pytest.raises(UniqueViolationError):
        vehicles.add(_vehicle(owner.id))


def test_list_for_user_newest_first(users, vehicles) -> None:
    owner = users.add(_user())
    older = vehicles.add(_vehicle(owner.id, VALID_VIN, NOW))
    newer = vehicles.add(_vehicle(owner.id, OTHER_VIN, NOW + timedelta(days=1)))

    assert [v.id for v in vehicles.list_for_user(owner.id)] == [newer.id, older.id]
    assert vehicles.list_for_user(999) == []


def test_find_owned_and_delete_owned(users, vehicles) -> None:
    alice = users.add(_user("alice@example.com"))
    bob = users.add(_user("bob@example.com"))
    vehicle = vehicles.add(_vehicle(alice.id))

    assert vehicles.find_owned(vehicle.id, bob.id) is None
    assert vehicles.find_owned(vehicle.id, alice.id) == vehicle
    assert vehicles.delete_owned(vehicle.id, bob.id) is False
    assert vehicles.delete_owned(vehicle.id, alice.id) is True
    assert vehicles.find_by_id(vehicle.id) is None


def test_save_persists_changes(users, vehicles) -> None:
    owner = users.add(_user())
    vehicle = vehicles.add(_vehicle(owner.id))
    later = NOW + timedelta(hours=3)

    saved = vehicles.save(replace(vehicle, make="Acura", color=None, updated_at=later))

    assert saved.make == "Acura"
    assert saved.color is None
    assert vehicles.find_by_id(vehicle.id).updated_at == later


def test_save_conflicting_vin_raises(users, vehicles) -> None:
    owner = users.add(_user())
    vehicles.add(_vehicle(owner.id, VALID_VIN))
    second = vehicles.add(_vehicle(owner.id, OTHER_VIN))

    with pytest.raises(UniqueViolationError):
        vehicles.save(replace(second, vin=VALID_VIN))


def test_deleting_user_cascades_to_vehicles(users, vehicles, engine) -> None:
    owner = users.add(_user())
    vehicle = vehicles.add(_vehicle(owner.id))

    with engine.begin() as connection:
        connection.execute(text("DELETE FROM users WHERE id = :id"), {"id": owner.id})

    assert vehicles.find_by_id(vehicle.id) is None


def test_check_database(engine) -> None:
    assert check_database(engine) is True


def test_vehicle_add_for_unknown_owner_is_not_a_vin_conflict(vehicles) -> None:
    with pytest.raises(InfrastructureError) as caught:
        vehicles.add(_vehicle(999))

    assert not isinstance(caught.value, UniqueViolationError)
    assert caught.value.code == "owner_not_found"
    assert vehicles.exists_by_vin(VALID_VIN) is False


def test_create_use_case_for_unknown_owner_reports_generic_failure(
    vehicles, vehicle_input
) -> None:
    registry = VehicleRegistry(vehicles=vehicles, clock=FakeClock(NOW))
    create = CreateVehicleUseCase(registry=registry, clock=FakeClock(NOW))

    payload = create.execute(vehicle_input(), 999)

    assert payload.error == "Failed to create vehicle"
    assert vehicles.list_for_user(999) == []


@pytest.mark.parametrize(
    ("driver_message", "expected"),
    [
        ("UNIQUE constraint failed: vehicles.vin", UniqueViolationError),
        ("FOREIGN KEY constraint failed", InfrastructureError),
    ],
)
def test_only_unique_integrity_errors_map_to_vin_conflicts(driver_message, expected) -> None:
    error = _constraint_error(IntegrityError("INSERT", {}, Exception(driver_message)))

    assert type(error) is expected
