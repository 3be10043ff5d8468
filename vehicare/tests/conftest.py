from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from typing import Any

import pytest

from vehicare.application.inputs import CreateVehicleInput
from vehicare.application.services.user_directory import UserDirectory
from vehicare.application.services.vehicle_registry import VehicleRegistry
from vehicare.domain.users.repositories import PasswordHasher
from vehicare.infrastructure.repositories.memory import (
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryVehicleRepository,
)

VALID_VIN = "1HGCM82633A004352"
OTHER_VIN = "2T1BURHE5JC123456"
THIRD_VIN = "5YJSA1E26MF123456"


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 6, 1, 12, 0, tzinfo=UTC))


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def directory(store: InMemoryStore, hasher: DeterministicHasher, clock: FakeClock) -> UserDirectory:
    return UserDirectory(
        users=InMemoryUserRepository(store), password_hasher=hasher, clock=clock
    )


@pytest.fixture()
def registry(store: InMemoryStore, clock: FakeClock) -> VehicleRegistry:
    return VehicleRegistry(vehicles=InMemoryVehicleRepository(store), clock=clock)


@pytest.fixture()
def vehicle_input() -> Callable[..., CreateVehicleInput]:
    def _build(**overrides: Any) -> CreateVehicleInput:
        values: dict[str, Any] = {
            "make": "Honda",
            "model": "Accord",
            "year": 2020,
            "vin": VALID_VIN,
            "purchase_date": date(2021, 3, 15),
            "current_mileage": 12000,
            "license_plate": "ABC-123",
            "color": "Blue",
        }
        values.update(overrides)
        return CreateVehicleInput(**values)

    return _build
