# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Operation results.

Failures are reported in the payload rather than raised: ``error`` carries
a human readable message and ``violations`` the per-field validation
failures, when there were any.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vehicare.application.validators import Violation, messages
from vehicare.domain.users.entities import User
from vehicare.domain.vehicles.entities import Vehicle


def join_violations(violations: list[Violation]) -> str:
    return ", ".join(messages(violations))


@dataclass(slots=True, frozen=True)
class LoginPayload:
    token: str | None = None
    user: User | None = None
    error: str | None = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None and self.token is not None


@dataclass(slots=True, frozen=True)
class RegisterPayload:
    user: User | None = None
    error: str | None = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None and self.user is not None


@dataclass(slots=True, frozen=True)
class VehiclePayload:
    vehicle: Vehicle | None = None
    error: str | None = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None and self.vehicle is not None

    @classmethod
    def invalid(cls, violations: list[Violation]) -> VehiclePayload:
        return cls(error=join_violations(violations), violations=violations)


@dataclass(slots=True, frozen=True)
class DeleteVehiclePayload:
    deleted_id: int | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None and self.deleted_id is not None


__all__ = [
    "DeleteVehiclePayload",
    "LoginPayload",
    "RegisterPayload",
    "VehiclePayload",
    "join_violations",
]
