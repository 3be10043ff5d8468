from __future__ import annotations

from datetime import date

import pytest

from conftest import VALID_VIN
from vehicare.application.inputs import UpdateVehicleInput
from vehicare.application.validators import (
    messages,
    validate_create_vehicle,
    validate_update_vehicle,
)

TODAY = date(2024, 6, 1)


def _create_errors(vehicle_input, **overrides) -> list[tuple[str, str]]:
    violations = validate_create_vehicle(vehicle_input(**overrides), today=TODAY)
    return [(v.field, v.message) for v in violations]


def test_valid_input_has_no_violations(vehicle_input) -> None:
    assert validate_create_vehicle(vehicle_input(), today=TODAY) == []


@pytest.mark.parametrize(
    ("vin", "expected"),
    [
        ("1HGCM82633A00435", "VIN must be exactly 17 characters"),
        ("1HGCM82633A0043521", "VIN must be exactly 17 characters"),
        ("1HGCM82633A00435I", "VIN contains invalid characters"),
        ("1HGCM82633A00435O", "VIN contains invalid characters"),
        ("1HGCM82633A00435Q", "VIN contains invalid characters"),
        ("1hgcm82633a004352", "VIN contains invalid characters"),
    ],
)
def test_vin_rules(vehicle_input, vin: str, expected: str) -> None:
    assert ("vin", expected) in _create_errors(vehicle_input, vin=vin)


@pytest.mark.parametrize("vin", [VALID_VIN, "ABCDEFGHJKLMNPRST", "0123456789ABCDEFG"])
def test_vin_accepts_allowed_alphabet(vehicle_input, vin: str) -> None:
    assert _create_errors(vehicle_input, vin=vin) == []


def test_blank_vin_reports_every_failed_rule(vehicle_input) -> None:
    assert _create_errors(vehicle_input, vin="") == [
        ("vin", "VIN is required"),
        ("vin", "VIN must be exactly 17 characters"),
        ("vin", "VIN contains invalid characters"),
    ]


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (1900, "Year must be greater than 1900"),
        (1800, "Year must be greater than 1900"),
        (2026, "Year cannot be in the future"),
    ],
)
def test_year_rejected(vehicle_input, year: int, expected: str) -> None:
    assert _create_errors(vehicle_input, year=year) == [("year", expected)]


@pytest.mark.parametrize("year", [1901, 2024, 2025])
def test_year_accepted(vehicle_input, year: int) -> None:
    assert _create_errors(vehicle_input, year=year) == []


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({"make": ""}, ("make", "Make is required")),
        ({"make": "   "}, ("make", "Make is required")),
        ({"make": "M" * 51}, ("make", "Make cannot exceed 50 characters")),
        ({"model": ""}, ("model", "Model is required")),
        ({"model": "M" * 51}, ("model", "Model cannot exceed 50 characters")),
        ({"license_plate": "P" * 21}, ("license_plate", "License plate cannot exceed 20 characters")),
        ({"current_mileage": -1}, ("current_mileage", "Current mileage cannot be negative")),
        ({"color": "C" * 31}, ("color", "Color cannot exceed 30 characters")),
        ({"purchase_date": date(2024, 6, 2)}, ("purchase_date", "Purchase date cannot be in the future")),
    ],
)
def test_field_rules(vehicle_input, overrides: dict, expected: tuple[str, str]) -> None:
    assert _create_errors(vehicle_input, **overrides) == [expected]


def test_optional_fields_may_be_absent(vehicle_input) -> None:
    assert _create_errors(vehicle_input, license_plate=None, color=None) == []


def test_limits_are_inclusive(vehicle_input) -> None:
    errors = _create_errors(
        vehicle_input,
        make="M" * 50,
        model="M" * 50,
        license_plate="P" * 20,
        color="C" * 30,
        current_mileage=0,
        purchase_date=TODAY,
    )
    assert errors == []


def test_update_requires_positive_id() -> None:
    violations = validate_update_vehicle(UpdateVehicleInput(id=0), today=TODAY)

    assert messages(violations) == ["Vehicle ID must be greater than 0"]


def test_update_skips_rules_for_absent_fields() -> None:
    assert validate_update_vehicle(UpdateVehicleInput(id=1), today=TODAY) == []


def test_update_treats_empty_string_as_absent() -> None:
    data = UpdateVehicleInput(id=1, make="", model="", vin="", color="", license_plate="")

    assert validate_update_vehicle(data, today=TODAY) == []


def test_update_applies_rules_to_provided_fields() -> None:
    data = UpdateVehicleInput(
        id=3,
        vin="SHORT",
        year=1900,
        current_mileage=-5,
        purchase_date=date(2030, 1, 1),
        make="M" * 51,
    )

    assert messages(validate_update_vehicle(data, today=TODAY)) == [
        "Make cannot exceed 50 characters",
        "Year must be greater than 1900",
        "VIN must be exactly 17 characters",
        "VIN contains invalid characters",
        "Current mileage cannot be negative",
        "Purchase date cannot be in the future",
    ]
