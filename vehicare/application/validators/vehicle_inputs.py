# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from datetime import date

from vehicare.application.inputs import CreateVehicleInput, UpdateVehicleInput, is_provided
from vehicare.domain.vehicles.entities import VIN_LENGTH

from .rules import Rule, RuleSet, Violation, max_length, not_blank, when

# I, O and Q never appear in a VIN.
VIN_PATTERN = re.compile(r"^[A-HJ-NPR-Z0-9]{17}$")

MAKE_MAX = 50
MODEL_MAX = 50
LICENSE_PLATE_MAX = 20
COLOR_MAX = 30
MIN_YEAR_EXCLUSIVE = 1900


def _year_rules(today: date) -> list[Rule]:
    latest = today.year + 1
    return [
        ("year", lambda i: i.year > MIN_YEAR_EXCLUSIVE, "Year must be greater than 1900"),
        ("year", lambda i: i.year <= latest, "Year cannot be in the future"),
    ]


def _vin_format_rules() -> list[Rule]:
    return [
        ("vin", lambda i: len(i.vin or "") == VIN_LENGTH, "VIN must be exactly 17 characters"),
        ("vin", lambda i: bool(VIN_PATTERN.match(i.vin or "")), "VIN contains invalid characters"),
    ]


def _create_rules(today: date) -> list[Rule[CreateVehicleInput]]:
    return [
        ("make", lambda i: not_blank(i.make), "Make is required"),
        ("make", lambda i: max_length(i.make, MAKE_MAX), "Make cannot exceed 50 characters"),
        ("model", lambda i: not_blank(i.model), "Model is required"),
        ("model", lambda i: max_length(i.model, MODEL_MAX), "Model cannot exceed 50 characters"),
        *_year_rules(today),
        ("vin", lambda i: not_blank(i.vin), "VIN is required"),
        *_vin_format_rules(),
        (
            "license_plate",
            lambda i: max_length(i.license_plate, LICENSE_PLATE_MAX),
            "License plate cannot exceed 20 characters",
        ),
        ("current_mileage", lambda i: i.current_mileage >= 0, "Current mileage cannot be negative"),
        ("color", lambda i: max_length(i.color, COLOR_MAX), "Color cannot exceed 30 characters"),
        (
            "purchase_date",
            lambda i: i.purchase_date <= today,
            "Purchase date cannot be in the future",
        ),
    ]


def _update_rules(today: date) -> list[Rule[UpdateVehicleInput]]:
    return [
        ("id", lambda i: i.id > 0, "Vehicle ID must be greater than 0"),
        *when(
            lambda i: is_provided(i.make),
            [("make", lambda i: max_length(i.make, MAKE_MAX), "Make cannot exceed 50 characters")],
        ),
        *when(
            lambda i: is_provided(i.model),
            [("model", lambda i: max_length(i.model, MODEL_MAX), "Model cannot exceed 50 characters")],
        ),
        *when(lambda i: is_provided(i.year), _year_rules(today)),
        *when(lambda i: is_provided(i.vin), _vin_format_rules()),
        *when(
            lambda i: is_provided(i.license_plate),
            [
                (
                    "license_plate",
                    lambda i: max_length(i.license_plate, LICENSE_PLATE_MAX),
                    "License plate cannot exceed 20 characters",
                )
            ],
        ),
        *when(
            lambda i: is_provided(i.current_mileage),
            [
                (
                    "current_mileage",
                    lambda i: i.current_mileage >= 0,
                    "Current mileage cannot be negative",
                )
            ],
        ),
        *when(
            lambda i: is_provided(i.color),
            [("color", lambda i: max_length(i.color, COLOR_MAX), "Color cannot exceed 30 characters")],
        ),
        *when(
            lambda i: is_provided(i.purchase_date),
            [
                (
                    "purchase_date",
                    lambda i: i.purchase_date <= today,
                    "Purchase date cannot be in the future",
                )
            ],
        ),
    ]


def validate_create_vehicle(
    data: CreateVehicleInput, *, today: date | None = None
) -> list[Violation]:
    return RuleSet(_create_rules(today or date.today())).evaluate(data)


def validate_update_vehicle(
    data: UpdateVehicleInput, *, today: date | None = None
) -> list[Violation]:
    return RuleSet(_update_rules(today or date.today())).evaluate(data)


__all__ = ["VIN_PATTERN", "validate_create_vehicle", "validate_update_vehicle"]
