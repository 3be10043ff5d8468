# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_inputs import is_valid_email, validate_login, validate_register
from .rules import RuleSet, Violation, messages
from .vehicle_inputs import VIN_PATTERN, validate_create_vehicle, validate_update_vehicle

__all__ = [
    "RuleSet",
    "VIN_PATTERN",
    "Violation",
    "is_valid_email",
    "messages",
    "validate_create_vehicle",
    "validate_login",
    "validate_register",
    "validate_update_vehicle",
]
