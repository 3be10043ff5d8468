# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from vehicare.application.inputs import LoginInput, RegisterInput

from .rules import Rule, RuleSet, Violation, max_length, not_blank

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

PASSWORD_MIN = 6
PASSWORD_MAX = 128
NAME_MAX = 50


def is_valid_email(email: str | None) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email.strip()) is not None


def _email_rules() -> list[Rule]:
    return [
        ("email", lambda i: not_blank(i.email), "Email is required"),
        ("email", lambda i: is_valid_email(i.email), "Valid email address is required"),
    ]


_REGISTER_RULES: RuleSet[RegisterInput] = RuleSet(
    [
        *_email_rules(),
        ("password", lambda i: not_blank(i.password), "Password is required"),
        (
            "password",
            lambda i: len(i.password or "") >= PASSWORD_MIN,
            "Password must be at least 6 characters long",
        ),
        (
            "password",
            lambda i: max_length(i.password, PASSWORD_MAX),
            "Password cannot exceed 128 characters",
        ),
        ("first_name", lambda i: not_blank(i.first_name), "First name is required"),
        (
            "first_name",
            lambda i: max_length(i.first_name, NAME_MAX),
            "First name cannot exceed 50 characters",
        ),
        ("last_name", lambda i: not_blank(i.last_name), "Last name is required"),
        (
            "last_name",
            lambda i: max_length(i.last_name, NAME_MAX),
            "Last name cannot exceed 50 characters",
        ),
    ]
)

_LOGIN_RULES: RuleSet[LoginInput] = RuleSet(
    [
        *_email_rules(),
        ("password", lambda i: not_blank(i.password), "Password is required"),
        (
            "password",
            lambda i: max_length(i.password, PASSWORD_MAX),
            "Password cannot exceed 128 characters",
        ),
    ]
)


def validate_register(data: RegisterInput) -> list[Violation]:
    return _REGISTER_RULES.evaluate(data)


def validate_login(data: LoginInput) -> list[Violation]:
    return _LOGIN_RULES.evaluate(data)


__all__ = ["EMAIL_PATTERN", "is_valid_email", "validate_login", "validate_register"]
