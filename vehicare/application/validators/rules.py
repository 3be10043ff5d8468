# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Declarative field rules.

A rule is a ``(field, predicate, message)`` tuple. The predicate returns
``True`` when the subject satisfies the rule. Every rule in a list is
evaluated, even after an earlier rule on the same field failed, and each
failure contributes one :class:`Violation` in rule order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]
Rule = tuple[str, Predicate[T], str]


@dataclass(slots=True, frozen=True)
class Violation:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(slots=True, frozen=True)
class RuleSet(Generic[T]):
    rules: Sequence[Rule[T]]

    def evaluate(self, subject: T) -> list[Violation]:
        return [
            Violation(field=field, message=message)
            for field, predicate, message in self.rules
            if not predicate(subject)
        ]


def when(condition: Callable[[T], bool], rules: Iterable[Rule[T]]) -> list[Rule[T]]:
    """Guard rules so they pass whenever ``condition`` is false."""

    def _guard(condition: Callable[[T], bool], predicate: Predicate[T]) -> Predicate[T]:
        return lambda subject: not condition(subject) or predicate(subject)

    return [(field, _guard(condition, predicate), message) for field, predicate, message in rules]


def not_blank(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def max_length(value: str | None, limit: int) -> bool:
    return value is None or len(value) <= limit


def messages(violations: Iterable[Violation]) -> list[str]:
    return [violation.message for violation in violations]
