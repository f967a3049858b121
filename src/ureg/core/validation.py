# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Declarative form-field validation.

A field is checked against an ordered list of rules. Every rule is evaluated
(no short-circuit) and the messages of the failing ones are returned in rule
order, ready to be shown in the form that submitted them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Sequence

MIN_PASSWORD_LENGTH = 8

MSG_PASSWORD_LENGTH = "La contraseña debe tener al menos 8 caracteres"
MSG_PASSWORD_COMPOSITION = "La contraseña debe contener al menos 1 letra mayúscula y 1 número"

_UPPER_AND_DIGIT = re.compile(r"^(?=.*[A-Z])(?=.*\d).+\Z", re.ASCII)


@dataclass(frozen=True)
class Rule:
    check: Callable[[str], bool]
    message: str

    def failed(self, value: str) -> bool:
        return not self.check(value)


def min_length(n: int, message: str) -> Rule:
    return Rule(check=lambda v: len(v) >= n, message=message)


def matches(pattern: "re.Pattern[str]", message: str) -> Rule:
    return Rule(check=lambda v: pattern.search(v) is not None, message=message)


PASSWORD_RULES: List[Rule] = [
    min_length(MIN_PASSWORD_LENGTH, MSG_PASSWORD_LENGTH),
    matches(_UPPER_AND_DIGIT, MSG_PASSWORD_COMPOSITION),
]


class FormValidator:
    """Apply per-field rule lists to submitted form data."""

    def __init__(self, rules_by_field: Mapping[str, Sequence[Rule]]):
        self._rules: Dict[str, List[Rule]] = {k: list(v) for k, v in rules_by_field.items()}

    def validate_field(self, field: str, value: Any) -> List[str]:
        s = "" if value is None else str(value)
        return [r.message for r in self._rules.get(field, []) if r.failed(s)]

    def validate(self, data: Mapping[str, Any]) -> List[str]:
        """Return all error messages, field by field, in declaration order."""
        errors: List[str] = []
        for field in self._rules:
            errors.extend(self.validate_field(field, data.get(field)))
        return errors


def user_form_validator() -> FormValidator:
    return FormValidator({"password": PASSWORD_RULES})
