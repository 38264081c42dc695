"""Validation rules applied to values before they are sent to the service.

Every rule exposes `validate(current, new)` returning an error message, or None
when the new value is acceptable. Rules are stateless unless parameterized, so
the common ones are shared module-level instances.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import urlparse

from trellokit.core.exceptions import TrelloValidationError


class ValidationRule:
    """Base class for validation rules."""

    def validate(self, current: Any, new: Any) -> str | None:
        raise NotImplementedError


class NotNullRule(ValidationRule):
    """Value must not be None."""

    def validate(self, current: Any, new: Any) -> str | None:
        if new is None:
            return "Value cannot be null."
        return None


class NullableHasValueRule(ValidationRule):
    """An optional value may be read as None but not assigned None."""

    def validate(self, current: Any, new: Any) -> str | None:
        if new is None:
            return "Value must be assigned."
        return None


class NotNullOrWhiteSpaceRule(ValidationRule):
    """Value must be a string with at least one non-whitespace character."""

    def validate(self, current: Any, new: Any) -> str | None:
        if new is None or not isinstance(new, str) or not new.strip():
            return "Value cannot be null, empty, or whitespace."
        return None


class EnumerationRule(ValidationRule):
    """Value must be a member of an enumeration (or one of its raw values)."""

    def __init__(self, enum_type: type[Enum]):
        self.enum_type = enum_type

    def validate(self, current: Any, new: Any) -> str | None:
        if new is None:
            return None
        if isinstance(new, self.enum_type):
            return None
        try:
            self.enum_type(new)
        except ValueError:
            allowed = ", ".join(str(member.value) for member in self.enum_type)
            return f"Value is not a valid {self.enum_type.__name__} (expected one of: {allowed})."
        return None


class NumericRule(ValidationRule):
    """Number within inclusive bounds."""

    def __init__(self, min: float | None = None, max: float | None = None):
        self.min = min
        self.max = max

    def validate(self, current: Any, new: Any) -> str | None:
        if new is None:
            return None
        if isinstance(new, bool) or not isinstance(new, (int, float)):
            return "Value must be a number."
        if self.min is not None and new < self.min:
            return f"Value must be greater than or equal to {self.min}."
        if self.max is not None and new > self.max:
            return f"Value must be less than or equal to {self.max}."
        return None


class UriRule(ValidationRule):
    """Absolute http(s) URL."""

    def validate(self, current: Any, new: Any) -> str | None:
        if new is None:
            return None
        try:
            parsed = urlparse(str(new))
        except ValueError:
            return "Value must be an absolute http or https URL."
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return "Value must be an absolute http or https URL."
        return None


class PositionRule(ValidationRule):
    """`top`, `bottom`, or a positive number."""

    def validate(self, current: Any, new: Any) -> str | None:
        if new is None:
            return None
        if new in ("top", "bottom"):
            return None
        if isinstance(new, bool) or not isinstance(new, (int, float)) or new <= 0:
            return "Position must be 'top', 'bottom', or a positive number."
        return None


NOT_NULL = NotNullRule()
NULLABLE_HAS_VALUE = NullableHasValueRule()
NOT_NULL_OR_WHITESPACE = NotNullOrWhiteSpaceRule()
URI = UriRule()
POSITION = PositionRule()


def collect_errors(value: Any, *rules: ValidationRule, current: Any = None) -> list[str]:
    """Run every rule and return all error messages."""
    errors = []
    for rule in rules:
        error = rule.validate(current, value)
        if error is not None:
            errors.append(error)
    return errors


def validate_value(value: Any, *rules: ValidationRule, current: Any = None) -> None:
    """Validate a value against rules.

    Raises:
        TrelloValidationError: If any rule fails; all messages are collected.
    """
    errors = collect_errors(value, *rules, current=current)
    if errors:
        raise TrelloValidationError(value, errors)
