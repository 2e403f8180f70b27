# -*- coding: utf-8 -*-
"""
rules

Built-in validation rules and their dispatch.

Each rule checks a single value. ``apply_validation_rule`` raises
:class:`FieldValidationError` for the first problem it finds; callers that need
every message use :func:`collect_validation_errors`. ``unique`` and ``exists``
are markers for the persistence layer and always pass here.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from threading import RLock
from typing import Any, Callable, Iterable

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..core.exceptions import FieldValidationError
from ..schema.descriptors import ValidationRule

logger = logging.getLogger(__name__)

ValidatorFunc = Callable[[Any, Any], None]

_url_adapter = TypeAdapter(AnyUrl)


# --- rule factories ---------------------------------------------------------

def required() -> ValidationRule:
    return ValidationRule(name="required", message="This field is required")


def email() -> ValidationRule:
    return ValidationRule(name="email", message="This field must be a valid email address")


def url() -> ValidationRule:
    return ValidationRule(name="url", message="This field must be a valid URL")


def min_value(bound: int | float) -> ValidationRule:
    return ValidationRule(
        name="min", parameters=(bound,), message=f"This field must be at least {bound}"
    )


def max_value(bound: int | float) -> ValidationRule:
    return ValidationRule(
        name="max", parameters=(bound,), message=f"This field must be at most {bound}"
    )


def min_length(length: int) -> ValidationRule:
    return ValidationRule(
        name="minLength",
        parameters=(length,),
        message=f"This field must be at least {length} characters",
    )


def max_length(length: int) -> ValidationRule:
    return ValidationRule(
        name="maxLength",
        parameters=(length,),
        message=f"This field must be at most {length} characters",
    )


def pattern(regex: str) -> ValidationRule:
    return ValidationRule(
        name="pattern", parameters=(regex,), message="This field format is invalid"
    )


def unique(table: str, column: str) -> ValidationRule:
    return ValidationRule(
        name="unique", parameters=(table, column), message="This value already exists"
    )


def exists(table: str, column: str) -> ValidationRule:
    return ValidationRule(
        name="exists", parameters=(table, column), message="This value does not exist"
    )


# --- single-value checks ----------------------------------------------------

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def validate_required(value: Any) -> None:
    if value is None:
        raise FieldValidationError("required", "value is required")
    if isinstance(value, str) and not value.strip():
        raise FieldValidationError("required", "value is required")
    if isinstance(value, (list, tuple, set, frozenset, dict)) and not value:
        raise FieldValidationError("required", "value is required")


def validate_email_value(value: Any) -> None:
    if not isinstance(value, str):
        raise FieldValidationError("email", "email must be a string")
    if value == "":
        return
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise FieldValidationError("email", "invalid email format") from exc


def validate_url(value: Any) -> None:
    if not isinstance(value, str):
        raise FieldValidationError("url", "url must be a string")
    if value == "":
        return
    try:
        _url_adapter.validate_python(value)
    except ValidationError as exc:
        raise FieldValidationError("url", "invalid URL format") from exc


def validate_min(value: Any, bound: Any) -> None:
    if isinstance(value, str):
        if len(value) < int(bound):
            raise FieldValidationError("min", f"value must be at least {bound} characters")
        return
    if _is_number(value):
        if not _is_number(bound):
            raise FieldValidationError("min", "min parameter must be numeric")
        if value < bound:
            raise FieldValidationError("min", f"value must be at least {bound}")


def validate_max(value: Any, bound: Any) -> None:
    if isinstance(value, str):
        if len(value) > int(bound):
            raise FieldValidationError("max", f"value must be at most {bound} characters")
        return
    if _is_number(value):
        if not _is_number(bound):
            raise FieldValidationError("max", "max parameter must be numeric")
        if value > bound:
            raise FieldValidationError("max", f"value must be at most {bound}")


def validate_min_length(value: Any, length: int) -> None:
    if not isinstance(value, str):
        raise FieldValidationError("minLength", "minLength validation requires string value")
    if len(value) < length:
        raise FieldValidationError("minLength", f"value must be at least {length} characters")


def validate_max_length(value: Any, length: int) -> None:
    if not isinstance(value, str):
        raise FieldValidationError("maxLength", "maxLength validation requires string value")
    if len(value) > length:
        raise FieldValidationError("maxLength", f"value must be at most {length} characters")


def validate_pattern(value: Any, regex: str) -> None:
    if not isinstance(value, str):
        raise FieldValidationError("pattern", "pattern validation requires string value")
    if value == "":
        return
    try:
        matched = re.search(regex, value)
    except re.error as exc:
        raise FieldValidationError("pattern", f"invalid regex pattern: {exc}") from exc
    if matched is None:
        raise FieldValidationError("pattern", "value does not match required pattern")


# --- custom validators ------------------------------------------------------

@dataclass(frozen=True)
class ConditionalValidator:
    """Run ``validator`` only when ``condition`` holds for the form context."""

    condition: Callable[[Any], bool]
    validator: ValidatorFunc

    def apply(self, value: Any, context: Any = None) -> None:
        if self.condition(context):
            self.validator(value, context)


class CustomValidatorRegistry:
    """Named validators contributed by applications."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._validators: dict[str, ValidatorFunc] = {}

    def register(self, name: str, validator: ValidatorFunc) -> None:
        with self._lock:
            self._validators[name] = validator

    def get(self, name: str) -> ValidatorFunc | None:
        with self._lock:
            return self._validators.get(name)

    def apply(self, name: str, value: Any, context: Any = None) -> None:
        validator = self.get(name)
        if validator is None:
            raise FieldValidationError(name, f"custom validator '{name}' not found")
        validator(value, context)


custom_validators = CustomValidatorRegistry()


def register_custom_validator(name: str, validator: ValidatorFunc) -> None:
    custom_validators.register(name, validator)


def get_custom_validator(name: str) -> ValidatorFunc | None:
    return custom_validators.get(name)


def apply_custom_validator(name: str, value: Any, context: Any = None) -> None:
    custom_validators.apply(name, value, context)


# --- dispatch ---------------------------------------------------------------

def _first(rule: ValidationRule) -> Any:
    return rule.parameters[0] if rule.parameters else None


def apply_validation_rule(rule: ValidationRule, value: Any) -> None:
    """Check ``value`` against ``rule``; raise ``FieldValidationError`` on failure."""

    name = rule.name
    param = _first(rule)
    if name == "required":
        validate_required(value)
    elif name == "email":
        validate_email_value(value)
    elif name == "url":
        validate_url(value)
    elif name == "min":
        if param is not None:
            validate_min(value, param)
    elif name == "max":
        if param is not None:
            validate_max(value, param)
    elif name == "minLength":
        if isinstance(param, int):
            validate_min_length(value, param)
    elif name == "maxLength":
        if isinstance(param, int):
            validate_max_length(value, param)
    elif name == "pattern":
        if isinstance(param, str):
            validate_pattern(value, param)
    elif name in ("unique", "exists"):
        return
    else:
        validator = custom_validators.get(name)
        if validator is None:
            logger.debug("No validator registered for rule %r; skipping", name)
            return
        validator(value, None)


def collect_validation_errors(rules: Iterable[ValidationRule], value: Any) -> list[str]:
    """Run every rule and return the failure messages in rule order."""

    errors: list[str] = []
    for rule in rules:
        try:
            apply_validation_rule(rule, value)
        except FieldValidationError as exc:
            errors.append(rule.message or exc.message)
    return errors


__all__ = [
    "ConditionalValidator",
    "CustomValidatorRegistry",
    "apply_custom_validator",
    "apply_validation_rule",
    "collect_validation_errors",
    "custom_validators",
    "email",
    "exists",
    "get_custom_validator",
    "max_length",
    "max_value",
    "min_length",
    "min_value",
    "pattern",
    "register_custom_validator",
    "required",
    "unique",
    "url",
]


# The End
