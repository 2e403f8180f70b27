# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for field and relationship descriptors.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any


class AdminFieldsError(Exception):
    """Base class for field-layer exceptions."""


class RelationshipError(AdminFieldsError):
    """Raised when a relationship precondition is violated."""

    def __init__(
        self,
        field_name: str,
        relationship_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.field_name = field_name
        self.relationship_type = str(getattr(relationship_type, "value", relationship_type))
        self.message = message
        self.context: dict[str, Any] = dict(context or {})
        super().__init__(
            f"relationship error in field '{field_name}' "
            f"({self.relationship_type}): {message}"
        )


class FieldValidationError(AdminFieldsError, ValueError):
    """Raised when a value fails a single validation rule."""

    def __init__(self, rule: str, message: str) -> None:
        super().__init__(message)
        self.rule = rule
        self.message = message


class BackendUnavailableError(AdminFieldsError):
    """Raised when the persistence collaborator cannot be reached."""


class CircularDependencyError(AdminFieldsError):
    """Raised when field dependencies form a cycle."""

    def __init__(self, field_key: str) -> None:
        super().__init__(f"circular dependency detected involving field: {field_key}")
        self.field_key = field_key


class UnknownRelationshipKindError(AdminFieldsError):
    """Raised when a facade receives a field with an unsupported kind."""


# The End
