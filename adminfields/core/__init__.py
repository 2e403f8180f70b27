# -*- coding: utf-8 -*-
"""
core

Shared enumerations and exceptions of the field layer.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .exceptions import (
    AdminFieldsError,
    BackendUnavailableError,
    CircularDependencyError,
    FieldValidationError,
    RelationshipError,
    UnknownRelationshipKindError,
)
from .types import (
    ElementContext,
    ElementType,
    LoadingStrategy,
    RelationshipKind,
    VisibilityContext,
    is_visible_in_context,
)

__all__ = [
    "AdminFieldsError",
    "BackendUnavailableError",
    "CircularDependencyError",
    "FieldValidationError",
    "RelationshipError",
    "UnknownRelationshipKindError",
    "ElementContext",
    "ElementType",
    "LoadingStrategy",
    "RelationshipKind",
    "VisibilityContext",
    "is_visible_in_context",
]


# The End
