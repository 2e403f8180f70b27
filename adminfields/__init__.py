# -*- coding: utf-8 -*-
"""
__init__

Field descriptor layer entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .api import DependencyAPI
from .conf import AdminFieldsSettings, configure, current_settings, reset_settings
from .core import (
    AdminFieldsError,
    BackendUnavailableError,
    CircularDependencyError,
    ElementContext,
    ElementType,
    FieldValidationError,
    LoadingStrategy,
    RelationshipError,
    RelationshipKind,
    UnknownRelationshipKindError,
    VisibilityContext,
)
from .fields import DependencyResolver, FieldDescriptor, registry
from .meta import __version__
from .relations import (
    BelongsToField,
    BelongsToManyField,
    HasManyField,
    HasOneField,
    MorphToField,
    MorphToManyField,
    NullRelationshipBackend,
    RelationshipBackend,
    RelationshipDescriptor,
)
from .schema import FieldUpdate, ValidationRule
from .utils import resolve_attribute

__all__ = [
    "AdminFieldsError",
    "AdminFieldsSettings",
    "BackendUnavailableError",
    "BelongsToField",
    "BelongsToManyField",
    "CircularDependencyError",
    "DependencyAPI",
    "DependencyResolver",
    "ElementContext",
    "ElementType",
    "FieldDescriptor",
    "FieldUpdate",
    "FieldValidationError",
    "HasManyField",
    "HasOneField",
    "LoadingStrategy",
    "MorphToField",
    "MorphToManyField",
    "NullRelationshipBackend",
    "RelationshipBackend",
    "RelationshipDescriptor",
    "RelationshipError",
    "RelationshipKind",
    "UnknownRelationshipKindError",
    "ValidationRule",
    "VisibilityContext",
    "__version__",
    "configure",
    "current_settings",
    "registry",
    "reset_settings",
    "resolve_attribute",
]

# The End
