# -*- coding: utf-8 -*-
"""
relations

Relationship descriptors and the facades working with related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import (
    MorphMixin,
    PivotMixin,
    RelationshipDescriptor,
    dispatch,
    format_morph_types,
    relationship_kind_of,
    resolve_related,
)
from .belongs_to import BelongsToField, relation_stem
from .belongs_to_many import BelongsToManyField, pivot_table_name
from .constraints import RelationshipConstraints
from .counting import RelationshipCounting
from .display import RelationshipDisplay
from .existence import RelationshipExistence
from .filter import RelationshipFilter
from .has_many import HasManyField
from .has_one import HasOneField
from .loader import RelationshipLoader
from .morph_to import MorphToField
from .morph_to_many import MorphToManyField
from .pagination import RelationshipPagination
from .search import RelationshipSearch
from .serialization import RelationshipSerialization
from .sort import RelationshipSort, normalize_direction
from .title import extract_fallback_title, resolve_relationship_record_title
from .validator import RelationshipValidator

__all__ = [
    "BelongsToField",
    "BelongsToManyField",
    "HasManyField",
    "HasOneField",
    "MorphMixin",
    "MorphToField",
    "MorphToManyField",
    "NullRelationshipBackend",
    "PivotMixin",
    "RelationshipBackend",
    "RelationshipConstraints",
    "RelationshipCounting",
    "RelationshipDescriptor",
    "RelationshipDisplay",
    "RelationshipExistence",
    "RelationshipFilter",
    "RelationshipLoader",
    "RelationshipPagination",
    "RelationshipSearch",
    "RelationshipSerialization",
    "RelationshipSort",
    "RelationshipValidator",
    "call_backend",
    "dispatch",
    "extract_fallback_title",
    "format_morph_types",
    "normalize_direction",
    "pivot_table_name",
    "relation_stem",
    "relationship_kind_of",
    "resolve_related",
    "resolve_relationship_record_title",
]


# The End
