# -*- coding: utf-8 -*-
"""
belongs_to_many

Many-to-many association through a pivot table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import ElementType, RelationshipKind
from ..fields.base import default_key
from ..fields.registry import registry
from .base import PivotMixin, RelationshipDescriptor, resolve_related


def pivot_table_name(key: str, related_slug: str) -> str:
    """Alphabetical join of both sides (``tags`` + ``posts`` -> ``posts_tags``)."""
    return "_".join(sorted((key, related_slug)))


@registry.register("belongs-to-many-field", ElementType.RELATIONSHIP)
class BelongsToManyField(PivotMixin, RelationshipDescriptor):

    relationship_kind = RelationshipKind.BELONGS_TO_MANY

    def __init__(self, name: str, key: str | None = None, related: Any = None, /, **data: Any) -> None:
        key = key or default_key(name)
        slug, _resource = resolve_related(related)
        data.setdefault("pivot_table_name", pivot_table_name(key, slug))
        data.setdefault("foreign_key_name", "user_id")
        data.setdefault("related_key_name", f"{slug}_id")
        super().__init__(name, key, related, **data)

    def resolve_relationship(self, item: Any) -> list[Any]:
        return []


# The End
