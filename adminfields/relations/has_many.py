# -*- coding: utf-8 -*-
"""
has_many

One-to-many association owned by the related table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import ElementType, RelationshipKind
from ..fields.registry import registry
from .base import RelationshipDescriptor, resolve_related


class _HasRelation(RelationshipDescriptor):

    def __init__(self, name: str, key: str | None = None, related: Any = None, /, **data: Any) -> None:
        slug, _resource = resolve_related(related)
        data.setdefault("foreign_key_name", f"{slug}_id")
        data.setdefault("owner_key_name", "id")
        super().__init__(name, key, related, **data)


@registry.register("has-many-field", ElementType.RELATIONSHIP)
class HasManyField(_HasRelation):
    """Related records point back at this one through ``<slug>_id``."""

    relationship_kind = RelationshipKind.HAS_MANY

    def resolve_relationship(self, item: Any) -> list[Any]:
        return []


# The End
