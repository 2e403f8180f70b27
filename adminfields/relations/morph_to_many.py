# -*- coding: utf-8 -*-
"""
morph_to_many

Polymorphic many-to-many association (``taggables`` style pivot).

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import ElementType, RelationshipKind
from ..fields.base import default_key
from ..fields.registry import registry
from .base import MorphMixin, PivotMixin, RelationshipDescriptor


@registry.register("morph-to-many-field", ElementType.RELATIONSHIP)
class MorphToManyField(MorphMixin, PivotMixin, RelationshipDescriptor):
    """Pivot ``<key>s`` with ``<key>_type`` and ``<key>_id`` columns."""

    relationship_kind = RelationshipKind.MORPH_TO_MANY

    def __init__(self, name: str, key: str | None = None, /, **data: Any) -> None:
        key = key or default_key(name)
        props = dict(data.pop("props", None) or {})
        props.setdefault("types", [])
        props.setdefault("displays", {})
        data.setdefault("pivot_table_name", f"{key}s")
        data.setdefault("foreign_key_name", "tag_id")
        data.setdefault("related_key_name", f"{key}_id")
        data.setdefault("morph_type_column", f"{key}_type")
        super().__init__(name, key, None, props=props, **data)

    def morph_type(self, column: str) -> "MorphToManyField":
        return self._with(morph_type_column=column)

    def resolve_relationship(self, item: Any) -> list[Any]:
        return []


# The End
