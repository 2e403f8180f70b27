# -*- coding: utf-8 -*-
"""
morph_to

Polymorphic association: the record stores a discriminator and an id.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import ElementType, RelationshipKind
from ..fields.base import default_key
from ..fields.registry import registry
from ..utils.attributes import resolver
from .base import MorphMixin, RelationshipDescriptor


@registry.register("morph-to-field", ElementType.RELATIONSHIP)
class MorphToField(MorphMixin, RelationshipDescriptor):
    """
    Morph To

    For key ``commentable`` the record is read through ``commentable_type``
    and ``commentable_id`` (or ``CommentableType`` / ``CommentableID``).
    ``types`` maps each discriminator value to the slug of its resource.
    """

    relationship_kind = RelationshipKind.MORPH_TO

    def __init__(self, name: str, key: str | None = None, /, **data: Any) -> None:
        key = key or default_key(name)
        props = dict(data.pop("props", None) or {})
        props.setdefault("types", [])
        props.setdefault("displays", {})
        data.setdefault("morph_type_column", f"{key}_type")
        data.setdefault("foreign_key_name", f"{key}_id")
        super().__init__(name, key, None, props=props, **data)

    def resolve_relationship(self, item: Any) -> dict[str, Any] | None:
        if item is None:
            return None
        morph_type, type_found = resolver.resolve(item, self.morph_type_column)
        morph_id, id_found = resolver.resolve(item, self.foreign_key_name)
        if not type_found and not id_found:
            return None
        morph_type = "" if morph_type is None else str(morph_type)
        return {
            "type": morph_type,
            "id": morph_id,
            "morphToType": morph_type,
            "morphToId": morph_id,
        }

    def extract(self, record: Any) -> "MorphToField":
        return self._with(data=self.resolve_relationship(record))


# The End
