# -*- coding: utf-8 -*-
"""
serialization

Wrap related values with the identity of their relationship.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from .base import RelationshipDescriptor


class RelationshipSerialization:

    def __init__(self, field: RelationshipDescriptor) -> None:
        self.field = field

    def serialize_relationship(self, item: Any) -> dict[str, Any]:
        if item is None:
            return {"value": None}
        return {
            "type": self.field.get_relationship_type(),
            "name": self.field.get_relationship_name(),
            "resource": self.field.get_related_resource(),
            "value": item,
        }

    def serialize_relationships(self, items: Iterable[Any] | None) -> list[dict[str, Any]]:
        if not items:
            return []
        return [self.serialize_relationship(item) for item in items]

    def to_json(self, item: Any) -> str:
        return json.dumps(self.serialize_relationship(item), ensure_ascii=False, default=str)

    def to_json_array(self, items: Iterable[Any] | None) -> str:
        return json.dumps(self.serialize_relationships(items), ensure_ascii=False, default=str)


# The End
