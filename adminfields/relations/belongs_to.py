# -*- coding: utf-8 -*-
"""
belongs_to

Many-to-one association stored as a foreign key on the record.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import weakref
from collections.abc import Mapping
from typing import Any

from ..core.types import ElementType, RelationshipKind
from ..fields.base import default_key
from ..fields.registry import registry
from ..utils.attributes import AttributeSource, resolver, to_camel
from .base import RelationshipDescriptor
from .title import resolve_relationship_record_title

_KEY_SUFFIXES = ("_id", "Id", "ID")


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (str, Mapping, list, tuple)) and not value


def relation_stem(key: str) -> str:
    """Strip one foreign-key suffix per kind (``author_id`` -> ``author``)."""
    stem = key
    for suffix in _KEY_SUFFIXES:
        if stem.endswith(suffix):
            stem = stem[: -len(suffix)]
    return stem


@registry.register("belongs-to-field", ElementType.RELATIONSHIP)
class BelongsToField(RelationshipDescriptor):
    """
    Belongs To

    ``key`` names the foreign key column. When the related resource object is
    known and the record carries the loaded relation, ``extract`` produces
    ``{"id": <fk>, "title": <title>}`` instead of the bare key.
    """

    relationship_kind = RelationshipKind.BELONGS_TO

    def __init__(self, name: str, key: str | None = None, related: Any = None, /, **data: Any) -> None:
        key = key or default_key(name)
        data.setdefault("searchable_columns", ("name",))
        data.setdefault("foreign_key_name", key)
        super().__init__(name, key, related, **data)

    def resolve_relationship(self, item: Any) -> Any:
        if item is None:
            self.validate_relationship(None)
            return None
        value, _found = resolver.resolve(item, self.key)
        return value

    def _related_record(self, record: Any) -> Any:
        if isinstance(record, weakref.ReferenceType):
            record = record()
            if record is None:
                return None
        stem = relation_stem(self.key)
        if isinstance(record, AttributeSource) and not isinstance(record, type):
            for name in (stem, to_camel(stem)):
                value, found = resolver.resolve(record, name)
                if found:
                    return value
        stem = stem.lower()
        for member in resolver.member_names(record):
            if member.lower() == stem:
                value, _found = resolver.resolve(record, member)
                return value
        return None

    def extract(self, record: Any) -> "BelongsToField":
        extracted = super().extract(record)
        if extracted.display_callback is not None or extracted.related_resource is None:
            return extracted
        related = self._related_record(record)
        if _is_empty(related):
            return extracted._with(data=None)
        foreign_key = extracted.data
        title = resolve_relationship_record_title(extracted.related_resource, related, foreign_key)
        return extracted._with(data={"id": foreign_key, "title": title})


# The End
