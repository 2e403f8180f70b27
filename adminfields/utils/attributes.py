# -*- coding: utf-8 -*-
"""
attributes

Best-effort lookup of a named attribute on arbitrary records.

Records may be mappings, plain objects, dataclasses or pydantic models. A
record can also answer lookups itself by implementing ``get_field_value``.
A missing attribute is never an error: callers receive ``(None, False)`` so
that serialization of a partially loaded record keeps going.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import dataclasses
import inspect
import re
import weakref
from collections.abc import Mapping
from typing import Any, Iterator, Protocol, runtime_checkable

from pydantic import BaseModel

_MISSING = object()
_WORD_SPLIT = re.compile(r"[_\-\s.]+")


@runtime_checkable
class AttributeSource(Protocol):
    """Records that resolve their own attributes."""

    def get_field_value(self, key: str) -> tuple[Any, bool]:
        ...


def to_camel(key: str) -> str:
    """Return ``key`` in upper camel case (``author_id`` -> ``AuthorId``)."""

    parts = [part for part in _WORD_SPLIT.split(key) if part]
    return "".join(part[:1].upper() + part[1:] for part in parts)


def to_snake(name: str) -> str:
    """Return ``name`` in snake case (``FullName`` -> ``full_name``)."""

    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name)
    return snake.lower()


def bare_tag(tag: str) -> str:
    """Strip trailing options such as ``,omitempty`` from a serialization tag."""

    return tag.split(",", 1)[0].strip()


class AttributeResolver:
    """Locate a record attribute by name, naming convention or tag."""

    def resolve(self, record: Any, key: str) -> tuple[Any, bool]:
        """Return ``(value, found)`` for ``key`` on ``record``."""

        if record is None or not key:
            return None, False

        if isinstance(record, weakref.ReferenceType):
            record = record()
            if record is None:
                return None, False

        if isinstance(record, AttributeSource) and not isinstance(record, type):
            return record.get_field_value(key)

        if isinstance(record, Mapping):
            if key in record:
                return record[key], True
            return None, False

        for name in self._candidate_names(key):
            value = self._read(record, name)
            if value is not _MISSING:
                return value, True

        for member, tag in self._tagged_members(record):
            if bare_tag(tag) == key:
                value = self._read(record, member)
                if value is not _MISSING:
                    return value, True
                return None, False

        return None, False

    def member_names(self, record: Any) -> list[str]:
        """Return the externally readable member names of ``record``."""

        if record is None:
            return []
        if isinstance(record, Mapping):
            return [key for key in record.keys() if isinstance(key, str)]

        names: list[str] = []
        if isinstance(record, BaseModel):
            names.extend(type(record).model_fields)
            names.extend((record.model_extra or {}).keys())
        elif dataclasses.is_dataclass(record) and not isinstance(record, type):
            names.extend(field.name for field in dataclasses.fields(record))
        else:
            names.extend(getattr(record, "__dict__", {}).keys())
            for klass in type(record).__mro__:
                slots = klass.__dict__.get("__slots__", ())
                if isinstance(slots, str):
                    slots = (slots,)
                names.extend(slots)

        seen: set[str] = set()
        result: list[str] = []
        for name in names:
            if name.startswith("_") or name in seen:
                continue
            seen.add(name)
            result.append(name)
        return result

    def _candidate_names(self, key: str) -> list[str]:
        camel = to_camel(key)
        names = [key, camel]
        if camel.endswith("Id"):
            names.append(camel[:-2] + "ID")
        return [name for i, name in enumerate(names) if name and name not in names[:i]]

    def _read(self, record: Any, name: str) -> Any:
        if name.startswith("_"):
            return _MISSING
        value = getattr(record, name, _MISSING)
        if value is _MISSING or inspect.isroutine(value):
            return _MISSING
        return value

    def _tagged_members(self, record: Any) -> Iterator[tuple[str, str]]:
        if isinstance(record, BaseModel):
            for name, info in type(record).model_fields.items():
                for alias in (info.alias, info.serialization_alias, info.validation_alias):
                    if isinstance(alias, str) and alias:
                        yield name, alias
        elif dataclasses.is_dataclass(record) and not isinstance(record, type):
            for field in dataclasses.fields(record):
                tag = field.metadata.get("json")
                if isinstance(tag, str) and tag:
                    yield field.name, tag


resolver = AttributeResolver()


def resolve_attribute(record: Any, key: str) -> tuple[Any, bool]:
    """Module-level shortcut for :meth:`AttributeResolver.resolve`."""

    return resolver.resolve(record, key)


__all__ = [
    "AttributeResolver",
    "AttributeSource",
    "bare_tag",
    "resolve_attribute",
    "resolver",
    "to_camel",
    "to_snake",
]


# The End
