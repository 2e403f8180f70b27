# -*- coding: utf-8 -*-
"""
title

Human readable titles for related records.

Resources often fall back to printing the primary key when they have no
better title. In that case a descriptive attribute of the record itself is
preferred.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..utils.attributes import resolver, to_snake

FALLBACK_TITLE_ATTRIBUTES = ("Name", "Title", "Label", "FullName", "DisplayName", "Slug")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def extract_fallback_title(record: Any) -> str:
    """Return the first non-empty descriptive attribute of ``record``."""

    if record is None:
        return ""
    for attribute in FALLBACK_TITLE_ATTRIBUTES:
        for name in (attribute, to_snake(attribute)):
            value, found = resolver.resolve(record, name)
            if found and _text(value):
                return _text(value)
    return ""


def resolve_relationship_record_title(resource: Any, record: Any, id_value: Any) -> str:
    """Title of ``record`` as shown next to its id in relationship fields.

    The resource's own ``record_title`` wins unless it is empty or merely
    repeats the id (``"10"`` or ``"#10"``) and the record offers a fallback.
    """

    if resource is None:
        return ""
    record_title = getattr(resource, "record_title", None)
    title = _text(record_title(record)) if callable(record_title) else ""
    fallback = extract_fallback_title(record)
    if not fallback:
        return title
    id_text = _text(id_value)
    if not title or (id_text and title == id_text) or title == "#" + id_text:
        return fallback
    return title


# The End
