# -*- coding: utf-8 -*-
"""
types

Enumerations shared by field and relationship descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class ElementType(str, Enum):
    """Primitive or relationship kind transmitted as ``type`` to the frontend."""

    TEXT = "text"
    TEXTAREA = "textarea"
    RICHTEXT = "richtext"
    PASSWORD = "password"
    NUMBER = "number"
    MONEY = "money"
    TEL = "tel"
    EMAIL = "email"
    AUDIO = "audio"
    VIDEO = "video"
    DATE = "date"
    DATETIME = "datetime"
    FILE = "file"
    KEY_VALUE = "key_value"
    LINK = "link"
    COLLECTION = "collection"
    DETAIL = "detail"
    CONNECT = "connect"
    POLY_LINK = "poly_link"
    POLY_DETAIL = "poly_detail"
    POLY_COLLECTION = "poly_collection"
    POLY_CONNECT = "poly_connect"
    BOOLEAN = "boolean"
    SELECT = "select"
    PANEL = "panel"
    TABS = "tabs"
    STACK = "stack"
    REPEATER = "repeater"
    RELATIONSHIP = "relationship"
    BADGE = "badge"
    CODE = "code"
    COLOR = "color"
    BOOLEAN_GROUP = "boolean_group"
    DIALOG = "dialog"


class ElementContext(str, Enum):
    """Stored placement hint of a field across admin views."""

    FORM = "form"
    DETAIL = "detail"
    LIST = "list"

    SHOW_ON_FORM = "show_on_form"
    SHOW_ON_DETAIL = "show_on_detail"
    SHOW_ON_LIST = "show_on_list"

    HIDE_ON_LIST = "hide_on_list"
    HIDE_ON_DETAIL = "hide_on_detail"
    HIDE_ON_CREATE = "hide_on_create"
    HIDE_ON_UPDATE = "hide_on_update"

    ONLY_ON_LIST = "only_on_list"
    ONLY_ON_DETAIL = "only_on_detail"
    ONLY_ON_CREATE = "only_on_create"
    ONLY_ON_UPDATE = "only_on_update"
    ONLY_ON_FORM = "only_on_form"


class VisibilityContext(str, Enum):
    """UI context requested when deciding whether a field renders."""

    INDEX = "index"
    DETAIL = "detail"
    CREATE = "create"
    UPDATE = "update"
    PREVIEW = "preview"


class LoadingStrategy(str, Enum):
    """Declarative hint for the query layer about relationship loading."""

    EAGER = "eager"
    LAZY = "lazy"


class RelationshipKind(str, Enum):
    """Closed set of supported associations."""

    BELONGS_TO = "belongsTo"
    HAS_MANY = "hasMany"
    HAS_ONE = "hasOne"
    BELONGS_TO_MANY = "belongsToMany"
    MORPH_TO = "morphTo"
    MORPH_TO_MANY = "morphToMany"


_ONLY_FORM_VARIANTS = frozenset(
    {
        ElementContext.ONLY_ON_FORM,
        ElementContext.ONLY_ON_CREATE,
        ElementContext.ONLY_ON_UPDATE,
    }
)

# requested context -> stored contexts that hide the field there
HIDDEN_CONTEXTS: Final[dict[VisibilityContext, frozenset[ElementContext]]] = {
    VisibilityContext.INDEX: frozenset(
        {ElementContext.HIDE_ON_LIST, ElementContext.ONLY_ON_DETAIL}
    )
    | _ONLY_FORM_VARIANTS,
    VisibilityContext.DETAIL: frozenset(
        {ElementContext.HIDE_ON_DETAIL, ElementContext.ONLY_ON_LIST}
    )
    | _ONLY_FORM_VARIANTS,
    VisibilityContext.CREATE: frozenset(
        {
            ElementContext.HIDE_ON_CREATE,
            ElementContext.ONLY_ON_LIST,
            ElementContext.ONLY_ON_DETAIL,
            ElementContext.ONLY_ON_UPDATE,
        }
    ),
    VisibilityContext.UPDATE: frozenset(
        {
            ElementContext.HIDE_ON_UPDATE,
            ElementContext.ONLY_ON_LIST,
            ElementContext.ONLY_ON_DETAIL,
            ElementContext.ONLY_ON_CREATE,
        }
    ),
    VisibilityContext.PREVIEW: frozenset(
        {ElementContext.ONLY_ON_LIST, ElementContext.ONLY_ON_DETAIL}
    )
    | _ONLY_FORM_VARIANTS,
}


def is_visible_in_context(
    stored: ElementContext | None, requested: VisibilityContext | str
) -> bool:
    """Return ``True`` when a field stored with ``stored`` renders in ``requested``."""

    if stored is None:
        return True
    requested = VisibilityContext(requested)
    return stored not in HIDDEN_CONTEXTS[requested]


__all__ = [
    "ElementType",
    "ElementContext",
    "VisibilityContext",
    "LoadingStrategy",
    "RelationshipKind",
    "HIDDEN_CONTEXTS",
    "is_visible_in_context",
]


# The End
