# -*- coding: utf-8 -*-
"""
base

Common surface of relationship descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Mapping, TypeVar

from pydantic import Field as PField

from ..conf import current_settings
from ..core.exceptions import RelationshipError, UnknownRelationshipKindError
from ..core.types import LoadingStrategy, RelationshipKind
from ..fields.base import FieldDescriptor
from ..schema.descriptors import HoverCardOptions

_R = TypeVar("_R", bound="RelationshipDescriptor")
_H = TypeVar("_H")

QueryCallback = Callable[[Any], Any]
HoverCardResolver = Callable[[Any, Any, Any], Any]


def resolve_related(related: Any) -> tuple[str, Any]:
    """Return ``(slug, resource)`` for a slug string or a resource object.

    Resource objects expose ``slug()`` or a ``slug`` attribute; anything else
    yields an empty slug.
    """

    if related is None:
        return "", None
    if isinstance(related, str):
        return related, None
    slug = getattr(related, "slug", None)
    if callable(slug):
        slug = slug()
    if isinstance(slug, str):
        return slug, related
    return "", None


def relationship_kind_of(field: Any) -> RelationshipKind:
    """Return the kind of a relationship descriptor or raise for anything else."""
    kind = getattr(type(field), "relationship_kind", None)
    if not isinstance(kind, RelationshipKind):
        raise UnknownRelationshipKindError(
            f"{type(field).__name__} is not a supported relationship field"
        )
    return kind


def dispatch(table: Mapping[RelationshipKind, _H], field: Any) -> _H:
    """Pick the handler registered for the kind of ``field``."""
    kind = relationship_kind_of(field)
    try:
        return table[kind]
    except KeyError:
        raise UnknownRelationshipKindError(f"no handler for relationship kind {kind.value!r}") from None


def _identity(query: Any) -> Any:
    return query


def format_morph_types(mapping: Mapping[str, str]) -> list[dict[str, str]]:
    """Client options for a discriminator mapping, labels capitalised."""
    return [
        {"label": slug[:1].upper() + slug[1:], "value": db_type, "slug": slug}
        for db_type, slug in mapping.items()
    ]


class RelationshipDescriptor(FieldDescriptor):
    """
    Relationship Descriptor

    Describes an association to another resource. The descriptor only carries
    configuration; loading, counting and validation against storage are done
    by the facades in :mod:`adminfields.relations` through a backend.
    """

    relationship_kind: ClassVar[RelationshipKind]

    related_slug: str = ""
    related_resource: Any = None
    display_key: str = "name"
    searchable_columns: tuple[str, ...] = ()
    query_callback: QueryCallback | None = None
    loading_strategy: LoadingStrategy = LoadingStrategy.EAGER

    foreign_key_name: str = ""
    owner_key_name: str = "id"
    pivot_table_name: str = ""
    related_key_name: str = ""
    morph_type_column: str = ""
    type_mapping: dict[str, str] = PField(default_factory=dict)
    display_mapping: dict[str, str] = PField(default_factory=dict)
    hover_card_options: HoverCardOptions | None = None

    def __init__(self, name: str, key: str | None = None, related: Any = None, /, **data: Any) -> None:
        slug, resource = resolve_related(related)
        props = dict(data.pop("props", None) or {})
        if related is not None:
            props["related_resource"] = slug
            if resource is not None:
                props["related_resource_instance"] = resource
        data.setdefault("loading_strategy", current_settings().default_loading_strategy)
        super().__init__(
            name, key, related_slug=slug, related_resource=resource, props=props, **data
        )

    # === Configuration ===
    def display_using_key(self: _R, key: str) -> _R:
        return self._with(display_key=key)

    def with_searchable_columns(self: _R, *columns: str) -> _R:
        return self._with(searchable_columns=tuple(columns))

    def query(self: _R, fn: QueryCallback) -> _R:
        return self._with(query_callback=fn)

    def foreign_key(self: _R, column: str) -> _R:
        return self._with(foreign_key_name=column)

    def owner_key(self: _R, column: str) -> _R:
        return self._with(owner_key_name=column)

    def with_eager_load(self: _R) -> _R:
        return self._with(loading_strategy=LoadingStrategy.EAGER)

    def with_lazy_load(self: _R) -> _R:
        return self._with(loading_strategy=LoadingStrategy.LAZY)

    # === Hover card ===
    def with_hover_card(
        self: _R, width: str = "md", open_delay: int = 200, close_delay: int = 300
    ) -> _R:
        current = self.hover_card_options or HoverCardOptions()
        options = current.model_copy(
            update={
                "enabled": True,
                "width": width,
                "open_delay": max(open_delay, 0),
                "close_delay": max(close_delay, 0),
            }
        )
        return self._with_hover_card(options)

    def resolve_hover_card(self: _R, fn: HoverCardResolver) -> _R:
        """Use ``fn(record, related_id, field)`` to build the card payload."""
        current = self.hover_card_options or HoverCardOptions()
        return self._with_hover_card(current.model_copy(update={"resolver": fn}))

    def disable_hover_card(self: _R) -> _R:
        current = self.hover_card_options or HoverCardOptions()
        return self._with_hover_card(current.model_copy(update={"enabled": False}))

    def get_hover_card(self) -> HoverCardOptions | None:
        return self.hover_card_options

    def hover_card_data(self, record: Any, related_id: Any) -> Any:
        options = self.hover_card_options
        if options is None or not options.enabled or options.resolver is None:
            return None
        return options.resolver(record, related_id, self)

    def _with_hover_card(self: _R, options: HoverCardOptions) -> _R:
        props = {
            **self.props,
            "hover_card": options.to_dict(),
            "hover_card_enabled": options.enabled,
        }
        return self._with(hover_card_options=options, props=props)

    # === Accessors ===
    def get_relationship_type(self) -> str:
        return self.relationship_kind.value

    def get_related_resource(self) -> str:
        return self.related_slug

    def get_relationship_name(self) -> str:
        return self.name

    def get_display_key(self) -> str:
        return self.display_key or "name"

    def get_searchable_columns(self) -> list[str]:
        return list(self.searchable_columns)

    def get_query_callback(self) -> QueryCallback:
        return self.query_callback or _identity

    def get_loading_strategy(self) -> LoadingStrategy:
        return self.loading_strategy

    def get_types(self) -> dict[str, str]:
        return dict(self.type_mapping)

    def get_foreign_key(self) -> str:
        return self.foreign_key_name

    def get_owner_key(self) -> str:
        return self.owner_key_name

    def get_pivot_table(self) -> str:
        return self.pivot_table_name

    def get_related_key(self) -> str:
        return self.related_key_name

    def get_related_table(self) -> str:
        return self.related_slug

    # === Behaviour ===
    def resolve_relationship(self, item: Any) -> Any:
        return None

    def validate_relationship(self, value: Any) -> None:
        """Raise :class:`RelationshipError` when a required relation is missing."""
        if value is None and self.is_required:
            raise RelationshipError(
                self.name,
                self.relationship_kind,
                "Related resource is required",
                {"related_resource": self.related_slug},
            )

    def json_serialize(self) -> dict[str, Any]:
        payload = super().json_serialize()
        # resource objects are not JSON material
        payload["props"].pop("related_resource_instance", None)
        return payload


class PivotMixin:
    """Join-table configuration shared by the many-to-many variants."""

    def pivot_table(self, table: str):
        return self._with(pivot_table_name=table)

    def related_key(self, column: str):
        return self._with(related_key_name=column)


class MorphMixin:
    """Discriminator handling shared by the polymorphic variants."""

    def types(self, mapping: Mapping[str, str]):
        mapping = dict(mapping)
        return self._with(
            type_mapping=mapping,
            props={**self.props, "types": format_morph_types(mapping)},
        )

    def displays(self, mapping: Mapping[str, str]):
        mapping = dict(mapping)
        return self._with(display_mapping=mapping, props={**self.props, "displays": mapping})

    def validate_types(self) -> None:
        if not self.type_mapping:
            raise RelationshipError(self.name, self.relationship_kind, "No morph types registered")

    def resource_for_type(self, morph_type: str) -> str:
        try:
            return self.type_mapping[morph_type]
        except KeyError:
            raise RelationshipError(
                self.name,
                self.relationship_kind,
                f"morph type '{morph_type}' is not registered",
                {"type": morph_type},
            ) from None


# The End
