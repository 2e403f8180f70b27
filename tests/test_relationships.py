# -*- coding: utf-8 -*-
"""
test_relationships

Defaults and configuration of the relationship descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from adminfields.conf import AdminFieldsSettings, configure
from adminfields.core.exceptions import RelationshipError
from adminfields.core.types import LoadingStrategy, RelationshipKind
from adminfields.fields import registry
from adminfields.relations import (
    BelongsToField,
    BelongsToManyField,
    HasManyField,
    HasOneField,
    MorphToField,
    MorphToManyField,
    format_morph_types,
    pivot_table_name,
    resolve_related,
)


@dataclass
class Comment:
    CommentableType: str
    CommentableID: int


def test_belongs_to_defaults() -> None:
    """The key doubles as the foreign key and ``name`` is searchable."""

    field = BelongsToField("Author", "author_id", "users")

    assert field.get_relationship_type() == RelationshipKind.BELONGS_TO.value
    assert field.get_foreign_key() == "author_id"
    assert field.get_searchable_columns() == ["name"]
    assert field.get_related_table() == "users"
    assert field.get_display_key() == "name"


def test_has_relations_point_back_with_slug_key() -> None:
    """Owned relations default to ``<slug>_id`` and the ``id`` owner key."""

    many = HasManyField("Comments", "comments", "comments")
    one = HasOneField("Profile", "profile", "profiles")

    assert many.get_foreign_key() == "comments_id"
    assert many.get_owner_key() == "id"
    assert one.get_foreign_key() == "profiles_id"
    assert many.resolve_relationship({"comments": [1]}) == []
    assert one.resolve_relationship({"profile": 1}) is None


def test_belongs_to_many_pivot_defaults() -> None:
    """The pivot joins both sides alphabetically."""

    field = BelongsToManyField("Tags", "tags", "posts")

    assert pivot_table_name("tags", "posts") == "posts_tags"
    assert field.get_pivot_table() == "posts_tags"
    assert field.get_foreign_key() == "user_id"
    assert field.get_related_key() == "posts_id"
    assert field.pivot_table("post_tag").get_pivot_table() == "post_tag"


def test_morph_to_many_defaults() -> None:
    """Morph pivots are named after the key."""

    field = MorphToManyField("Taggable")

    assert field.get_pivot_table() == "taggables"
    assert field.get_foreign_key() == "tag_id"
    assert field.get_related_key() == "taggable_id"
    assert field.morph_type_column == "taggable_type"
    assert field.morph_type("kind").morph_type_column == "kind"


@pytest.mark.parametrize(
    ("field_class", "name"),
    [(MorphToField, "Commentable"), (MorphToManyField, "Taggable")],
)
def test_morph_types_are_required(field_class: type, name: str) -> None:
    """A morph field without registered types cannot be used."""

    field = field_class(name)

    with pytest.raises(RelationshipError, match="No morph types registered"):
        field.validate_types()

    typed = field.types({"post": "posts"})
    typed.validate_types()

    assert typed.resource_for_type("post") == "posts"
    assert typed.props["types"] == [{"label": "Posts", "value": "post", "slug": "posts"}]
    with pytest.raises(RelationshipError) as exc_info:
        typed.resource_for_type("video")
    assert exc_info.value.context == {"type": "video"}


def test_morph_to_reads_type_and_id() -> None:
    """Both naming conventions of the discriminator columns are read."""

    field = MorphToField("Commentable")
    expected = {"type": "post", "id": 3, "morphToType": "post", "morphToId": 3}

    assert field.resolve_relationship({"commentable_type": "post", "commentable_id": 3}) == expected
    assert field.resolve_relationship(Comment(CommentableType="post", CommentableID=3)) == expected
    assert field.resolve_relationship({"other": 1}) is None
    assert field.extract({"commentable_type": "post", "commentable_id": 3}).data == expected


def test_required_relationship_reports_missing_value() -> None:
    """Required relations reject ``None`` with the related slug attached."""

    field = BelongsToField("Author", "author_id", "users").required()

    with pytest.raises(RelationshipError) as exc_info:
        field.resolve_relationship(None)

    error = exc_info.value
    assert error.field_name == "Author"
    assert error.relationship_type == "belongsTo"
    assert error.context == {"related_resource": "users"}
    BelongsToField("Author", "author_id", "users").validate_relationship(None)


def test_loading_strategy_follows_settings() -> None:
    """The default strategy is configurable and overridable per field."""

    assert BelongsToField("Author", "author_id", "users").get_loading_strategy() is LoadingStrategy.EAGER

    configure(AdminFieldsSettings(default_loading_strategy=LoadingStrategy.LAZY))
    field = HasManyField("Comments", "comments", "comments")

    assert field.get_loading_strategy() is LoadingStrategy.LAZY
    assert field.with_eager_load().get_loading_strategy() is LoadingStrategy.EAGER


def test_query_callback_defaults_to_identity() -> None:
    """Without a callback constraints pass through unchanged."""

    field = HasManyField("Comments", "comments", "comments")
    constraints = {"approved": True}

    assert field.get_query_callback()(constraints) is constraints
    shaped = field.query(lambda query: {**query, "limit": 5}).get_query_callback()(constraints)
    assert shaped == {"approved": True, "limit": 5}


def test_registry_creates_relationship_fields() -> None:
    """Relationship views are registered with the other fields."""

    field = registry.create("belongs-to-field", "Author", "author_id", "users")

    assert isinstance(field, BelongsToField)
    assert field.get_related_resource() == "users"


def test_resolve_related_accepts_slugs_and_objects() -> None:
    """Strings are slugs, objects provide ``slug``."""

    class Users:
        def slug(self) -> str:
            return "users"

    users = Users()

    assert resolve_related("users") == ("users", None)
    assert resolve_related(users) == ("users", users)
    assert resolve_related(42) == ("", None)


def test_format_morph_types_capitalises_labels() -> None:
    """Labels are derived from slugs."""

    assert format_morph_types({"App\\Post": "posts"}) == [
        {"label": "Posts", "value": "App\\Post", "slug": "posts"}
    ]


# The End
