# -*- coding: utf-8 -*-
"""
test_field_descriptor

Visibility, immutability, extraction and serialization of field descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from adminfields.core.types import ElementContext
from adminfields.fields import TextField

SERIALIZED_KEYS = {
    "view",
    "type",
    "key",
    "name",
    "data",
    "props",
    "context",
    "placeholder",
    "label",
    "help_text",
    "read_only",
    "disabled",
    "required",
    "nullable",
    "sortable",
    "filterable",
    "stacked",
    "text_align",
}


@pytest.mark.parametrize(
    ("setter", "expected"),
    [
        (None, {"index": True, "detail": True, "create": True, "update": True}),
        ("hide_on_list", {"index": False, "detail": True, "create": True, "update": True}),
        ("hide_on_detail", {"index": True, "detail": False, "create": True, "update": True}),
        ("hide_on_create", {"index": True, "detail": True, "create": False, "update": True}),
        ("hide_on_update", {"index": True, "detail": True, "create": True, "update": False}),
        ("only_on_list", {"index": True, "detail": False, "create": False, "update": False}),
        ("only_on_detail", {"index": False, "detail": True, "create": False, "update": False}),
        ("only_on_create", {"index": False, "detail": False, "create": True, "update": False}),
        ("only_on_update", {"index": False, "detail": False, "create": False, "update": True}),
        ("only_on_form", {"index": False, "detail": False, "create": True, "update": True}),
    ],
)
def test_visibility_by_context(setter: str | None, expected: dict[str, bool]) -> None:
    """Each stored placement hides the field in exactly the expected views."""

    field = TextField("Name")
    if setter is not None:
        field = getattr(field, setter)()

    actual = {context: field.is_visible_in_context(context) for context in expected}
    assert actual == expected


def test_preview_hides_only_variants() -> None:
    """Preview shows plain fields and hides every ``only_on`` placement."""

    assert TextField("Name").is_visible_in_context("preview")
    assert TextField("Name").hide_on_list().is_visible_in_context("preview")
    assert not TextField("Name").only_on_list().is_visible_in_context("preview")
    assert not TextField("Name").only_on_form().is_visible_in_context("preview")


def test_unknown_visibility_context_is_rejected() -> None:
    """Only the known UI contexts are accepted."""

    with pytest.raises(ValueError):
        TextField("Name").hide_on_list().is_visible_in_context("sidebar")


def test_setters_return_copies() -> None:
    """Fluent setters never alter the descriptor they are called on."""

    field = TextField("Name")
    required = field.required().placeholder("Your name")

    assert required is not field
    assert required.is_required is True
    assert required.placeholder_text == "Your name"
    assert field.is_required is False
    assert field.placeholder_text == ""


def test_props_are_not_shared_between_copies() -> None:
    """Adding a prop to a copy leaves the original's props untouched."""

    field = TextField("Name")
    tweaked = field.with_props("maxlength", 10)

    assert tweaked.props == {"maxlength": 10}
    assert field.props == {}


def test_default_key_and_label() -> None:
    """Keys derive from the name and the label defaults to it."""

    field = TextField("Full Name")

    assert field.key == "full_name"
    assert field.label_text == "Full Name"
    assert TextField("Name", "username").key == "username"


def test_empty_key_is_rejected() -> None:
    """A blank key cannot be used to read records."""

    with pytest.raises(ValueError):
        TextField("Name", "   ")


def test_extract_reads_key_without_resolve_callback() -> None:
    """``extract`` copies the raw value and ignores the resolve callback."""

    field = TextField("Full Name").resolve(lambda value: "changed")
    extracted = field.extract({"full_name": "Ann Lee"})

    assert extracted.data == "Ann Lee"
    assert field.data is None


def test_extract_missing_attribute_is_none() -> None:
    """A record without the key yields ``None`` data."""

    assert TextField("Email").extract({"name": "Ann"}).data is None


def test_json_serialize_has_fixed_shape() -> None:
    """Serialized descriptors expose exactly the documented keys."""

    payload = TextField("Name").hide_on_list().json_serialize()

    assert set(payload) == SERIALIZED_KEYS
    assert payload["view"] == "text-field"
    assert payload["type"] == "text"
    assert payload["context"] == ElementContext.HIDE_ON_LIST.value
    assert payload["label"] == "Name"


def test_json_serialize_is_repeatable() -> None:
    """Serializing twice yields equal payloads and leaves the field intact."""

    field = TextField("Name").with_props("rows", 2).extract({"name": "Ann"})

    first = field.json_serialize()
    first["props"]["rows"] = 99
    second = field.json_serialize()

    assert second["props"] == {"rows": 2}
    assert second["data"] == "Ann"
    assert second["context"] == ""


def test_visibility_callback_receives_request() -> None:
    """``can_see`` decides visibility per request."""

    field = TextField("Secret").can_see(lambda request: request == "admin")

    assert field.is_visible("admin") is True
    assert field.is_visible("guest") is False
    assert TextField("Name").is_visible() is True


def test_validate_value_collects_messages() -> None:
    """Required fields report emptiness before their other rules."""

    field = TextField("Code").required().max_length(5)

    assert field.validate_value("") == ["This field is required"]
    assert field.validate_value("hello!") == ["This field must be at most 5 characters"]
    assert field.validate_value("hello") == []


def test_dependency_callback_falls_back_to_all_contexts() -> None:
    """Context-specific callbacks win over the catch-all one."""

    def everywhere(field, form_data, request):
        return None

    def on_create(field, form_data, request):
        return None

    field = (
        TextField("City")
        .on_dependency_change(everywhere)
        .on_dependency_change(on_create, "create")
    )

    assert field.get_dependency_callback("create") is on_create
    assert field.get_dependency_callback("update") is everywhere


# The End
