# -*- coding: utf-8 -*-
"""
test_field_catalog

Registry of field views and the extra payloads of specialised fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from adminfields.conf import AdminFieldsSettings, configure
from adminfields.core.types import ElementContext
from adminfields.fields import (
    AudioField,
    BadgeField,
    DetailField,
    DialogField,
    FieldRegistry,
    FileField,
    IDField,
    LinkField,
    PanelField,
    RepeaterField,
    RichTextField,
    TabsField,
    TextField,
    TextareaField,
    registry,
)
from adminfields.schema.descriptors import DialogStep


def test_registry_creates_fields_by_view() -> None:
    """Views map back to the registered classes."""

    field = registry.create("text-field", "Title")

    assert isinstance(field, TextField)
    assert field.key == "title"
    assert "belongs-to-field" in registry
    assert "dialog" in registry.views()


def test_registry_rejects_conflicting_views() -> None:
    """A view name can belong to one class only."""

    class FirstField(TextField):
        pass

    class SecondField(TextField):
        pass

    local = FieldRegistry()
    local.register("custom-field")(FirstField)

    assert FirstField.view == "custom-field"
    assert TextField.view == "text-field"
    with pytest.raises(ValueError):
        local.register("custom-field")(SecondField)
    with pytest.raises(KeyError):
        local.create("missing-field", "Name")


def test_id_field_defaults() -> None:
    """The id field reads ``id`` and lives on the list view."""

    field = IDField()

    assert field.key == "id"
    assert field.context is ElementContext.ONLY_ON_LIST
    assert field.json_serialize()["type"] == ""


def test_textarea_rows_are_at_least_one() -> None:
    """Row counts below one are raised to one."""

    assert TextareaField("Bio").rows(0).props["rows"] == 1
    assert TextareaField("Bio").rows(6).props["rows"] == 6


def test_file_attachment_block() -> None:
    """Upload constraints are serialized under ``attachment``."""

    payload = (
        FileField("Contract")
        .accepted_types("application/pdf")
        .max_size(1024)
        .store("s3", "contracts")
        .json_serialize()
    )

    assert payload["view"] == "file-field"
    assert payload["attachment"] == {
        "accepted_types": ["application/pdf"],
        "max_size": 1024,
        "disk": "s3",
        "path": "contracts",
    }
    assert "attachment" not in FileField("Contract").json_serialize()


def test_media_fields_share_the_file_view() -> None:
    """Audio uploads render with the file component but keep their type."""

    payload = AudioField("Voice").json_serialize()

    assert payload["view"] == "file-field"
    assert payload["type"] == "audio"


def test_richtext_editor_block() -> None:
    """Editor options are serialized only when configured."""

    payload = RichTextField("Body").toolbar("bold", "italic").editor_height(300).json_serialize()

    assert payload["editor"] == {"toolbar": ["bold", "italic"], "height": 300, "allowImages": False}
    assert "editor" not in RichTextField("Body").json_serialize()


def test_badge_colors() -> None:
    """Badge colours travel in their own block."""

    payload = BadgeField("Status").colors({"active": "green"}).json_serialize()

    assert payload["badge"] == {"colors": {"active": "green"}}


def test_link_family_visibility_defaults() -> None:
    """Link fields show on the list, the rest of the family does not."""

    detail = DetailField("Owner", "users")
    link = LinkField("Website", "sites")

    assert detail.resource == "users"
    assert detail.context is ElementContext.HIDE_ON_LIST
    assert link.context is None
    assert link.json_serialize()["props"] == {"resource": "sites"}


def test_panel_columns_are_clamped() -> None:
    """Panel columns stay between one and the configured maximum."""

    panel = PanelField("Main", TextField("Name"), TextField("Email"))

    assert panel.with_columns(10).props["columns"] == 4
    assert panel.with_columns(0).props["columns"] == 1
    assert [field.key for field in panel.get_fields()] == ["name", "email"]
    assert [child["key"] for child in panel.json_serialize()["fields"]] == ["name", "email"]


def test_panel_columns_follow_settings() -> None:
    """The column limit comes from the active settings."""

    configure(AdminFieldsSettings(max_panel_columns=2))

    assert PanelField("Main").with_columns(3).props["columns"] == 2


def test_panel_default_collapsed_implies_collapsible() -> None:
    """Collapsed panels can be expanded again."""

    props = PanelField("Extra").default_collapsed().props

    assert props == {"collapsible": True, "defaultCollapsed": True}


def test_tabs_serialize_their_fields() -> None:
    """Tabs keep their order and flatten for form processing."""

    tabs = (
        TabsField("Sections")
        .add_tab("general", "General", TextField("Name"))
        .add_tab("contact", "Contact", TextField("Email"), TextField("Phone"))
        .with_default_tab("general")
    )
    payload = tabs.json_serialize()

    assert [tab["value"] for tab in payload["tabs"]] == ["general", "contact"]
    assert [field["key"] for field in payload["tabs"][1]["fields"]] == ["email", "phone"]
    assert payload["props"]["defaultTab"] == "general"
    assert [field.key for field in tabs.get_fields()] == ["name", "email", "phone"]


def test_repeater_rows_and_bounds() -> None:
    """Rows reduce to nested keys and item counts are checked."""

    repeater = (
        RepeaterField("Phones")
        .fields(TextField("Label"), TextField("Number"))
        .min_items(1)
        .max_items(2)
    )
    record = {"phones": [{"label": "home", "number": "1", "extra": True}]}

    assert repeater.extract(record).data == [{"label": "home", "number": "1"}]
    assert repeater.validate_value([]) == ["At least 1 items are required"]
    assert repeater.validate_value([{}, {}, {}]) == ["At most 2 items are allowed"]
    assert repeater.json_serialize()["repeater"] == {"min_items": 1, "max_items": 2}


def test_dialog_form_serialization() -> None:
    """A form dialog serializes its fields and no steps."""

    payload = (
        DialogField("Invite")
        .with_trigger_button("Invite user")
        .with_title("Invite a colleague")
        .content([TextField("Email")])
        .json_serialize()
    )

    assert payload["view"] == "dialog"
    assert payload["contentType"] == "form"
    assert payload["triggerButton"] == "Invite user"
    assert payload["dialogSize"] == "md"
    assert [field["key"] for field in payload["fields"]] == ["email"]
    assert "steps" not in payload


def test_dialog_wizard_serialization() -> None:
    """A wizard dialog serializes its steps instead of fields."""

    steps = [
        DialogStep(index=0, title="Account", fields=(TextField("Email"),)),
        DialogStep(index=1, title="Profile", can_skip=True),
    ]
    payload = DialogField("Onboarding").content([TextField("Ignored")]).wizard(steps).json_serialize()

    assert payload["contentType"] == "wizard"
    assert "fields" not in payload
    assert payload["steps"][0]["fields"][0]["key"] == "email"
    assert payload["steps"][1]["can_skip"] is True


def test_dialog_size_is_checked() -> None:
    """Only the known dialog sizes are accepted."""

    assert DialogField("Confirm").with_size("lg").dialog_size == "lg"
    with pytest.raises(ValueError):
        DialogField("Confirm").with_size("huge")


# The End
