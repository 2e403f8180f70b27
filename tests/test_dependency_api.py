# -*- coding: utf-8 -*-
"""
test_dependency_api

HTTP endpoint resolving field dependencies.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from adminfields.api import DependencyAPI, iter_form_fields
from adminfields.conf import AdminFieldsSettings, configure
from adminfields.fields import PanelField, SelectField, TabsField, TextField
from adminfields.schema.descriptors import FieldUpdate


def state_options(field, form_data, request):
    states = {"us": {"ca": "California"}}
    return FieldUpdate().set_options(states.get(form_data.get("country"), {})).show()


def build_client(fields: list, prefix: str | None = None) -> TestClient:
    app = FastAPI()
    app.include_router(DependencyAPI(fields, prefix).router)
    return TestClient(app)


def address_fields() -> list:
    return [
        PanelField(
            "Address",
            SelectField("Country"),
            SelectField("State").depends_on("country").on_dependency_change(state_options),
        )
    ]


def test_iter_form_fields_inlines_layouts() -> None:
    """Panels and tabs contribute their children, not themselves."""

    tabs = TabsField("Sections").add_tab("main", "Main", TextField("Name"))
    keys = [field.key for field in iter_form_fields([*address_fields(), tabs, TextField("Notes")])]

    assert keys == ["country", "state", "name", "notes"]


def test_resolves_dependent_fields() -> None:
    """Changed fields produce updates keyed by dependent field."""

    client = build_client(address_fields())

    response = client.post(
        "/api/fields/dependencies",
        json={"formData": {"country": "us"}, "context": "create", "changedFields": ["country"]},
    )

    assert response.status_code == 200
    assert response.json() == {"fields": {"state": {"visible": True, "options": {"ca": "California"}}}}


def test_rejects_unknown_context() -> None:
    """Only create and update forms have dependencies."""

    client = build_client(address_fields())

    response = client.post(
        "/api/fields/dependencies",
        json={"formData": {}, "context": "index", "changedFields": ["country"]},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid context. Must be 'create' or 'update'"


def test_reports_circular_dependencies() -> None:
    """Cyclic definitions are a client-visible error."""

    fields = [TextField("A").depends_on("b"), TextField("B").depends_on("a")]
    client = build_client(fields)

    response = client.post(
        "/api/fields/dependencies",
        json={"formData": {}, "context": "update", "changedFields": ["a"]},
    )

    assert response.status_code == 400
    assert "circular dependency" in response.json()["detail"]


def test_missing_context_is_a_validation_error() -> None:
    """The request body must name the form context."""

    client = build_client(address_fields())

    response = client.post("/api/fields/dependencies", json={"formData": {}})

    assert response.status_code == 422


def test_prefix_follows_settings() -> None:
    """The route is mounted under the configured API prefix."""

    configure(AdminFieldsSettings(api_prefix="admin/api/"))
    client = build_client(address_fields())

    response = client.post(
        "/admin/api/fields/dependencies",
        json={"formData": {"country": "us"}, "context": "update", "changedFields": ["country"]},
    )

    assert response.status_code == 200
    assert "state" in response.json()["fields"]


def test_explicit_prefix_wins() -> None:
    """An explicit prefix overrides the settings."""

    api = DependencyAPI(address_fields(), "/v2")

    assert api.DEPENDENCIES_PATH == "/v2/fields/dependencies"


# The End
