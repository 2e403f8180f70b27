# -*- coding: utf-8 -*-
"""
test_belongs_to

Extraction of belongs-to values with readable record titles.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass

import pytest

from adminfields.relations import (
    BelongsToField,
    extract_fallback_title,
    relation_stem,
    resolve_relationship_record_title,
)


class ProductResource:
    """Resource whose record title is fixed by the test."""

    def __init__(self, title: str) -> None:
        self._title = title

    def slug(self) -> str:
        return "products"

    def record_title(self, record) -> str:
        return self._title


class UntitledResource:
    """Resource without a ``record_title`` hook."""

    slug = "products"


@dataclass
class Product:
    ID: int
    FullName: str


@dataclass
class Order:
    ProductID: int
    Product: Product | None


class SelfResolvingOrder:
    """Order answering attribute lookups from its own value table."""

    def __init__(self, product: Product) -> None:
        self._values = {"product_id": 10, "product": product}

    def get_field_value(self, key: str) -> tuple[object, bool]:
        return self._values.get(key), key in self._values


def product_field(resource) -> BelongsToField:
    return BelongsToField("Product", "product_id", resource)


@pytest.mark.parametrize("title", ["10", "#10", ""])
def test_id_like_titles_use_record_name(title: str) -> None:
    """Titles repeating the id fall back to the record's name."""

    record = {"product_id": 10, "product": {"Name": "Product Name"}}

    extracted = product_field(ProductResource(title)).extract(record)

    assert extracted.data == {"id": 10, "title": "Product Name"}


def test_descriptive_title_is_kept() -> None:
    """A real title from the resource wins over the fallback."""

    record = {"product_id": 10, "product": {"name": "Product Name"}}

    extracted = product_field(ProductResource("Custom Title")).extract(record)

    assert extracted.data == {"id": 10, "title": "Custom Title"}


def test_resource_without_title_hook_uses_fallback() -> None:
    """Resources that cannot title records rely on the record itself."""

    record = {"product_id": 3, "product": {"title": "Lamp"}}

    extracted = product_field(UntitledResource()).extract(record)

    assert extracted.data == {"id": 3, "title": "Lamp"}


def test_struct_records_use_camel_case_members() -> None:
    """``ProductID`` and ``Product`` members are found for ``product_id``."""

    order = Order(ProductID=5, Product=Product(ID=5, FullName="Desk Lamp"))

    extracted = product_field(ProductResource("#5")).extract(order)

    assert extracted.data == {"id": 5, "title": "Desk Lamp"}


def test_weakly_referenced_record_keeps_relation() -> None:
    """A live weak reference to the record resolves the loaded relation."""

    order = Order(ProductID=10, Product=Product(ID=10, FullName="Product Name"))

    extracted = product_field(ProductResource("#10")).extract(weakref.ref(order))

    assert extracted.data == {"id": 10, "title": "Product Name"}


def test_self_resolving_record_keeps_relation() -> None:
    """Records answering ``get_field_value`` provide the loaded relation."""

    order = SelfResolvingOrder(Product(ID=10, FullName="Product Name"))

    extracted = product_field(ProductResource("#10")).extract(order)

    assert extracted.data == {"id": 10, "title": "Product Name"}


def test_missing_relation_yields_none() -> None:
    """Without the loaded relation there is nothing to show."""

    extracted = product_field(ProductResource("x")).extract({"product_id": 10})

    assert extracted.data is None
    assert product_field(ProductResource("x")).extract({"product_id": 10, "product": {}}).data is None


def test_slug_only_field_keeps_raw_key() -> None:
    """A field configured with a slug keeps the bare foreign key."""

    extracted = product_field("products").extract({"product_id": 10, "product": {"name": "A"}})

    assert extracted.data == 10
    assert extracted.get_related_resource() == "products"


def test_display_callback_keeps_raw_key() -> None:
    """A display callback takes over rendering of the raw key."""

    field = product_field(ProductResource("x")).display_using(lambda value: f"#{value}")

    assert field.extract({"product_id": 10, "product": {"name": "A"}}).data == 10


def test_serialized_props_omit_resource_object() -> None:
    """Only the slug of the related resource is sent to the client."""

    payload = product_field(ProductResource("x")).json_serialize()

    assert payload["props"] == {"related_resource": "products"}
    assert payload["view"] == "belongs-to-field"
    assert payload["type"] == "relationship"


def test_title_without_fallback_is_returned_as_is() -> None:
    """Records lacking descriptive attributes keep the resource title."""

    title = resolve_relationship_record_title(ProductResource("10"), {"sku": "X"}, 10)

    assert title == "10"
    assert resolve_relationship_record_title(None, {"name": "A"}, 1) == ""


def test_fallback_title_order() -> None:
    """``Name`` is preferred over ``Title`` and blank values are skipped."""

    assert extract_fallback_title({"name": " ", "title": "Second"}) == "Second"
    assert extract_fallback_title({"Title": "T", "Name": "N"}) == "N"
    assert extract_fallback_title(None) == ""


@pytest.mark.parametrize(
    ("key", "stem"),
    [("author_id", "author"), ("AuthorID", "Author"), ("authorId", "author"), ("owner", "owner")],
)
def test_relation_stem(key: str, stem: str) -> None:
    """Foreign key suffixes are removed to name the loaded relation."""

    assert relation_stem(key) == stem


# The End
