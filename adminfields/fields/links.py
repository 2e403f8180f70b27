# -*- coding: utf-8 -*-
"""
links

Fields pointing at another resource by slug.

Unlike the relationship descriptors these carry no key configuration; the
target resource travels to the client in ``props["resource"]``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..core.types import ElementContext, ElementType
from .base import FieldDescriptor
from .registry import registry


class ResourceLinkField(FieldDescriptor):
    """Base of the link family; hidden on the list unless told otherwise."""

    hidden_on_list: ClassVar[bool] = True

    def __init__(
        self, name: str, resource: str, key: str | None = None, /, **data: Any
    ) -> None:
        props = dict(data.pop("props", None) or {})
        props["resource"] = resource
        if self.hidden_on_list:
            data.setdefault("context", ElementContext.HIDE_ON_LIST)
        super().__init__(name, key, props=props, **data)

    @property
    def resource(self) -> str:
        return self.props.get("resource", "")


@registry.register("link-field", ElementType.LINK)
class LinkField(ResourceLinkField):
    hidden_on_list: ClassVar[bool] = False


@registry.register("detail-field", ElementType.DETAIL)
class DetailField(ResourceLinkField):
    pass


@registry.register("collection-field", ElementType.COLLECTION)
class CollectionField(ResourceLinkField):
    pass


@registry.register("connect-field", ElementType.CONNECT)
class ConnectField(ResourceLinkField):
    pass


@registry.register("poly-link-field", ElementType.POLY_LINK)
class PolyLinkField(FieldDescriptor):
    """Link whose target resource is decided per record."""


@registry.register("poly-detail-field", ElementType.POLY_DETAIL)
class PolyDetailField(ResourceLinkField):
    pass


@registry.register("poly-collection-field", ElementType.POLY_COLLECTION)
class PolyCollectionField(ResourceLinkField):
    pass


@registry.register("poly-connect-field", ElementType.POLY_CONNECT)
class PolyConnectField(ResourceLinkField):
    pass


# The End
