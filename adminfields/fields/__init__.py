# -*- coding: utf-8 -*-
"""
fields

Field descriptors. Importing this package registers every built-in field
class in :data:`registry`.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import ALL_CONTEXTS, FieldDescriptor, default_key
from .choices import (
    BadgeField,
    BooleanGroupField,
    ComboboxField,
    KeyValueField,
    SelectField,
    SwitchField,
)
from .datetime import DateField, DateTimeField
from .dependency import DependencyResolver
from .dialog import DialogContentType, DialogField
from .file import AudioField, FileField, ImageField, VideoField
from .layout import PanelField, TabsField
from .links import (
    CollectionField,
    ConnectField,
    DetailField,
    LinkField,
    PolyCollectionField,
    PolyConnectField,
    PolyDetailField,
    PolyLinkField,
    ResourceLinkField,
)
from .registry import FieldRegistry, registry
from .repeater import RepeaterField
from .richtext import RichTextField
from .text import (
    CodeField,
    ColorField,
    EmailField,
    IDField,
    NumberField,
    PasswordField,
    TelField,
    TextField,
    TextareaField,
)

__all__ = [
    "ALL_CONTEXTS",
    "AudioField",
    "BadgeField",
    "BooleanGroupField",
    "CodeField",
    "CollectionField",
    "ColorField",
    "ComboboxField",
    "ConnectField",
    "DateField",
    "DateTimeField",
    "DependencyResolver",
    "DetailField",
    "DialogContentType",
    "DialogField",
    "EmailField",
    "FieldDescriptor",
    "FieldRegistry",
    "FileField",
    "IDField",
    "ImageField",
    "KeyValueField",
    "LinkField",
    "NumberField",
    "PanelField",
    "PasswordField",
    "PolyCollectionField",
    "PolyConnectField",
    "PolyDetailField",
    "PolyLinkField",
    "RepeaterField",
    "ResourceLinkField",
    "RichTextField",
    "SelectField",
    "SwitchField",
    "TabsField",
    "TelField",
    "TextField",
    "TextareaField",
    "VideoField",
    "default_key",
    "registry",
]


# The End
