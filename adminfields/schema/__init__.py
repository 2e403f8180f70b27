# -*- coding: utf-8 -*-
"""
schema

Value objects shared by descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .descriptors import (
    AttachmentOptions,
    DialogStep,
    FieldUpdate,
    HoverCardOptions,
    RepeaterOptions,
    RichTextOptions,
    Tab,
    ValidationRule,
)

__all__ = [
    "AttachmentOptions",
    "DialogStep",
    "FieldUpdate",
    "HoverCardOptions",
    "RepeaterOptions",
    "RichTextOptions",
    "Tab",
    "ValidationRule",
]


# The End
