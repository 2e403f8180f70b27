# -*- coding: utf-8 -*-
"""
utils

Helper utilities for the field layer.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .attributes import AttributeResolver, AttributeSource, resolve_attribute, resolver

__all__ = ["AttributeResolver", "AttributeSource", "resolve_attribute", "resolver"]


# The End
