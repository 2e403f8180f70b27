# -*- coding: utf-8 -*-
"""
datetime

Date and date-time pickers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from ..core.types import ElementType
from .base import FieldDescriptor
from .registry import registry


class _TemporalField(FieldDescriptor):

    def display_format(self, fmt: str):
        """Format string the client uses to render the value."""
        return self.with_props("format", fmt)

    def min_date(self, value: str):
        return self.with_props("minDate", value)

    def max_date(self, value: str):
        return self.with_props("maxDate", value)


@registry.register("date-field", ElementType.DATE)
class DateField(_TemporalField):
    pass


@registry.register("datetime-field", ElementType.DATETIME)
class DateTimeField(_TemporalField):
    pass


# The End
