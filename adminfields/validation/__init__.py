# -*- coding: utf-8 -*-
"""
validation

Validation rules for field values.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .rules import *  # noqa: F401,F403
from .rules import __all__  # noqa: F401


# The End
