# -*- coding: utf-8 -*-
"""
api

HTTP endpoints exposed by the field layer.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .dependencies import DependencyAPI, ResolveDependenciesRequest, iter_form_fields

__all__ = ["DependencyAPI", "ResolveDependenciesRequest", "iter_form_fields"]


# The End
