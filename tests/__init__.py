# -*- coding: utf-8 -*-
"""
Tests package.

Test-suite for the adminfields field and relationship descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
