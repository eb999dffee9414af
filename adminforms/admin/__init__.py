# -*- coding: utf-8 -*-
"""
__init__

Admin configuration objects and their pool.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseAdmin
from .fields import FieldDescription
from .pool import AdminPool

__all__ = ["AdminPool", "BaseAdmin", "FieldDescription"]

# The End
