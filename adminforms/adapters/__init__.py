# -*- coding: utf-8 -*-
"""
__init__

Model managers providing ORM metadata to the form contractor.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseModelManager
from .registry import ManagerRegistry, registry

__all__ = ["BaseModelManager", "ManagerRegistry", "registry"]

# The End
