# -*- coding: utf-8 -*-
"""
__init__

Form building: type resolution, builders and the form contractor.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .builder import FormBuilder, FormFactory
from .contractor import FormContractor, deep_merge
from .transformers import EntityToIdTransformer
from .types import FORM_TYPES, TypeNameResolver, resolve, resolver

__all__ = [
    "FORM_TYPES",
    "EntityToIdTransformer",
    "FormBuilder",
    "FormContractor",
    "FormFactory",
    "TypeNameResolver",
    "deep_merge",
    "resolve",
    "resolver",
]

# The End
