# -*- coding: utf-8 -*-
"""
__init__

Map model field metadata to editable admin form widgets.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .admin import AdminPool, BaseAdmin, FieldDescription
from .conf import FormSettings, configure, current_settings
from .exceptions import (
    AdminNotRegistered,
    FormContractorError,
    InlineRecursionError,
    MissingAssociationAdmin,
    MissingType,
    NoWidgetType,
    UnknownFormField,
)
from .forms import FormBuilder, FormContractor, FormFactory, TypeNameResolver
from .schema import AssociationKind, FieldKind

__version__ = "0.1.0"

__all__ = [
    "AdminNotRegistered",
    "AdminPool",
    "AssociationKind",
    "BaseAdmin",
    "FieldDescription",
    "FieldKind",
    "FormBuilder",
    "FormContractor",
    "FormContractorError",
    "FormFactory",
    "FormSettings",
    "InlineRecursionError",
    "MissingAssociationAdmin",
    "MissingType",
    "NoWidgetType",
    "TypeNameResolver",
    "UnknownFormField",
    "configure",
    "current_settings",
]

# The End
