# -*- coding: utf-8 -*-
"""
__init__

Metadata schema used across the package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .descriptors import (
    AssociationKind,
    AssociationMapping,
    EditMode,
    FieldKind,
    FieldMapping,
    FieldOptions,
    ModelMetadata,
)

__all__ = [
    "AssociationKind",
    "AssociationMapping",
    "EditMode",
    "FieldKind",
    "FieldMapping",
    "FieldOptions",
    "ModelMetadata",
]

# The End
