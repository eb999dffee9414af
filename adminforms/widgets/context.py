# -*- coding: utf-8 -*-
"""
context

Widget context helper.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from ..schema.descriptors import AssociationMapping, FieldMapping


@dataclass(frozen=True)
class WidgetContext:
    """What a widget built by the factory knows about its model field."""
    model: Any                                        # model class
    name: str                                         # field name in the form
    field_mapping: Optional[FieldMapping] = None      # scalar storage mapping
    association_mapping: Optional[AssociationMapping] = None

    @property
    def many(self) -> bool:
        rel = self.association_mapping
        return bool(rel and rel.type.value in ("one_to_many", "many_to_many"))

# The End
