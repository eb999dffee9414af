# -*- coding: utf-8 -*-
"""
fields

Field descriptions handed by admins to the form contractor.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import weakref
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping

from ..schema.descriptors import (
    AssociationMapping, FieldKind, FieldMapping, FieldOptions
)

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .base import BaseAdmin


class FieldDescription:
    """Mutable description of one form field of an admin.

    ``type`` holds either a storage type (``"string"``, ``"datetime"``) or an
    association kind value. Mappings copied from model metadata never
    replace a type, mapping type or field name that is already set, so an
    explicitly declared type survives normalization.
    """

    def __init__(
        self,
        name: str,
        type: str | Enum | None = None,
        options: Mapping[str, Any] | FieldOptions | None = None,
        *,
        template: str | None = None,
        field_name: str | None = None,
    ) -> None:
        self.name = name
        self.field_name = field_name or name
        self.type: str | None = _type_value(type)
        self.mapping_type: str | None = None
        self.field_mapping: FieldMapping | None = None
        self.association_mapping: AssociationMapping | None = None
        self.template = template
        self.association_admin: BaseAdmin | None = None
        self._admin_ref: weakref.ReferenceType[Any] | None = None
        if isinstance(options, FieldOptions):
            self.options = options
        else:
            self.options = FieldOptions(**dict(options or {}))

    # --- owning admin -------------------------------------------------------
    @property
    def admin(self) -> BaseAdmin | None:
        if self._admin_ref is None:
            return None
        return self._admin_ref()

    @admin.setter
    def admin(self, admin: BaseAdmin | None) -> None:
        self._admin_ref = weakref.ref(admin) if admin is not None else None

    # --- mappings -----------------------------------------------------------
    def set_field_mapping(self, mapping: FieldMapping) -> None:
        self.field_mapping = mapping
        self.type = self.type or mapping.type
        self.mapping_type = self.mapping_type or mapping.type
        self.field_name = self.field_name or mapping.field_name

    def set_association_mapping(self, mapping: AssociationMapping) -> None:
        self.association_mapping = mapping
        self.type = self.type or mapping.type.value
        self.mapping_type = self.mapping_type or mapping.type.value
        self.field_name = mapping.field_name

    @property
    def kind(self) -> FieldKind:
        return FieldKind.of(self.type)

    @property
    def target_entity(self) -> Any:
        if self.association_mapping is None:
            return None
        return self.association_mapping.target_entity

    # --- options ------------------------------------------------------------
    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def set_option(self, name: str, value: Any) -> None:
        self.options.set(name, value)

    def merge_options(self, options: Mapping[str, Any]) -> None:
        self.options.merge(options)

    def get_value(self, obj: Any) -> Any:
        return getattr(obj, self.field_name, None)

    def __repr__(self) -> str:
        return f"<FieldDescription {self.name}:{self.type}>"


def _type_value(value: str | Enum | None) -> str | None:
    if isinstance(value, Enum):
        return value.value
    return value


__all__ = ["FieldDescription"]

# The End
