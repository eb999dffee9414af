# -*- coding: utf-8 -*-
"""
descriptors

Metadata descriptors shared by the model managers and the form contractor.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field as PField

EditMode = Literal["standard", "inline", "list"]


class AssociationKind(str, Enum):
    """Cardinality of a relation between two models."""

    ONE_TO_ONE = "one_to_one"
    MANY_TO_ONE = "many_to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_MANY = "many_to_many"


class FieldKind(str, Enum):
    """Closed set of variants the form contractor dispatches on."""

    ONE_TO_ONE = "one_to_one"
    MANY_TO_ONE = "many_to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_MANY = "many_to_many"
    SCALAR = "scalar"

    @classmethod
    def of(cls, type_name: Any) -> "FieldKind":
        """Return the variant matching ``type_name``; plain types are scalar."""
        if isinstance(type_name, Enum):
            type_name = type_name.value
        try:
            kind = cls(type_name)
        except ValueError:
            return cls.SCALAR
        return kind


class FieldMapping(BaseModel):
    """Storage mapping of a scalar model field."""

    field_name: str
    type: str
    nullable: bool = False
    unique: bool = False
    primary_key: bool = False
    max_length: int | None = None


class AssociationMapping(BaseModel):
    """Relation metadata: the target model and the cardinality."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    field_name: str
    type: AssociationKind
    target_entity: Any  # model class or dotted path "app.Model"
    mapped_by: Optional[str] = None
    nullable: bool = True


class ModelMetadata(BaseModel):
    """Introspected field and association mappings of one model."""

    model: str
    pk_attr: str = "id"
    field_mappings: dict[str, FieldMapping] = PField(default_factory=dict)
    association_mappings: dict[str, AssociationMapping] = PField(default_factory=dict)


class FieldOptions(BaseModel):
    """Recognized field options plus a residual map for custom keys.

    Unknown keys passed by admin configuration are kept as extras, so a
    caller may look up ``help`` or ``label`` the same way as ``edit``.
    """

    model_config = ConfigDict(
        extra="allow", arbitrary_types_allowed=True, validate_assignment=True
    )

    edit: Optional[EditMode] = None
    form_field_type: Any = None
    form_field_options: Optional[dict[str, Any]] = None
    min: Optional[int] = None
    widget_form_field: Any = None

    def get(self, name: str, default: Any = None) -> Any:
        """Return option ``name`` or ``default`` when it is unset or ``None``."""
        if name in type(self).model_fields:
            value = getattr(self, name)
        else:
            value = (self.model_extra or {}).get(name)
        return default if value is None else value

    def set(self, name: str, value: Any) -> None:
        setattr(self, name, value)

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def merge(self, options: Mapping[str, Any] | None) -> None:
        """Overwrite options with the entries of ``options``."""
        for key, value in (options or {}).items():
            self.set(key, value)

    def extras(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


__all__ = [
    "EditMode",
    "AssociationKind",
    "FieldKind",
    "FieldMapping",
    "AssociationMapping",
    "ModelMetadata",
    "FieldOptions",
]

# The End
