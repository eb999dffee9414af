# -*- coding: utf-8 -*-
"""
tortoise

Tortoise ORM model manager.

This module defines :class:`TortoiseModelManager`, which introspects
Tortoise models into :class:`ModelMetadata` so the form contractor can
decide widgets without depending directly on Tortoise APIs.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from tortoise import Tortoise, fields
from tortoise.models import Model as TortoiseModel

from ..schema.descriptors import (
    AssociationKind, AssociationMapping, FieldMapping, ModelMetadata
)
from .base import BaseModelManager
from .registry import registry


Model = TortoiseModel


class TortoiseModelManager(BaseModelManager):
    """Metadata provider backed by Tortoise ``_meta`` information."""

    name = "tortoise"

    def __init__(self) -> None:
        self._cache: dict[type[Any], ModelMetadata] = {}

    def clear_cache(self) -> None:
        """Forget introspected metadata, e.g. after ``Tortoise.init``."""
        self._cache.clear()

    def has_metadata(self, model: Any) -> bool:
        if not isinstance(model, type) or not issubclass(model, Model):
            return False
        meta = getattr(model, "_meta", None)
        return bool(getattr(meta, "fields_map", None))

    def get_metadata(self, model: Any) -> ModelMetadata:
        """Build (and cache) the metadata of ``model``.

        Relations are classified from the Tortoise ``_meta`` sets; the
        ``*_id`` source columns of foreign keys are skipped because the
        relation itself already describes them.
        """
        cached = self._cache.get(model)
        if cached is not None:
            return cached

        meta = model._meta
        field_mappings: dict[str, FieldMapping] = {}
        association_mappings: dict[str, AssociationMapping] = {}

        source_fields = {
            getattr(meta.fields_map[name], "source_field", None) or f"{name}_id"
            for name in (set(meta.fk_fields) | set(meta.o2o_fields))
        }

        for name, f in meta.fields_map.items():
            if name in source_fields:
                continue
            kind = self._association_kind(meta, name)
            if kind is not None:
                association_mappings[name] = AssociationMapping(
                    field_name=name,
                    type=kind,
                    target_entity=getattr(f, "related_model", None),
                    mapped_by=getattr(f, "relation_field", None),
                    nullable=bool(getattr(f, "null", True)),
                )
                continue
            field_mappings[name] = FieldMapping(
                field_name=name,
                type=self._type_for_field(f),
                nullable=bool(getattr(f, "null", False)),
                unique=bool(getattr(f, "unique", False)),
                primary_key=bool(getattr(f, "pk", False)),
                max_length=getattr(f, "max_length", None),
            )

        metadata = ModelMetadata(
            model=self.get_dotted(model),
            pk_attr=meta.pk_attr,
            field_mappings=field_mappings,
            association_mappings=association_mappings,
        )
        self._cache[model] = metadata
        return metadata

    def get_dotted(self, model: type[Any]) -> str:
        return f"{self._app_label(model)}.{model.__name__}"

    def get_model(self, dotted: str) -> type[Model]:
        """Return the model registered under ``app.Model``."""
        app_label, model_name = dotted.split(".", 1)
        apps = Tortoise.apps
        if apps is None:
            raise LookupError(f"Tortoise is not initialized; cannot resolve '{dotted}'")
        try:
            return apps[app_label][model_name]
        except KeyError as exc:
            raise LookupError(f"Model '{dotted}' is not registered with Tortoise") from exc

    async def get_or_none(self, model: Any, **filters: Any) -> Any | None:
        if isinstance(model, str):
            model = self.get_model(model)
        return await model.get_or_none(**filters)

    def _association_kind(self, meta: Any, name: str) -> AssociationKind | None:
        if name in meta.o2o_fields or name in meta.backward_o2o_fields:
            return AssociationKind.ONE_TO_ONE
        if name in meta.fk_fields:
            return AssociationKind.MANY_TO_ONE
        if name in meta.backward_fk_fields:
            return AssociationKind.ONE_TO_MANY
        if name in meta.m2m_fields:
            return AssociationKind.MANY_TO_MANY
        return None

    def _type_for_field(self, f: fields.Field) -> str:
        """Map a Tortoise field instance to a storage type name."""
        if getattr(f, "enum_type", None) is not None or getattr(f, "choices", None):
            return "choice"
        if isinstance(f, fields.BooleanField):
            return "boolean"
        if isinstance(f, fields.SmallIntField):
            return "smallint"
        if isinstance(f, fields.BigIntField):
            return "bigint"
        if isinstance(f, fields.IntField):
            return "integer"
        # float columns edit like decimals
        if isinstance(f, (fields.FloatField, fields.DecimalField)):
            return "decimal"
        if isinstance(f, fields.DatetimeField):
            return "datetime"
        if isinstance(f, fields.DateField):
            return "date"
        if isinstance(f, fields.JSONField):
            return "array"
        if isinstance(f, fields.TextField):
            return "text"
        if isinstance(f, fields.BinaryField):
            return "binary"
        return "string"

    def _app_label(self, model: type[Any]) -> str:
        """Return the app label for a model, with safe fallback."""
        meta = getattr(model, "_meta", None)
        label = getattr(meta, "app", None)
        if label:
            return label
        return model.__module__.split(".")[0]


tortoise_manager = TortoiseModelManager()
registry.register(tortoise_manager)

__all__ = ["TortoiseModelManager", "tortoise_manager", "Model"]

# The End
