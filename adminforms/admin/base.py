# -*- coding: utf-8 -*-
"""
base

Admin configuration object driving form construction for one model.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from ..adapters.base import BaseModelManager
from ..conf import FormSettings
from ..forms.builder import FormBuilder
from ..forms.contractor import FormContractor
from .fields import FieldDescription

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .pool import AdminPool

logger = logging.getLogger(__name__)

FieldSpec = str | tuple[str, Mapping[str, Any]]


class BaseAdmin:
    """Form configuration of one model.

    ``form_fields`` lists the edited fields, either as names or as
    ``(name, options)`` pairs. ``type`` and ``template`` keys of the options
    go to the field description, the rest become field options. Without
    ``form_fields`` every mapped field except the primary key and columns
    without a widget type (binary data) is edited.
    """

    model: Any = None
    form_fields: Sequence[FieldSpec] = ()
    exclude: Sequence[str] = ()
    label: str | None = None

    def __init__(
        self,
        model: Any = None,
        model_manager: BaseModelManager | None = None,
        *,
        contractor: FormContractor | None = None,
        pool: AdminPool | None = None,
    ) -> None:
        if model is not None:
            self.model = model
        self.model_manager = model_manager
        self.contractor = contractor or FormContractor()
        self.pool = pool
        self._descriptions: list[FieldDescription] | None = None
        self._descriptions_settings: FormSettings | None = None

    @property
    def name(self) -> str:
        return self.label or type(self).__name__

    def get_class(self) -> Any:
        return self.model

    def get_model_manager(self) -> BaseModelManager | None:
        return self.model_manager

    def get_new_instance(self) -> Any:
        return self.model()

    # --- field descriptions -------------------------------------------------
    def get_form_field_specs(self) -> list[tuple[str, dict[str, Any]]]:
        if self.form_fields:
            specs = []
            for spec in self.form_fields:
                if isinstance(spec, str):
                    specs.append((spec, {}))
                else:
                    name, options = spec
                    specs.append((name, dict(options)))
            return specs

        manager = self.get_model_manager()
        if manager is None or not manager.has_metadata(self.model):
            return []
        metadata = manager.get_metadata(self.model)
        resolver = self.contractor.resolver
        names = []
        for name, mapping in metadata.field_mappings.items():
            if mapping.primary_key:
                continue
            if resolver.lookup(mapping.type) is None:
                logger.debug(
                    "Skipping `%s` of %s: no widget for %r", name, self.name, mapping.type
                )
                continue
            names.append(name)
        names.extend(metadata.association_mappings)
        return [(name, {}) for name in names if name not in self.exclude]

    def get_form_field_descriptions(self) -> list[FieldDescription]:
        """Return the normalized field descriptions.

        Descriptions are built once per settings instance; installing new
        settings rebuilds them on the next call.
        """
        settings = self.contractor.settings
        if self._descriptions is None or self._descriptions_settings is not settings:
            descriptions = []
            for name, options in self.get_form_field_specs():
                description = FieldDescription(
                    name,
                    type=options.pop("type", None),
                    template=options.pop("template", None),
                )
                self.contractor.fix_field_description(self, description, options)
                descriptions.append(description)
            self._descriptions = descriptions
            self._descriptions_settings = settings
        return self._descriptions

    # --- form building ------------------------------------------------------
    def define_form_builder(self, builder: FormBuilder) -> None:
        """Add every form field of this admin into ``builder``."""
        builder.admin = self
        for description in self.get_form_field_descriptions():
            self.contractor.add_field(builder, description)

    def get_form_builder(self, obj: Any = None) -> FormBuilder:
        """Return the root form bound to ``obj`` or to a new instance."""
        builder = self.contractor.get_form_builder(
            self.name, {"data_class": self.model}
        )
        builder.set_data(obj if obj is not None else self.get_new_instance())
        self.define_form_builder(builder)
        return builder

    def attach_admin_class(self, description: FieldDescription) -> None:
        """Link ``description`` to the admin governing its related model."""
        if self.pool is None:
            logger.warning(
                "%s is not registered in a pool; `%s` has no related admin",
                self.name, description.name,
            )
            return
        admin = self.pool.get_admin_by_class(description.target_entity)
        if admin is None:
            logger.warning(
                "No admin registered for %r (field `%s` of %s)",
                description.target_entity, description.name, self.name,
            )
            return
        description.association_admin = admin
        logger.debug("Attached %s to `%s` of %s", admin.name, description.name, self.name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} model={getattr(self.model, '__name__', self.model)}>"


__all__ = ["BaseAdmin", "FieldSpec"]

# The End
