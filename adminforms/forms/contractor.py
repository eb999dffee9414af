# -*- coding: utf-8 -*-
"""
contractor

Map field descriptions of an admin to form builder entries.

The contractor normalizes descriptions against the model metadata
(``fix_field_description``) and then emits one entry per field
(``add_field``). Relations are rendered as pickers, nested inline forms or
collections of nested forms depending on their cardinality and ``edit``
mode.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from ..conf import FormSettings, current_settings
from ..exceptions import (
    FormContractorError,
    InlineRecursionError,
    MissingAssociationAdmin,
    MissingType,
    NoWidgetType,
)
from ..schema.descriptors import FieldKind
from ..widgets import BaseWidget, FieldGroupWidget, TextWidget, WidgetFactory
from ..widgets import registry as widget_registry
from .builder import FormBuilder, FormFactory
from .transformers import EntityToIdTransformer
from .types import TypeNameResolver

logger = logging.getLogger(__name__)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; nested mappings merge too."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class FormContractor:
    """Build form entries from admin field descriptions."""

    def __init__(
        self,
        form_factory: FormFactory | None = None,
        widget_factory: WidgetFactory | None = None,
        resolver: TypeNameResolver | None = None,
        *,
        settings: FormSettings | None = None,
    ) -> None:
        self.form_factory = form_factory or FormFactory()
        self.resolver = resolver or TypeNameResolver()
        self.widget_factory = widget_factory or WidgetFactory(
            type_table=self.resolver.table
        )
        self._settings = settings
        self._handlers: dict[FieldKind, Callable[[FormBuilder, Any], None]] = {
            FieldKind.ONE_TO_ONE: self._add_one_to_one_field,
            FieldKind.ONE_TO_MANY: self._add_one_to_many_field,
            FieldKind.MANY_TO_MANY: self._add_many_to_many_field,
            FieldKind.MANY_TO_ONE: self._add_many_to_one_field,
            FieldKind.SCALAR: self._add_scalar_field,
        }

    @property
    def settings(self) -> FormSettings:
        return self._settings or current_settings()

    # --- type resolution ----------------------------------------------------
    def get_form_type_name(self, description: Any) -> str:
        """Return the widget type name of ``description`` or raise ``NoWidgetType``."""
        return self.resolver.resolve(description)

    # --- nested forms -------------------------------------------------------
    def define_child_form_builder(
        self,
        builder: FormBuilder,
        description: Any,
        field_name: str | None = None,
    ) -> FormBuilder:
        """Embed the form of the related admin under ``field_name``.

        The nested scope is bound to a fresh instance of the related model and
        populated by the related admin itself, so inline associations of the
        related admin nest further. An admin never defines a scope nested
        inside a scope it already defines.
        """
        field_name = field_name or description.field_name
        associated_admin = description.association_admin
        if associated_admin is None:
            raise MissingAssociationAdmin(field_name)

        chain = [node.admin for node in builder.lineage() if node.admin is not None]
        chain.reverse()
        if (
            any(admin is associated_admin for admin in chain)
            or len(chain) >= self.settings.max_inline_depth
        ):
            names = [_admin_name(admin) for admin in chain + [associated_admin]]
            raise InlineRecursionError(field_name, names)

        # retrieve the related object
        target_object = associated_admin.get_new_instance()

        child_builder = builder.build(field_name, "form")
        child_builder.set_data(target_object)
        child_builder.admin = associated_admin
        logger.debug(
            "Defining inline form `%s` with %s", field_name, _admin_name(associated_admin)
        )
        associated_admin.define_form_builder(child_builder)
        return child_builder

    def add_new_instance(self, obj: Any, description: Any) -> Any:
        """Attach a new related instance to ``obj`` and return it.

        ``obj.add_<field>(instance)`` is preferred; a plain list attribute is
        appended to otherwise.
        """
        associated_admin = description.association_admin
        if associated_admin is None:
            raise MissingAssociationAdmin(description.field_name)

        instance = associated_admin.get_new_instance()
        mapping = description.association_mapping
        field_name = mapping.field_name if mapping is not None else description.field_name

        method = getattr(obj, f"add_{field_name}", None)
        if callable(method):
            method(instance)
            return instance
        value = getattr(obj, field_name, None)
        if isinstance(value, list):
            value.append(instance)
            return instance
        raise FormContractorError(
            f"Cannot add a new `{field_name}` item to {type(obj).__name__}"
        )

    def ensure_min_instances(self, obj: Any, description: Any) -> int:
        """Add new related instances until the ``min`` option is satisfied.

        Only list and tuple values are counted; lazy ORM relations are left
        untouched. Returns the number of instances added.
        """
        minimum = int(description.get_option("min", 0) or 0)
        if minimum <= 0:
            return 0
        value = description.get_value(obj)
        if value is None:
            value = ()
        if not isinstance(value, (list, tuple)):
            logger.debug(
                "Skipping min=%s for `%s`: %s is not a list",
                minimum, description.field_name, type(value).__name__,
            )
            return 0
        missing = minimum - len(value)
        for _ in range(missing):
            self.add_new_instance(obj, description)
        return max(missing, 0)

    # --- association handlers -----------------------------------------------
    def _add_one_to_one_field(self, builder: FormBuilder, description: Any) -> None:
        # tweak the widget depend on the edit mode
        if description.get_option("edit") == "inline":
            self.define_child_form_builder(builder, description)
            return

        admin = description.admin
        form_field_options = description.get_option("form_field_options", {})
        options = {
            "value_transformer": EntityToIdTransformer(
                admin.get_model_manager().get_entity_manager(),
                description.target_entity,
            )
        }
        options.update(form_field_options)

        if description.get_option("edit") == "list":
            widget: BaseWidget = TextWidget(description.field_name, options)
        else:
            widget_type = description.get_option("form_field_type")
            if not widget_type:
                widget = self.widget_factory.get_instance(
                    admin.get_class(),
                    description.field_name,
                    form_field_options,
                    manager=admin.get_model_manager(),
                )
            else:
                widget_cls = self._widget_class(description, widget_type)
                widget = widget_cls(description.field_name, options)

        builder.add(description.field_name, widget)

    def _add_one_to_many_field(self, builder: FormBuilder, description: Any) -> None:
        if description.get_option("edit") != "inline":
            self._add_many_to_many_field(builder, description)
            return

        field_name = description.field_name
        # build the prototype instance, then take it out of the builder
        self.define_child_form_builder(builder, description)
        prototype = builder.get(field_name)
        builder.remove(field_name)

        data = builder.get_data()
        if data is not None:
            self.ensure_min_instances(data, description)

        # create a collection type with the generated prototype
        options = dict(description.get_option("form_field_options", {}))
        options["prototype"] = prototype
        builder.add(field_name, self.settings.collection_type, options)

    def _add_many_to_many_field(self, builder: FormBuilder, description: Any) -> None:
        # the one-to-many default is kept for compatibility with existing themes
        type_name = description.get_option("form_field_type", self.settings.relation_type)
        options = dict(description.get_option("form_field_options", {}))

        options["em"] = description.admin.get_model_manager().get_entity_manager()
        options["class"] = description.target_entity
        options["multiple"] = True
        options["field_description"] = description

        builder.add(description.name, type_name, options)

    def _add_many_to_one_field(self, builder: FormBuilder, description: Any) -> None:
        # tweak the widget depend on the edit mode
        if description.get_option("edit") == "inline":
            self.define_child_form_builder(builder, description)
            return

        type_name = description.get_option("form_field_type", self.settings.relation_type)
        options = deep_merge(
            {
                "em": description.admin.get_model_manager().get_entity_manager(),
                "class": description.target_entity,
                "expanded": False,
                "edit": description.get_option("edit", self.settings.default_edit),
            },
            description.get_option("form_field_options", {}),
        )
        options["field_description"] = description

        builder.add(description.name, type_name, options)

    def _add_scalar_field(self, builder: FormBuilder, description: Any) -> None:
        builder.add(
            description.field_name,
            self.get_form_type_name(description),
            description.get_option("form_field_options", {}),
        )

    def _widget_class(self, description: Any, widget_type: Any) -> type[BaseWidget]:
        if isinstance(widget_type, type) and issubclass(widget_type, BaseWidget):
            return widget_type
        widget_cls = widget_registry.get(str(widget_type))
        if widget_cls is None:
            raise NoWidgetType(description.field_name, str(widget_type))
        return widget_cls

    # --- public entry points --------------------------------------------------
    def add_field(self, builder: FormBuilder, description: Any) -> None:
        """Add the entry for ``description`` into ``builder``."""
        kind = description.kind
        logger.debug("Adding %s field `%s`", kind.value, description.name)
        self._handlers[kind](builder, description)

    def fix_field_description(
        self,
        admin: Any,
        description: Any,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Define the correct default settings for ``description``."""
        settings = self.settings
        description.merge_options(options or {})

        manager = admin.get_model_manager()
        model = admin.get_class()
        if manager is not None and manager.has_metadata(model):
            metadata = manager.get_metadata(model)

            # set the default field mapping
            field_mapping = metadata.field_mappings.get(description.name)
            if field_mapping is not None:
                description.set_field_mapping(field_mapping)

            # set the default association mapping
            association_mapping = metadata.association_mappings.get(description.name)
            if association_mapping is not None:
                description.set_association_mapping(association_mapping)

        if not description.type:
            raise MissingType(description.name, _admin_name(admin))

        description.admin = admin
        description.set_option(
            "edit", description.get_option("edit", settings.default_edit)
        )

        kind = description.kind
        if not description.template:
            suffix = description.type if kind is FieldKind.SCALAR else f"orm_{kind.value}"
            description.template = settings.template_name(suffix)

        if (
            kind is FieldKind.ONE_TO_MANY
            and description.get_option("edit") == "inline"
            and not description.get_option("widget_form_field")
        ):
            description.set_option("widget_form_field", FieldGroupWidget)

        if kind is not FieldKind.SCALAR:
            admin.attach_admin_class(description)

        # set correct default value
        if description.type == "datetime":
            form_field_options = dict(description.get_option("form_field_options", {}))
            form_field_options.setdefault("years", settings.years)
            description.set_option("form_field_options", form_field_options)

    def get_form_builder(
        self, name: str = "form", options: Mapping[str, Any] | None = None
    ) -> FormBuilder:
        return self.form_factory.create_builder("form", name, options)


def _admin_name(admin: Any) -> str:
    return getattr(admin, "name", None) or type(admin).__name__


__all__ = ["FormContractor", "deep_merge"]

# The End
