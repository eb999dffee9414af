# -*- coding: utf-8 -*-
"""
types

Storage type to widget type resolution.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping

from ..exceptions import NoWidgetType

# built-in definition
FORM_TYPES: Mapping[str, str] = {
    "string": "text",
    "text": "textarea",
    "boolean": "checkbox",
    "checkbox": "checkbox",
    "integer": "integer",
    "tinyint": "integer",
    "smallint": "integer",
    "mediumint": "integer",
    "bigint": "integer",
    "decimal": "number",
    "datetime": "datetime",
    "date": "date",
    "choice": "choice",
    "array": "collection",
    "country": "country",
}


class TypeNameResolver:
    """Resolve the widget type name used to render a field description."""

    def __init__(self, types: Mapping[str, str] | None = None) -> None:
        self._types: dict[str, str] = dict(FORM_TYPES)
        if types:
            self._types.update(types)

    @property
    def table(self) -> dict[str, str]:
        return dict(self._types)

    def register(self, storage_type: str, widget_type: str) -> None:
        self._types[storage_type] = widget_type

    def lookup(self, storage_type: Any) -> str | None:
        return self._types.get(storage_type)

    def resolve(self, description: Any) -> str:
        """Return the widget type name for ``description``.

        When the declared type was redefined away from the mapped type, or
        nothing was mapped, only the built-in table is consulted. Otherwise a
        non-empty ``form_field_type`` option wins over the table.
        """
        storage_type = description.type
        mapping_type = description.mapping_type

        if not mapping_type or storage_type != mapping_type:
            type_name = self.lookup(storage_type)
        elif description.get_option("form_field_type"):
            type_name = description.get_option("form_field_type")
        else:
            type_name = self.lookup(storage_type)

        if not type_name:
            raise NoWidgetType(description.field_name, storage_type)
        return type_name


resolver = TypeNameResolver()


def resolve(description: Any) -> str:
    """Resolve ``description`` with the default type table."""
    return resolver.resolve(description)


__all__ = ["FORM_TYPES", "TypeNameResolver", "resolver", "resolve"]

# The End
