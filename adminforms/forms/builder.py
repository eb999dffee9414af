# -*- coding: utf-8 -*-
"""
builder

Form builder accumulating field entries and nested form scopes.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping

from pydantic import BaseModel

from ..exceptions import UnknownFormField
from ..widgets import BaseWidget, registry as widget_registry

# Option keys holding runtime handles that are never serialized.
PRIVATE_OPTIONS = frozenset({"em", "field_description", "value_transformer"})


class FormBuilder:
    """A named form node: either a field entry or a nested form scope.

    Children are kept in insertion order. ``admin`` is set on scopes that an
    admin populated through ``define_form_builder``.
    """

    def __init__(
        self,
        name: str,
        type: str = "form",
        options: Mapping[str, Any] | None = None,
        *,
        parent: FormBuilder | None = None,
        widget: BaseWidget | None = None,
    ) -> None:
        self.name = name
        self.type = type
        self.options: dict[str, Any] = dict(options or {})
        self.parent = parent
        self.widget = widget
        self.admin: Any = None
        self._data: Any = None
        self._children: dict[str, FormBuilder] = {}

    # --- children -----------------------------------------------------------
    def add(
        self,
        name: str,
        type: str | BaseWidget,
        options: Mapping[str, Any] | None = None,
    ) -> FormBuilder:
        """Add a field entry; ``type`` is a widget key or a widget instance."""
        widget = None
        if isinstance(type, BaseWidget):
            widget = type
            merged = dict(widget.options)
            merged.update(options or {})
            options, type = merged, widget.key
        self._children[name] = FormBuilder(
            name, type, options, parent=self, widget=widget
        )
        return self

    def build(
        self,
        name: str,
        type: str = "form",
        options: Mapping[str, Any] | None = None,
    ) -> FormBuilder:
        """Create a nested scope named ``name`` and return it."""
        child = FormBuilder(name, type, options, parent=self)
        self._children[name] = child
        return child

    def get(self, name: str) -> FormBuilder:
        try:
            return self._children[name]
        except KeyError:
            raise UnknownFormField(name) from None

    def has(self, name: str) -> bool:
        return name in self._children

    def remove(self, name: str) -> FormBuilder:
        """Detach child ``name``; missing names are ignored."""
        child = self._children.pop(name, None)
        if child is not None:
            child.parent = None
        return self

    @property
    def children(self) -> list[FormBuilder]:
        return list(self._children.values())

    def __iter__(self) -> Iterator[FormBuilder]:
        return iter(self.children)

    def __contains__(self, name: object) -> bool:
        return name in self._children

    # --- data ---------------------------------------------------------------
    def set_data(self, data: Any) -> FormBuilder:
        self._data = data
        return self

    def get_data(self) -> Any:
        return self._data

    def lineage(self) -> Iterator[FormBuilder]:
        """Yield this builder followed by its ancestors."""
        node: FormBuilder | None = self
        while node is not None:
            yield node
            node = node.parent

    # --- serialization ------------------------------------------------------
    def get_schema(self) -> Dict[str, Any]:
        """Return the JSON Schema fragment of this node."""
        if self.widget is not None:
            return self.widget.get_schema()
        if self._children:
            return {
                "type": "object",
                "title": self.options.get("label") or self.name,
                "properties": {
                    child.name: child.get_schema() for child in self.children
                },
            }
        widget_cls = widget_registry.get(self.type)
        if widget_cls is None:
            return {"type": "string", "title": self.name, "format": self.type}
        return widget_cls(self.name, self.options).get_schema()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "options": {
                key: _serialize(value)
                for key, value in self.options.items()
                if key not in PRIVATE_OPTIONS
            },
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self) -> str:
        return f"<FormBuilder {self.name}:{self.type} children={list(self._children)}>"


def _serialize(value: Any) -> Any:
    if isinstance(value, FormBuilder):
        return value.to_dict()
    if isinstance(value, BaseWidget):
        return value.get_schema()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    if isinstance(value, Mapping):
        return {str(k): _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset, range)):
        return [_serialize(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


class FormFactory:
    """Create root form builders."""

    builder_class = FormBuilder

    def create_builder(
        self,
        type: str = "form",
        name: str = "form",
        options: Mapping[str, Any] | None = None,
    ) -> FormBuilder:
        return self.builder_class(name, type, options)


__all__ = ["FormBuilder", "FormFactory", "PRIVATE_OPTIONS"]

# The End
