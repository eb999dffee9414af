# -*- coding: utf-8 -*-
"""
registry

Widget registry and the factory producing default widgets for model fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Type

from ..adapters.base import BaseModelManager
from .base import BaseWidget
from .context import WidgetContext

logger = logging.getLogger(__name__)


class WidgetRegistry:
    def __init__(self) -> None:
        self._by_key: Dict[str, Type[BaseWidget]] = {}

    def register(self, key: str, *aliases: str):
        """Decorator to register a widget by key (and optional aliases)."""
        def _decorator(cls: Type[BaseWidget]) -> Type[BaseWidget]:
            cls.key = key
            for name in (key, *aliases):
                self._by_key[name] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[BaseWidget] | None:
        return self._by_key.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key


registry = WidgetRegistry()


class WidgetFactory:
    """Build the default widget for a field of a model.

    The widget key comes from the model metadata: relations render as
    ``relation`` selects, scalar fields use the type table of the resolver.
    Unknown keys fall back to a plain ``text`` widget.
    """

    def __init__(
        self,
        widgets: WidgetRegistry | None = None,
        type_table: Mapping[str, str] | None = None,
        model_manager: BaseModelManager | None = None,
    ) -> None:
        self.widgets = widgets or registry
        self.type_table = type_table or {}
        self.model_manager = model_manager

    def resolve_key(
        self,
        model: Any,
        field_name: str,
        manager: BaseModelManager | None = None,
    ) -> tuple[str, WidgetContext]:
        """Map a model field to a widget key and its context."""
        manager = manager or self.model_manager
        ctx = WidgetContext(model=model, name=field_name)
        if manager is None or not manager.has_metadata(model):
            return "text", ctx

        metadata = manager.get_metadata(model)
        association = metadata.association_mappings.get(field_name)
        if association is not None:
            ctx = WidgetContext(model=model, name=field_name, association_mapping=association)
            return "relation", ctx

        mapping = metadata.field_mappings.get(field_name)
        if mapping is None:
            return "text", ctx
        ctx = WidgetContext(model=model, name=field_name, field_mapping=mapping)
        return self.type_table.get(mapping.type, "text"), ctx

    def get_instance(
        self,
        model: Any,
        field_name: str,
        options: Mapping[str, Any] | None = None,
        *,
        manager: BaseModelManager | None = None,
    ) -> BaseWidget:
        """Return a configured widget instance for ``model.field_name``."""
        key, ctx = self.resolve_key(model, field_name, manager)
        widget_cls = self.widgets.get(key)
        if widget_cls is None:
            logger.debug("No widget registered for '%s', using text for %s", key, field_name)
            widget_cls = self.widgets.get("text")
        opts = dict(options or {})
        if ctx.many:
            opts.setdefault("multiple", True)
        return widget_cls(field_name, opts, ctx=ctx)


__all__ = ["WidgetRegistry", "WidgetFactory", "registry"]

# The End
