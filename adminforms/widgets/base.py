# -*- coding: utf-8 -*-
"""
base

Base widget class.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping

from .context import WidgetContext


class BaseWidget(ABC):
    """
    Base Widget Class

    A widget is a form-field rendering component identified by ``key`` and
    configured by an options bag. Widgets provide JSON Schema fragments
    describing how the field is rendered.
    """
    key: str = "base"

    def __init__(
        self,
        name: str,
        options: Mapping[str, Any] | None = None,
        ctx: WidgetContext | None = None,
    ) -> None:
        self.name = name
        self.options: dict[str, Any] = dict(options or {})
        self.ctx = ctx

    def get_title(self) -> str:
        label = self.options.get("label")
        if label:
            return str(label)
        name = self.name.replace("_", "\u00A0")
        return name[:1].upper() + name[1:]

    # === Schema Generation ===
    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """JSON Schema fragment for a specific field."""
        raise NotImplementedError

    def merge_readonly(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """Insert the ``readonly`` flag into the schema if needed."""
        if self.options.get("readonly"):
            schema["readonly"] = True
        return schema

    # === Value Converters ===
    def to_python(self, value: Any) -> Any:
        return value

    def to_storage(self, value: Any) -> Any:
        return value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.key}:{self.name}>"

# The End
