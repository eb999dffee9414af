# -*- coding: utf-8 -*-
"""
text

Single-line and multi-line text input widgets.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("text")
class TextWidget(BaseWidget):
    def get_schema(self) -> Dict[str, Any]:
        """Build a JSON Schema representation for the widget."""
        schema: Dict[str, Any] = {
            "type": "string",
            "format": self.options.get("format", "text"),
            "title": self.get_title(),
        }
        max_length = self.options.get("max_length")
        if max_length is None and self.ctx and self.ctx.field_mapping:
            max_length = self.ctx.field_mapping.max_length
        if max_length:
            schema["maxLength"] = max_length
        return self.merge_readonly(schema)

    def to_python(self, value: Any) -> Any:
        transformer = self.options.get("value_transformer")
        if transformer is not None:
            return transformer.transform(value)
        return value


@registry.register("textarea")
class TextAreaWidget(BaseWidget):
    """Multi-line text area."""

    def get_schema(self) -> Dict[str, Any]:
        rows = int(self.options.get("rows", 4))
        return self.merge_readonly({
            "type": "string",
            "format": "textarea",
            "title": self.get_title(),
            "options": {"inputAttributes": {"rows": rows}},
        })

# The End
