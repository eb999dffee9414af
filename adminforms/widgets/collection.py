# -*- coding: utf-8 -*-
"""
collection

Editable collections of nested forms.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("collection", "admin_collection")
class CollectionWidget(BaseWidget):
    """Repeated entries; new rows are cloned from the ``prototype`` form."""

    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "array",
            "title": self.get_title(),
            "format": "table",
        }
        prototype = self.options.get("prototype")
        if prototype is not None:
            schema["items"] = prototype.get_schema()
        else:
            schema["items"] = {"type": "string"}
        if self.options.get("min"):
            schema["minItems"] = int(self.options["min"])
        return self.merge_readonly(schema)


@registry.register("field_group")
class FieldGroupWidget(BaseWidget):
    """Group of nested fields rendered as one object."""

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_readonly({
            "type": "object",
            "title": self.get_title(),
            "format": "grid",
            "properties": dict(self.options.get("properties") or {}),
        })

# The End
