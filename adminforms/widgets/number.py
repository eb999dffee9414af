# -*- coding: utf-8 -*-
"""
number

Widgets for numeric fields (integers and decimals).

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("number")
class NumberWidget(BaseWidget):
    """Render numeric values using JSON Schema number/integer types."""

    schema_type = "number"
    step = "0.1"

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_readonly({
            "type": self.schema_type,
            "title": self.get_title(),
            "format": "number",
            "options": {
                "inputAttributes": {
                    "step": self.options.get("step", self.step),
                }
            },
        })


@registry.register("integer")
class IntegerWidget(NumberWidget):
    schema_type = "integer"
    step = "1"

# The End
