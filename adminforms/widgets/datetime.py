# -*- coding: utf-8 -*-
"""
datetime

Date and date-time pickers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("datetime")
class DateTimeWidget(BaseWidget):
    """Date-time picker; ``years`` limits the selectable year range."""

    input_type = "datetime-local"

    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "string",
            "format": self.input_type,
            "title": self.get_title(),
        }
        years = self.options.get("years")
        if years:
            schema["options"] = {
                "inputAttributes": {
                    "min": f"{min(years)}-01-01",
                    "max": f"{max(years)}-12-31",
                }
            }
        return self.merge_readonly(schema)


@registry.register("date")
class DateWidget(DateTimeWidget):
    input_type = "date"

# The End
