# -*- coding: utf-8 -*-
"""
choices

Select widgets working with pre-calculated choices.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

from .base import BaseWidget
from .registry import registry

COUNTRIES: tuple[tuple[str, str], ...] = (
    ("DE", "Germany"),
    ("ES", "Spain"),
    ("FR", "France"),
    ("GB", "United Kingdom"),
    ("IT", "Italy"),
    ("US", "United States"),
)


@registry.register("choice")
class ChoiceWidget(BaseWidget):
    """Simple select based on enum/enum_titles."""

    def get_choices(self) -> Iterable[Any]:
        return self.options.get("choices") or ()

    def build_choices(self) -> tuple[list[Any], list[str]]:
        """Split ``(value, label)`` pairs or plain values into enum lists."""
        enum: list[Any] = []
        titles: list[str] = []
        for choice in self.get_choices():
            if isinstance(choice, (list, tuple)) and len(choice) == 2:
                value, title = choice
            else:
                value, title = choice, choice
            enum.append(value)
            titles.append(str(title))
        return enum, titles

    def get_schema(self) -> Dict[str, Any]:
        enum, titles = self.build_choices()
        if self.options.get("multiple"):
            schema: Dict[str, Any] = {
                "type": "array",
                "title": self.get_title(),
                "format": "checkbox",
                "uniqueItems": True,
                "items": {
                    "type": "string",
                    "enum": enum,
                    "options": {"enum_titles": titles},
                },
            }
            return self.merge_readonly(schema)
        schema = {
            "type": "string",
            "title": self.get_title(),
            "enum": enum,
            "format": "select",
        }
        if enum:
            schema["options"] = {"enum_titles": titles}
        return self.merge_readonly(schema)


@registry.register("country")
class CountryWidget(ChoiceWidget):
    """Country select; the default list is replaced by a ``choices`` option."""

    def get_choices(self) -> Iterable[Any]:
        return self.options.get("choices") or COUNTRIES

# The End
