# -*- coding: utf-8 -*-
"""
relations

Select widget for related models.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .choices import ChoiceWidget
from .registry import registry


@registry.register("relation", "orm_one_to_many")
class RelationWidget(ChoiceWidget):
    """Reference picker for one or many related objects."""

    def is_many(self) -> bool:
        return bool(self.options.get("multiple") or (self.ctx and self.ctx.many))

    def get_target(self) -> Any:
        """Return the related model from ``class`` or the widget context."""
        target = self.options.get("class")
        if target is None and self.ctx and self.ctx.association_mapping:
            target = self.ctx.association_mapping.target_entity
        return target

    def get_schema(self) -> Dict[str, Any]:
        """Generate JSON schema for relation selects.

        Uses a checkbox array when multiple selections are allowed and
        annotates single-value relations with ``format="select"`` so the
        frontend renders a proper dropdown control.
        """
        if self.is_many():
            self.options["multiple"] = True
        schema = super().get_schema()
        target = self.get_target()
        if target is not None:
            schema.setdefault("options", {})["target"] = getattr(
                target, "__name__", str(target)
            )
        if self.options.get("expanded"):
            schema["format"] = "radio" if not self.is_many() else "checkbox"
        return schema

    def to_python(self, value: Any) -> Any:
        """Convert related objects to identifiers using the value transformer."""
        transformer = self.options.get("value_transformer")
        if transformer is None:
            return value
        if self.is_many():
            return [transformer.transform(item) for item in value or ()]
        return transformer.transform(value)

# The End
