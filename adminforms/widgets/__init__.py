# -*- coding: utf-8 -*-
"""
__init__

Form widgets and the widget factory.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .base import BaseWidget
from .context import WidgetContext
from .registry import WidgetFactory, WidgetRegistry, registry

# Import built-in widgets so they register themselves:
from .text import TextAreaWidget, TextWidget  # noqa: F401
from .number import IntegerWidget, NumberWidget  # noqa: F401
from .checkbox import CheckboxWidget  # noqa: F401
from .datetime import DateTimeWidget, DateWidget  # noqa: F401
from .choices import ChoiceWidget, CountryWidget  # noqa: F401
from .relations import RelationWidget  # noqa: F401
from .collection import CollectionWidget, FieldGroupWidget  # noqa: F401

__all__ = [
    "BaseWidget",
    "WidgetContext",
    "WidgetFactory",
    "WidgetRegistry",
    "registry",
    "TextWidget",
    "TextAreaWidget",
    "NumberWidget",
    "IntegerWidget",
    "CheckboxWidget",
    "DateTimeWidget",
    "DateWidget",
    "ChoiceWidget",
    "CountryWidget",
    "RelationWidget",
    "CollectionWidget",
    "FieldGroupWidget",
]

# The End
