# -*- coding: utf-8 -*-
"""
transformers

Value transformers converting between related objects and identifiers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any


class EntityToIdTransformer:
    """Render a related object as its primary key and look it up again.

    ``em`` is the model manager handle of the owning admin and
    ``class_name`` the related model (class or dotted path).
    """

    def __init__(self, em: Any, class_name: Any) -> None:
        self.em = em
        self.class_name = class_name

    def transform(self, value: Any) -> Any:
        if value is None:
            return None
        pk_attr = self.em.get_pk_attr(self.class_name)
        return getattr(value, pk_attr, None)

    async def reverse_transform(self, value: Any) -> Any:
        if value in (None, ""):
            return None
        pk_attr = self.em.get_pk_attr(self.class_name)
        return await self.em.get_or_none(self.class_name, **{pk_attr: value})

    def __repr__(self) -> str:
        target = getattr(self.class_name, "__name__", self.class_name)
        return f"<EntityToIdTransformer {target}>"


__all__ = ["EntityToIdTransformer"]

# The End
