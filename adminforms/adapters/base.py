# -*- coding: utf-8 -*-
"""
base

Interface every model manager exposes to the form contractor.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..schema.descriptors import ModelMetadata


class BaseModelManager(ABC):
    """Metadata provider and entity access for one ORM."""

    name: str = "base"

    @abstractmethod
    def has_metadata(self, model: Any) -> bool:
        """Return ``True`` when ``model`` can be introspected."""

    @abstractmethod
    def get_metadata(self, model: Any) -> ModelMetadata:
        """Return field and association mappings of ``model``."""

    def get_entity_manager(self) -> Any:
        """Return the handle passed to relational widgets as ``em``."""
        return self

    def get_pk_attr(self, model: Any) -> str:
        if self.has_metadata(model):
            return self.get_metadata(model).pk_attr
        return "id"

    async def get_or_none(self, model: Any, **filters: Any) -> Any | None:
        raise NotImplementedError


__all__ = ["BaseModelManager"]

# The End
