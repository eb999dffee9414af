# -*- coding: utf-8 -*-
"""
registry

Registry for model managers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseModelManager


class ManagerRegistry:
    """Registry for model managers keyed by ORM name."""

    def __init__(self) -> None:
        self._managers: dict[str, BaseModelManager] = {}

    def register(self, manager: BaseModelManager) -> None:
        """Register a manager instance."""
        self._managers[manager.name] = manager

    def get(self, name: str) -> BaseModelManager:
        """Return manager by ``name``."""
        try:
            return self._managers[name]
        except KeyError as exc:
            raise ModuleNotFoundError(f"Model manager '{name}' not registered") from exc


registry = ManagerRegistry()

__all__ = ["ManagerRegistry", "registry"]

# The End
