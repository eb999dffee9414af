# -*- coding: utf-8 -*-
"""
pool

Registry of admin configuration objects.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Iterator

from ..adapters.base import BaseModelManager
from ..exceptions import AdminNotRegistered
from ..forms.contractor import FormContractor
from .base import BaseAdmin


class AdminPool:
    """Hold one admin per model and resolve admins of related models."""

    def __init__(
        self,
        model_manager: BaseModelManager | None = None,
        contractor: FormContractor | None = None,
    ) -> None:
        if model_manager is None:
            from ..adapters.tortoise import tortoise_manager

            model_manager = tortoise_manager
        self.model_manager = model_manager
        self.contractor = contractor or FormContractor()
        self._admins: dict[Any, BaseAdmin] = {}

    def register(
        self,
        model: Any,
        admin_cls: type[BaseAdmin] = BaseAdmin,
    ) -> BaseAdmin:
        """Instantiate ``admin_cls`` for ``model`` and store it."""
        admin = admin_cls(
            model,
            self.model_manager,
            contractor=self.contractor,
            pool=self,
        )
        self._admins[model] = admin
        return admin

    def get_admin_by_class(self, model: Any) -> BaseAdmin | None:
        """Return the admin of ``model`` (class or dotted ``app.Model``)."""
        if model is None:
            return None
        if not isinstance(model, str):
            return self._admins.get(model)
        for registered, admin in self._admins.items():
            if self._dotted(registered) == model:
                return admin
        return None

    def get_admin(self, app_label: str, model_name: str) -> BaseAdmin:
        """Return the admin addressed by ``app_label`` and lower-case model name."""
        for registered, admin in self._admins.items():
            app, name = self._dotted(registered).split(".", 1)
            if app == app_label and name.lower() == model_name.lower():
                return admin
        raise AdminNotRegistered(f"No admin registered for {app_label}.{model_name}")

    def _dotted(self, model: Any) -> str:
        get_dotted = getattr(self.model_manager, "get_dotted", None)
        if get_dotted is not None and self.model_manager.has_metadata(model):
            return get_dotted(model)
        return f"{model.__module__.split('.')[0]}.{model.__name__}"

    def __iter__(self) -> Iterator[BaseAdmin]:
        return iter(self._admins.values())


__all__ = ["AdminPool"]

# The End
