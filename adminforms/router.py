# -*- coding: utf-8 -*-
"""
router

FastAPI router exposing the forms built for registered admins.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any
from weakref import WeakSet

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from .admin.pool import AdminPool
from .conf import FormSettings, current_settings
from .exceptions import FormContractorError

logger = logging.getLogger(__name__)


class AdminFormRouter:
    """Coordinate creation and mounting of the form endpoints."""

    def __init__(
        self,
        pool: AdminPool,
        prefix: str | None = None,
        *,
        settings: FormSettings | None = None,
    ) -> None:
        self.pool = pool
        self._settings = settings or current_settings()
        self._prefix = (prefix if prefix is not None else self._settings.api_prefix).rstrip("/")
        self._router: APIRouter | None = None
        self._mounted_apps: WeakSet[FastAPI] = WeakSet()

    @property
    def prefix(self) -> str:
        return self._prefix

    def create_router(self) -> APIRouter:
        router = APIRouter()
        pool = self.pool

        @router.get("/{app_label}/{model_name}/form")
        def form(app_label: str, model_name: str) -> dict[str, Any]:
            admin = pool.get_admin(app_label, model_name)
            builder = admin.get_form_builder()
            return {"form": builder.to_dict(), "schema": builder.get_schema()}

        return router

    def get_router(self) -> APIRouter:
        """Return the cached router, creating it when necessary."""
        if self._router is None:
            self._router = self.create_router()
        return self._router

    def mount(self, app: FastAPI) -> None:
        """Include the form endpoints and the mapping error handler into ``app``."""
        if app in self._mounted_apps:
            return
        app.include_router(self.get_router(), prefix=self._prefix)
        app.add_exception_handler(FormContractorError, self.handle_error)
        app.state.admin_pool = self.pool
        self._mounted_apps.add(app)

    async def handle_error(self, request: Request, exc: Exception) -> JSONResponse:
        """Report a misconfigured form to the client."""
        status_code = getattr(exc, "status_code", 500)
        if status_code >= 500:
            logger.error("Form build failed for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "error": type(exc).__name__},
        )


__all__ = ["AdminFormRouter"]

# The End
