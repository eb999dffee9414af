# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the form contractor.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Mapping


@dataclass
class FormSettings:
    """Container for form mapping configuration derived from environment variables."""

    template_prefix: str = "admin/crud"
    years_start: int = 1900
    years_end: int = 2100
    default_edit: str = "standard"
    collection_type: str = "admin_collection"
    relation_type: str = "orm_one_to_many"
    max_inline_depth: int = 8
    api_prefix: str = "/admin"

    def __post_init__(self) -> None:
        """Normalize path-like values and keep the year range ordered."""
        self.template_prefix = self.template_prefix.strip().strip("/")
        self.api_prefix = self._normalize_prefix(self.api_prefix)
        if self.years_end < self.years_start:
            self.years_start, self.years_end = self.years_end, self.years_start
        if self.max_inline_depth < 1:
            self.max_inline_depth = 1

    @property
    def years(self) -> list[int]:
        """Return the inclusive list of selectable years for datetime widgets."""
        return list(range(self.years_start, self.years_end + 1))

    def template_name(self, suffix: str) -> str:
        """Return the edit template path for ``suffix``."""
        name = f"edit_{suffix}.html"
        if not self.template_prefix:
            return name
        return f"{self.template_prefix}/{name}"

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "ADMINFORMS_",
    ) -> "FormSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            template_prefix=data.get("TEMPLATE_PREFIX") or "admin/crud",
            years_start=cls._to_int(data.get("YEARS_START"), default=1900),
            years_end=cls._to_int(data.get("YEARS_END"), default=2100),
            default_edit=data.get("DEFAULT_EDIT") or "standard",
            collection_type=data.get("COLLECTION_TYPE") or "admin_collection",
            relation_type=data.get("RELATION_TYPE") or "orm_one_to_many",
            max_inline_depth=cls._to_int(data.get("MAX_INLINE_DEPTH"), default=8),
            api_prefix=data.get("API_PREFIX") or "/admin",
        )

    @staticmethod
    def _to_int(value: str | None, *, default: int) -> int:
        """Return an integer from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths contain a single leading slash and no trailing one."""
        stripped = value.strip().strip("/")
        if not stripped:
            return ""
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``FormSettings`` instance."""

    def __init__(self, initial: FormSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[FormSettings], None]] = []

    def configure(self, settings: FormSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> FormSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = FormSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Drop the active settings so the next access re-reads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[FormSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[FormSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: FormSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> FormSettings:
    """Return the active settings instance used by the form contractor."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Forget configured settings; mostly useful in tests."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[FormSettings], None]) -> None:
    """Subscribe to configuration changes."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[FormSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "FormSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
