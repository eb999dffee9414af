# -*- coding: utf-8 -*-
"""
exceptions

Domain exceptions raised while mapping field descriptions to form widgets.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class FormContractorError(Exception):
    """Base class for form mapping errors."""

    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "")
        self.detail = detail


class MissingType(FormContractorError):
    """Raised when a field description has no resolvable type."""

    def __init__(self, field_name: str, admin_name: str) -> None:
        self.field_name = field_name
        self.admin_name = admin_name
        super().__init__(
            f"Please define a type for field `{field_name}` in `{admin_name}`"
        )


class NoWidgetType(FormContractorError):
    """Raised when no rule yields a widget type for a field."""

    def __init__(self, field_name: str, storage_type: str | None) -> None:
        self.field_name = field_name
        self.storage_type = storage_type
        super().__init__(
            f"No known form type for field `{field_name}` (`{storage_type}`)"
        )


class MissingAssociationAdmin(FormContractorError):
    """Raised when inline editing is requested without a sub-admin."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"inline mode for field `{field_name}` requires an Admin definition"
        )


class InlineRecursionError(FormContractorError):
    """Raised when inline forms would nest an admin inside itself."""

    def __init__(self, field_name: str, chain: list[str]) -> None:
        self.field_name = field_name
        self.chain = chain
        path = " -> ".join(chain)
        super().__init__(
            f"inline field `{field_name}` cannot be nested further ({path})"
        )


class UnknownFormField(FormContractorError, KeyError):
    """Raised when a form builder has no child with the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        FormContractorError.__init__(self, f"Form has no field named `{name}`")

    def __str__(self) -> str:
        return self.detail or ""


class AdminNotRegistered(FormContractorError):
    """Raised when an admin is not registered for the requested model."""

    status_code = 404


__all__ = [
    "FormContractorError",
    "MissingType",
    "NoWidgetType",
    "MissingAssociationAdmin",
    "InlineRecursionError",
    "UnknownFormField",
    "AdminNotRegistered",
]

# The End
