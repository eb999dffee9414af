# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for the adminforms test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Iterator

import pytest

from adminforms.admin import AdminPool, BaseAdmin
from adminforms.conf import FormSettings, configure, reset_settings
from adminforms.forms import FormContractor
from tests.stub_models import Author, Book, Profile, StubModelManager, Tag


class AsyncioTestPlugin:
    """Minimal asyncio runner enabling ``async def`` tests without extras."""

    def __init__(self) -> None:
        """Configure the event-loop factory used for async test execution."""

        self._loop_factory = asyncio.new_event_loop

    def pytest_pyfunc_call(self, pyfuncitem: pytest.Function) -> bool | None:
        """Execute coroutine test functions inside a dedicated event loop."""

        if not inspect.iscoroutinefunction(pyfuncitem.obj):
            return None
        signature = inspect.signature(pyfuncitem.obj)
        kwargs = {
            name: pyfuncitem.funcargs[name]
            for name in signature.parameters
            if name in pyfuncitem.funcargs
        }
        loop = self._loop_factory()
        try:
            loop.run_until_complete(pyfuncitem.obj(**kwargs))
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            loop.close()
        return True


_asyncio_plugin = AsyncioTestPlugin()


def pytest_configure(config: pytest.Config) -> None:
    """Integrate custom plugins with pytest's plugin manager."""

    config.addinivalue_line(
        "markers", "asyncio: execute test using the built-in asyncio loop"
    )
    config.pluginmanager.register(_asyncio_plugin, "adminforms-asyncio-plugin")


@pytest.fixture(autouse=True)
def form_settings() -> Iterator[FormSettings]:
    """Install default settings for every test and forget them afterwards."""

    settings = FormSettings()
    configure(settings)
    yield settings
    reset_settings()


@pytest.fixture
def manager() -> StubModelManager:
    return StubModelManager()


@pytest.fixture
def contractor() -> FormContractor:
    return FormContractor()


@pytest.fixture
def pool(manager: StubModelManager, contractor: FormContractor) -> AdminPool:
    """Pool with an admin for every stub model."""

    pool = AdminPool(manager, contractor)
    for model in (Author, Book, Profile, Tag):
        pool.register(model, BaseAdmin)
    return pool


# The End
