# -*- coding: utf-8 -*-
"""
tests.test_router

Form endpoints mounted on a FastAPI application.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from adminforms.admin import AdminPool, BaseAdmin
from adminforms.forms import FormContractor
from adminforms.router import AdminFormRouter
from tests.stub_models import Author, Book, Profile, StubModelManager, Tag


class BrokenAuthorAdmin(BaseAdmin):
    form_fields = ("name", "nickname")


def _client(pool: AdminPool) -> tuple[FastAPI, TestClient]:
    app = FastAPI()
    AdminFormRouter(pool, prefix="/admin").mount(app)
    return app, TestClient(app)


def test_form_endpoint_returns_serialized_form(pool: AdminPool) -> None:
    _, client = _client(pool)

    resp = client.get("/admin/tests/book/form")

    assert resp.status_code == 200
    payload = resp.json()
    children = {child["name"]: child for child in payload["form"]["children"]}
    assert set(children) == {"title", "author"}
    assert children["author"]["type"] == "orm_one_to_many"
    assert children["author"]["options"]["expanded"] is False
    assert "em" not in children["author"]["options"]
    assert payload["schema"]["properties"]["title"]["type"] == "string"


def test_unknown_admin_returns_404(pool: AdminPool) -> None:
    _, client = _client(pool)

    resp = client.get("/admin/tests/publisher/form")

    assert resp.status_code == 404
    assert resp.json()["error"] == "AdminNotRegistered"


def test_mapping_error_is_reported(manager: StubModelManager) -> None:
    pool = AdminPool(manager, FormContractor())
    pool.register(Author, BrokenAuthorAdmin)
    for model in (Book, Profile, Tag):
        pool.register(model)
    _, client = _client(pool)

    resp = client.get("/admin/tests/author/form")

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "MissingType"
    assert "nickname" in body["detail"]


def test_mount_is_idempotent(pool: AdminPool) -> None:
    app = FastAPI()
    router = AdminFormRouter(pool, prefix="/admin")

    router.mount(app)
    initial_route_count = len(app.router.routes)
    router.mount(app)

    assert len(app.router.routes) == initial_route_count
    assert app.state.admin_pool is pool
    assert router.prefix == "/admin"


# The End
