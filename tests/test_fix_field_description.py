# -*- coding: utf-8 -*-
"""
tests.test_fix_field_description

Normalization of field descriptions against model metadata.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from adminforms.admin import AdminPool, BaseAdmin, FieldDescription
from adminforms.conf import FormSettings, configure
from adminforms.exceptions import MissingType
from adminforms.forms import FormContractor
from adminforms.schema import FieldKind
from adminforms.widgets import FieldGroupWidget
from tests.stub_models import Author, Book, Profile, StubModelManager, Tag


def _fix(pool: AdminPool, model: type, name: str, **options) -> FieldDescription:
    admin = pool.get_admin_by_class(model)
    description = FieldDescription(name, type=options.pop("type", None))
    pool.contractor.fix_field_description(admin, description, options)
    return description


def test_metadata_mapping_is_copied(pool: AdminPool) -> None:
    description = _fix(pool, Author, "name")

    assert description.type == "string"
    assert description.mapping_type == "string"
    assert description.field_mapping is not None
    assert description.field_mapping.max_length == 50
    assert description.kind is FieldKind.SCALAR


def test_explicit_type_is_not_overwritten(pool: AdminPool) -> None:
    description = _fix(pool, Author, "name", type="text")

    assert description.type == "text"
    assert description.mapping_type == "string"
    assert description.field_mapping is not None


def test_association_mapping_is_copied(pool: AdminPool) -> None:
    description = _fix(pool, Book, "author")

    assert description.kind is FieldKind.MANY_TO_ONE
    assert description.type == "many_to_one"
    assert description.target_entity is Author
    assert description.association_admin is pool.get_admin_by_class(Author)


def test_missing_type_raises(pool: AdminPool) -> None:
    admin = pool.get_admin_by_class(Author)
    description = FieldDescription("nickname")

    with pytest.raises(MissingType) as exc_info:
        pool.contractor.fix_field_description(admin, description)

    assert exc_info.value.field_name == "nickname"
    assert "BaseAdmin" in str(exc_info.value)


def test_missing_type_without_metadata() -> None:
    pool = AdminPool(StubModelManager({}), FormContractor())
    admin = pool.register(Author, BaseAdmin)

    with pytest.raises(MissingType):
        pool.contractor.fix_field_description(admin, FieldDescription("name"))


def test_unmapped_field_with_explicit_type(pool: AdminPool) -> None:
    description = _fix(pool, Author, "nickname", type="string")

    assert description.type == "string"
    assert description.mapping_type is None
    assert description.admin is pool.get_admin_by_class(Author)


def test_options_are_merged_and_edit_defaults(pool: AdminPool) -> None:
    description = _fix(pool, Author, "name", help="Full name")

    assert description.get_option("edit") == "standard"
    assert description.get_option("help") == "Full name"
    assert description.options.extras() == {"help": "Full name"}


def test_explicit_edit_mode_is_kept(pool: AdminPool) -> None:
    assert _fix(pool, Author, "profile", edit="list").get_option("edit") == "list"


def test_default_edit_mode_from_settings(pool: AdminPool) -> None:
    configure(FormSettings(default_edit="list"))

    assert _fix(pool, Author, "name").get_option("edit") == "list"


@pytest.mark.parametrize(
    "model, name, template",
    [
        (Author, "name", "admin/crud/edit_string.html"),
        (Author, "profile", "admin/crud/edit_orm_one_to_one.html"),
        (Author, "books", "admin/crud/edit_orm_one_to_many.html"),
        (Author, "tags", "admin/crud/edit_orm_many_to_many.html"),
        (Book, "author", "admin/crud/edit_orm_many_to_one.html"),
    ],
)
def test_default_templates(pool: AdminPool, model: type, name: str, template: str) -> None:
    assert _fix(pool, model, name).template == template


def test_explicit_template_is_kept(pool: AdminPool) -> None:
    admin = pool.get_admin_by_class(Author)
    description = FieldDescription("books", template="custom/books.html")
    pool.contractor.fix_field_description(admin, description)

    assert description.template == "custom/books.html"


def test_inline_one_to_many_gets_field_group(pool: AdminPool) -> None:
    inline = _fix(pool, Author, "books", edit="inline")
    standard = _fix(pool, Author, "books")

    assert inline.get_option("widget_form_field") is FieldGroupWidget
    assert standard.get_option("widget_form_field") is None


def test_inline_one_to_many_keeps_custom_field_group(pool: AdminPool) -> None:
    description = _fix(pool, Author, "books", edit="inline", widget_form_field="tabs")

    assert description.get_option("widget_form_field") == "tabs"


@pytest.mark.parametrize("name", ["profile", "books", "tags"])
def test_associations_attach_related_admin(pool: AdminPool, name: str) -> None:
    description = _fix(pool, Author, name)

    assert description.association_admin is pool.get_admin_by_class(description.target_entity)
    assert description.association_admin.get_class() in (Profile, Book, Tag)


def test_association_without_registered_admin(manager: StubModelManager, caplog) -> None:
    pool = AdminPool(manager, FormContractor())
    admin = pool.register(Author, BaseAdmin)
    description = FieldDescription("tags")

    with caplog.at_level(logging.WARNING, logger="adminforms.admin.base"):
        pool.contractor.fix_field_description(admin, description)

    assert description.association_admin is None
    assert "No admin registered" in caplog.text


def test_datetime_gets_default_years(pool: AdminPool) -> None:
    description = _fix(pool, Author, "born")
    years = description.get_option("form_field_options")["years"]

    assert years[0] == 1900
    assert years[-1] == 2100
    assert len(years) == 201


def test_datetime_keeps_explicit_years(pool: AdminPool) -> None:
    description = _fix(
        pool, Author, "born", form_field_options={"years": [2000, 2001], "label": "Born"}
    )

    assert description.get_option("form_field_options") == {
        "years": [2000, 2001],
        "label": "Born",
    }


def test_admin_back_pointer_is_weak(pool: AdminPool) -> None:
    admin = BaseAdmin(Author, pool.model_manager, contractor=pool.contractor)
    description = FieldDescription("name")
    pool.contractor.fix_field_description(admin, description)

    assert description.admin is admin
    del admin
    assert description.admin is None


def test_misspelled_edit_mode_is_rejected(pool: AdminPool) -> None:
    with pytest.raises(ValidationError):
        _fix(pool, Author, "profile", edit="inlnie")

    description = FieldDescription("name")
    with pytest.raises(ValidationError):
        description.set_option("edit", "inlnie")
    description.set_option("help", "Shown below the input")
    assert description.get_option("help") == "Shown below the input"


def test_descriptions_follow_new_settings(pool: AdminPool) -> None:
    admin = pool.get_admin_by_class(Author)
    first = admin.get_form_field_descriptions()
    assert admin.get_form_field_descriptions() is first

    configure(FormSettings(template_prefix="custom", years_start=2000, years_end=2010))
    fresh = admin.get_form_field_descriptions()
    born = next(description for description in fresh if description.name == "born")

    assert fresh is not first
    assert born.get_option("form_field_options")["years"] == list(range(2000, 2011))
    assert born.template == "custom/edit_datetime.html"


# The End
