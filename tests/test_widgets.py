# -*- coding: utf-8 -*-
"""
tests.test_widgets

Widget factory defaults and widget schema fragments.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from adminforms.forms import FORM_TYPES, EntityToIdTransformer
from adminforms.widgets import (
    CheckboxWidget,
    CountryWidget,
    DateTimeWidget,
    IntegerWidget,
    RelationWidget,
    TextWidget,
    WidgetFactory,
    registry,
)
from tests.stub_models import Author, Profile, StubModelManager, Tag


@pytest.fixture
def factory(manager: StubModelManager) -> WidgetFactory:
    return WidgetFactory(type_table=FORM_TYPES, model_manager=manager)


@pytest.mark.parametrize("widget_type", sorted(set(FORM_TYPES.values())))
def test_every_builtin_widget_type_is_registered(widget_type: str) -> None:
    assert widget_type in registry


def test_factory_uses_type_table(factory: WidgetFactory) -> None:
    widget = factory.get_instance(Author, "born", {"years": [2000, 2010]})

    assert isinstance(widget, DateTimeWidget)
    assert widget.ctx.field_mapping.type == "datetime"
    assert widget.get_schema()["options"]["inputAttributes"]["max"] == "2010-12-31"


def test_factory_relation_for_associations(factory: WidgetFactory) -> None:
    single = factory.get_instance(Author, "profile")
    many = factory.get_instance(Author, "tags")

    assert isinstance(single, RelationWidget)
    assert single.get_schema()["format"] == "select"
    assert many.options["multiple"] is True
    assert many.get_schema()["type"] == "array"
    assert many.get_schema()["options"]["target"] == Tag.__name__


def test_relation_target_from_context_or_class(factory: WidgetFactory) -> None:
    default = factory.get_instance(Author, "profile")
    explicit = factory.get_instance(Author, "profile", {"class": Tag})

    assert "class" not in default.options
    assert default.get_target() is Profile
    assert default.get_schema()["options"]["target"] == "Profile"
    assert explicit.get_schema()["options"]["target"] == "Tag"
    assert RelationWidget("profile").get_target() is None


def test_factory_falls_back_to_text(factory: WidgetFactory) -> None:
    assert isinstance(factory.get_instance(Author, "unknown"), TextWidget)
    assert isinstance(factory.get_instance(object, "anything"), TextWidget)
    assert isinstance(WidgetFactory().get_instance(Author, "name"), TextWidget)


def test_text_widget_max_length_from_mapping(factory: WidgetFactory) -> None:
    widget = factory.get_instance(Author, "name", {"label": "Full name", "readonly": True})

    schema = widget.get_schema()
    assert schema["maxLength"] == 50
    assert schema["title"] == "Full name"
    assert schema["readonly"] is True


def test_widget_titles_and_schemas() -> None:
    assert TextWidget("first_name").get_title() == "First\u00a0name"
    assert IntegerWidget("age").get_schema()["type"] == "integer"
    assert CheckboxWidget("active", {"switch": False}).get_schema() == {
        "type": "boolean",
        "format": "checkbox",
        "title": "Active",
    }
    schema = CountryWidget("country").get_schema()
    assert "FR" in schema["enum"]


def test_relation_widget_converts_with_transformer(manager: StubModelManager) -> None:
    profile = Profile()
    profile.id = 7
    transformer = EntityToIdTransformer(manager, Profile)
    widget = RelationWidget("profile", {"value_transformer": transformer})

    assert widget.to_python(profile) == 7
    assert RelationWidget("tags", {"value_transformer": transformer, "multiple": True}).to_python(
        [profile]
    ) == [7]


async def test_transformer_reverse_lookup(manager: StubModelManager) -> None:
    profile = Profile()
    profile.id = 3
    manager.objects[3] = profile
    transformer = EntityToIdTransformer(manager, Profile)

    assert await transformer.reverse_transform(3) is profile
    assert await transformer.reverse_transform(None) is None
    assert manager.lookups == [(Profile, {"id": 3})]


# The End
