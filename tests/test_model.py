"""
Tests for Schema Model Objects

These tests verify:
    - Component variants accept only their own types
    - Interactive components require a name at construction
    - Screens and schemas keep declaration order
    - Retrieval methods
"""

import pytest
from formflow.errors import MissingComponentName, SchemaFormatError
from formflow.model import (
    ChoiceComponent,
    ComponentType,
    InputComponent,
    Schema,
    Screen,
    StaticComponent,
    is_bindable,
)


class TestComponentType:
    """Test the closed component variant enum."""

    def test_static_types(self):
        for ctype in (ComponentType.TEXT, ComponentType.HEADING,
                      ComponentType.SUBHEADING, ComponentType.CAPTION):
            assert ctype.is_static

    def test_field_types_are_not_static(self):
        for ctype in (ComponentType.INPUT, ComponentType.RADIO, ComponentType.CHECKBOX):
            assert not ctype.is_static

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            ComponentType("slider")


class TestStaticComponent:
    """Test static text components."""

    def test_create_text(self):
        c = StaticComponent(type=ComponentType.TEXT, text="Hello")
        assert c.text == "Hello"
        assert not is_bindable(c)

    def test_text_is_optional(self):
        c = StaticComponent(type=ComponentType.CAPTION)
        assert c.text is None

    def test_named_static_is_bindable(self):
        c = StaticComponent(type=ComponentType.HEADING, text="Welcome", name="intro")
        assert c.name == "intro"
        assert is_bindable(c)

    def test_field_type_rejected(self):
        with pytest.raises(SchemaFormatError):
            StaticComponent(type=ComponentType.INPUT, text="nope")


class TestInputComponent:
    """Test free-form field components."""

    def test_defaults(self):
        c = InputComponent(type=ComponentType.INPUT, name="email")
        assert c.label is None
        assert c.required is False
        assert is_bindable(c)

    def test_missing_name_raises(self):
        with pytest.raises(MissingComponentName):
            InputComponent(type=ComponentType.TEXTAREA, name="")

    def test_choice_type_rejected(self):
        with pytest.raises(SchemaFormatError):
            InputComponent(type=ComponentType.RADIO, name="x")

    def test_is_immutable(self):
        c = InputComponent(type=ComponentType.DATE, name="when")
        with pytest.raises(AttributeError):
            c.name = "other"


class TestChoiceComponent:
    """Test choice field components."""

    def test_options_keep_order(self):
        c = ChoiceComponent(
            type=ComponentType.DROPDOWN,
            name="size",
            options=["Small", "Medium", "Large"],
        )
        assert c.options == ["Small", "Medium", "Large"]

    def test_options_default_absent(self):
        c = ChoiceComponent(type=ComponentType.CHECKBOX, name="tags")
        assert c.options is None

    def test_missing_name_raises(self):
        with pytest.raises(MissingComponentName) as exc:
            ChoiceComponent(type=ComponentType.RADIO, name="", options=["a"])
        assert exc.value.component_type == "radio"

    def test_input_type_rejected(self):
        with pytest.raises(SchemaFormatError):
            ChoiceComponent(type=ComponentType.INPUT, name="x")


class TestSchema:
    """Test Schema container."""

    def test_empty_schema(self):
        schema = Schema()
        assert schema.screens == []

    def test_get_screen(self):
        schema = Schema(screens=[Screen(id="s1", title="A"), Screen(id="s2", title="B")])
        assert schema.get_screen("s2").title == "B"
        assert schema.get_screen("missing") is None

    def test_screen_components_keep_order(self):
        screen = Screen(
            id="s1",
            title="A",
            components=[
                StaticComponent(type=ComponentType.HEADING, text="Hi"),
                InputComponent(type=ComponentType.INPUT, name="first"),
            ],
        )
        assert [c.type for c in screen.components] == [ComponentType.HEADING, ComponentType.INPUT]
