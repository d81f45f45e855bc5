"""Tests for document-level schema limits."""

import pytest
from formflow.errors import EmptySchema, QualifiedNameCollision, SchemaLimitExceeded, ScreenIdCollision
from formflow.model import ComponentType, InputComponent, Schema, Screen, StaticComponent
from formflow.validator import validate_schema


def make_screens(count: int, components_per_screen: int = 0):
    return [
        Screen(
            id=f"s{i}",
            title=f"Screen {i}",
            components=[
                StaticComponent(type=ComponentType.TEXT, text=str(j))
                for j in range(components_per_screen)
            ],
        )
        for i in range(count)
    ]


def test_eight_screens_of_eight_components_pass():
    validate_schema(Schema(screens=make_screens(8, 8)))


def test_nine_screens_rejected():
    with pytest.raises(SchemaLimitExceeded) as exc:
        validate_schema(Schema(screens=make_screens(9)))
    assert exc.value.limit == 8
    assert exc.value.actual == 9
    assert exc.value.screen_id is None


def test_nine_components_rejected():
    screens = make_screens(2)
    screens[1] = Screen(id="busy", title="Busy", components=make_screens(1, 9)[0].components)
    with pytest.raises(SchemaLimitExceeded) as exc:
        validate_schema(Schema(screens=screens))
    assert exc.value.screen_id == "busy"
    assert exc.value.actual == 9


def test_empty_schema_rejected():
    with pytest.raises(EmptySchema):
        validate_schema(Schema(screens=[]))


def test_duplicate_screen_id_rejected():
    screens = [Screen(id="same", title="A"), Screen(id="same", title="B")]
    with pytest.raises(ScreenIdCollision) as exc:
        validate_schema(Schema(screens=screens))
    assert exc.value.screen_id == "same"


def test_screen_count_checked_before_collisions():
    screens = [Screen(id="dup", title=str(i)) for i in range(9)]
    with pytest.raises(SchemaLimitExceeded):
        validate_schema(Schema(screens=screens))


def test_overlapping_qualified_names_rejected():
    screens = [
        Screen(id="a", title="A", components=[InputComponent(type=ComponentType.INPUT, name="b_c")]),
        Screen(id="a_b", title="B", components=[InputComponent(type=ComponentType.INPUT, name="c")]),
    ]
    with pytest.raises(QualifiedNameCollision) as exc:
        validate_schema(Schema(screens=screens))
    assert exc.value.qualified_name == "a_b_c_0"
    assert exc.value.screen_id == "a_b"


def test_named_static_components_take_part_in_collisions():
    screens = [
        Screen(id="a", title="A", components=[InputComponent(type=ComponentType.INPUT, name="first name")]),
        Screen(id="a_first", title="B", components=[
            StaticComponent(type=ComponentType.TEXT, text="x", name="name"),
        ]),
    ]
    with pytest.raises(QualifiedNameCollision) as exc:
        validate_schema(Schema(screens=screens))
    assert exc.value.qualified_name == "a_first_name_0"


def test_unnamed_static_components_never_collide():
    validate_schema(Schema(screens=make_screens(2, 8)))
