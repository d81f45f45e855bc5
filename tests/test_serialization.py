"""
Tests for reading schema documents and writing flow documents.

These tests ensure the input document format maps onto the model,
that malformed input fails with a schema error, and that JSON and
YAML files load the same schema.
"""

import json

import pytest
from formflow.errors import EmptySchema, MissingComponentName, SchemaFormatError, SchemaLimitExceeded
from formflow.examples import build_example_signup_schema
from formflow.model import ChoiceComponent, ComponentType, InputComponent, StaticComponent
from formflow.serialization import (
    flow_to_json,
    load_schema,
    schema_from_dict,
    schema_from_json,
    schema_from_yaml,
    schema_to_dict,
    schema_to_json,
    schema_to_yaml,
)

SAMPLE = {
    "screens": [
        {
            "id": "s1",
            "title": "A",
            "components": [
                {"type": "heading", "text": "Welcome"},
                {"type": "input", "name": "email", "label": "Email", "required": True},
                {"type": "radio", "name": "pick", "options": ["Yes", "No"]},
            ],
        },
        {"id": "s2", "title": "B", "components": [{"type": "text", "text": "done"}]},
    ]
}


def test_schema_from_dict_builds_variants():
    schema = schema_from_dict(SAMPLE)
    heading, email, pick = schema.screens[0].components

    assert isinstance(heading, StaticComponent)
    assert heading.type is ComponentType.HEADING
    assert isinstance(email, InputComponent)
    assert email.required is True
    assert isinstance(pick, ChoiceComponent)
    assert pick.options == ["Yes", "No"]


def test_name_on_static_component_is_kept():
    data = {"screens": [{"id": "s", "title": "", "components": [{"type": "text", "name": "intro", "text": "Hi"}]}]}
    schema = schema_from_dict(data)
    component = schema.screens[0].components[0]
    assert isinstance(component, StaticComponent)
    assert component.name == "intro"
    assert schema_to_dict(schema)["screens"][0]["components"][0] == {"type": "text", "name": "intro", "text": "Hi"}


def test_absent_options_stay_absent():
    data = {"screens": [{"id": "s", "title": "", "components": [
        {"type": "radio", "name": "none"},
        {"type": "radio", "name": "empty", "options": []},
    ]}]}
    schema = schema_from_dict(data)
    absent, empty = schema.screens[0].components
    assert absent.options is None
    assert empty.options == []
    assert "options" not in schema_to_dict(schema)["screens"][0]["components"][0]


def test_screen_limit_reported_before_missing_names():
    data = {"screens": [
        {"id": f"s{i}", "title": "", "components": [{"type": "input"}]} for i in range(9)
    ]}
    with pytest.raises(SchemaLimitExceeded) as exc:
        schema_from_dict(data)
    assert exc.value.actual == 9
    assert exc.value.screen_id is None


def test_component_limit_reported_before_missing_names():
    components = [{"type": "text", "text": str(i)} for i in range(8)] + [{"type": "input"}]
    data = {"screens": [{"id": "s1", "title": "", "components": components}]}
    with pytest.raises(SchemaLimitExceeded) as exc:
        schema_from_dict(data)
    assert exc.value.screen_id == "s1"
    assert exc.value.actual == 9


def test_later_oversized_screen_reported_before_earlier_missing_name():
    data = {"screens": [
        {"id": "s1", "title": "", "components": [{"type": "checkbox"}]},
        {"id": "s2", "title": "", "components": [{"type": "caption"}] * 9},
    ]}
    with pytest.raises(SchemaLimitExceeded) as exc:
        schema_from_dict(data)
    assert exc.value.screen_id == "s2"


def test_empty_screen_list_rejected():
    with pytest.raises(EmptySchema):
        schema_from_dict({"screens": []})


def test_missing_name_reports_position():
    data = {"screens": [{"id": "s9", "title": "", "components": [
        {"type": "text", "text": "ok"},
        {"type": "dropdown", "options": ["a"]},
    ]}]}
    with pytest.raises(MissingComponentName) as exc:
        schema_from_dict(data)
    assert exc.value.screen_id == "s9"
    assert exc.value.index == 1
    assert exc.value.component_type == "dropdown"


def test_empty_name_counts_as_missing():
    data = {"screens": [{"id": "s", "title": "", "components": [{"type": "input", "name": ""}]}]}
    with pytest.raises(MissingComponentName):
        schema_from_dict(data)


@pytest.mark.parametrize("data", [
    [],
    {"pages": []},
    {"screens": "nope"},
    {"screens": [{"title": "no id"}]},
    {"screens": [{"id": "s", "components": [{"type": "slider", "name": "x"}]}]},
    {"screens": [{"id": "s", "components": [{"type": "radio", "name": "x", "options": "a,b"}]}]},
])
def test_malformed_documents_rejected(data):
    with pytest.raises(SchemaFormatError):
        schema_from_dict(data)


def test_invalid_json_rejected():
    with pytest.raises(SchemaFormatError):
        schema_from_json("{not json")


def test_json_roundtrip():
    schema = build_example_signup_schema()
    restored = schema_from_json(schema_to_json(schema))
    assert schema_to_dict(restored) == schema_to_dict(schema)


def test_yaml_roundtrip():
    schema = build_example_signup_schema()
    restored = schema_from_yaml(schema_to_yaml(schema))
    assert schema_to_dict(restored) == schema_to_dict(schema)


def test_load_schema_by_suffix(tmp_path):
    json_path = tmp_path / "form.json"
    json_path.write_text(json.dumps(SAMPLE))
    yaml_path = tmp_path / "form.yaml"
    yaml_path.write_text(schema_to_yaml(schema_from_dict(SAMPLE)))

    assert schema_to_dict(load_schema(json_path)) == schema_to_dict(load_schema(yaml_path))


def test_flow_to_json_keeps_key_order():
    text = flow_to_json({"version": "3.1", "data_api_version": "3.0", "routing_model": {}, "screens": []})
    assert text.index('"version"') < text.index('"data_api_version"') < text.index('"routing_model"')
