"""
Serialization helpers for schemas and compiled flow documents.

Reads the author-facing input document (JSON or YAML) into model objects
and writes compiled flow documents back out as JSON. Field names follow
the input document exactly:

    {screens: [{id, title, components: [{type, label?, name?, text?,
                                         options?, required?}]}]}
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from formflow.errors import MissingComponentName, SchemaFormatError
from formflow.model import (
    CHOICE_TYPES,
    ChoiceComponent,
    ComponentSpec,
    ComponentType,
    FieldComponent,
    InputComponent,
    Schema,
    Screen,
    StaticComponent,
)
from formflow.validator import check_component_count, check_layout, check_screen_count


def component_from_dict(d: Dict[str, Any], screen_id: str | None = None, index: int | None = None) -> ComponentSpec:
    if not isinstance(d, dict):
        raise SchemaFormatError(f"Component must be a mapping, got {type(d).__name__}")
    try:
        ctype = ComponentType(d.get("type"))
    except ValueError:
        raise SchemaFormatError(f"Unsupported component type: {d.get('type')!r}") from None

    if ctype.is_static:
        return StaticComponent(type=ctype, text=d.get("text"), name=d.get("name") or None)

    if not d.get("name"):
        raise MissingComponentName(
            f"Component missing name: {json.dumps(d, sort_keys=True)}",
            component_type=ctype.value,
            screen_id=screen_id,
            index=index,
        )

    common = {
        "type": ctype,
        "name": d["name"],
        "label": d.get("label"),
        "required": bool(d.get("required", False)),
    }
    if ctype in CHOICE_TYPES:
        options = d.get("options")
        if options is not None and not isinstance(options, list):
            raise SchemaFormatError(f"Options for {d['name']} must be a list")
        if options is not None:
            options = [str(o) for o in options]
        return ChoiceComponent(options=options, **common)
    return InputComponent(**common)


def component_to_dict(c: ComponentSpec) -> Dict[str, Any]:
    if isinstance(c, StaticComponent):
        d: Dict[str, Any] = {"type": c.type.value}
        if c.name is not None:
            d["name"] = c.name
        if c.text is not None:
            d["text"] = c.text
        return d
    if isinstance(c, FieldComponent):
        d = {"type": c.type.value, "name": c.name, "required": c.required}
        if c.label is not None:
            d["label"] = c.label
        if isinstance(c, ChoiceComponent) and c.options is not None:
            d["options"] = list(c.options)
        return d
    raise TypeError(f"Unsupported component: {type(c)}")


def _screen_parts(d: Any) -> Tuple[str, List[Any]]:
    if not isinstance(d, dict):
        raise SchemaFormatError(f"Screen must be a mapping, got {type(d).__name__}")
    if not d.get("id"):
        raise SchemaFormatError("Screen is missing an id")
    screen_id = str(d["id"])
    components = d.get("components") or []
    if not isinstance(components, list):
        raise SchemaFormatError(f"Components of screen {screen_id} must be a list")
    return screen_id, components


def screen_from_dict(d: Dict[str, Any]) -> Screen:
    screen_id, components = _screen_parts(d)
    check_component_count(screen_id, len(components))
    return Screen(
        id=screen_id,
        title=d.get("title", ""),
        components=[component_from_dict(c, screen_id, i) for i, c in enumerate(components)],
    )


def screen_to_dict(s: Screen) -> Dict[str, Any]:
    return {
        "id": s.id,
        "title": s.title,
        "components": [component_to_dict(c) for c in s.components],
    }


def schema_from_dict(d: Any) -> Schema:
    """
    Build a Schema from a parsed input document.

    Size limits and screen id uniqueness are checked on the raw document
    first, so an oversized schema is reported as such even when its
    components are also malformed.
    """
    if not isinstance(d, dict) or "screens" not in d:
        raise SchemaFormatError("Schema must be a mapping with a 'screens' list")
    if not isinstance(d["screens"], list):
        raise SchemaFormatError("'screens' must be a list")
    check_screen_count(len(d["screens"]))
    parts = [_screen_parts(s) for s in d["screens"]]
    check_layout((screen_id, len(components)) for screen_id, components in parts)
    return Schema(screens=[screen_from_dict(s) for s in d["screens"]])


def schema_to_dict(s: Schema) -> Dict[str, Any]:
    return {"screens": [screen_to_dict(screen) for screen in s.screens]}


def schema_from_json(s: str) -> Schema:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SchemaFormatError(f"Invalid JSON: {e}") from e
    return schema_from_dict(d)


def schema_to_json(s: Schema) -> str:
    return json.dumps(schema_to_dict(s), indent=2)


def schema_from_yaml(s: str) -> Schema:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SchemaFormatError(f"Invalid YAML: {e}") from e
    return schema_from_dict(d)


def schema_to_yaml(s: Schema) -> str:
    return yaml.safe_dump(schema_to_dict(s), sort_keys=False)


def load_schema(path: str | Path) -> Schema:
    """Read a schema file; .json is parsed as JSON, anything else as YAML."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return schema_from_json(text)
    return schema_from_yaml(text)


def flow_to_json(document: Dict[str, Any]) -> str:
    # Key order is part of the output; never sort.
    return json.dumps(document, indent=2, ensure_ascii=False)
