"""
Flow JSON generator for form schemas.

Compiles a Schema into the flow document consumed by the conversational
flow renderer. Compilation runs in passes:
    1. Validate document limits (formflow.validator)
    2. Translate each component into a widget record
    3. Resolve data bindings to fields on earlier screens
    4. Build each screen's footer action and routing edge
    5. Fold the screens into the final document

The generator is a pure function of the schema: no I/O, no logging, and
no state carried between calls. Label truncations are reported as
Diagnostic records on the result instead of being printed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from formflow import DATA_API_VERSION, FLOW_JSON_VERSION
from formflow.errors import ScreenCountMismatch
from formflow.model import (
    ChoiceComponent,
    ComponentSpec,
    ComponentType,
    FieldComponent,
    Schema,
    Screen,
    StaticComponent,
    is_bindable,
)
from formflow.naming import (
    MAX_LABEL_LENGTH,
    option_id,
    placeholder_name,
    qualified_name,
    truncate_label,
)
from formflow.serialization import flow_to_json
from formflow.validator import validate_schema


WIDGET_TYPES: Dict[ComponentType, str] = {
    ComponentType.TEXT: "TextBody",
    ComponentType.HEADING: "TextHeading",
    ComponentType.SUBHEADING: "TextSubheading",
    ComponentType.CAPTION: "TextCaption",
    ComponentType.INPUT: "TextInput",
    ComponentType.TEXTAREA: "TextArea",
    ComponentType.DATE: "DatePicker",
    ComponentType.RADIO: "RadioButtonsGroup",
    ComponentType.DROPDOWN: "Dropdown",
    ComponentType.CHECKBOX: "CheckboxGroup",
}

FORM_NAME = "flow_path"
CONTINUE_LABEL = "Continue"
DONE_LABEL = "Done"


class BindingMode(Enum):
    """How a reference to an upstream field is rendered."""
    CONTRACT = "contract"      # Typed placeholder for the screen's data block
    EXPRESSION = "expression"  # ${data.<key>} runtime reference


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal note about something the compiler changed."""
    screen_id: str
    component: str
    message: str
    original: str
    truncated: str


@dataclass
class AssembledScreen:
    """One compiled screen plus what it contributes to the whole document."""
    record: Dict[str, Any]
    routing_edge: Optional[Tuple[str, List[str]]] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass
class CompiledFlow:
    """Result of compiling a schema."""
    document: Dict[str, Any]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def routing_model(self) -> Dict[str, List[str]]:
        return self.document["routing_model"]

    @property
    def screens(self) -> List[Dict[str, Any]]:
        return self.document["screens"]


def component_key(screen_id: str, component: ComponentSpec, index: int) -> str:
    """Qualified name for named components, positional placeholder otherwise."""
    if is_bindable(component):
        return qualified_name(screen_id, component.name, index)
    return placeholder_name(index)


# =============================================================================
# COMPONENTS
# =============================================================================

def compile_component(
    component: ComponentSpec, index: int, screen_id: str
) -> Tuple[Dict[str, Any], Optional[Diagnostic]]:
    """
    Translate one component into its widget record.

    Args:
        component: Component to translate
        index: Position of the component on its screen
        screen_id: Owning screen

    Returns:
        (widget, diagnostic) where diagnostic is set only when the label
        had to be truncated
    """
    if isinstance(component, StaticComponent):
        widget: Dict[str, Any] = {"type": WIDGET_TYPES[component.type]}
        if component.text is not None:
            widget["text"] = component.text
        return widget, None

    if isinstance(component, FieldComponent):
        name = qualified_name(screen_id, component.name, index)
        label = truncate_label(component.label)
        diagnostic = None
        if label != component.label:
            diagnostic = Diagnostic(
                screen_id=screen_id,
                component=name,
                message=f'Label "{component.label}" truncated to {MAX_LABEL_LENGTH} characters.',
                original=component.label,
                truncated=label,
            )

        widget = {"type": WIDGET_TYPES[component.type]}
        if label is not None:
            widget["label"] = label
        widget["name"] = name
        if isinstance(component, ChoiceComponent) and component.options is not None:
            widget["data-source"] = [
                {"id": option_id(i, option), "title": option}
                for i, option in enumerate(component.options)
            ]
        widget["required"] = component.required
        if component.type is ComponentType.INPUT:
            widget["input-type"] = "text"
        return widget, diagnostic

    raise TypeError(f"Unsupported component: {type(component)}")


# =============================================================================
# DATA BINDINGS
# =============================================================================

def _contract_placeholder(component: ComponentSpec) -> Dict[str, Any]:
    if component.type is ComponentType.CHECKBOX:
        return {"type": "array", "items": {"type": "string"}, "__example__": []}
    return {"type": "string", "__example__": "Example"}


def resolve_bindings(schema: Schema, boundary: int, mode: BindingMode) -> Dict[str, Any]:
    """
    Reference every named component declared on screens [0, boundary).

    Args:
        schema: Schema being compiled
        boundary: Exclusive screen index; screens before it are included
        mode: CONTRACT for typed placeholders, EXPRESSION for ${data.*}

    Returns:
        Mapping of qualified name to placeholder or expression, in
        declaration order
    """
    bindings: Dict[str, Any] = {}
    for screen in schema.screens[:boundary]:
        for index, component in enumerate(screen.components):
            if not is_bindable(component):
                continue
            key = qualified_name(screen.id, component.name, index)
            if mode is BindingMode.CONTRACT:
                bindings[key] = _contract_placeholder(component)
            else:
                bindings[key] = f"${{data.{key}}}"
    return bindings


def form_references(screen: Screen) -> Dict[str, str]:
    """Reference each of the screen's own fields in the submitted form values."""
    references: Dict[str, str] = {}
    for index, component in enumerate(screen.components):
        if is_bindable(component):
            key = qualified_name(screen.id, component.name, index)
            references[key] = f"${{form.{key}}}"
    return references


# =============================================================================
# ROUTING
# =============================================================================

def _routing_edge(schema: Schema, index: int) -> Optional[Tuple[str, List[str]]]:
    if index >= len(schema.screens) - 1:
        return None
    return schema.screens[index].id, [schema.screens[index + 1].id]


def build_routing_model(schema: Schema) -> Dict[str, List[str]]:
    """Linear adjacency map: each non-terminal screen points at the next one."""
    routing_model: Dict[str, List[str]] = {}
    for index in range(len(schema.screens)):
        edge = _routing_edge(schema, index)
        if edge is not None:
            routing_model[edge[0]] = edge[1]
    return routing_model


# =============================================================================
# SCREENS
# =============================================================================

def assemble_screen(schema: Schema, index: int) -> AssembledScreen:
    """
    Compile the screen at `index` into its full record.

    The footer payload starts from ${data.*} references to every field up
    to and including this screen, then the screen's own ${form.*}
    references are laid over it. Both layers share one key scheme, so
    the form value always replaces the upstream placeholder for a field
    that belongs to this screen.
    """
    screens = schema.screens
    total = len(screens)
    screen = screens[index]
    terminal = index == total - 1

    widgets: List[Dict[str, Any]] = []
    diagnostics: List[Diagnostic] = []
    for position, component in enumerate(screen.components):
        widget, diagnostic = compile_component(component, position, screen.id)
        widgets.append(widget)
        if diagnostic is not None:
            diagnostics.append(diagnostic)

    payload = resolve_bindings(schema, total if terminal else index + 1, BindingMode.EXPRESSION)
    payload.update(form_references(screen))

    edge = _routing_edge(schema, index)
    if terminal:
        action: Dict[str, Any] = {"name": "complete", "payload": payload}
    else:
        action = {
            "name": "navigate",
            "next": {"type": "screen", "name": edge[1][0]},
            "payload": payload,
        }

    footer = {
        "type": "Footer",
        "label": DONE_LABEL if terminal else CONTINUE_LABEL,
        "on-click-action": action,
    }

    record = {
        "id": screen.id,
        "title": screen.title,
        "data": resolve_bindings(schema, index, BindingMode.CONTRACT),
        "terminal": terminal,
        "layout": {
            "type": "SingleColumnLayout",
            "children": [
                {
                    "type": "Form",
                    "name": FORM_NAME,
                    "children": widgets + [footer],
                }
            ],
        },
    }
    return AssembledScreen(record=record, routing_edge=edge, diagnostics=diagnostics)


# =============================================================================
# DOCUMENT
# =============================================================================

def generate_flow_json(schema: Schema) -> CompiledFlow:
    """
    Compile a schema into a flow document.

    Args:
        schema: Schema to compile

    Returns:
        CompiledFlow with the document and any diagnostics

    Raises:
        FlowCompileError subclasses; no document is produced on failure
    """
    validate_schema(schema)

    assembled = [assemble_screen(schema, index) for index in range(len(schema.screens))]

    if len(assembled) != len(schema.screens):
        raise ScreenCountMismatch(expected=len(schema.screens), actual=len(assembled))

    routing_model = dict(a.routing_edge for a in assembled if a.routing_edge is not None)
    diagnostics = [d for a in assembled for d in a.diagnostics]

    document = {
        "version": FLOW_JSON_VERSION,
        "data_api_version": DATA_API_VERSION,
        "routing_model": routing_model,
        "screens": [a.record for a in assembled],
    }
    return CompiledFlow(document=document, diagnostics=diagnostics)


def save_flow_file(schema: Schema, filename: str) -> CompiledFlow:
    """
    Compile a schema and write the flow document to a file.

    Args:
        schema: Schema to compile
        filename: Output file path (.json extension recommended)

    Returns:
        The CompiledFlow that was written
    """
    compiled = generate_flow_json(schema)
    with open(filename, 'w') as f:
        f.write(flow_to_json(compiled.document))
    return compiled


__all__ = [
    "BindingMode",
    "CompiledFlow",
    "Diagnostic",
    "assemble_screen",
    "build_routing_model",
    "compile_component",
    "component_key",
    "form_references",
    "generate_flow_json",
    "resolve_bindings",
    "save_flow_file",
]
