"""
Core Schema Model Objects

Defines the author-facing description of a multi-step form:
    - Components (static text or interactive fields)
    - Screens (one step of the form)
    - Schemas (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about the compiled flow document format
        - Are immutable once built
        - Validate their own shape at construction time
        - Represent structure, not behavior

Screen order is meaningful: it defines routing order and which
screen is terminal.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .errors import MissingComponentName, SchemaFormatError


class ComponentType(Enum):
    """Closed set of component variants an author can place on a screen."""

    # Static display text
    TEXT = "text"
    HEADING = "heading"
    SUBHEADING = "subheading"
    CAPTION = "caption"

    # Free-form fields
    INPUT = "input"
    TEXTAREA = "textarea"
    DATE = "date"

    # Choice fields
    RADIO = "radio"
    DROPDOWN = "dropdown"
    CHECKBOX = "checkbox"

    @property
    def is_static(self) -> bool:
        return self in STATIC_TYPES


STATIC_TYPES = frozenset({
    ComponentType.TEXT,
    ComponentType.HEADING,
    ComponentType.SUBHEADING,
    ComponentType.CAPTION,
})

INPUT_TYPES = frozenset({
    ComponentType.INPUT,
    ComponentType.TEXTAREA,
    ComponentType.DATE,
})

CHOICE_TYPES = frozenset({
    ComponentType.RADIO,
    ComponentType.DROPDOWN,
    ComponentType.CHECKBOX,
})


@dataclass(frozen=True)
class StaticComponent:
    """
    Display-only text.

    Properties:
        type: One of text, heading, subheading, caption
        text: Text to display (optional)
        name:
            Optional. The widget never shows it, but a named static
            component is bound like a field so later screens can
            reference it.
    """

    type: ComponentType
    text: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        if self.type not in STATIC_TYPES:
            raise SchemaFormatError(f"{self.type.value} is not a static component type")


@dataclass(frozen=True)
class FieldComponent:
    """
    Common shape of every interactive component.

    Properties:
        type: Component variant
        name:
            Author-chosen field name. Must be non-empty; the compiler
            derives the qualified binding key from it.
        label: Field label (optional, truncated on compile when too long)
        required: Whether the renderer requires a value
    """

    type: ComponentType
    name: str
    label: Optional[str] = None
    required: bool = False

    allowed_types = frozenset()

    def __post_init__(self):
        if self.type not in self.allowed_types:
            raise SchemaFormatError(
                f"{self.type.value} is not valid for {type(self).__name__}"
            )
        if not self.name:
            raise MissingComponentName(
                f"Component missing name: {self.type.value}",
                component_type=self.type.value,
            )


@dataclass(frozen=True)
class InputComponent(FieldComponent):
    """Free-form field: input, textarea or date."""

    allowed_types = INPUT_TYPES


@dataclass(frozen=True)
class ChoiceComponent(FieldComponent):
    """
    Field with a fixed, ordered list of options: radio, dropdown or checkbox.

    Option order is preserved; it determines the option ids. None means
    the author gave no option list at all.
    """

    options: Optional[List[str]] = None

    allowed_types = CHOICE_TYPES


ComponentSpec = Union[StaticComponent, InputComponent, ChoiceComponent]


def is_bindable(component: ComponentSpec) -> bool:
    """True when the component carries a name other screens can reference."""
    return bool(component.name)


@dataclass(frozen=True)
class Screen:
    """
    One step of the form and one node of the routing graph.

    Properties:
        id: Identifier used for display anchoring and routing
        title: Screen title shown by the renderer
        components: Ordered components; position feeds the qualified name
    """

    id: str
    title: str
    components: List[ComponentSpec] = field(default_factory=list)


@dataclass(frozen=True)
class Schema:
    """
    Root container for a form definition.

    INVARIANTS (enforced by formflow.validator before compiling):
        - 1 to 8 screens
        - 0 to 8 components per screen
        - Screen ids are unique
        - Qualified names are unique
    """

    screens: List[Screen] = field(default_factory=list)

    def get_screen(self, screen_id: str) -> Optional[Screen]:
        """
        Retrieve a screen by ID.

        Returns:
            Screen object or None if not found
        """
        for screen in self.screens:
            if screen.id == screen_id:
                return screen
        return None
