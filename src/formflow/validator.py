"""
Document-level limits checked before any compilation work.

Nothing is translated until the whole schema passes, so a failure
never leaves a partially compiled document behind. The size checks
take plain (screen id, component count) pairs so the reader can run
them on a raw input document before building any components.
"""

from typing import Iterable, Set, Tuple

from .errors import EmptySchema, QualifiedNameCollision, SchemaLimitExceeded, ScreenIdCollision
from .model import Schema, is_bindable
from .naming import qualified_name

MAX_SCREENS = 8
MAX_COMPONENTS_PER_SCREEN = 8


def check_screen_count(screen_count: int) -> None:
    if screen_count == 0:
        raise EmptySchema("Schema must contain at least one screen.")
    if screen_count > MAX_SCREENS:
        raise SchemaLimitExceeded(
            f"Maximum number of screens ({MAX_SCREENS}) exceeded.",
            limit=MAX_SCREENS,
            actual=screen_count,
        )


def check_component_count(screen_id: str, component_count: int) -> None:
    if component_count > MAX_COMPONENTS_PER_SCREEN:
        raise SchemaLimitExceeded(
            f"Screen {screen_id} exceeds maximum number of components "
            f"({MAX_COMPONENTS_PER_SCREEN}).",
            limit=MAX_COMPONENTS_PER_SCREEN,
            actual=component_count,
            screen_id=screen_id,
        )


def check_layout(screen_sizes: Iterable[Tuple[str, int]]) -> None:
    """
    Enforce screen and component ceilings and screen id uniqueness.

    Args:
        screen_sizes: (screen id, component count) for each screen, in order

    Raises:
        EmptySchema: If there are no screens
        SchemaLimitExceeded: If there are more than 8 screens, or any
            screen holds more than 8 components
        ScreenIdCollision: If two screens share an id
    """
    screen_sizes = list(screen_sizes)
    check_screen_count(len(screen_sizes))

    seen: Set[str] = set()
    for screen_id, component_count in screen_sizes:
        if screen_id in seen:
            raise ScreenIdCollision(screen_id)
        seen.add(screen_id)
        check_component_count(screen_id, component_count)


def check_qualified_names(schema: Schema) -> None:
    """Raise QualifiedNameCollision if two bound components share a key."""
    seen: Set[str] = set()
    for screen in schema.screens:
        for index, component in enumerate(screen.components):
            if not is_bindable(component):
                continue
            key = qualified_name(screen.id, component.name, index)
            if key in seen:
                raise QualifiedNameCollision(key, screen.id)
            seen.add(key)


def validate_schema(schema: Schema) -> None:
    """
    Run every document-level check on a built schema.

    Limits come first, in the order of check_layout, then qualified
    name uniqueness.
    """
    check_layout((screen.id, len(screen.components)) for screen in schema.screens)
    check_qualified_names(schema)
