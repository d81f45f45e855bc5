"""
Exception hierarchy for the form flow compiler.

Every failure the compiler can raise derives from FlowCompileError so a
calling boundary can map the whole family to a client error, and treat
anything else as an unexpected server failure.
"""

from typing import Optional


class FlowCompileError(Exception):
    """Base class for schema validation and compilation failures."""
    pass


class SchemaFormatError(FlowCompileError):
    """Raised when an input document cannot be read as a schema."""
    pass


class EmptySchema(FlowCompileError):
    """Raised when a schema declares no screens at all."""
    pass


class SchemaLimitExceeded(FlowCompileError):
    """
    Raised when a schema exceeds a fixed size ceiling.

    Properties:
        limit: The ceiling that was exceeded
        actual: The count found in the schema
        screen_id: Owning screen for component-count failures, None for
            the screen-count check
    """

    def __init__(self, message: str, limit: int, actual: int, screen_id: Optional[str] = None):
        super().__init__(message)
        self.limit = limit
        self.actual = actual
        self.screen_id = screen_id


class MissingComponentName(FlowCompileError):
    """Raised when an interactive component has no name to bind its value to."""

    def __init__(self, message: str, component_type: str, screen_id: Optional[str] = None,
                 index: Optional[int] = None):
        super().__init__(message)
        self.component_type = component_type
        self.screen_id = screen_id
        self.index = index


class ScreenIdCollision(FlowCompileError):
    """Raised when two screens share the same id."""

    def __init__(self, screen_id: str):
        super().__init__(f"Duplicate screen id: {screen_id}")
        self.screen_id = screen_id


class ScreenCountMismatch(FlowCompileError):
    """Raised when fewer screens were compiled than the schema declares."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Some screens were invalid: compiled {actual} of {expected}. Flow JSON not generated."
        )
        self.expected = expected
        self.actual = actual


class QualifiedNameCollision(FlowCompileError):
    """
    Raised when two bound components resolve to the same qualified name.

    Screen ids and component names are joined with underscores, so screen
    "a" with field "b_c" and screen "a_b" with field "c" both become
    "a_b_c_0".
    """

    def __init__(self, qualified_name: str, screen_id: str):
        super().__init__(f"Duplicate field name: {qualified_name} (screen {screen_id})")
        self.qualified_name = qualified_name
        self.screen_id = screen_id
