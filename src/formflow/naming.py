"""
Naming rules for compiled components.

Both the widget compiler and the data binding resolver derive keys
through these helpers, so the two always agree byte for byte.
"""

import re
from typing import Optional

MAX_LABEL_LENGTH = 20

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_name(name: str) -> str:
    """Collapse every whitespace run into a single underscore."""
    return _WHITESPACE_RE.sub("_", name)


def qualified_name(screen_id: str, name: str, index: int) -> str:
    """
    Build the document-wide key for a named component.

    The screen id and positional index keep keys unique even when the
    same name appears twice on one screen or across screens.

    Example:
        qualified_name("s1", "first name", 0) -> "s1_first_name_0"
    """
    return f"{screen_id}_{sanitize_name(name)}_{index}"


def placeholder_name(index: int) -> str:
    """Bookkeeping name for an unnamed static component. Never bound."""
    return f"unnamed_{index}"


def option_id(index: int, option: str) -> str:
    """Stable id for a choice option, e.g. (1, "Not Sure") -> "1_not_sure"."""
    return f"{index}_{sanitize_name(option).lower()}"


def truncate_label(label: Optional[str], max_length: int = MAX_LABEL_LENGTH) -> Optional[str]:
    """Cut a label down to its first `max_length` characters."""
    if label is not None and len(label) > max_length:
        return label[:max_length]
    return label
