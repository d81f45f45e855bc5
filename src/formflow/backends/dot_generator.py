"""
Graphviz DOT diagram generator for form schemas.

Draws the screen chain described by the routing model: one node per
screen, one edge per routing entry, with the terminal screen highlighted.

Supports two modes:
    - SIMPLE: Screen titles only
    - DETAILED: Titles plus the screen's field names
"""

from enum import Enum
from typing import List

from formflow.backends.flow_json import build_routing_model, component_key
from formflow.model import Schema, is_bindable


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"      # Just screen flow
    DETAILED = "detailed"  # Include field names


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Escape backslashes first
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _escape_dot_id(identifier: str) -> str:
    """Escape/quote an identifier for DOT."""
    # If it starts with a digit or contains special chars, quote it
    if not identifier or identifier[0].isdigit() or not identifier.replace('_', '').isalnum():
        return _escape_dot_string(identifier)
    return identifier


def generate_dot(schema: Schema, mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for a schema's screen chain.

    Args:
        schema: Schema to visualize
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    lines: List[str] = []

    lines.append("digraph flow {")
    lines.append("  rankdir=LR;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    # =========================================================================
    # NODES
    # =========================================================================

    last_index = len(schema.screens) - 1
    for index, screen in enumerate(schema.screens):
        label = screen.title or screen.id

        if mode == DotMode.DETAILED:
            fields = [
                component_key(screen.id, component, position)
                for position, component in enumerate(screen.components)
                if is_bindable(component)
            ]
            if fields:
                label = label + "\n" + "\n".join(fields)

        attrs = f"label={_escape_dot_string(label)}"
        if index == last_index:
            attrs += ", shape=doubleoctagon, fillcolor=lightgreen"
        lines.append(f"  {_escape_dot_id(screen.id)} [{attrs}];")

    # =========================================================================
    # EDGES (ROUTING MODEL)
    # =========================================================================

    for from_id, targets in build_routing_model(schema).items():
        for to_id in targets:
            lines.append(f"  {_escape_dot_id(from_id)} -> {_escape_dot_id(to_id)};")

    lines.append("}")

    return "\n".join(lines)


def save_dot_file(schema: Schema, filename: str, mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        schema: Schema to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
    """
    dot = generate_dot(schema, mode=mode)
    with open(filename, 'w') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
