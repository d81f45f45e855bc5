"""
Schema Analyzer: early diagnostics and inventory of form schemas.

This module provides lightweight analysis of Schema objects:
    - Screen and component inventory
    - Field counts and cross-screen binding fan-in
    - Labels the compiler will truncate
    - Choice fields with no options, empty screens
    - Limit violations, reported as warnings rather than raised

IMPORTANT: This is read-only. It does NOT modify the schema and it never
raises on a schema the compiler would reject; use it to explain why.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from formflow.backends.flow_json import component_key
from formflow.model import ChoiceComponent, Schema, is_bindable
from formflow.naming import MAX_LABEL_LENGTH
from formflow.validator import MAX_COMPONENTS_PER_SCREEN, MAX_SCREENS


@dataclass
class SchemaReport:
    """Analysis report for a schema."""

    total_screens: int = 0
    total_components: int = 0
    total_fields: int = 0

    # Screen id -> number of upstream fields its data block will declare
    inbound_bindings: Dict[str, int] = field(default_factory=dict)
    terminal_screen: str | None = None

    # Findings
    truncated_labels: List[str] = field(default_factory=list)
    choices_without_options: List[str] = field(default_factory=list)
    empty_screens: List[str] = field(default_factory=list)
    duplicate_screen_ids: List[str] = field(default_factory=list)
    oversized_screens: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_schema(schema: Schema) -> SchemaReport:
    """
    Inventory a schema and flag anything the compiler would reject or alter.

    Returns a SchemaReport with counts and warnings.
    """
    report = SchemaReport()
    report.total_screens = len(schema.screens)
    if schema.screens:
        report.terminal_screen = schema.screens[-1].id

    fields_so_far = 0
    for screen in schema.screens:
        report.inbound_bindings[screen.id] = fields_so_far
        report.total_components += len(screen.components)

        if not screen.components:
            report.empty_screens.append(screen.id)
        if len(screen.components) > MAX_COMPONENTS_PER_SCREEN:
            report.oversized_screens.append(screen.id)

        for index, component in enumerate(screen.components):
            if not is_bindable(component):
                continue
            fields_so_far += 1
            key = component_key(screen.id, component, index)
            label = getattr(component, "label", None)
            if label is not None and len(label) > MAX_LABEL_LENGTH:
                report.truncated_labels.append(key)
            if isinstance(component, ChoiceComponent) and not component.options:
                report.choices_without_options.append(key)

    report.total_fields = fields_so_far

    id_counts = Counter(screen.id for screen in schema.screens)
    report.duplicate_screen_ids = sorted(sid for sid, n in id_counts.items() if n > 1)

    # =========================================================================
    # WARNING FLAGS
    # =========================================================================

    if report.total_screens == 0:
        report.add_warning("Schema has no screens")

    if report.total_screens > MAX_SCREENS:
        report.add_warning(
            f"Too many screens: {report.total_screens} (maximum {MAX_SCREENS})"
        )

    if report.oversized_screens:
        report.add_warning(
            f"Screens over {MAX_COMPONENTS_PER_SCREEN} components: {', '.join(report.oversized_screens)}"
        )

    if report.duplicate_screen_ids:
        report.add_warning(
            f"Duplicate screen ids: {', '.join(report.duplicate_screen_ids)}"
        )

    if report.truncated_labels:
        report.add_warning(
            f"Labels longer than {MAX_LABEL_LENGTH} characters: {', '.join(report.truncated_labels)}"
        )

    if report.choices_without_options:
        report.add_warning(
            f"Choice fields without options: {', '.join(report.choices_without_options)}"
        )

    if report.empty_screens:
        report.add_warning(
            f"Empty screens: {', '.join(report.empty_screens)}"
        )

    return report
