"""CLI entry point for formflow.

Compile form schemas into flow JSON and manage flows on the platform.

Exit codes:
    0: Success
    1: The schema was rejected (any FlowCompileError) or the platform
       refused the request
    2: Unexpected failure
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
import structlog

from formflow import __version__
from formflow.errors import FlowCompileError

logger = structlog.get_logger(__name__)


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _compile(schema_path: str):
    """Load and compile a schema, logging diagnostics and mapping failures to exit codes."""
    from formflow.backends.flow_json import generate_flow_json
    from formflow.serialization import load_schema

    try:
        compiled = generate_flow_json(load_schema(schema_path))
    except FlowCompileError as e:
        logger.warning("schema_rejected", path=schema_path, error=str(e), kind=type(e).__name__)
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None
    except Exception as e:
        logger.exception("compile_failed", path=schema_path)
        click.echo(f"Error: An unexpected error occurred: {e}", err=True)
        raise SystemExit(2) from None

    for diagnostic in compiled.diagnostics:
        logger.warning(
            "label_truncated",
            screen=diagnostic.screen_id,
            component=diagnostic.component,
            original=diagnostic.original,
            truncated=diagnostic.truncated,
        )
    return compiled


def _platform_call(method_name: str, *args: Any) -> None:
    from formflow.client import FlowPlatformClient, FlowPlatformError

    try:
        with FlowPlatformClient() as client:
            result = getattr(client, method_name)(*args)
    except FlowPlatformError as e:
        click.echo(f"Error: {e}", err=True)
        if e.payload is not None:
            _echo_json(e.payload)
        raise SystemExit(1) from None
    _echo_json(result)


@click.group()
@click.version_option(version=__version__, prog_name="formflow")
@click.option("--log-level", default=None, help="Override FORMFLOW_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Formflow - compile form schemas into flow JSON.

    Getting started:

    - `formflow generate schema.yaml` - Compile a schema
    - `formflow analyze schema.yaml` - Check a schema before compiling
    - `formflow upload FLOW_ID schema.yaml` - Compile and upload
    """
    from formflow.config import get_settings
    from formflow.logging_config import configure_logging

    settings = get_settings()
    configure_logging(log_level=log_level or settings.log_level, json_format=settings.log_json)


@cli.command("generate")
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", type=click.Path(), default=None,
              help="Write the flow JSON here instead of stdout.")
def generate(schema_path: str, output_path: str | None) -> None:
    """Compile a JSON or YAML schema into a flow document."""
    from formflow.serialization import flow_to_json

    compiled = _compile(schema_path)
    text = flow_to_json(compiled.document)
    if output_path:
        Path(output_path).write_text(text, encoding="utf-8")
        click.echo(f"Compiled {len(compiled.screens)} screens to {output_path}")
    else:
        click.echo(text)


@cli.command("analyze")
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False))
def analyze(schema_path: str) -> None:
    """Report counts and problems in a schema without compiling it."""
    from formflow.analyzer import analyze_schema
    from formflow.serialization import load_schema

    try:
        report = analyze_schema(load_schema(schema_path))
    except FlowCompileError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    click.echo(f"Screens:    {report.total_screens}")
    click.echo(f"Components: {report.total_components}")
    click.echo(f"Fields:     {report.total_fields}")
    click.echo(f"Terminal:   {report.terminal_screen}")
    for screen_id, count in report.inbound_bindings.items():
        click.echo(f"  {screen_id}: reads {count} upstream fields")
    if report.warnings:
        click.echo(f"\nWarnings ({len(report.warnings)}):")
        for warning in report.warnings:
            click.echo(f"  - {warning}")


@cli.command("diagram")
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", type=click.Path(), default=None)
@click.option("--detailed", is_flag=True, default=False, help="List field names on each screen.")
def diagram(schema_path: str, output_path: str | None, detailed: bool) -> None:
    """Render the screen routing as a Graphviz DOT graph."""
    from formflow.backends.dot_generator import DotMode, generate_dot
    from formflow.serialization import load_schema

    try:
        schema = load_schema(schema_path)
    except FlowCompileError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    dot = generate_dot(schema, mode=DotMode.DETAILED if detailed else DotMode.SIMPLE)
    if output_path:
        Path(output_path).write_text(dot, encoding="utf-8")
    else:
        click.echo(dot)


@cli.command("create")
@click.argument("name")
@click.option("-c", "--category", "categories", multiple=True, help="Flow category (repeatable).")
def create(name: str, categories: tuple) -> None:
    """Create a new, empty flow on the platform."""
    _platform_call("create_flow", name, list(categories) or None)


@cli.command("list")
def list_cmd() -> None:
    """List flows owned by the configured business account."""
    _platform_call("list_flows")


@cli.command("get")
@click.argument("flow_id")
def get(flow_id: str) -> None:
    """Show a flow's status, versions and validation errors."""
    _platform_call("get_flow", flow_id)


@cli.command("preview")
@click.argument("flow_id")
def preview(flow_id: str) -> None:
    """Show a flow's preview link."""
    _platform_call("get_flow_preview", flow_id)


def _read_flow_document(path: str) -> bytes | None:
    """Return the file's bytes when it already holds a compiled flow document."""
    raw = Path(path).read_bytes()
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict) or "version" not in data:
        return None
    screens = data.get("screens")
    if not isinstance(screens, list):
        return None
    if not all(isinstance(s, dict) and "layout" in s for s in screens):
        return None
    return raw


@cli.command("upload")
@click.argument("flow_id")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def upload(flow_id: str, path: str) -> None:
    """Upload PATH as the flow's JSON asset.

    A compiled flow document (top-level `version`, every screen with a
    `layout`) is sent as is; anything else is compiled as a schema first.
    """
    document: Any = _read_flow_document(path)
    if document is None:
        document = _compile(path).document
    _platform_call("upload_flow_json", flow_id, document)


@cli.command("delete")
@click.argument("flow_id")
@click.confirmation_option(prompt="Delete this flow?")
def delete(flow_id: str) -> None:
    """Delete a flow."""
    _platform_call("delete_flow", flow_id)


if __name__ == "__main__":
    cli()
