"""Backends for schema output generation (flow JSON, DOT)."""

from .flow_json import CompiledFlow, Diagnostic, generate_flow_json, save_flow_file
from .dot_generator import DotMode, generate_dot, save_dot_file

__all__ = [
    "CompiledFlow",
    "Diagnostic",
    "DotMode",
    "generate_dot",
    "generate_flow_json",
    "save_dot_file",
    "save_flow_file",
]
