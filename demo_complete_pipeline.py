#!/usr/bin/env python3
"""
Complete Pipeline Demo: Schema → Analysis → Flow JSON → Diagram

Shows the full workflow:
1. Build (or load) a form schema
2. Analyze it for problems
3. Compile it into a flow document
4. Generate a Graphviz diagram of the screen chain
"""

import sys

from formflow.analyzer import analyze_schema
from formflow.backends import DotMode, generate_dot, save_dot_file, save_flow_file
from formflow.examples import build_example_signup_schema
from formflow.serialization import load_schema


def main():
    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: Schema → Analysis → Flow JSON → Diagram")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Load schema
    # =========================================================================
    print("\n1. LOADING SCHEMA...")
    if len(sys.argv) > 1:
        schema = load_schema(sys.argv[1])
        print(f"   ✓ Loaded {sys.argv[1]}")
    else:
        schema = build_example_signup_schema()
        print("   ✓ Built example signup schema")
    print(f"   ✓ Screens: {len(schema.screens)}")

    # =========================================================================
    # STEP 2: Analyze
    # =========================================================================
    print("\n2. ANALYZING SCHEMA...")
    report = analyze_schema(schema)
    print(f"   ✓ Fields: {report.total_fields}")
    print(f"   ✓ Terminal screen: {report.terminal_screen}")
    for screen_id, count in report.inbound_bindings.items():
        print(f"   ✓ {screen_id} reads {count} upstream fields")

    if report.warnings:
        print(f"\n   Warnings ({len(report.warnings)}):")
        for warning in report.warnings:
            print(f"      - {warning}")

    # =========================================================================
    # STEP 3: Compile
    # =========================================================================
    print("\n3. COMPILING FLOW JSON...")
    compiled = save_flow_file(schema, "flow.json")
    print(f"   ✓ Routing model: {compiled.routing_model}")
    print("   ✓ Saved flow.json")
    for diagnostic in compiled.diagnostics:
        print(f"   ! {diagnostic.component}: {diagnostic.message}")

    # =========================================================================
    # STEP 4: Diagram
    # =========================================================================
    print("\n4. GENERATING DIAGRAMS...")
    for mode in (DotMode.SIMPLE, DotMode.DETAILED):
        filename = f"flow_{mode.value}.dot"
        save_dot_file(schema, filename, mode=mode)
        print(f"   ✓ Saved {filename}")

    print("\n   Sample detailed output:")
    for line in generate_dot(schema, mode=DotMode.DETAILED).split('\n'):
        print(f"   {line}")

    print("\n" + "=" * 80)
    print("PIPELINE COMPLETE!")
    print("\nTo visualize the diagrams:")
    print("  dot -Tpng flow_simple.dot -o flow_simple.png")
    print("=" * 80)


if __name__ == "__main__":
    main()
