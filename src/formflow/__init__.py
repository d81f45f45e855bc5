"""
Form Flow Compiler Package

Turns an author-facing form schema (screens of typed components) into a
fully resolved flow document that a conversational flow renderer consumes.

ARCHITECTURAL GUARANTEE:
------------------------
The compiler core (model, validator, naming, backends.flow_json) performs
ZERO I/O:
    - No network calls
    - No file access
    - No logging

Uploading the compiled document to the flow platform lives in
`formflow.client`, and the command line wiring lives in `formflow.cli`.
"""

__version__ = "0.1.0"

FLOW_JSON_VERSION = "3.1"
DATA_API_VERSION = "3.0"
