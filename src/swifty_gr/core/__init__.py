"""Core layer — option schema, parser and dispatcher.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or stream I/O; no reads of ``sys.argv``.
* No imports from ``cli``.
* Errors are returned as values to the caller; only action failures
  propagate as exceptions.
"""

from swifty_gr.core import converters
from swifty_gr.core.dispatcher import Action, ActionTable, dispatch
from swifty_gr.core.models import (
    ArgumentKind,
    ArgumentSpec,
    HelpRequest,
    ValidatedCommand,
    VersionRequest,
)
from swifty_gr.core.parser import ParseResult, is_error, parse_arguments
from swifty_gr.core.schema import OptionSchema, build_schema

__all__: list[str] = [
    "Action",
    "ActionTable",
    "ArgumentKind",
    "ArgumentSpec",
    "HelpRequest",
    "OptionSchema",
    "ParseResult",
    "ValidatedCommand",
    "VersionRequest",
    "build_schema",
    "converters",
    "dispatch",
    "is_error",
    "parse_arguments",
]
