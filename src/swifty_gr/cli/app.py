"""CLI application entry point for swifty-gr.

This module is the process boundary.  :func:`run` drives one invocation
through a fixed sequence and returns the exit status::

    Start → Parsing ─┬─ ParseFailed ──────────────→ Reporting → exit 64
                     ├─ Help/VersionRequested ─────────────────→ exit 0
                     └─ Parsed → Dispatching ─┬─ ActionFailed → Reporting → exit ≠0
                                              └─ ActionSucceeded ────────→ exit status

No state is revisited and exactly one exit status is produced.

Architecture notes
------------------
* No parsing or routing logic lives here — it is delegated to ``core``.
* This module is the only place that translates between error values
  and the OS process exit code.
* ``sys.argv`` is read by :func:`cli` alone; everything else receives
  argv explicitly.
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from collections.abc import Sequence

from swifty_gr.cli import exit_codes
from swifty_gr.cli.console import console, out_console
from swifty_gr.cli.logging_setup import configure_logging
from swifty_gr.cli.usage import show_help, show_usage
from swifty_gr.core.dispatcher import ActionTable, dispatch
from swifty_gr.core.models import HelpRequest, ValidatedCommand, VersionRequest
from swifty_gr.core.parser import parse_arguments
from swifty_gr.core.schema import OptionSchema
from swifty_gr.exceptions import SwiftyGrError, UnknownCommandError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

def _report_usage_error(schema: OptionSchema, error: SwiftyGrError) -> int:
    """Render a command-line error with the relevant usage line."""
    console.print_error(str(error), error.hint)
    try:
        schema.resolve(error.command_path)
        path = error.command_path
    except UnknownCommandError:
        path = ()
    show_usage(schema, path)
    return exit_codes.USAGE_ERROR


def _report_action_error(error: SwiftyGrError) -> int:
    console.print_error(str(error), error.hint)
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Generic entry point
# ---------------------------------------------------------------------------

def run(
    argv: Sequence[str],
    schema: OptionSchema,
    actions: ActionTable,
    *,
    prog: str | None = None,
) -> int:
    """Parse *argv*, dispatch the result, and return the exit status.

    Parameters
    ----------
    argv:
        Process arguments, excluding the program name.
    schema:
        The command tree, built with :func:`~swifty_gr.core.schema.build_schema`.
    actions:
        Command path → action mapping passed to the dispatcher.
    prog:
        Program name shown in help and usage text.  Defaults to the
        root schema's name.
    """
    if prog is not None and prog != schema.name:
        schema = dataclasses.replace(schema, name=prog)
    result = parse_arguments(schema, argv)

    if isinstance(result, HelpRequest):
        show_help(schema, result.command_path)
        return exit_codes.SUCCESS

    if isinstance(result, VersionRequest):
        out_console.print_text(result.version)
        return exit_codes.SUCCESS

    if not isinstance(result, ValidatedCommand):
        return _report_usage_error(schema, result)

    try:
        outcome = dispatch(result, actions)
    except SwiftyGrError as exc:
        logger.debug("action %r failed", result.key, exc_info=True)
        return _report_action_error(exc)

    if isinstance(outcome, UnknownCommandError):
        outcome.command_path = result.command_path[:-1]
        return _report_usage_error(schema, outcome)
    return outcome


# ---------------------------------------------------------------------------
# swifty-gr
# ---------------------------------------------------------------------------

def main(argv: Sequence[str]) -> int:
    """Run the swifty-gr CLI on *argv* and return the exit status."""
    from swifty_gr.cli.commands import build_app_actions, build_app_schema

    schema = build_app_schema()
    # --log-level must take effect before the parse and dispatch records.
    first = parse_arguments(schema, argv)
    if isinstance(first, ValidatedCommand):
        configure_logging(first["log_level"])
    return run(argv, schema, build_app_actions(schema))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(sys.argv[1:])
        sys.exit(code)
    except SwiftyGrError as exc:
        console.print_error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_text(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
