"""The swifty-gr command tree and its actions.

Only the scaffold's built-in commands live here:

* ``swifty-gr help [<subcommands> ...]`` — help for any command path
* ``swifty-gr doctor``                   — environment diagnostics
* ``swifty-gr --version``

A root ``--log-level`` option applies to every subcommand.
"""

from __future__ import annotations

from swifty_gr.cli.logging_setup import DEFAULT_LOG_LEVEL, LOG_LEVELS
from swifty_gr.core import converters
from swifty_gr.core.dispatcher import Action, ActionTable
from swifty_gr.core.models import ArgumentKind, ArgumentSpec, ValidatedCommand
from swifty_gr.core.schema import OptionSchema, build_schema
from swifty_gr.version import __version__

PROG: str = "swifty-gr"


def build_app_schema() -> OptionSchema:
    """Build the schema for the ``swifty-gr`` executable."""
    help_command = build_schema(
        [
            ArgumentSpec(
                "subcommands",
                ArgumentKind.POSITIONAL,
                collect_remaining=True,
                help="The subcommand to show help for.",
            ),
        ],
        name="help",
        abstract="Show subcommand help information.",
    )
    doctor_command = build_schema(
        name="doctor",
        abstract="Check the runtime environment.",
    )
    return build_schema(
        [
            ArgumentSpec(
                "log_level",
                ArgumentKind.OPTION,
                value_type=converters.choice(*LOG_LEVELS),
                default=DEFAULT_LOG_LEVEL,
                help="Diagnostic log level written to stderr.",
            ),
        ],
        name=PROG,
        abstract="Command-line entry point scaffold.",
        subcommands=[help_command, doctor_command],
        version=__version__,
    )


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

def _help_action(root: OptionSchema) -> Action:
    def _run(command: ValidatedCommand) -> int | None:
        from swifty_gr.cli.usage import show_help

        # Raises UnknownCommandError for an unknown path; the boundary reports it.
        show_help(root, command["subcommands"])
        return None

    return _run


def _doctor_action(command: ValidatedCommand) -> int | None:
    from swifty_gr.cli.doctor import run_doctor

    return run_doctor()


def build_app_actions(root: OptionSchema) -> ActionTable:
    """Map every swifty-gr command path to its action.

    ``--log-level`` is applied by :func:`~swifty_gr.cli.app.main` before
    parsing, so actions do not configure logging themselves.
    """
    return {
        "help": _help_action(root),
        "doctor": _doctor_action,
    }
