"""Usage and help text rendering.

The ``format_*`` functions are pure and return plain strings; only
:func:`show_help` and :func:`show_usage` write (to stderr).  Layout
follows the familiar ``OVERVIEW / USAGE / ARGUMENTS / OPTIONS /
SUBCOMMANDS`` sections.
"""

from __future__ import annotations

from collections.abc import Sequence

from swifty_gr.cli.console import console
from swifty_gr.core.models import ArgumentKind, ArgumentSpec
from swifty_gr.core.schema import OptionSchema

_INDENT = "  "
_MIN_LABEL_WIDTH = 20


# ---------------------------------------------------------------------------
# Pieces
# ---------------------------------------------------------------------------

def _usage_token(spec: ArgumentSpec) -> str:
    """Render one argument as it appears in the usage line."""
    if spec.is_positional:
        token = spec.metavar
        if spec.collect_remaining:
            token = f"{token} ..."
        return token if spec.required else f"[{token}]"

    spelling = spec.long_name
    if spec.takes_value:
        spelling = f"{spelling} {spec.metavar}"
    if spec.kind is ArgumentKind.REPEATED:
        spelling = f"{spelling} ..."
    return spelling if spec.required else f"[{spelling}]"


def _option_label(spec: ArgumentSpec) -> str:
    names = [spec.long_name]
    if spec.short_name:
        names.insert(0, spec.short_name)
    if spec.negatable:
        names.append("--no-" + spec.long_name[2:])
    label = ", ".join(names)
    if spec.takes_value:
        label = f"{label} {spec.metavar}"
    return label


def _describe(spec: ArgumentSpec) -> str:
    text = spec.help
    if spec.takes_value or spec.is_positional:
        if spec.value_type.name != "string":
            text = f"{text} ({spec.value_type.name})".strip()
    if spec.default is not None and not spec.required:
        text = f"{text} (default: {_format_default(spec.default)})".strip()
    return text


def _format_default(value: object) -> str:
    if isinstance(value, (tuple, list)):
        return ", ".join(str(item) for item in value)
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _section(title: str, rows: Sequence[tuple[str, str]]) -> list[str]:
    if not rows:
        return []
    width = max(_MIN_LABEL_WIDTH, *(len(label) + 2 for label, _ in rows))
    lines = [f"{title}:"]
    for label, text in rows:
        lines.append(f"{_INDENT}{label:<{width}}{text}".rstrip())
    return lines


# ---------------------------------------------------------------------------
# Pure formatters
# ---------------------------------------------------------------------------

def command_name(root: OptionSchema, path: Sequence[str]) -> str:
    """Full command name, e.g. ``swifty-gr help``."""
    return " ".join([root.name, *path])


def format_usage(root: OptionSchema, path: Sequence[str] = ()) -> str:
    """Return the one-line ``USAGE:`` string for the command at *path*.

    Raises
    ------
    UnknownCommandError
        If *path* does not name a declared command.
    """
    node = root.resolve(path)
    parts = [command_name(root, path)]
    parts.extend(_usage_token(spec) for spec in node.options)
    parts.extend(_usage_token(spec) for spec in node.positionals)
    if node.is_group:
        parts.append("[<subcommand>]" if node.default_subcommand else "<subcommand>")
    return "USAGE: " + " ".join(parts)


def format_help(root: OptionSchema, path: Sequence[str] = ()) -> str:
    """Return the full help text for the command at *path*.

    Raises
    ------
    UnknownCommandError
        If *path* does not name a declared command.
    """
    node = root.resolve(path)
    blocks: list[list[str]] = []

    if node.abstract:
        blocks.append([f"OVERVIEW: {node.abstract}"])
    blocks.append([format_usage(root, path)])

    positional_rows = [
        (
            spec.metavar + (" ..." if spec.collect_remaining else ""),
            _describe(spec),
        )
        for spec in node.positionals
    ]
    blocks.append(_section("ARGUMENTS", positional_rows))

    option_rows = [(_option_label(spec), _describe(spec)) for spec in node.options]
    option_rows.append(("-h, --help", "Show help information."))
    if node is root and root.version is not None:
        option_rows.append(("--version", "Show the version."))
    blocks.append(_section("OPTIONS", option_rows))

    subcommand_rows = []
    for child in node.subcommands:
        label = child.name
        if child.name == node.default_subcommand:
            label = f"{label} (default)"
        subcommand_rows.append((label, child.abstract))
    blocks.append(_section("SUBCOMMANDS", subcommand_rows))

    if node.subcommands:
        if _has_help_command(root):
            pointer = f"{command_name(root, ('help', *path))} <subcommand>"
        else:
            pointer = f"{command_name(root, path)} <subcommand> --help"
        blocks.append([f"See '{pointer}' for detailed help."])

    return "\n\n".join("\n".join(block) for block in blocks if block)


def _has_help_command(root: OptionSchema) -> bool:
    return any(child.name == "help" for child in root.subcommands)


# ---------------------------------------------------------------------------
# Writers (stderr)
# ---------------------------------------------------------------------------

def show_help(root: OptionSchema, path: Sequence[str] = ()) -> None:
    """Write the help text for *path* to stderr."""
    console.print_text(format_help(root, path))


def show_usage(root: OptionSchema, path: Sequence[str] = ()) -> None:
    """Write the usage line and a ``--help`` pointer to stderr."""
    console.print_text(format_usage(root, path))
    console.print_text(
        f"See '{command_name(root, path)} --help' for more information.",
    )
