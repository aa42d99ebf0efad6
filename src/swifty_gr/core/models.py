"""Domain models for swifty-gr.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and a few derived properties.  They carry
zero I/O and remain pure across the entire lifecycle of an invocation.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from swifty_gr.core.converters import ValueType, string


# ---------------------------------------------------------------------------
# Argument specification
# ---------------------------------------------------------------------------

class ArgumentKind(enum.Enum):
    """How an argument is spelled and how many values it takes."""

    FLAG = "flag"
    """``--verbose`` — present or absent, no value."""

    OPTION = "option"
    """``--name value`` — a single value; the last occurrence wins."""

    REPEATED = "repeated"
    """``--tag a --tag b`` — every occurrence is collected."""

    POSITIONAL = "positional"
    """A bare token, matched by position."""


@dataclass(frozen=True, slots=True)
class ArgumentSpec:
    """Declaration of one accepted argument."""

    name: str
    """Unique identifier; also the key in :class:`ValidatedCommand`."""

    kind: ArgumentKind

    value_type: ValueType = string
    """Conversion applied to raw values.  Ignored for flags."""

    default: Any = None
    """Value used when the argument is absent.  ``None`` means no default."""

    required: bool = False

    short: str | None = None
    """Single-character alias (``"n"`` → ``-n``).  Options and flags only."""

    help: str = ""

    collect_remaining: bool = False
    """Positional only: absorb every remaining positional token."""

    negatable: bool = False
    """Flag only: also accept ``--no-<name>`` to force ``False``."""

    @property
    def is_positional(self) -> bool:
        return self.kind is ArgumentKind.POSITIONAL

    @property
    def takes_value(self) -> bool:
        return self.kind in (ArgumentKind.OPTION, ArgumentKind.REPEATED)

    @property
    def long_name(self) -> str:
        """Long spelling, e.g. ``--dry-run`` for ``dry_run``."""
        return "--" + self.name.replace("_", "-")

    @property
    def short_name(self) -> str | None:
        return f"-{self.short}" if self.short else None

    @property
    def metavar(self) -> str:
        return "<" + self.name.replace("_", "-") + ">"

    def empty_value(self) -> Any:
        """Value stored when the argument never appears on the command line."""
        if self.kind is ArgumentKind.FLAG:
            return bool(self.default) if self.default is not None else False
        if self.kind is ArgumentKind.REPEATED or self.collect_remaining:
            return tuple(self.default) if self.default is not None else ()
        return self.default


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, eq=False)
class ValidatedCommand(Mapping[str, Any]):
    """Fully populated, typed result of a successful parse.

    Behaves as a read-only mapping from argument name to value.
    """

    command_path: tuple[str, ...]
    """Subcommand names from the root; ``()`` for the root command."""

    arguments: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "arguments", MappingProxyType(dict(self.arguments)),
        )

    def __getitem__(self, key: str) -> Any:
        return self.arguments[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.arguments)

    def __len__(self) -> int:
        return len(self.arguments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatedCommand):
            return NotImplemented
        return (
            self.command_path == other.command_path
            and dict(self.arguments) == dict(other.arguments)
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def key(self) -> str:
        """Dispatch key — subcommand names joined by a space."""
        return " ".join(self.command_path)

    def as_dict(self) -> dict[str, Any]:
        return dict(self.arguments)


@dataclass(frozen=True, slots=True)
class HelpRequest:
    """The user asked for help (or invoked a group without a subcommand)."""

    command_path: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class VersionRequest:
    """The user passed ``--version`` to the root command."""

    version: str
