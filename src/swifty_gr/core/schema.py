"""Option schema — explicit, data-driven description of a command line.

A schema is built once at startup with :func:`build_schema`, which
checks every structural invariant and raises
:class:`~swifty_gr.exceptions.SchemaError` on the first violation.  The
resulting :class:`OptionSchema` is immutable and safe to reuse for any
number of parses.

Invariants
----------
* Argument names are unique within a schema and along its ancestor
  chain, so a :class:`ValidatedCommand` never has two values for one key.
* Long and short spellings are unique; ``-h``/``--help`` are reserved,
  and so is ``--version`` when the schema carries a version.
* At most one positional collects the remaining tokens, and it is the
  last positional.
* Required arguments declare no default; flags are never required;
  required positionals never follow optional ones.
* A schema with subcommands declares no positionals.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from swifty_gr.core.models import ArgumentKind, ArgumentSpec
from swifty_gr.exceptions import (
    ArgumentNotFoundError,
    SchemaError,
    UnknownCommandError,
)

HELP_SPELLINGS: frozenset[str] = frozenset({"-h", "--help"})
VERSION_SPELLING: str = "--version"


@dataclass(frozen=True, slots=True)
class OptionMatch:
    """Result of resolving an option spelling against a schema."""

    spec: ArgumentSpec
    negated: bool = False
    """``True`` when matched through ``--no-<name>``."""


@dataclass(frozen=True, slots=True, eq=False)
class OptionSchema:
    """Immutable description of one command and its subcommands.

    Instances are produced by :func:`build_schema`; constructing one
    directly skips validation.
    """

    name: str
    arguments: tuple[ArgumentSpec, ...]
    subcommands: tuple[OptionSchema, ...] = ()
    abstract: str = ""
    version: str | None = None
    default_subcommand: str | None = None
    _spellings: Mapping[str, OptionMatch] = field(
        default_factory=lambda: MappingProxyType({}), repr=False,
    )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def lookup(self, name: str) -> ArgumentSpec:
        """Return the argument declared as *name*.

        Raises
        ------
        ArgumentNotFoundError
            If no argument of that name exists in this schema.
        """
        for spec in self.arguments:
            if spec.name == name:
                return spec
        raise ArgumentNotFoundError(name)

    def find_option(self, spelling: str) -> OptionMatch | None:
        """Resolve ``--name``, ``-n`` or ``--no-name``; ``None`` if unknown."""
        return self._spellings.get(spelling)

    def subcommand(self, name: str) -> OptionSchema:
        """Return the direct subcommand called *name*.

        Raises
        ------
        UnknownCommandError
            If this schema declares no such subcommand.
        """
        for child in self.subcommands:
            if child.name == name:
                return child
        raise UnknownCommandError(name, hint=self.subcommand_hint())

    def resolve(self, path: Sequence[str]) -> OptionSchema:
        """Walk *path* from this schema down through its subcommands."""
        node = self
        for name in path:
            node = node.subcommand(name)
        return node

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def positionals(self) -> tuple[ArgumentSpec, ...]:
        return tuple(spec for spec in self.arguments if spec.is_positional)

    @property
    def options(self) -> tuple[ArgumentSpec, ...]:
        return tuple(spec for spec in self.arguments if not spec.is_positional)

    @property
    def is_group(self) -> bool:
        return bool(self.subcommands)

    def subcommand_hint(self) -> str | None:
        if not self.subcommands:
            return None
        names = ", ".join(child.name for child in self.subcommands)
        return f"Available commands: {names}"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

def build_schema(
    arguments: Iterable[ArgumentSpec] = (),
    *,
    name: str,
    abstract: str = "",
    subcommands: Iterable[OptionSchema] = (),
    version: str | None = None,
    default_subcommand: str | None = None,
) -> OptionSchema:
    """Validate *arguments* and *subcommands* and return a schema.

    Subcommand schemas are re-validated against this schema's argument
    names so that no name is declared twice along any command path.

    Raises
    ------
    SchemaError
        On the first invariant violation found.
    """
    specs = tuple(arguments)
    children = tuple(subcommands)

    _check_name(name, what="Command")
    for spec in specs:
        _check_spec(spec, command=name)
    _check_unique_names(specs, command=name)
    _check_positionals(specs, command=name)
    _check_subcommands(specs, children, default_subcommand, command=name)
    spellings = _index_spellings(specs, command=name, version=version)

    for child in children:
        _check_ancestor_collisions(child, {spec.name for spec in specs}, name)

    return OptionSchema(
        name=name,
        arguments=specs,
        subcommands=children,
        abstract=abstract,
        version=version,
        default_subcommand=default_subcommand,
        _spellings=MappingProxyType(spellings),
    )


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def _check_name(name: str, *, what: str) -> None:
    if not name or name.startswith("-") or any(ch.isspace() for ch in name):
        raise SchemaError(f"{what} name {name!r} is not a valid identifier.")


def _check_spec(spec: ArgumentSpec, *, command: str) -> None:
    _check_name(spec.name, what="Argument")
    where = f"'{spec.name}' in '{command}'"

    if spec.required and spec.default is not None:
        raise SchemaError(f"Required argument {where} cannot declare a default.")
    if spec.kind is ArgumentKind.FLAG and spec.required:
        raise SchemaError(f"Flag {where} cannot be required.")
    if spec.collect_remaining and not spec.is_positional:
        raise SchemaError(f"Only positionals may collect remaining tokens ({where}).")
    if spec.negatable and spec.kind is not ArgumentKind.FLAG:
        raise SchemaError(f"Only flags may be negatable ({where}).")
    if spec.short is not None:
        if spec.is_positional:
            raise SchemaError(f"Positional {where} cannot have a short name.")
        if len(spec.short) != 1 or not spec.short.isalpha():
            raise SchemaError(
                f"Short name {spec.short!r} for {where} must be a single letter.",
            )


def _check_unique_names(specs: Sequence[ArgumentSpec], *, command: str) -> None:
    seen: set[str] = set()
    for spec in specs:
        if spec.name in seen:
            raise SchemaError(
                f"Argument name '{spec.name}' is declared twice in '{command}'.",
            )
        seen.add(spec.name)


def _check_positionals(specs: Sequence[ArgumentSpec], *, command: str) -> None:
    positionals = [spec for spec in specs if spec.is_positional]

    collectors = [spec for spec in positionals if spec.collect_remaining]
    if len(collectors) > 1:
        names = ", ".join(spec.name for spec in collectors)
        raise SchemaError(
            f"Only one positional may collect remaining tokens in '{command}' "
            f"(found: {names}).",
        )
    if collectors and positionals[-1] is not collectors[0]:
        raise SchemaError(
            f"Positional '{collectors[0].name}' collects remaining tokens "
            f"and must be the last positional in '{command}'.",
        )

    seen_optional = False
    for spec in positionals:
        if not spec.required:
            seen_optional = True
        elif seen_optional:
            raise SchemaError(
                f"Required positional '{spec.name}' follows an optional one "
                f"in '{command}'.",
            )


def _check_subcommands(
    specs: Sequence[ArgumentSpec],
    children: Sequence[OptionSchema],
    default_subcommand: str | None,
    *,
    command: str,
) -> None:
    names = [child.name for child in children]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise SchemaError(
            f"Subcommand '{duplicates[0]}' is declared twice in '{command}'.",
        )
    if children and any(spec.is_positional for spec in specs):
        raise SchemaError(
            f"Command '{command}' has subcommands and cannot declare positionals.",
        )
    if default_subcommand is not None and default_subcommand not in names:
        raise SchemaError(
            f"Default subcommand '{default_subcommand}' is not declared "
            f"in '{command}'.",
        )


def _index_spellings(
    specs: Sequence[ArgumentSpec],
    *,
    command: str,
    version: str | None,
) -> dict[str, OptionMatch]:
    reserved = set(HELP_SPELLINGS)
    if version is not None:
        reserved.add(VERSION_SPELLING)

    index: dict[str, OptionMatch] = {}

    def _claim(spelling: str, match: OptionMatch) -> None:
        if spelling in reserved:
            raise SchemaError(
                f"'{spelling}' is reserved and cannot be declared in '{command}'.",
            )
        if spelling in index:
            raise SchemaError(
                f"Option spelling '{spelling}' is used twice in '{command}'.",
            )
        index[spelling] = match

    for spec in specs:
        if spec.is_positional:
            continue
        _claim(spec.long_name, OptionMatch(spec))
        if spec.short_name is not None:
            _claim(spec.short_name, OptionMatch(spec))
        if spec.negatable:
            _claim("--no-" + spec.long_name[2:], OptionMatch(spec, negated=True))
    return index


def _check_ancestor_collisions(
    child: OptionSchema,
    ancestor_names: set[str],
    parent: str,
) -> None:
    for spec in child.arguments:
        if spec.name in ancestor_names:
            raise SchemaError(
                f"Argument '{spec.name}' of '{child.name}' collides with an "
                f"argument of its parent command '{parent}'.",
            )
    inherited = ancestor_names | {spec.name for spec in child.arguments}
    for grandchild in child.subcommands:
        _check_ancestor_collisions(grandchild, inherited, child.name)
