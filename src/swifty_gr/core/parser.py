"""Pure argv parser and validator.

:func:`parse_arguments` scans raw tokens left to right against an
:class:`~swifty_gr.core.schema.OptionSchema` and returns exactly one of:

* :class:`~swifty_gr.core.models.ValidatedCommand` — success,
* :class:`~swifty_gr.core.models.HelpRequest` /
  :class:`~swifty_gr.core.models.VersionRequest` — clean exit requested,
* a :class:`~swifty_gr.exceptions.ParseError` or
  :class:`~swifty_gr.exceptions.UnknownCommandError` instance — failure.

Errors are *returned*, never raised.  The first error met during the
scan stops it, except missing required arguments, which are checked
after the scan and reported all together.

Guarantees
----------
* No I/O, no ``print()``, no reads of ``sys.argv``.
* The schema is never mutated; parsing the same argv twice yields equal
  results.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from swifty_gr.core.converters import looks_like_number
from swifty_gr.core.models import (
    ArgumentKind,
    ArgumentSpec,
    HelpRequest,
    ValidatedCommand,
    VersionRequest,
)
from swifty_gr.core.schema import HELP_SPELLINGS, VERSION_SPELLING, OptionSchema
from swifty_gr.exceptions import (
    MissingRequiredError,
    MissingValueError,
    ParseError,
    TypeConversionError,
    UnexpectedArgumentError,
    UnknownArgumentError,
    UnknownCommandError,
)

logger = logging.getLogger(__name__)

ParseFailure = ParseError | UnknownCommandError

ParseResult = ValidatedCommand | HelpRequest | VersionRequest | ParseFailure
"""Everything :func:`parse_arguments` can return."""

_TERMINATOR = "--"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_arguments(schema: OptionSchema, argv: Sequence[str]) -> ParseResult:
    """Parse *argv* against *schema*.

    Parameters
    ----------
    schema:
        A schema produced by :func:`~swifty_gr.core.schema.build_schema`.
    argv:
        Raw arguments, excluding the program name.
    """
    result = _Scan(schema, tuple(argv)).run()
    if is_error(result):
        logger.debug("parse failed: %s", result)
    return result


def is_error(result: object) -> bool:
    """Return ``True`` when *result* is a failure value."""
    return isinstance(result, (ParseError, UnknownCommandError))


def _is_option_like(token: str) -> bool:
    return token.startswith("-") and len(token) > 1 and not looks_like_number(token)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

class _Scan:
    """State for one left-to-right pass.  Created per call, then discarded.

    Every ``_take_*`` step returns ``None`` to continue or a failure value
    to stop the scan.
    """

    def __init__(self, root: OptionSchema, tokens: tuple[str, ...]) -> None:
        self._root = root
        self._tokens = tokens
        self._index = 0
        self._node = root
        self._path: list[str] = []
        self._schemas: list[OptionSchema] = [root]
        self._values: dict[str, Any] = {}
        self._positional_index = 0
        self._options_ended = False

    # -- driver ----------------------------------------------------------

    def run(self) -> ParseResult:
        while self._index < len(self._tokens):
            token = self._tokens[self._index]
            self._index += 1

            failure: ParseFailure | None
            if self._options_ended:
                failure = self._take_positional(token)
            elif token == _TERMINATOR:
                self._options_ended = True
                failure = None
            elif token in HELP_SPELLINGS:
                return HelpRequest(tuple(self._path))
            elif (
                token == VERSION_SPELLING
                and self._node is self._root
                and self._root.version is not None
            ):
                return VersionRequest(self._root.version)
            elif token.startswith("--"):
                failure = self._take_long(token)
            elif _is_option_like(token):
                failure = self._take_short(token)
            else:
                failure = self._take_positional(token)

            if failure is not None:
                failure.command_path = tuple(self._path)
                return failure

        result = self._finish()
        if isinstance(result, MissingRequiredError):
            result.command_path = tuple(self._path)
        return result

    def _finish(self) -> ParseResult:
        while self._node.is_group:
            default = self._node.default_subcommand
            if default is None:
                return HelpRequest(tuple(self._path))
            logger.debug("using default subcommand %r", default)
            self._enter(self._node.subcommand(default))

        missing = [
            spec.name
            for schema in self._schemas
            for spec in schema.arguments
            if spec.required and spec.name not in self._values
        ]
        if missing:
            return MissingRequiredError(missing)

        values: dict[str, Any] = {}
        for schema in self._schemas:
            for spec in schema.arguments:
                if spec.name in self._values:
                    values[spec.name] = self._values[spec.name]
                else:
                    values[spec.name] = spec.empty_value()
        return ValidatedCommand(tuple(self._path), values)

    # -- long options ----------------------------------------------------

    def _take_long(self, token: str) -> ParseFailure | None:
        spelling, has_inline, inline = token.partition("=")
        match = self._node.find_option(spelling)
        if match is None:
            return UnknownArgumentError(token)
        spec = match.spec
        logger.debug("matched %r to argument %r", spelling, spec.name)

        if spec.kind is ArgumentKind.FLAG:
            if has_inline:
                return UnexpectedArgumentError(
                    token, reason="flags do not take a value",
                )
            self._store(spec, not match.negated)
            return None

        if has_inline:
            return self._convert_and_store(spec, inline)
        raw = self._next_value()
        if raw is None:
            return MissingValueError(spec.name, spelling)
        return self._convert_and_store(spec, raw)

    # -- short options ---------------------------------------------------

    def _take_short(self, token: str) -> ParseFailure | None:
        letters = token[1:]
        for offset, letter in enumerate(letters):
            spelling = "-" + letter
            match = self._node.find_option(spelling)
            if match is None:
                hint = f"'{spelling}' is not a known option." if offset else None
                return UnknownArgumentError(token, hint=hint)
            spec = match.spec
            logger.debug("matched %r to argument %r", spelling, spec.name)

            if spec.kind is ArgumentKind.FLAG:
                self._store(spec, True)
                continue

            # An option ends the bundle; the rest of the token is its value.
            # "-n=" carries an empty value, like "--name=".
            attached = letters[offset + 1:]
            if attached:
                return self._convert_and_store(spec, attached.removeprefix("="))
            raw = self._next_value()
            if raw is None:
                return MissingValueError(spec.name, spelling)
            return self._convert_and_store(spec, raw)
        return None

    # -- positionals and subcommands ------------------------------------

    def _take_positional(self, token: str) -> ParseFailure | None:
        if self._node.is_group:
            child = next(
                (c for c in self._node.subcommands if c.name == token),
                None,
            )
            if child is None:
                return UnknownCommandError(
                    token, hint=self._node.subcommand_hint(),
                )
            logger.debug("entering subcommand %r", token)
            self._enter(child)
            return None

        positionals = self._node.positionals
        if self._positional_index >= len(positionals):
            return UnexpectedArgumentError(token)

        spec = positionals[self._positional_index]
        if not spec.collect_remaining:
            self._positional_index += 1
        return self._convert_and_store(spec, token)

    def _enter(self, child: OptionSchema) -> None:
        self._node = child
        self._path.append(child.name)
        self._schemas.append(child)
        self._positional_index = 0

    # -- helpers ---------------------------------------------------------

    def _next_value(self) -> str | None:
        """Consume the next token as an option value, if it can be one."""
        if self._index >= len(self._tokens):
            return None
        candidate = self._tokens[self._index]
        if candidate == _TERMINATOR or _is_option_like(candidate):
            return None
        self._index += 1
        return candidate

    def _convert_and_store(
        self, spec: ArgumentSpec, raw: str,
    ) -> ParseFailure | None:
        try:
            value = spec.value_type(raw)
        except ValueError as exc:
            return TypeConversionError(spec.name, raw, str(exc))
        self._store(spec, value)
        return None

    def _store(self, spec: ArgumentSpec, value: Any) -> None:
        if spec.kind is ArgumentKind.REPEATED or spec.collect_remaining:
            self._values[spec.name] = (*self._values.get(spec.name, ()), value)
        else:
            self._values[spec.name] = value
