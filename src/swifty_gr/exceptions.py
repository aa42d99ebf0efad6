"""Custom exception hierarchy for swifty-gr.

Every error condition the scaffold can report inherits from
:class:`SwiftyGrError`, so the CLI error boundary can render a clean
message without leaking stack traces.

User-input errors (the :class:`ParseError` family and
:class:`UnknownCommandError`) are *returned as values* by the parser and
the dispatcher; only the entry point turns them into output and an exit
status.  They are still ``Exception`` subclasses so that actions may
raise them and the boundary handles both paths the same way.

Hierarchy
---------
SwiftyGrError
├── SchemaError
├── ArgumentNotFoundError
├── ParseError
│   ├── UnknownArgumentError
│   ├── TypeConversionError
│   ├── MissingValueError
│   ├── MissingRequiredError
│   └── UnexpectedArgumentError
└── UnknownCommandError
"""

from __future__ import annotations


class SwiftyGrError(Exception):
    """Base exception for all swifty-gr errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""
        self.command_path: tuple[str, ...] = ()
        """Subcommand path where the error was detected, when known."""


# --- Schema construction ---------------------------------------------------

class SchemaError(SwiftyGrError):
    """Raised when an option schema violates its invariants.

    This is a programmer error: a correctly configured tool never
    reaches it at runtime.
    """


class ArgumentNotFoundError(SwiftyGrError):
    """Raised by :meth:`OptionSchema.lookup` for an undeclared name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No argument named '{name}' is declared.")
        self.name: str = name


# --- Parsing ---------------------------------------------------------------

class ParseError(SwiftyGrError):
    """Base for user-input errors found while parsing argv.

    Attributes
    ----------
    token : str | None
        The offending raw token, when one exists.
    argument : str | None
        Name of the argument involved, when one is known.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        argument: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.token: str | None = token
        self.argument: str | None = argument

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError) or type(other) is not type(self):
            return NotImplemented
        return (
            str(self) == str(other)
            and self.token == other.token
            and self.argument == other.argument
        )

    def __hash__(self) -> int:
        return hash((type(self), str(self), self.token, self.argument))


class UnknownArgumentError(ParseError):
    """Raised for a flag or option spelling the schema does not declare."""

    def __init__(self, token: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unknown option '{token}'", token=token, hint=hint)


class TypeConversionError(ParseError):
    """Raised when a raw value cannot be converted to its declared type."""

    def __init__(self, argument: str, text: str, reason: str) -> None:
        super().__init__(
            f"The value '{text}' is invalid for '{argument}': {reason}",
            token=text,
            argument=argument,
        )
        self.reason: str = reason


class MissingValueError(ParseError):
    """Raised when an option is not followed by a usable value."""

    def __init__(self, argument: str, token: str) -> None:
        super().__init__(
            f"Missing value for '{token}'",
            token=token,
            argument=argument,
        )


class MissingRequiredError(ParseError):
    """Raised when required arguments are absent after the full scan.

    Carries *every* missing name, in declaration order.
    """

    def __init__(self, names: tuple[str, ...] | list[str]) -> None:
        self.names: tuple[str, ...] = tuple(names)
        label = "argument" if len(self.names) == 1 else "arguments"
        super().__init__(
            f"Missing required {label}: {', '.join(self.names)}",
        )


class UnexpectedArgumentError(ParseError):
    """Raised for a token no declared argument can consume."""

    def __init__(self, token: str, *, reason: str | None = None) -> None:
        message = f"Unexpected argument '{token}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, token=token)


# --- Dispatch ----------------------------------------------------------------

class UnknownCommandError(SwiftyGrError):
    """Raised when a subcommand name matches no declared command or action."""

    def __init__(self, name: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unknown command '{name}'", hint=hint)
        self.name: str = name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnknownCommandError):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((UnknownCommandError, self.name))
