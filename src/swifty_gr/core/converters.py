"""Value types used to convert raw argv text into typed values.

Every converter is a **pure** function wrapped in a :class:`ValueType`
that also carries a display name (used as the metavar in help text).
A converter signals bad input by raising :class:`ValueError`; the parser
turns that into a :class:`~swifty_gr.exceptions.TypeConversionError`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ValueType:
    """A named conversion from ``str`` to a typed value."""

    name: str
    """Short label shown in usage text (e.g. ``int``, ``path``)."""

    convert: Callable[[str], object]
    """Callable raising :class:`ValueError` on invalid input."""

    def __call__(self, text: str) -> object:
        return self.convert(text)


# ---------------------------------------------------------------------------
# Built-in conversions
# ---------------------------------------------------------------------------

def _to_str(text: str) -> str:
    return text


def _to_int(text: str) -> int:
    try:
        return int(text, 10)
    except ValueError:
        raise ValueError("expected an integer") from None


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ValueError("expected a number") from None


_TRUE_WORDS = frozenset({"true", "yes", "y", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "n", "off", "0"})


def _to_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError("expected true or false")


def _to_path(text: str) -> Path:
    if not text:
        raise ValueError("expected a non-empty path")
    return Path(text)


string = ValueType("string", _to_str)
integer = ValueType("int", _to_int)
number = ValueType("number", _to_float)
boolean = ValueType("bool", _to_bool)
path = ValueType("path", _to_path)


def choice(*options: str) -> ValueType:
    """Build a value type accepting exactly one of *options*.

    >>> choice("debug", "info")("info")
    'info'
    """
    if not options:
        raise ValueError("choice() needs at least one option")
    allowed = tuple(options)

    def _convert(text: str) -> str:
        if text not in allowed:
            raise ValueError(f"expected one of: {', '.join(allowed)}")
        return text

    return ValueType("|".join(allowed), _convert)


def looks_like_number(text: str) -> bool:
    """Return ``True`` for tokens such as ``-5`` or ``-0.25``.

    Only digit-led forms count, so ``-inf`` and ``-nan`` stay option-like.
    """
    digits = text[1:] if text[:1] in "+-" else text
    if not digits or not (digits[0].isdigit() or digits[0] == "."):
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True
