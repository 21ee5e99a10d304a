"""
Value coercion helpers.

Pure functions turning option text into typed values. They share no state and
never touch a parser; failures raise ConversionError (a ValueError) and the
caller decides the fallback.
"""
import math

from .faults import ConversionError

_TRUTHY = frozenset({"true", "1", "yes", "on"})

# Signed 32-bit bounds.
_INT_MIN = -2 ** 31
_INT_MAX = 2 ** 31 - 1


def to_boolean(text, /):
    """
    True when text (case-folded) is one of "true", "1", "yes", "on".

    Surrounding whitespace is not trimmed: " on " is false.
    """
    return text.casefold() in _TRUTHY


def to_integer(text, /):
    """
    Parse a base-10 integer in the signed 32-bit range.

    Raises ConversionError for non-numeric or out-of-range input.
    """
    try:
        value = int(text.strip(), 10)
    except ValueError:
        raise ConversionError(
            "invalid integer value %r" % text,
            value=text,
            hint="pass a whole number, for example 42",
        ) from None
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConversionError(
            "integer value %r out of range" % text,
            value=text,
            hint="pass a number between %d and %d" % (_INT_MIN, _INT_MAX),
        )
    return value


def to_double(text, /):
    """
    Parse a finite floating-point value.

    Raises ConversionError for unparsable text, NaN, and values that overflow
    (e.g. "1e999").
    """
    try:
        value = float(text.strip())
    except ValueError:
        raise ConversionError(
            "invalid floating-point value %r" % text,
            value=text,
            hint="pass a decimal number, for example 3.14",
        ) from None
    if math.isnan(value):
        raise ConversionError("invalid floating-point value %r" % text, value=text, hint="pass a decimal number")
    if math.isinf(value):
        raise ConversionError(
            "floating-point value %r out of range" % text,
            value=text,
            hint="pass a finite decimal number",
        )
    return value


def split_list(text, separator="|", /):
    """
    Split text on every occurrence of separator, keeping empty fields.

    Always returns at least one element:
    - split_list("a,b,c", ",") -> ["a", "b", "c"]
    - split_list("x", ",")     -> ["x"]
    - split_list("", ",")      -> [""]
    """
    if not separator:
        raise ValueError("split_list() separator cannot be empty")
    return text.split(separator)


def version_string(major, minor, patch, /):
    return "%d.%d.%d" % (major, minor, patch)


__all__ = (
    "to_boolean",
    "to_integer",
    "to_double",
    "split_list",
    "version_string",
)
