"""
optmatch utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None or "".
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- rename(callable, name) / @rename(name)
  • Assign stable __name__/__qualname__ to generated accessors for clean tracebacks.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr) as a
    frozen copy, so callers never alias the parser's own tables.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce("", "fallback")
    ''
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Used where an empty string or None is a legitimate user value, but the API
    needs to distinguish “not provided” from “provided as empty”.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and "".
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce("", "fallback")     -> ""
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable and return it.

    Two forms are supported:
        rename(function, "name")      # direct
        @rename("name")               # decorator

    Raises TypeError when the target is not callable, the name is not a string,
    or the callable does not allow its metadata to be updated (e.g. built-ins).
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                """Apply the pending name to the decorated callable."""
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _freeze(object):
    """
    Recursively copy container values into immutable counterparts.

    - Sequence (non-string): tuple of processed items.
    - Mapping: read-only mapping proxy over a fresh dict of processed values.
    - Set: frozenset of processed items.
    - Anything else: returned as-is.
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_freeze, object))
    elif isinstance(object, Mapping):
        return MappingProxyType(dict(zip(object.keys(), map(_freeze, object.values()))))
    elif isinstance(object, Set):
        return frozenset(map(_freeze, object))
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" from the instance and returns a
    frozen copy for container types.

    Example
    - Given self._descriptors (a list), `descriptors = mirror("descriptors")`
      exposes it as a tuple.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(rename(getter, name))


def ordinal(number, /):
    """
    Return a human-friendly ordinal label for a 1-based position.

    - 1..10 are rendered as words ("first"…"tenth").
    - Other numbers use numeric ordinals with correct English suffixes.
    """
    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    # 11th, 12th, 13th (and 111th, 112th, 113th, …)
    if 10 < number % 100 < 20:
        return f"{number}th"

    return f"{number}%s" % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "ordinal",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)

Unset = UnsetType()
