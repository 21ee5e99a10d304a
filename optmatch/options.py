r"""
optmatch option model.

Overview
- Enums
  • Arity: how many values an option consumes (NONE, SINGLE, LIST).
  • PrefixStyle: how names are spelled on the command line (UNIX "-x"/"--xyz", WINDOWS "/x"/"/xyz").

- Records
  • OptionDescriptor: static definition of one recognizable option.
  • ParserConfig: parsing switches plus presentation toggles for help/version views.
  • ParsedOption: one matched occurrence with its extracted values.

- Introspection & representation
  • RecordType metaclass exposes the fields listed in __introspectable__ as read-only
    properties (see mirror()), and provides stable __repr__/__rich_repr__ plus value
    equality and hashing unless the class opts out with `comparable=False`.

Validation highlights
- Names are bare (no prefix), contain no whitespace, and at least one of short/long is set.
- A descriptor cannot be both a help and a version flag, and terminal flags take no value.
- The list separator is exactly one character.

Quick example:
    >>> output = OptionDescriptor("o", "output", Arity.SINGLE, "out.txt", "output file")
    >>> config = ParserConfig(ignore_case=True, separator=",")
"""
import enum
import functools
import operator
import re

from .utils import *


class RecordType(type):
    """
    Metaclass that turns plain classes into introspectable records.

    Responsibilities
    - Expose fields named in __introspectable__ as read-only properties backed by
      "_{name}" attributes (frozen copies for containers).
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.
    - Provide value-based __eq__/__hash__ (skipped with `comparable=False`).
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, comparable=True, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                field: mirror(field) for field in namespace.get("__introspectable__", ())
            },
            **options,
        )

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers.
            """
            for field in type(self).__introspectable__:
                yield field, getattr(self, field)
        self.__rich_repr__ = __rich_repr__

        @rename("__repr__")
        def __repr__(self):
            fields = ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            return f"{type(self).__typename__}({fields})"
        self.__repr__ = __repr__

        if comparable:
            @rename("__eq__")
            def __eq__(self, other):
                if type(other) is not type(self):
                    return NotImplemented
                return tuple(self.__rich_repr__()) == tuple(other.__rich_repr__())
            self.__eq__ = __eq__

            @rename("__hash__")
            def __hash__(self):
                return hash((type(self), *(object for _, object in self.__rich_repr__())))
            self.__hash__ = __hash__

        return self


class Arity(enum.Enum):
    """
    value arity of an option.

    - NONE: presence-only, never consumes the following token.
    - SINGLE: consumes the following token as its value.
    - LIST: consumes the following token and splits it on the list separator.
    """
    NONE = "none"
    SINGLE = "single"
    LIST = "list"


class PrefixStyle(enum.Enum):
    """
    prefix convention for option names.

    each member carries its (short, long) prefixes.
    """
    UNIX = ("-", "--")
    WINDOWS = ("/", "/")

    @property
    def short(self):
        return self.value[0]

    @property
    def long(self):
        return self.value[1]

    @property
    def prefixes(self):
        """
        distinct prefixes, longest first (used to spot option-looking tokens).
        """
        return tuple(sorted(set(self.value), key=len, reverse=True))


def _sanitize_name(kind, name, /):
    if not isinstance(name, str):
        raise TypeError(f"option-descriptor {kind!r} name must be a string")
    if name != name.strip() or any(character.isspace() for character in name):
        raise ValueError(f"option-descriptor {kind!r} name cannot contain whitespace: {name!r}")
    if name.startswith(("-", "/")):
        raise ValueError(f"option-descriptor {kind!r} name must be given without its prefix: {name!r}")
    return name


class OptionDescriptor(metaclass=RecordType):
    """
    Static definition of one recognizable command-line option.

    Fields
    - short/long: bare names (either may be empty, not both).
    - arity: Arity member deciding how many values are consumed.
    - default: text used when a value-bearing option ends the input, and as the
      query fallback when the option was never given.
    - descr: one-line description for the help view.
    - help/version: terminal flags; matching one ends scanning.
    - hidden: excluded from the help view.
    """
    __introspectable__ = (
        "short",
        "long",
        "arity",
        "default",
        "descr",
        "help",
        "version",
        "hidden",
    )

    def __init__(
            self,
            short="",
            long="",
            arity=Arity.NONE,
            default="",
            descr="",
            *,
            help=False,
            version=False,
            hidden=False,
    ):
        self._short = _sanitize_name("short", short)
        self._long = _sanitize_name("long", long)
        if not self._short and not self._long:
            raise ValueError("option-descriptor needs a short or a long name")

        if not isinstance(arity, Arity):
            raise TypeError("option-descriptor 'arity' must be an Arity member")
        self._arity = arity

        if not isinstance(default, str):
            raise TypeError("option-descriptor 'default' must be a string")
        self._default = default

        if not isinstance(descr, str):
            raise TypeError("option-descriptor 'descr' must be a string")
        self._descr = descr.strip()

        self._help = bool(help)
        self._version = bool(version)
        self._hidden = bool(hidden)

        if self._help and self._version:
            raise ValueError("option-descriptor cannot be both a help and a version flag")
        if (self._help or self._version) and arity is not Arity.NONE:
            raise ValueError("help and version flags cannot take values")

    @property
    def names(self):
        """
        Non-empty names, short first.
        """
        return tuple(name for name in (self._short, self._long) if name)

    @property
    def identity(self):
        return self._short, self._long

    @property
    def terminal(self):
        return self._help or self._version


class ParserConfig(metaclass=RecordType):
    """
    Parsing switches plus presentation toggles.

    Parsing
    - ignore_case: fold both tokens and names before comparing.
    - style: PrefixStyle used to spell names.
    - separator: single character splitting LIST values.

    Presentation (never affects parsing)
    - show_header, show_footer, show_name, show_version, show_license: help view sections.
    - show_version_footer: version view footer.
    - colorful: apply the rich palette; fancy: wrap views in a panel.
    """
    __introspectable__ = (
        "ignore_case",
        "style",
        "separator",
        "show_header",
        "show_footer",
        "show_name",
        "show_version",
        "show_license",
        "show_version_footer",
        "colorful",
        "fancy",
    )

    def __init__(
            self,
            ignore_case=False,
            style=PrefixStyle.UNIX,
            separator="|",
            *,
            show_header=True,
            show_footer=True,
            show_name=True,
            show_version=True,
            show_license=True,
            show_version_footer=False,
            colorful=True,
            fancy=False,
    ):
        if not isinstance(style, PrefixStyle):
            raise TypeError("parser-config 'style' must be a PrefixStyle member")
        if not isinstance(separator, str):
            raise TypeError("parser-config 'separator' must be a string")
        if len(separator) != 1:
            raise ValueError(f"parser-config 'separator' must be a single character, got {separator!r}")

        self._ignore_case = bool(ignore_case)
        self._style = style
        self._separator = separator
        self._show_header = bool(show_header)
        self._show_footer = bool(show_footer)
        self._show_name = bool(show_name)
        self._show_version = bool(show_version)
        self._show_license = bool(show_license)
        self._show_version_footer = bool(show_version_footer)
        self._colorful = bool(colorful)
        self._fancy = bool(fancy)

    def fold(self, text, /):
        """
        Normalize text for comparison under the configured case policy.
        """
        return text.casefold() if self._ignore_case else text

    def replace(self, **overrides):
        """
        Return a copy with the given fields replaced.
        """
        if unknown := set(overrides) - set(type(self).__introspectable__):
            raise TypeError(f"parser-config has no field(s) {', '.join(sorted(unknown))}")
        return type(self)(**dict(self.__rich_repr__()) | overrides)


class ParsedOption(metaclass=RecordType):
    """
    One matched occurrence: the descriptor identity plus its extracted values.
    """
    __introspectable__ = ("short", "long", "values")

    def __init__(self, short, long, values=()):
        self._short = short
        self._long = long
        self._values = tuple(values)

    def matches(self, name, /):
        return bool(name) and name in (self._short, self._long)


__all__ = (
    "RecordType",
    "Arity",
    "PrefixStyle",
    "OptionDescriptor",
    "ParserConfig",
    "ParsedOption",
)
