"""
Option matcher and value extractor.

Parser owns a descriptor table, a ParserConfig and the result of its last parse.

Lifecycle
- configure(descriptors, config): replace the table; duplicate names raise ConfigError.
- parse(tokens): walk tokens[1:] left to right and return a ParseOutcome.
- has_option/get_value/get_values: query the last successful parse, falling back to
  descriptor defaults for options that were not given.
- run(tokens): parse, then render help/version or report the fault.

Matching rules
- A token matches a descriptor when it equals style.long + long or style.short + short
  (both sides case-folded under ignore_case). The first descriptor in table order wins.
- Help/version flags stop scanning at once; later tokens are never looked at.
- Unmatched tokens starting with a configured prefix are unknown options; other
  unmatched tokens are skipped.

Not thread-safe: parse() replaces the instance's stored result. Use one parser per thread.
"""
import difflib

from .convert import split_list, to_boolean, to_double, to_integer
from .faults import (
    ConfigError,
    ConversionError,
    MissingValueError,
    OptionLikeValueWarning,
    UnknownOptionError,
    report,
    warn,
)
from .options import Arity, OptionDescriptor, ParsedOption, ParserConfig, RecordType
from .outcomes import Error, HelpRequested, Success, VersionRequested
from .render import render_help, render_license, render_version
from .utils import *

_metadata = ("name", "version", "header", "footer", "license", "version_footer")


class Parser(metaclass=RecordType, comparable=False):
    """
    Command-line option parser over a declarative descriptor table.

    Example:
        parser = Parser([
            OptionDescriptor("h", "help", descr="show help", help=True),
            OptionDescriptor("o", "output", Arity.SINGLE, "out.txt", "output file"),
        ], name="tool", version="1.0.0")

        outcome = parser.parse(sys.argv)
        if outcome.ok:
            path = parser.get_value("output")
    """
    __introspectable__ = (
        "descriptors",
        "config",
        "parsed",
    ) + _metadata

    def __init__(self, descriptors=(), config=Unset, /, **metadata):
        self._descriptors = []
        self._config = ParserConfig()
        self._table = []
        self._parsed = []
        for key in _metadata:
            setattr(self, "_" + key, "")
        self.describe(**metadata)
        self.configure(descriptors, config)

    def describe(self, **metadata):
        """
        Set presentation metadata (name, version, header, footer, license, version_footer).
        """
        for key, value in metadata.items():
            if key not in _metadata:
                raise TypeError(f"parser has no metadata field {key!r}")
            if not isinstance(value, str):
                raise TypeError(f"parser metadata {key!r} must be a string")
            setattr(self, "_" + key, value)
        return self

    def configure(self, descriptors, config=Unset, /):
        """
        Replace the descriptor table (and the config, when given).

        Raises ConfigError when two descriptors share a non-empty short name or a
        non-empty long name (compared case-folded under ignore_case). On error the
        previous table and config stay in place.
        """
        descriptors = list(descriptors)
        config = coalesce(config, self._config)
        if not isinstance(config, ParserConfig):
            raise TypeError("configure() config must be a ParserConfig")

        seen = {}
        table = []
        for descriptor in descriptors:
            if not isinstance(descriptor, OptionDescriptor):
                raise TypeError("configure() descriptors must be OptionDescriptor instances, got %r" % (descriptor,))
            for kind, name, prefix in (
                    ("short", descriptor.short, config.style.short),
                    ("long", descriptor.long, config.style.long),
            ):
                if not name:
                    continue
                key = kind, config.fold(name)
                if (other := seen.get(key)) is not None:
                    raise ConfigError(
                        "%s name %r is declared twice" % (kind, prefix + name),
                        name=name,
                        descriptors=(other, descriptor),
                        hint="give each option its own %s name%s" % (
                            kind, " (names are compared ignoring case)" if config.ignore_case else ""
                        ),
                    )
                seen[key] = descriptor
            table.append((
                frozenset(
                    config.fold(prefix + name)
                    for prefix, name in ((config.style.long, descriptor.long), (config.style.short, descriptor.short))
                    if name
                ),
                descriptor,
            ))

        self._descriptors = descriptors
        self._config = config
        self._table = table
        self._parsed = []
        return self

    def _match(self, token):
        key = self._config.fold(token)
        for candidates, descriptor in self._table:
            if key in candidates:
                return descriptor
        return None

    def _unknown(self, token, index):
        style = self._config.style
        spellings = [
            prefix + name
            for descriptor in self._descriptors
            for prefix, name in ((style.long, descriptor.long), (style.short, descriptor.short))
            if name
        ]
        suggestions = difflib.get_close_matches(token, spellings, 5)
        if suggestions:
            hint = "did you mean %r?" % suggestions[0]
        else:
            hint = "see the help for all available options"
        return UnknownOptionError(
            "unknown option %r at %s position" % (token, ordinal(index)),
            token=token,
            index=index,
            suggestions=tuple(suggestions),
            hint=hint,
        )

    def _extract(self, descriptor, token, tokens, index):
        """
        Pull the value(s) for a value-bearing descriptor matched at tokens[index].

        Returns (values, next_index) or a MissingValueError.
        """
        if index + 1 < len(tokens):
            value = tokens[index + 1]
            if self._match(value) is not None:
                warn(OptionLikeValueWarning(
                    "value %r for option %r at %s position is itself an option" % (value, token, ordinal(index)),
                    token=token,
                    value=value,
                    index=index,
                    hint="check whether a value is missing after %r" % token,
                ))
            index += 1
        elif descriptor.default:
            value = descriptor.default
        else:
            return MissingValueError(
                "missing value for option %r at %s position" % (token, ordinal(index)),
                token=token,
                index=index,
                name=descriptor.long or descriptor.short,
                hint="pass a value after it (for example: %s <value>)" % token,
            )

        if descriptor.arity is Arity.LIST:
            return tuple(split_list(value, self._config.separator)), index
        return (value,), index

    def parse(self, tokens):
        """
        Scan tokens (tokens[0] is the program name) and return a ParseOutcome.

        Fail-fast: the first unknown option or missing value ends the scan with an
        Error outcome. Only a Success replaces the stored result; every other
        outcome leaves it empty.
        """
        tokens = list(tokens)
        self._parsed = []
        prefixes = self._config.style.prefixes
        parsed = []

        index = 1
        while index < len(tokens):
            token = tokens[index]
            descriptor = self._match(token)

            if descriptor is None:
                if token.startswith(prefixes):
                    return Error(self._unknown(token, index))
                index += 1
                continue

            if descriptor.help:
                return HelpRequested(descriptor)
            if descriptor.version:
                return VersionRequested(descriptor)

            if descriptor.arity is Arity.NONE:
                values = ()
            else:
                extracted = self._extract(descriptor, token, tokens, index)
                if isinstance(extracted, MissingValueError):
                    return Error(extracted)
                values, index = extracted

            parsed.append(ParsedOption(descriptor.short, descriptor.long, values))
            index += 1

        self._parsed = parsed
        return Success(parsed)

    def run(self, tokens, console=None):
        """
        Parse and act on terminal outcomes the way a CLI would.

        Help renders the help view, version renders the version view, errors are
        reported on stderr. The outcome is returned in every case.
        """
        tokens = list(tokens)
        outcome = self.parse(tokens)
        match outcome:
            case HelpRequested():
                render_help(self, console)
            case VersionRequested():
                render_version(self, console)
            case Error(fault=fault):
                report(
                    fault,
                    prog=self._name or (tokens[0] if tokens else ""),
                    colorful=self._config.colorful,
                    fancy=self._config.fancy,
                )
        return outcome

    def render_help(self, console=None):
        render_help(self, console)

    def render_version(self, console=None, *, license=True):
        render_version(self, console, license=license)

    def render_license(self, console=None):
        render_license(self, console)

    def _lookup(self, name):
        for descriptor in self._descriptors:
            if name and name in (descriptor.short, descriptor.long):
                return descriptor
        return None

    def has_option(self, name):
        """
        True when the last successful parse recorded the option under name.
        """
        return any(option.matches(name) for option in self._parsed)

    def get_value(self, name):
        """
        First value given for the option; else its descriptor default; else "".
        """
        for option in self._parsed:
            if option.matches(name) and option.values:
                return option.values[0]
        if (descriptor := self._lookup(name)) is not None:
            return descriptor.default
        return ""

    def get_values(self, name):
        """
        Values given for the option; else its default (split for LIST arity); else ().

        A presence-only option carries no values, so it reports its default too.
        """
        for option in self._parsed:
            if option.matches(name) and option.values:
                return option.values
        if (descriptor := self._lookup(name)) is not None:
            if descriptor.arity is Arity.LIST:
                return tuple(split_list(descriptor.default, self._config.separator))
            return descriptor.default,
        return ()

    def get_boolean(self, name):
        return to_boolean(self.get_value(name))

    def get_integer(self, name, fallback=0):
        try:
            return to_integer(self.get_value(name))
        except ConversionError:
            return fallback

    def get_double(self, name, fallback=0.0):
        try:
            return to_double(self.get_value(name))
        except ConversionError:
            return fallback


__all__ = (
    "Parser",
)
