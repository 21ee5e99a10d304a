"""
optmatch faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
- ParserException / ParserWarning: base types that carry message + options and
  know how to render themselves with rich.
- report(): print any fault to a stderr console.

UX goals
- Position-first messages: parse faults include the ordinal position of the token
  (“at second position”), so users can find the culprit quickly.
- Short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).

Integration
- configure() raises ConfigError; the converters raise ConversionError.
- parse() never raises for bad input: it wraps UnknownOptionError/MissingValueError
  in an Error outcome. Parser.run() hands those to report().
- Soft issues (ParserWarning subclasses) go through warnings.warn.
"""
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - configuration (2110x): DUPLICATED_OPTION
    - parsing (2111x): UNKNOWN_OPTION, MISSING_VALUE
    - conversion (2112x): CONVERSION_FAILED
    - warnings (2211x): OPTION_LIKE_VALUE
    """
    # --- configuration errors ---
    DUPLICATED_OPTION   = 21101

    # --- parsing errors ---
    UNKNOWN_OPTION      = 21111
    MISSING_VALUE       = 21112

    # --- conversion errors ---
    CONVERSION_FAILED   = 21121

    # --- warnings ---
    OPTION_LIKE_VALUE   = 22111

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette):
    main = __import__("__main__")
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))
    colorful = fault.options.get("colorful", True)

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment if colorful else Text(fragment.plain)
        return Text(str(fragment), style)

    prog = text(getattr(main, "__prog__", fault.options.get("prog") or "optmatch"), styler("prog-name"))

    header = Text.assemble(
        "[ ",
        prog,
        " — ",
        text(fault.code.normalize() if fault.code else "-", styler("code")),
        " | ",
        text(fault.title.title(), styler("title")),
        " ]"
    )
    message = text(fault.message, styler("message"))
    parts = [message]
    if hint := fault.options.get("hint"):
        parts.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

    if fault.options.get("fancy", False):
        return Panel(Group(*parts), title=header, title_align="left")

    return Group(header, *parts)


class ParserException(Exception):
    """
    base error: a message plus read-only keyword context.

    subclasses pin their own `code` and `title`; context keys commonly used are
    token, index, name, suggestions, hint, prog, colorful and fancy.
    """
    code = Unset
    title = "parser error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = coalesce(message, self.title)
        self.options = MappingProxyType(options)
        super().__init__(self.message)

    def __getattr__(self, name):
        # Context keys are readable as attributes (fault.token, fault.hint, ...).
        try:
            return self.__dict__["options"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title

            # body
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

    def replace(self, **overrides):
        return type(self)(self.message, **{**self.options, **overrides})


class ConfigError(ParserException):
    code = FaultCode.DUPLICATED_OPTION
    title = "duplicated option"


class UnknownOptionError(ParserException):
    code = FaultCode.UNKNOWN_OPTION
    title = "unknown option"


class MissingValueError(ParserException):
    code = FaultCode.MISSING_VALUE
    title = "missing value"


class ConversionError(ParserException, ValueError):
    code = FaultCode.CONVERSION_FAILED
    title = "conversion failed"


class ParserWarning(UserWarning):
    code = Unset
    title = "parser warning"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = coalesce(message, self.title)
        self.options = MappingProxyType(options)
        super().__init__(self.message)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",  # amber fault code for warnings
            "title": "bold #FFC2E0",  # softer pinky title
            "message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        })

    def replace(self, **overrides):
        return type(self)(self.message, **{**self.options, **overrides})


class OptionLikeValueWarning(ParserWarning):
    code = FaultCode.OPTION_LIKE_VALUE
    title = "value looks like an option"


def warn(warning, /):
    """
    emit a ParserWarning through the warnings machinery.
    """
    if not isinstance(warning, ParserWarning):
        raise TypeError("warn() argument must be a parser warning")
    warnings.warn(warning, stacklevel=3)


def report(fault, /, console=console, **options):
    """
    render a fault (error or warning) to the given console (stderr by default).

    options are merged into the fault's context before rendering, which is how
    callers inject presentation settings (prog, colorful, fancy).
    """
    if not isinstance(fault, ParserException | ParserWarning):
        raise TypeError("report() argument must be a parser fault")
    console.print(fault.replace(**options) if options else fault)


__all__ = (
    "FaultCode",
    "ParserException",
    "ConfigError",
    "UnknownOptionError",
    "MissingValueError",
    "ConversionError",
    "ParserWarning",
    "OptionLikeValueWarning",
    "warn",
    "report",
)
