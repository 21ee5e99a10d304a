"""
Tagged results of one parse call.

- Success(options): scan finished; options holds one ParsedOption per match, in order.
- Error(fault): scan stopped at the first UnknownOptionError/MissingValueError.
- HelpRequested(descriptor) / VersionRequested(descriptor): a terminal flag ended the scan.

Every outcome answers `ok` (True only for Success) and `terminal` (True for the two
terminal variants), so callers can branch without isinstance checks, or use `match`:

    match parser.parse(sys.argv):
        case Success(): ...
        case Error(fault=fault): ...
        case HelpRequested(): ...
"""
from .faults import ParserException
from .options import RecordType


class ParseOutcome(metaclass=RecordType):
    ok = False
    terminal = False


class Success(ParseOutcome):
    __introspectable__ = ("options",)
    __match_args__ = ("options",)
    ok = True

    def __init__(self, options=()):
        self._options = tuple(options)


class Error(ParseOutcome):
    __introspectable__ = ("fault",)
    __match_args__ = ("fault",)

    def __init__(self, fault):
        if not isinstance(fault, ParserException):
            raise TypeError("error outcome needs a parser exception")
        self._fault = fault

    @property
    def message(self):
        return self._fault.message


class HelpRequested(ParseOutcome):
    __introspectable__ = ("descriptor",)
    __match_args__ = ("descriptor",)
    terminal = True

    def __init__(self, descriptor):
        self._descriptor = descriptor


class VersionRequested(ParseOutcome):
    __introspectable__ = ("descriptor",)
    __match_args__ = ("descriptor",)
    terminal = True

    def __init__(self, descriptor):
        self._descriptor = descriptor


__all__ = (
    "ParseOutcome",
    "Success",
    "Error",
    "HelpRequested",
    "VersionRequested",
)
