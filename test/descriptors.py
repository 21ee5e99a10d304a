"""
Option model behavioral tests (descriptors, config, parsed records, outcomes).

Scope
- Validate OptionDescriptor construction, normalization and rejection rules.
- Validate ParserConfig defaults, separator rules and replace().
- Validate record semantics: read-only fields, value equality, hashing, repr.
- Validate outcome flags and the Unset/coalesce helpers.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optmatch import (
    Arity,
    Error,
    HelpRequested,
    MissingValueError,
    OptionDescriptor,
    ParsedOption,
    ParserConfig,
    PrefixStyle,
    Success,
    VersionRequested,
)
from optmatch.utils import Unset, coalesce, ordinal, rename


class TestOptionDescriptor(TestCase):
    """Construction and validation of option descriptors."""

    def testDefaults(self):
        descriptor = OptionDescriptor("v", "verbose")
        self.assertIs(descriptor.arity, Arity.NONE)
        self.assertEqual(descriptor.default, "")
        self.assertEqual(descriptor.descr, "")
        self.assertFalse(descriptor.help)
        self.assertFalse(descriptor.version)
        self.assertFalse(descriptor.hidden)
        self.assertFalse(descriptor.terminal)

    def testNamesAndIdentity(self):
        self.assertEqual(OptionDescriptor("o", "output").names, ("o", "output"))
        self.assertEqual(OptionDescriptor("", "output").names, ("output",))
        self.assertEqual(OptionDescriptor("o").identity, ("o", ""))

    def testBothNamesEmptyRejected(self):
        with self.assertRaises(ValueError):
            OptionDescriptor()
        with self.assertRaises(ValueError):
            OptionDescriptor("", "")

    def testPrefixedNameRejected(self):
        with self.assertRaises(ValueError):
            OptionDescriptor("", "--output")
        with self.assertRaises(ValueError):
            OptionDescriptor("/o")

    def testWhitespaceInNameRejected(self):
        with self.assertRaises(ValueError):
            OptionDescriptor("", "out put")
        with self.assertRaises(ValueError):
            OptionDescriptor(" o")

    def testNonStringFieldsRejected(self):
        with self.assertRaises(TypeError):
            OptionDescriptor(1)
        with self.assertRaises(TypeError):
            OptionDescriptor("o", default=5)
        with self.assertRaises(TypeError):
            OptionDescriptor("o", descr=None)

    def testArityMustBeEnumMember(self):
        with self.assertRaises(TypeError):
            OptionDescriptor("o", arity="single")

    def testHelpAndVersionAreExclusive(self):
        with self.assertRaises(ValueError):
            OptionDescriptor("x", help=True, version=True)

    def testTerminalFlagsTakeNoValue(self):
        with self.assertRaises(ValueError):
            OptionDescriptor("h", "help", Arity.LIST, help=True)
        with self.assertRaises(ValueError):
            OptionDescriptor("V", "version", Arity.SINGLE, version=True)

    def testTerminalProperty(self):
        self.assertTrue(OptionDescriptor("h", help=True).terminal)
        self.assertTrue(OptionDescriptor("V", version=True).terminal)

    def testDescriptionIsTrimmed(self):
        self.assertEqual(OptionDescriptor("o", descr="  output file ").descr, "output file")

    def testFieldsAreReadOnly(self):
        descriptor = OptionDescriptor("o", "output")
        with self.assertRaises(AttributeError):
            descriptor.short = "x"

    def testValueEqualityAndHashing(self):
        one = OptionDescriptor("o", "output", Arity.SINGLE, "a")
        two = OptionDescriptor("o", "output", Arity.SINGLE, "a")
        self.assertEqual(one, two)
        self.assertEqual(hash(one), hash(two))
        self.assertNotEqual(one, OptionDescriptor("o", "output", Arity.SINGLE, "b"))
        self.assertEqual(len({one, two}), 1)

    def testRepr(self):
        text = repr(OptionDescriptor("o", "output"))
        self.assertTrue(text.startswith("option-descriptor("))
        self.assertIn("long='output'", text)


class TestParserConfig(TestCase):
    """Defaults, validation and derivation of parser configs."""

    def testDefaults(self):
        config = ParserConfig()
        self.assertFalse(config.ignore_case)
        self.assertIs(config.style, PrefixStyle.UNIX)
        self.assertEqual(config.separator, "|")
        self.assertTrue(config.show_header)
        self.assertTrue(config.show_license)
        self.assertFalse(config.show_version_footer)
        self.assertTrue(config.colorful)
        self.assertFalse(config.fancy)

    def testSeparatorMustBeOneCharacter(self):
        with self.assertRaises(ValueError):
            ParserConfig(separator="")
        with self.assertRaises(ValueError):
            ParserConfig(separator="::")
        with self.assertRaises(TypeError):
            ParserConfig(separator=44)

    def testStyleMustBeEnumMember(self):
        with self.assertRaises(TypeError):
            ParserConfig(style="unix")

    def testReplaceDerivesNewConfig(self):
        config = ParserConfig()
        derived = config.replace(ignore_case=True, fancy=True)
        self.assertTrue(derived.ignore_case)
        self.assertTrue(derived.fancy)
        self.assertFalse(config.ignore_case)
        self.assertEqual(derived.separator, config.separator)

    def testReplaceRejectsUnknownFields(self):
        with self.assertRaises(TypeError):
            ParserConfig().replace(colour=True)

    def testFold(self):
        self.assertEqual(ParserConfig(ignore_case=True).fold("VeRbOsE"), "verbose")
        self.assertEqual(ParserConfig().fold("VeRbOsE"), "VeRbOsE")

    def testPrefixStyles(self):
        self.assertEqual((PrefixStyle.UNIX.short, PrefixStyle.UNIX.long), ("-", "--"))
        self.assertEqual((PrefixStyle.WINDOWS.short, PrefixStyle.WINDOWS.long), ("/", "/"))
        self.assertEqual(PrefixStyle.UNIX.prefixes, ("--", "-"))
        self.assertEqual(PrefixStyle.WINDOWS.prefixes, ("/",))


class TestRecords(TestCase):
    """Parsed options and outcomes."""

    def testParsedOptionMatches(self):
        option = ParsedOption("o", "output", ["a"])
        self.assertEqual(option.values, ("a",))
        self.assertTrue(option.matches("o"))
        self.assertTrue(option.matches("output"))
        self.assertFalse(option.matches("x"))

    def testParsedOptionWithEmptyShortDoesNotMatchEmptyName(self):
        self.assertFalse(ParsedOption("", "output").matches(""))

    def testOutcomeFlags(self):
        descriptor = OptionDescriptor("h", help=True)
        self.assertTrue(Success().ok)
        self.assertFalse(Success().terminal)
        self.assertFalse(Error(MissingValueError("x")).ok)
        self.assertTrue(HelpRequested(descriptor).terminal)
        self.assertFalse(HelpRequested(descriptor).ok)
        self.assertTrue(VersionRequested(descriptor).terminal)

    def testErrorNeedsParserException(self):
        with self.assertRaises(TypeError):
            Error(ValueError("x"))

    def testErrorMessage(self):
        self.assertEqual(Error(MissingValueError("missing value for '-o'")).message, "missing value for '-o'")

    def testSuccessEquality(self):
        self.assertEqual(Success([ParsedOption("o", "output", ["a"])]), Success((ParsedOption("o", "output", ("a",)),)))
        self.assertNotEqual(Success(), Error(MissingValueError()))


class TestUtils(TestCase):
    """Sentinel and helpers."""

    def testUnsetIsFalseySingleton(self):
        self.assertFalse(Unset)
        self.assertIs(type(Unset)(), Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testCoalescePreservesFalseyValues(self):
        self.assertEqual(coalesce(Unset, "x"), "x")
        self.assertEqual(coalesce("", "x"), "")
        self.assertIsNone(coalesce(None, "x"))

    def testOrdinal(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(10), "tenth")
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(103), "103rd")
        self.assertEqual(ordinal(112), "112th")

    def testRenameFunctionForm(self):
        def function():
            pass
        self.assertIs(rename(function, "stable"), function)
        self.assertEqual(function.__name__, "stable")
        self.assertEqual(function.__qualname__, "stable")

    def testRenameDecoratorForm(self):
        @rename("__stable__")
        def function():
            return 42
        self.assertEqual(function.__name__, "__stable__")
        self.assertEqual(function.__qualname__, "__stable__")
        self.assertEqual(function(), 42)

    def testRenameRejectsBadArguments(self):
        with self.assertRaises(TypeError):
            rename(42, "name")
        with self.assertRaises(TypeError):
            rename(lambda: None, 42)
        with self.assertRaises(TypeError):
            rename(42)
        with self.assertRaises(TypeError):
            rename("name")(42)
        with self.assertRaises(TypeError):
            rename()
        with self.assertRaises(TypeError):
            rename(len, "length")

    def testRecordMethodsCarryDunderNames(self):
        descriptor = OptionDescriptor("o", "output")
        self.assertEqual(type(descriptor).__repr__.__name__, "__repr__")
        self.assertEqual(type(descriptor).__eq__.__name__, "__eq__")
        self.assertTrue(repr(descriptor).startswith("option-descriptor("))


if __name__ == "__main__":
    unittest.main()
