###############################################################################
# error types raised while decoding product identifiers

# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
Error types of the identifier decoding engine.

There are two families of errors:

* :class:`RuleViolation` and its subclasses are raised by the primitive token parsers in
  :mod:`eoID.parsers`. They know nothing about the field or convention a token belongs to.
* :class:`DecodeError` and its subclasses are raised by convention decoders and the dispatcher.
  A :class:`RuleViolation` is wrapped into an :class:`InvalidField` by the grammar,
  which adds the field name and the raw token value.
"""


class RuleViolation(ValueError):
    """
    Base class for the failure of a primitive token parser.
    """

    def __init__(self, message):
        ValueError.__init__(self, message)

    @property
    def rule(self):
        """
        the name of the violated rule, e.g. 'OutOfRange'
        """
        return self.__class__.__name__


class InvalidWidth(RuleViolation):
    """
    the token does not have the declared number of characters
    """

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        RuleViolation.__init__(self, 'expected {} characters, got {}'.format(expected, actual))


class InvalidCharacters(RuleViolation):
    """
    the token contains characters outside of its character class
    """

    def __init__(self, expected):
        self.expected = expected
        RuleViolation.__init__(self, 'expected {}'.format(expected))


class InvalidCalendarDate(RuleViolation):
    """
    the token is well-formed but does not describe an existing calendar date or time of day
    """

    def __init__(self, reason):
        self.reason = reason
        RuleViolation.__init__(self, 'invalid calendar date/time: {}'.format(reason))


class OutOfRange(RuleViolation):
    """
    the integer value of the token is outside of the declared inclusive range
    """

    def __init__(self, minimum, maximum, value):
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        RuleViolation.__init__(self, 'value {} outside of range [{}, {}]'.format(value, minimum, maximum))


class UnknownToken(RuleViolation):
    """
    the token is not one of the literal strings of a closed enumeration
    """

    def __init__(self, allowed):
        self.allowed = tuple(allowed)
        RuleViolation.__init__(self, 'expected one of {}'.format(', '.join(repr(x) for x in self.allowed)))


class UnexpectedLiteral(RuleViolation):
    """
    a fixed text of the grammar, e.g. a field prefix or a delimiter, was not found
    """

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        RuleViolation.__init__(self, 'expected literal {!r}, got {!r}'.format(expected, actual))


class DecodeError(ValueError):
    """
    Base class for all errors raised when decoding an identifier.
    """

    def __init__(self, message):
        ValueError.__init__(self, message)


class NotThisConvention(DecodeError):
    """
    Raised by a convention decoder if a string does not belong to its naming convention.
    This is a signal to the dispatcher, which then offers the string to the next decoder.
    """

    def __init__(self, convention, name):
        self.convention = convention
        self.name = name
        DecodeError.__init__(self, '{!r} does not match the {} naming convention'.format(name, convention))


class UnrecognizedFormat(DecodeError):
    """
    Raised by the dispatcher if none of the registered conventions claimed a string.
    """

    def __init__(self, name):
        self.name = name
        DecodeError.__init__(self, 'unrecognized identifier format: {!r}'.format(name))


class MalformedStructure(DecodeError):
    """
    Raised if a convention claimed a string but its structure is wrong,
    i.e. the number of delimited tokens or, for fixed-width conventions, the number of characters.
    """

    def __init__(self, expected, actual, unit='tokens', convention=None):
        self.expected = expected
        self.actual = actual
        self.unit = unit
        self.convention = convention
        DecodeError.__init__(self, 'malformed {} identifier: expected {} {}, got {}'
                             .format(convention, expected, unit, actual))


class InvalidField(DecodeError):
    """
    Raised if a token of a claimed string fails validation.

    Parameters
    ----------
    field_name: str
        the name of the field the token was decoded into
    raw_value: str
        the raw token
    rule_violated: RuleViolation
        the error raised by the primitive parser
    convention: str or None
        the name of the convention that claimed the string
    """

    def __init__(self, field_name, raw_value, rule_violated, convention=None):
        self.field_name = field_name
        self.raw_value = raw_value
        self.rule_violated = rule_violated
        self.convention = convention
        DecodeError.__init__(self, 'invalid {} field {!r}: {!r} ({})'
                             .format(convention, field_name, raw_value, rule_violated))

    @property
    def rule(self):
        """
        the name of the violated rule, e.g. 'InvalidCalendarDate'
        """
        return self.rule_violated.rule
