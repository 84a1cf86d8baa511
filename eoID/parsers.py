###############################################################################
# primitive token parsers shared by all naming conventions

# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
Stateless parsers for the fixed-width tokens found in product identifiers.
Each function takes the raw token and returns a typed value or raises a
:class:`~eoID.errors.RuleViolation`.

All functions accept an optional `width` argument. If it is defined, the token
must have exactly this many characters.
"""
import re
import calendar
from datetime import date, time, datetime, timedelta

from .errors import InvalidWidth, InvalidCharacters, InvalidCalendarDate, OutOfRange, UnknownToken

_digits = re.compile(r'[0-9]+', re.ASCII)


def check_width(token, width):
    """
    make sure a token has the expected number of characters

    Parameters
    ----------
    token: str
        the token to be checked
    width: int or None
        the number of characters; no check is performed if None

    Raises
    ------
    InvalidWidth
    """
    if width is not None and len(token) != width:
        raise InvalidWidth(width, len(token))


def parse_digits(token, width=None):
    """
    check that a token consists of ASCII digits only and return it unchanged

    Parameters
    ----------
    token: str
        the token to be checked
    width: int or None
        the expected number of characters

    Returns
    -------
    str
    """
    check_width(token, width)
    if not _digits.fullmatch(token):
        raise InvalidCharacters('digits')
    return token


def parse_integer(token, width=None, minimum=None, maximum=None):
    """
    parse a fixed-width decimal integer with an optional inclusive value range

    Parameters
    ----------
    token: str
        the token, e.g. '031'
    width: int or None
        the expected number of characters
    minimum: int or None
        the smallest allowed value
    maximum: int or None
        the largest allowed value

    Returns
    -------
    int

    Examples
    --------
    >>> parse_integer('031', width=3, minimum=1, maximum=143)
    31
    """
    value = int(parse_digits(token, width))
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise OutOfRange(minimum, maximum, value)
    return value


def parse_date(token, width=8):
    """
    parse a date in format YYYYMMDD

    Parameters
    ----------
    token: str
        the date token, e.g. '20170105'
    width: int
        the expected number of characters; must be 8

    Returns
    -------
    ~datetime.date
    """
    parse_digits(token, width if width is not None else 8)
    if len(token) != 8:
        raise InvalidWidth(8, len(token))
    year, month, day = int(token[:4]), int(token[4:6]), int(token[6:])
    if not 1 <= month <= 12:
        raise InvalidCalendarDate('month {:02d}'.format(month))
    if year < 1:
        raise InvalidCalendarDate('year {:04d}'.format(year))
    days = calendar.monthrange(year, month)[1]
    if not 1 <= day <= days:
        raise InvalidCalendarDate('day {:02d} of {:04d}-{:02d}'.format(day, year, month))
    return date(year, month, day)


def parse_time(token, width=6):
    """
    parse a time of day in format HHMMSS

    Parameters
    ----------
    token: str
        the time token, e.g. '013442'
    width: int
        the expected number of characters; must be 6

    Returns
    -------
    ~datetime.time
    """
    parse_digits(token, width if width is not None else 6)
    if len(token) != 6:
        raise InvalidWidth(6, len(token))
    hour, minute, second = int(token[:2]), int(token[2:4]), int(token[4:])
    if hour > 23:
        raise InvalidCalendarDate('hour {:02d}'.format(hour))
    if minute > 59:
        raise InvalidCalendarDate('minute {:02d}'.format(minute))
    if second > 59:
        raise InvalidCalendarDate('second {:02d}'.format(second))
    return time(hour, minute, second)


def parse_datetime(token, width=15, separator='T'):
    """
    parse a time stamp in format YYYYMMDDTHHMMSS as used by ESA and most other providers

    Parameters
    ----------
    token: str
        the time stamp, e.g. '20170105T013442'
    width: int
        the expected number of characters; must be 15
    separator: str
        the character between date and time; Sentinel-1 dataset names use a lower case 't'

    Returns
    -------
    ~datetime.datetime

    Examples
    --------
    >>> parse_datetime('20170105T013442')
    datetime.datetime(2017, 1, 5, 1, 34, 42)
    """
    check_width(token, width if width is not None else 15)
    if len(token) != 15:
        raise InvalidWidth(15, len(token))
    if token[8] != separator:
        raise InvalidCharacters('format YYYYMMDD{}HHMMSS'.format(separator))
    return datetime.combine(parse_date(token[:8]), parse_time(token[9:]))


def parse_julian_date(token, width=7):
    """
    parse a date in format YYYYDDD, i.e. year and day of year

    Parameters
    ----------
    token: str
        the date token, e.g. '2013076'
    width: int
        the expected number of characters; must be 7

    Returns
    -------
    ~datetime.date
    """
    parse_digits(token, width if width is not None else 7)
    if len(token) != 7:
        raise InvalidWidth(7, len(token))
    year, doy = int(token[:4]), int(token[4:])
    if year < 1:
        raise InvalidCalendarDate('year {:04d}'.format(year))
    days = 366 if calendar.isleap(year) else 365
    if not 1 <= doy <= days:
        raise InvalidCalendarDate('day of year {:03d} of {:04d}'.format(doy, year))
    return date(year, 1, 1) + timedelta(days=doy - 1)


def parse_enum(token, mapping, width=None):
    """
    look up a token in a closed mapping of literal strings.
    The lookup is exact; no case folding or partial matching is performed.

    Parameters
    ----------
    token: str
        the token, e.g. 'L1C'
    mapping: dict
        the literal tokens and the values they map to
    width: int or None
        the expected number of characters

    Returns
    -------
    the mapped value
    """
    check_width(token, width)
    try:
        return mapping[token]
    except KeyError:
        raise UnknownToken(mapping.keys())


def parse_pattern(token, pattern, description=None, width=None):
    """
    check that a token fully matches a regular expression and return it unchanged

    Parameters
    ----------
    token: str
        the token to be checked
    pattern: str
        the regular expression describing the character class grammar
    description: str or None
        a human-readable description of the grammar used in error messages
    width: int or None
        the expected number of characters

    Returns
    -------
    str
    """
    check_width(token, width)
    if not re.fullmatch(pattern, token):
        raise InvalidCharacters(description or 'pattern {}'.format(pattern))
    return token
