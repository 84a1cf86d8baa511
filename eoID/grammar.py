###############################################################################
# declarative grammar of product naming conventions
# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
Building blocks shared by all naming conventions.

A naming convention is described by an ordered list of :class:`Token` objects.
Each token consists of fixed-width pieces, which are either a :class:`Literal`
(a text that must appear verbatim) or a :class:`Field` (a text that is decoded into
a record attribute by a parser from :mod:`eoID.parsers`).

A :class:`Convention` subclass combines such a grammar with a cheap claim check
(its `signature`) and the :class:`Identifier` record class its decoded fields are
assembled into.
"""
import re
import abc
import dataclasses
from enum import Enum
from datetime import date, datetime

from .errors import RuleViolation, UnexpectedLiteral, InvalidWidth, InvalidField, \
    MalformedStructure, NotThisConvention


class Mission(Enum):
    SENTINEL1 = 'Sentinel-1'
    SENTINEL2 = 'Sentinel-2'
    SENTINEL3 = 'Sentinel-3'
    LANDSAT1 = 'Landsat-1'
    LANDSAT2 = 'Landsat-2'
    LANDSAT3 = 'Landsat-3'
    LANDSAT4 = 'Landsat-4'
    LANDSAT5 = 'Landsat-5'
    LANDSAT6 = 'Landsat-6'
    LANDSAT7 = 'Landsat-7'
    LANDSAT8 = 'Landsat-8'
    LANDSAT9 = 'Landsat-9'


class Literal(object):
    """
    a fixed text, e.g. a field prefix like the 'R' of a relative orbit token or a delimiter
    """

    def __init__(self, text):
        self.text = text
        self.width = len(text)
        self.name = None

    def parse(self, chunk):
        if chunk != self.text:
            raise UnexpectedLiteral(self.text, chunk)

    def __repr__(self):
        return 'Literal({!r})'.format(self.text)


class Field(object):
    """
    a fixed-width piece of a token decoded into a record attribute

    Parameters
    ----------
    name: str
        the name of the record attribute
    width: int or None
        the number of characters; None for a field of variable width, which must be the
        last piece of a token in a delimited convention
    parser: function
        a parser from :mod:`eoID.parsers` or any other function taking the raw text and
        a `width` keyword and returning the decoded value
    options:
        additional keyword arguments passed to the parser, e.g. `minimum` and `maximum`
    """

    def __init__(self, name, width, parser, **options):
        self.name = name
        self.width = width
        self.parser = parser
        self.options = options

    def parse(self, chunk):
        return self.parser(chunk, width=self.width, **self.options)

    def __repr__(self):
        return 'Field({!r}, {})'.format(self.name, self.width)


class Token(object):
    """
    a sequence of :class:`Literal` and :class:`Field` pieces.
    In delimited conventions a token is the text between two delimiters.

    Parameters
    ----------
    pieces: Literal or Field
        the pieces in order of appearance
    name: str or None
        the name used in error messages if the token as a whole is invalid;
        defaults to the names of its fields
    """

    def __init__(self, *pieces, name=None):
        self.pieces = pieces
        if any(piece.width is None for piece in pieces):
            self.width = None
        else:
            self.width = sum(piece.width for piece in pieces)
        if name is None:
            name = '+'.join(piece.name for piece in pieces if piece.name is not None)
        self.name = name

    @property
    def fields(self):
        return [piece.name for piece in self.pieces if piece.name is not None]

    def parse(self, raw, convention=None):
        """
        decode a raw token

        Parameters
        ----------
        raw: str
            the text of the token
        convention: str or None
            the convention name used in error messages

        Returns
        -------
        dict
            the decoded values by field name

        Raises
        ------
        ~eoID.errors.InvalidField
        """
        if self.width is not None and len(raw) != self.width:
            raise InvalidField(self.name, raw, InvalidWidth(self.width, len(raw)), convention)
        values = {}
        position = 0
        for piece in self.pieces:
            end = len(raw) if piece.width is None else position + piece.width
            chunk = raw[position:end]
            position = end
            try:
                value = piece.parse(chunk)
            except RuleViolation as e:
                if piece.name is None:
                    raise InvalidField(self.name, raw, e, convention)
                raise InvalidField(piece.name, chunk, e, convention)
            if piece.name is not None:
                values[piece.name] = value
        return values

    def __repr__(self):
        return 'Token({})'.format(', '.join(repr(x) for x in self.pieces))


class Identifier(abc.ABC):
    """
    Abstract base class for decoded product identifiers.
    Each naming convention defines one frozen dataclass deriving from this class.
    """
    convention = None

    def __str__(self):
        lines = ['eoID identifier of type {}'.format(self.__class__.__name__)]
        for key, value in self.export2dict().items():
            lines.append('{0}: {1}'.format(key, _render(value)))
        return '\n'.join(lines)

    def export2dict(self):
        """
        Return the decoded fields as a dictionary.

        Returns
        -------
        dict
        """
        return {field.name: getattr(self, field.name) for field in dataclasses.fields(self)}

    @property
    @abc.abstractmethod
    def mission(self):
        """
        the satellite mission

        Returns
        -------
        Mission
        """
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def start(self):
        """
        the sensing start time

        Returns
        -------
        ~datetime.datetime
        """
        raise NotImplementedError

    @property
    def stop(self):
        """
        the sensing stop time or None if the name does not contain it

        Returns
        -------
        ~datetime.datetime or None
        """
        return None


def _render(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime('%Y%m%dT%H%M%S')
    if isinstance(value, date):
        return value.strftime('%Y%m%d')
    return value


class Convention(object):
    """
    Base class for naming convention decoders.

    Subclasses define the following class attributes:

    * name: the short name under which the convention is registered, e.g. 'sentinel2'
    * description: a human-readable name used in error messages
    * signature: a regular expression searched in the raw string to decide whether the convention claims it
    * delimiter: the token delimiter or None for fixed-width conventions,
      in which the tokens directly follow each other and the total number of characters is checked
    * extensions: file name extensions, which are removed before tokenization
    * grammar: a tuple of :class:`Token` objects
    * record: the :class:`Identifier` subclass the decoded fields are passed to

    Decoders are stateless and can be shared between threads.
    """
    name = None
    description = None
    signature = None
    delimiter = '_'
    extensions = ()
    grammar = ()
    record = None

    def __repr__(self):
        return '{}()'.format(self.__class__.__name__)

    def claims(self, name):
        """
        cheap check whether a string belongs to this convention

        Parameters
        ----------
        name: str
            the raw identifier

        Returns
        -------
        bool
        """
        return re.search(self.signature, name) is not None

    def strip_extension(self, name):
        """
        remove a known file extension

        Parameters
        ----------
        name: str
            the raw identifier

        Returns
        -------
        str
        """
        for extension in sorted(self.extensions, key=len, reverse=True):
            if name.endswith(extension):
                return name[:-len(extension)]
        return name

    def tokenize(self, name):
        """
        split a name into the raw text of the tokens defined in the grammar

        Parameters
        ----------
        name: str
            the identifier without extension

        Returns
        -------
        list of str

        Raises
        ------
        ~eoID.errors.MalformedStructure
        """
        if self.delimiter is None:
            width = sum(token.width for token in self.grammar)
            if len(name) != width:
                raise MalformedStructure(width, len(name), 'characters', self.description)
            tokens = []
            position = 0
            for token in self.grammar:
                tokens.append(name[position:position + token.width])
                position += token.width
            return tokens
        tokens = name.split(self.delimiter)
        if len(tokens) != len(self.grammar):
            raise MalformedStructure(len(self.grammar), len(tokens), 'tokens', self.description)
        return tokens

    def try_decode(self, name):
        """
        decode a string following this naming convention

        Parameters
        ----------
        name: str
            the raw identifier

        Returns
        -------
        Identifier
            an object of the class defined in attribute `record`

        Raises
        ------
        ~eoID.errors.NotThisConvention
            if the signature of the convention is not found; the dispatcher tries the next convention
        ~eoID.errors.MalformedStructure
        ~eoID.errors.InvalidField
        """
        if not self.claims(name):
            raise NotThisConvention(self.description, name)
        tokens = self.tokenize(self.strip_extension(name))
        fields = {}
        for token, raw in zip(self.grammar, tokens):
            fields.update(token.parse(raw, self.description))
        return self.assemble(fields)

    def assemble(self, fields):
        """
        create the record from the decoded field values.
        Conventions with dependent fields override this method.

        Parameters
        ----------
        fields: dict
            the decoded values by field name

        Returns
        -------
        Identifier
        """
        return self.record(**fields)
