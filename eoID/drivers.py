###############################################################################
# Identification of earth observation product names
# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
This is the core module of package eoID.
It contains the registry of naming convention decoders and the functions for identifying
product names. Each convention decodes a name into a record object deriving from
:class:`~eoID.grammar.Identifier`, which allows easy and standardized access to the metadata
encoded in the names of products from different missions.
"""
import operator
import functools
from typing import Union

import progressbar as pb

from .config import ConfigHandler
from .errors import DecodeError, NotThisConvention, UnrecognizedFormat, MalformedStructure, InvalidField, \
    RuleViolation
from .grammar import Convention, Identifier, Mission
from .sentinel1 import Sentinel1ProductDecoder, Sentinel1Product, Sentinel1DatasetDecoder, Sentinel1Dataset
from .sentinel2 import Sentinel2ProductDecoder, Sentinel2Product
from .sentinel3 import Sentinel3ProductDecoder, Sentinel3Product
from .landsat import LandsatProductDecoder, LandsatProduct, LandsatSceneDecoder, LandsatSceneID

import logging

log = logging.getLogger(__name__)

__all__ = ['identify', 'identify_many', 'Dispatcher', 'default_dispatcher', 'CONVENTIONS', 'AnyIdentifier',
           'Identifier', 'Convention', 'Mission', 'DecodeError', 'NotThisConvention', 'UnrecognizedFormat',
           'MalformedStructure', 'InvalidField', 'RuleViolation']

# all available conventions in default registration order
CONVENTIONS = (Sentinel1ProductDecoder(),
               Sentinel2ProductDecoder(),
               Sentinel3ProductDecoder(),
               LandsatProductDecoder(),
               LandsatSceneDecoder(),
               Sentinel1DatasetDecoder())

AnyIdentifier = Union[Sentinel1Product, Sentinel2Product, Sentinel3Product, LandsatProduct, LandsatSceneID,
                      Sentinel1Dataset]


class Dispatcher(object):
    """
    Decode names by offering them to an ordered list of naming convention decoders.

    Parameters
    ----------
    conventions: list of Convention
        the decoders in the order in which they are tried
    """

    def __init__(self, conventions=CONVENTIONS):
        self.conventions = tuple(conventions)
        names = [x.name for x in self.conventions]
        if len(set(names)) != len(names):
            raise ValueError('conventions must not be registered twice: {}'.format(names))

    def __repr__(self):
        return 'Dispatcher({})'.format(', '.join(x.name for x in self.conventions))

    @property
    def names(self):
        """
        the names of the registered conventions in registration order

        Returns
        -------
        list of str
        """
        return [x.name for x in self.conventions]

    @classmethod
    def from_names(cls, names):
        """
        create a dispatcher from convention names, e.g. ['sentinel2', 'landsat']

        Parameters
        ----------
        names: list of str
            the names of the conventions in the order in which they are tried;
            see :data:`CONVENTIONS` for options

        Returns
        -------
        Dispatcher
        """
        lookup = {x.name: x for x in CONVENTIONS}
        unknown = [x for x in names if x not in lookup]
        if len(unknown) > 0:
            raise ValueError('unknown convention(s): {}; options: {}'
                             .format(', '.join(unknown), ', '.join(lookup.keys())))
        return cls([lookup[x] for x in names])

    @classmethod
    def from_config(cls, config=None):
        """
        create a dispatcher from the conventions configured in section IDENTIFY, option conventions,
        of the eoID configuration file. All available conventions are registered in default order
        if the option is not defined.

        Parameters
        ----------
        config: ConfigHandler or None
            the configuration; if None, :class:`~eoID.config.ConfigHandler` is instantiated

        Returns
        -------
        Dispatcher
        """
        if config is None:
            config = ConfigHandler()
        names = config.getlist('IDENTIFY', 'conventions')
        if names is None:
            return cls()
        log.debug('registering conventions {} from {}'.format(names, config.file))
        return cls.from_names(names)

    def decode(self, name):
        """
        decode a product name

        Parameters
        ----------
        name: str
            the product name, optionally carrying a product file extension like .SAFE or .zip

        Returns
        -------
        AnyIdentifier
            the record of the first convention that decoded the name

        Raises
        ------
        TypeError
            if `name` is not a string
        ~eoID.errors.UnrecognizedFormat
            if none of the registered conventions claims the name
        ~eoID.errors.MalformedStructure
            if the claiming convention finds the wrong number of tokens or characters
        ~eoID.errors.InvalidField
            if a field of the claiming convention cannot be decoded
        """
        if not isinstance(name, str):
            raise TypeError('name must be of type str, got {}'.format(type(name).__name__))
        for convention in self.conventions:
            try:
                record = convention.try_decode(name)
            except NotThisConvention:
                continue
            log.debug('{} decoded as {}'.format(name, convention.description))
            return record
        raise UnrecognizedFormat(name)


@functools.lru_cache(maxsize=None)
def default_dispatcher():
    """
    the dispatcher used by :func:`identify`. It is created once from the configuration,
    see :meth:`Dispatcher.from_config`.

    Returns
    -------
    Dispatcher
    """
    return Dispatcher.from_config()


def identify(name, dispatcher=None):
    """
    identify a product name and return the decoded identifier record

    Parameters
    ----------
    name: str
        a product name
    dispatcher: Dispatcher or None
        the dispatcher to use; if None, :func:`default_dispatcher` is used

    Returns
    -------
    a subclass object of :class:`~eoID.grammar.Identifier`
        the decoded identifier

    Examples
    --------

    >>> from eoID import identify
    >>> name = 'S2A_MSIL1C_20170105T013442_N0204_R031_T53NMJ_20170105T013443.SAFE'
    >>> product = identify(name)
    >>> print(product)
    eoID identifier of type Sentinel2Product
    mission_unit: A
    product_level: L1C
    start_datetime: 20170105T013442
    processing_baseline: 02.04
    relative_orbit_number: 31
    tile_id: 53NMJ
    generation_datetime: 20170105T013443
    """
    if dispatcher is None:
        dispatcher = default_dispatcher()
    return dispatcher.decode(name)


def identify_many(names, verbose=True, sortkey=None, dispatcher=None):
    """
    wrapper function for returning the identifiers of all valid product names in a list, similar to function
    :func:`~eoID.drivers.identify`. Names that cannot be decoded are skipped.
    Prints a progressbar.

    Parameters
    ----------
    names: list
        the product names to be identified; already decoded identifiers are passed through
    verbose: bool
        adds a progressbar if True
    sortkey: str or None
        sort the identifier list by an attribute, e.g. 'start'
    dispatcher: Dispatcher or None
        the dispatcher to use; if None, :func:`default_dispatcher` is used
    Returns
    -------
    list
        a list of eoID identifiers

    Examples
    --------
    >>> from eoID import identify_many
    >>> names = ['S2A_MSIL1C_20170105T013442_N0204_R031_T53NMJ_20170105T013443',
    >>>          'LC08_L1GT_029030_20151209_20160131_01_RT']
    >>> ids = identify_many(names, verbose=False, sortkey='start')
    """
    idlist = []
    if verbose:
        pbar = pb.ProgressBar(max_value=len(names)).start()
    for i, name in enumerate(names):
        if isinstance(name, Identifier):
            idlist.append(name)
        else:
            try:
                idlist.append(identify(name, dispatcher))
            except DecodeError as e:
                log.debug('skipping {}: {}'.format(name, e))
        if verbose:
            pbar.update(i + 1)
    if verbose:
        pbar.finish()
    if sortkey is not None:
        idlist.sort(key=operator.attrgetter(sortkey))
    return idlist
