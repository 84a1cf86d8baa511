###############################################################################
# ancillary routines for lists of product identifiers
# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
This script gathers functions for grouping and filtering lists of decoded identifiers,
e.g. as returned by :func:`~eoID.drivers.identify_many`.
"""
from datetime import datetime
from enum import Enum


def _value(identifier, attribute):
    value = getattr(identifier, attribute)
    return value.value if isinstance(value, Enum) else value


def _sortkey(identifier, attribute):
    # None sorts first
    value = _value(identifier, attribute)
    return value is not None, value


def seconds(identifier):
    """
    function to extract the sensing start time in seconds from an identifier.

    Parameters
    ----------
    identifier: ~eoID.grammar.Identifier
        the decoded identifier

    Returns
    -------
    float
        the difference between the sensing start and Jan 01 1900 in seconds
    """
    td = identifier.start - datetime(1900, 1, 1)
    return td.total_seconds()


def groupby(identifiers, attribute):
    """
    group a list of identifiers by an attribute

    Parameters
    ----------
    identifiers: list of ~eoID.grammar.Identifier
        the identifiers to be grouped
    attribute: str
        the name of the attribute used for grouping, e.g. 'tile_id' or 'mission'

    Returns
    -------
    list of lists
        a list containing a list of identifiers for each group, sorted by the attribute value;
        identifiers for which the attribute is None are grouped first
    """
    if len(identifiers) == 0:
        return []
    srcids = sorted(identifiers, key=lambda x: _sortkey(x, attribute))
    out = [[srcids[0]]]
    for item in srcids[1:]:
        if _value(out[-1][0], attribute) == _value(item, attribute):
            out[-1].append(item)
        else:
            out.append([item])
    return out


def groupbyTime(identifiers, time, function=seconds):
    """
    function to group identifiers by their acquisition time difference.
    An identifier is added to a group if its time difference to the last member of the group
    is not larger than `time`.

    Parameters
    ----------
    identifiers: list of ~eoID.grammar.Identifier
        a list of identifiers
    time: int or float
        a time difference in seconds by which to group the identifiers
    function: function
        a function to derive the time from the identifiers; see e.g. :func:`seconds`

    Returns
    -------
    list
        a list of sub-lists containing the grouped identifiers
    """
    if len(identifiers) == 0:
        return []
    # sort identifiers by time stamp
    srcids = sorted(identifiers, key=function)

    groups = [[srcids[0]]]
    group = groups[0]

    for item in srcids[1:]:
        timediff = abs(function(item) - function(group[-1]))
        if timediff <= time:
            group.append(item)
        else:
            groups.append([item])
            group = groups[-1]
    return groups


def filter_identifiers(identifiers, **kwargs):
    """
    filter a list of identifiers by their attributes

    Parameters
    ----------
    identifiers: list of ~eoID.grammar.Identifier
        the identifiers to be filtered
    kwargs:
        attribute names and the values to keep. A tuple defines a set of allowed values.
        Enum attributes can be filtered by their member or by their value, e.g. product_level='L1C'.

    Returns
    -------
    list
        the identifiers matching all filters

    Examples
    --------
    >>> from eoID import identify_many
    >>> from eoID.ancillary import filter_identifiers
    >>> ids = identify_many(names, verbose=False)
    >>> selection = filter_identifiers(ids, tile_id=('32TNS', '32UPU'), product_level='L2A')
    """
    out = []
    for identifier in identifiers:
        keep = True
        for key, val in kwargs.items():
            allowed = val if isinstance(val, tuple) else (val,)
            if not hasattr(identifier, key):
                keep = False
                break
            value = getattr(identifier, key)
            if value not in allowed and _value(identifier, key) not in allowed:
                keep = False
                break
        if keep:
            out.append(identifier)
    return out
