###############################################################################
# Sentinel-2 product naming convention
# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
Sentinel-2 MSI products following the naming convention introduced on 6 December 2016:

MMM_MSIXXX_YYYYMMDDTHHMMSS_Nxxyy_ROOO_Txxxxx_YYYYMMDDTHHMMSS

e.g. S2A_MSIL1C_20170105T013442_N0204_R031_T53NMJ_20170105T013443.SAFE
identifies a Level-1C product acquired by Sentinel-2A on the 5th of January 2017 at 01:34:42.
It was acquired over tile 53NMJ during relative orbit 031 and processed with
processing baseline 02.04.

References:
    * https://sentinel.esa.int/web/sentinel/user-guides/sentinel-2-msi/naming-convention
"""
from enum import Enum
from datetime import datetime
from dataclasses import dataclass
from collections import namedtuple

from . import patterns
from .grammar import Convention, Identifier, Mission, Token, Field, Literal
from .parsers import parse_enum, parse_integer, parse_datetime, parse_pattern, parse_digits


class MissionUnit(Enum):
    A = 'A'
    B = 'B'
    C = 'C'


class ProductLevel(Enum):
    L1C = 'L1C'
    L2A = 'L2A'


class Baseline(namedtuple('Baseline', ['major', 'minor'])):
    """
    PDGS processing baseline number, e.g. N0204 -> 02.04
    """
    __slots__ = ()

    def __str__(self):
        return '{:02d}.{:02d}'.format(self.major, self.minor)


def parse_baseline(token, width=4):
    parse_digits(token, width)
    return Baseline(int(token[:2]), int(token[2:]))


@dataclass(frozen=True)
class Sentinel2Product(Identifier):
    """
    Sentinel-2 MSI product
    """
    convention = 'sentinel2'

    mission_unit: MissionUnit
    product_level: ProductLevel
    start_datetime: datetime
    processing_baseline: Baseline
    # R001 - R143
    relative_orbit_number: int
    tile_id: str
    # the product discriminator; used to distinguish between different end user products
    # from the same datatake. Depending on the instance it can be earlier or
    # slightly later than the datatake sensing time.
    generation_datetime: datetime

    @property
    def mission(self):
        return Mission.SENTINEL2

    @property
    def start(self):
        return self.start_datetime


class Sentinel2ProductDecoder(Convention):
    """
    Decoder for Sentinel-2 MSI product names

    Units:
        * S2A
        * S2B
        * S2C
    """
    name = 'sentinel2'
    description = 'Sentinel-2 product'
    signature = patterns.sentinel2
    delimiter = '_'
    extensions = ('.SAFE', '.zip', '.SAFE.zip')
    grammar = (Token(Literal('S2'),
                     Field('mission_unit', 1, parse_enum, mapping={x.value: x for x in MissionUnit})),
               Token(Literal('MSI'),
                     Field('product_level', 3, parse_enum, mapping={x.value: x for x in ProductLevel})),
               Token(Field('start_datetime', 15, parse_datetime)),
               Token(Literal('N'),
                     Field('processing_baseline', 4, parse_baseline)),
               # the constellation has a repeat cycle of 143 orbits
               Token(Literal('R'),
                     Field('relative_orbit_number', 3, parse_integer, minimum=1, maximum=143)),
               Token(Literal('T'),
                     Field('tile_id', 5, parse_pattern, pattern=patterns.mgrs_tile,
                           description='MGRS tile designator')),
               Token(Field('generation_datetime', 15, parse_datetime)))
    record = Sentinel2Product
