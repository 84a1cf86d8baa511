###############################################################################
# Sentinel-1 product naming convention
# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
Sentinel-1 SAR products, e.g.

S1A_IW_GRDH_1SDV_20180829T170656_20180829T170721_023464_028DE0_F7BD.SAFE

The product type token is padded with underscores if no resolution class applies
(e.g. S1A_IW_SLC__1SDV_...), which is why the name is decoded as a fixed-width string
of 67 characters instead of being split at the delimiter.

The datasets inside a product, e.g. the measurement file

s1a-iw-grd-vv-20180829t170656-20180829t170721-023464-028de0-001.tiff

are named in lower case with '-' as delimiter; the swath token has a variable width.

References:
    * https://sentinels.copernicus.eu/web/sentinel/user-guides/sentinel-1-sar/naming-conventions
"""
from enum import Enum
from typing import Optional
from datetime import datetime
from dataclasses import dataclass

from . import patterns
from .grammar import Convention, Identifier, Mission, Token, Field, Literal
from .parsers import parse_enum, parse_integer, parse_datetime, parse_pattern

# number of orbits in the repeat cycle of a single Sentinel-1 unit
ORBITS_PER_CYCLE = 175

# absolute orbit offsets for computing the relative orbit number
_ORBIT_OFFSET = {'A': 73, 'B': 27}


class MissionUnit(Enum):
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'


class BeamMode(Enum):
    S1 = 'S1'
    S2 = 'S2'
    S3 = 'S3'
    S4 = 'S4'
    S5 = 'S5'
    S6 = 'S6'
    IW = 'IW'
    EW = 'EW'
    WV = 'WV'
    EN = 'EN'
    N1 = 'N1'
    N2 = 'N2'
    N3 = 'N3'
    N4 = 'N4'
    N5 = 'N5'
    N6 = 'N6'
    IM = 'IM'


class ProductType(Enum):
    RAW = 'RAW'
    SLC = 'SLC'
    GRD = 'GRD'
    OCN = 'OCN'


class Resolution(Enum):
    FULL = 'F'
    HIGH = 'H'
    MEDIUM = 'M'


class ProductClass(Enum):
    STANDARD = 'S'
    ANNOTATION = 'A'


class Polarisation(Enum):
    SH = 'SH'
    SV = 'SV'
    DH = 'DH'
    DV = 'DV'
    HH = 'HH'
    VV = 'VV'
    HV = 'HV'
    VH = 'VH'


class Swath(Enum):
    S1 = 'S1'
    S2 = 'S2'
    S3 = 'S3'
    S4 = 'S4'
    S5 = 'S5'
    S6 = 'S6'
    IW = 'IW'
    IW1 = 'IW1'
    IW2 = 'IW2'
    IW3 = 'IW3'
    EW = 'EW'
    EW1 = 'EW1'
    EW2 = 'EW2'
    EW3 = 'EW3'
    EW4 = 'EW4'
    EW5 = 'EW5'
    WV = 'WV'
    WV1 = 'WV1'
    WV2 = 'WV2'
    N1 = 'N1'
    N2 = 'N2'
    N3 = 'N3'
    N4 = 'N4'
    N5 = 'N5'
    N6 = 'N6'


def _enum(cls, members=None, lower=False):
    members = list(cls) if members is None else members
    return {(x.value.lower() if lower else x.value): x for x in members}


class _Sentinel1(Identifier):

    @property
    def mission(self):
        return Mission.SENTINEL1

    @property
    def start(self):
        return self.start_datetime

    @property
    def stop(self):
        return self.stop_datetime

    @property
    def relative_orbit_number(self):
        """
        the relative orbit number computed from the absolute orbit number.
        Only defined for units A and B.

        Returns
        -------
        int or None
        """
        offset = _ORBIT_OFFSET.get(self.mission_unit.value)
        if offset is None:
            return None
        return (self.absolute_orbit_number - offset) % ORBITS_PER_CYCLE + 1


@dataclass(frozen=True)
class Sentinel1Product(_Sentinel1):
    """
    Sentinel-1 SAR product
    """
    convention = 'sentinel1'

    mission_unit: MissionUnit
    beam_mode: BeamMode
    product_type: ProductType
    # None for products without resolution class, e.g. SLC
    resolution: Optional[Resolution]
    processing_level: int
    product_class: ProductClass
    polarisation: Polarisation
    start_datetime: datetime
    stop_datetime: datetime
    absolute_orbit_number: int
    datatake_id: str
    product_id: str


@dataclass(frozen=True)
class Sentinel1Dataset(_Sentinel1):
    """
    a dataset inside a Sentinel-1 product, e.g. a measurement or annotation file
    """
    convention = 'sentinel1_dataset'

    mission_unit: MissionUnit
    swath: Swath
    product_type: ProductType
    polarisation: Polarisation
    start_datetime: datetime
    stop_datetime: datetime
    absolute_orbit_number: int
    datatake_id: str
    # the number of the image within the product, e.g. 001
    image_number: int


class Sentinel1ProductDecoder(Convention):
    """
    Decoder for Sentinel-1 product names

    Units:
        * S1A
        * S1B
        * S1C
        * S1D
    """
    name = 'sentinel1'
    description = 'Sentinel-1 product'
    signature = patterns.sentinel1
    delimiter = None
    extensions = ('.SAFE', '.zip', '.SAFE.zip')
    grammar = (Token(Literal('S1'),
                     Field('mission_unit', 1, parse_enum, mapping=_enum(MissionUnit))),
               Token(Literal('_'),
                     Field('beam_mode', 2, parse_enum, mapping=_enum(BeamMode))),
               Token(Literal('_'),
                     Field('product_type', 3, parse_enum, mapping=_enum(ProductType)),
                     Field('resolution', 1, parse_enum, mapping=dict(_enum(Resolution), _=None))),
               Token(Literal('_'),
                     Field('processing_level', 1, parse_integer, minimum=0, maximum=2),
                     Field('product_class', 1, parse_enum, mapping=_enum(ProductClass)),
                     Field('polarisation', 2, parse_enum, mapping=_enum(Polarisation))),
               Token(Literal('_'),
                     Field('start_datetime', 15, parse_datetime)),
               Token(Literal('_'),
                     Field('stop_datetime', 15, parse_datetime)),
               Token(Literal('_'),
                     Field('absolute_orbit_number', 6, parse_integer, minimum=1, maximum=999999)),
               Token(Literal('_'),
                     Field('datatake_id', 6, parse_pattern, pattern=patterns.hexadecimal,
                           description='hexadecimal digits')),
               Token(Literal('_'),
                     Field('product_id', 4, parse_pattern, pattern=patterns.hexadecimal,
                           description='hexadecimal digits')))
    record = Sentinel1Product


class Sentinel1DatasetDecoder(Convention):
    """
    Decoder for the names of datasets inside Sentinel-1 products

    mmm-sss-ttt-pp-YYYYMMDDtHHMMSS-YYYYMMDDtHHMMSS-oooooo-dddddd-nnn
    """
    name = 'sentinel1_dataset'
    description = 'Sentinel-1 dataset'
    signature = patterns.sentinel1_dataset
    delimiter = '-'
    extensions = ('.tiff', '.xml', '.nc')
    grammar = (Token(Literal('s1'),
                     Field('mission_unit', 1, parse_enum, mapping=_enum(MissionUnit, lower=True))),
               Token(Field('swath', None, parse_enum, mapping=_enum(Swath, lower=True))),
               Token(Field('product_type', 3, parse_enum, mapping=_enum(ProductType, lower=True))),
               Token(Field('polarisation', 2, parse_enum,
                           mapping=_enum(Polarisation, [Polarisation.HH, Polarisation.HV,
                                                        Polarisation.VV, Polarisation.VH], lower=True))),
               Token(Field('start_datetime', 15, parse_datetime, separator='t')),
               Token(Field('stop_datetime', 15, parse_datetime, separator='t')),
               Token(Field('absolute_orbit_number', 6, parse_integer, minimum=1, maximum=999999)),
               Token(Field('datatake_id', 6, parse_pattern, pattern=patterns.hexadecimal_lower,
                           description='lower case hexadecimal digits')),
               Token(Field('image_number', 3, parse_integer, minimum=1, maximum=999)))
    record = Sentinel1Dataset
