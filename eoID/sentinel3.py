###############################################################################
# Sentinel-3 product naming convention
# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
Sentinel-3 products, e.g.

S3A_OL_1_EFR____20220801T210143_20220801T210443_20220803T023357_0179_088_157_1800_MAR_O_NT_002.SEN3

All fields have a fixed width and are padded with underscores, so the name is decoded
as a fixed-width string of 94 characters.

References:
    * https://sentinel.esa.int/web/sentinel/user-guides/sentinel-3-olci/naming-convention
"""
import re
from enum import Enum
from typing import Optional
from datetime import datetime
from dataclasses import dataclass

from . import patterns
from .errors import InvalidCharacters
from .grammar import Convention, Identifier, Mission, Token, Field, Literal
from .parsers import parse_enum, parse_integer, parse_datetime, parse_pattern, check_width

# number of relative orbits in the 27 day repeat cycle
ORBITS_PER_CYCLE = 385


class MissionUnit(Enum):
    A = 'A'
    B = 'B'
    CONSTELLATION = '_'


class DataSource(Enum):
    OLCI = 'OL'
    SLSTR = 'SL'
    SYNERGY = 'SY'
    SRAL = 'SR'
    DORIS = 'DO'
    MWR = 'MW'
    GNSS = 'GN'


class Platform(Enum):
    OPERATIONAL = 'O'
    REFERENCE = 'F'
    DEVELOPMENT = 'D'
    REPROCESSING = 'R'


class Timeliness(Enum):
    NRT = 'NR'
    STC = 'ST'
    NTC = 'NT'


class InstanceKind(Enum):
    STRIPE = 'stripe'
    FRAME = 'frame'
    TILE = 'tile'
    GLOBAL = 'global'
    AUX = 'aux'


@dataclass(frozen=True)
class Instance(object):
    """
    the instance id of a Sentinel-3 product.
    Stripes and frames carry duration, cycle and relative orbit, frames additionally
    the along-track coordinate; tiles carry the tile identifier.
    """
    kind: InstanceKind
    duration: Optional[int] = None
    cycle_number: Optional[int] = None
    relative_orbit_number: Optional[int] = None
    frame_along_track: Optional[int] = None
    tile_id: Optional[str] = None


def parse_instance(token, width=17):
    check_width(token, width)
    if re.fullmatch(patterns.s3_aux, token):
        return Instance(InstanceKind.AUX)
    if re.fullmatch(patterns.s3_global, token):
        return Instance(InstanceKind.GLOBAL)
    match = re.fullmatch(patterns.s3_stripe, token)
    if match:
        relative_orbit = parse_integer(match.group('relative_orbit'), minimum=1, maximum=ORBITS_PER_CYCLE)
        frame = match.group('frame')
        return Instance(kind=InstanceKind.STRIPE if frame == '____' else InstanceKind.FRAME,
                        duration=int(match.group('duration')),
                        cycle_number=int(match.group('cycle')),
                        relative_orbit_number=relative_orbit,
                        frame_along_track=None if frame == '____' else int(frame))
    if re.fullmatch(patterns.s3_tile, token):
        return Instance(InstanceKind.TILE, tile_id=token.rstrip('_'))
    raise InvalidCharacters('Sentinel-3 instance id')


def parse_padded(token, pattern, description=None, width=None):
    """
    parse a left-aligned text padded with underscores; a text consisting of padding only is returned as None
    """
    parse_pattern(token, pattern, description, width)
    return token.rstrip('_') or None


def _enum(cls, extra=None):
    out = {x.value: x for x in cls}
    out.update(extra or {})
    return out


@dataclass(frozen=True)
class Sentinel3Product(Identifier):
    """
    Sentinel-3 product
    """
    convention = 'sentinel3'

    mission_unit: MissionUnit
    data_source: DataSource
    processing_level: Optional[int]
    data_type: str
    start_datetime: datetime
    stop_datetime: datetime
    creation_datetime: datetime
    instance: Instance
    # centre generating the file
    centre: str
    platform: Optional[Platform]
    timeliness: Optional[Timeliness]
    # baseline collection or data usage
    baseline_collection: Optional[str]

    @property
    def mission(self):
        return Mission.SENTINEL3

    @property
    def start(self):
        return self.start_datetime

    @property
    def stop(self):
        return self.stop_datetime


class Sentinel3ProductDecoder(Convention):
    """
    Decoder for Sentinel-3 product names

    Units:
        * S3A
        * S3B
        * S3_ (both units)
    """
    name = 'sentinel3'
    description = 'Sentinel-3 product'
    signature = patterns.sentinel3
    delimiter = None
    extensions = ('.SEN3', '.zip', '.SEN3.zip')
    grammar = (Token(Literal('S3'),
                     Field('mission_unit', 1, parse_enum, mapping=_enum(MissionUnit))),
               Token(Literal('_'),
                     Field('data_source', 2, parse_enum, mapping=_enum(DataSource))),
               Token(Literal('_'),
                     Field('processing_level', 1, parse_enum, mapping={'0': 0, '1': 1, '2': 2, '_': None})),
               Token(Literal('_'),
                     Field('data_type', 6, parse_padded, pattern=patterns.s3_data_type,
                           description='data type code')),
               Token(Literal('_'),
                     Field('start_datetime', 15, parse_datetime)),
               Token(Literal('_'),
                     Field('stop_datetime', 15, parse_datetime)),
               Token(Literal('_'),
                     Field('creation_datetime', 15, parse_datetime)),
               Token(Literal('_'),
                     Field('instance', 17, parse_instance)),
               Token(Literal('_'),
                     Field('centre', 3, parse_pattern, pattern=patterns.alphanumeric,
                           description='alphanumeric characters')),
               Token(Literal('_'),
                     Field('platform', 1, parse_enum, mapping=_enum(Platform, {'_': None}))),
               Token(Literal('_'),
                     Field('timeliness', 2, parse_enum, mapping=_enum(Timeliness, {'__': None}))),
               Token(Literal('_'),
                     Field('baseline_collection', 3, parse_padded, pattern=patterns.s3_baseline_collection,
                           description='baseline collection')))
    record = Sentinel3Product
