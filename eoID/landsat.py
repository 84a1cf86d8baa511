###############################################################################
# Landsat product and scene naming conventions
# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
Landsat Collection product identifiers, e.g. LC08_L1GT_029030_20151209_20160131_01_RT,
and pre-collection scene ids, e.g. LC80390222013076EDC00.

References:
    * https://www.usgs.gov/faqs/what-naming-convention-landsat-collections-level-1-scenes
    * https://www.usgs.gov/faqs/what-naming-convention-landsat-collection-2-level-1-and-level-2-scenes
"""
from enum import Enum
from dataclasses import dataclass
from datetime import date, datetime, time

from . import patterns
from .grammar import Convention, Identifier, Mission, Token, Field, Literal
from .parsers import parse_enum, parse_integer, parse_date, parse_julian_date, parse_pattern

# WRS-1 (Landsat 1-3) has 251 paths, WRS-2 233 paths and 248 rows
WRS_PATH_MAX = 251
WRS_ROW_MAX = 248


class Sensor(Enum):
    OLI_TIRS = 'OLI/TIRS'
    OLI = 'OLI'
    TIRS = 'TIRS'
    ETM_PLUS = 'ETM+'
    TM = 'TM'
    MSS = 'MSS'

    @property
    def long_name(self):
        return {'OLI/TIRS': 'Operational Land Imager / Thermal Infrared Sensor',
                'OLI': 'Operational Land Imager',
                'TIRS': 'Thermal Infrared Sensor',
                'ETM+': 'Enhanced Thematic Mapper Plus',
                'TM': 'Thematic Mapper',
                'MSS': 'Multispectral Scanner'}[self.value]


class ProcessingLevel(Enum):
    L1TP = 'L1TP'
    L1GT = 'L1GT'
    L1GS = 'L1GS'
    L2SP = 'L2SP'
    L2SR = 'L2SR'


class CollectionCategory(Enum):
    REAL_TIME = 'RT'
    TIER1 = 'T1'
    TIER2 = 'T2'
    ALBERS_TIER1 = 'A1'
    ALBERS_TIER2 = 'A2'

    @property
    def long_name(self):
        return {'RT': 'Real-Time',
                'T1': 'Tier 1',
                'T2': 'Tier 2',
                'A1': 'Albers Tier 1',
                'A2': 'Albers Tier 2'}[self.value]


# the sensor letter; T is resolved by the satellite number, see function sensor
SENSOR_CODES = ('C', 'O', 'T', 'E', 'M')


def sensor(code, satellite):
    """
    resolve the sensor letter of a Landsat name

    Parameters
    ----------
    code: str
        the sensor letter
    satellite: int
        the Landsat satellite number

    Returns
    -------
    Sensor
    """
    if code == 'T':
        # T = TM for Landsat 4 & 5
        return Sensor.TM if satellite in (4, 5) else Sensor.TIRS
    return {'C': Sensor.OLI_TIRS,
            'O': Sensor.OLI,
            'E': Sensor.ETM_PLUS,
            'M': Sensor.MSS}[code]


class _Landsat(Identifier):

    @property
    def mission(self):
        return Mission['LANDSAT{}'.format(self.satellite)]

    @property
    def start(self):
        return datetime.combine(self.acquisition_date, time())


@dataclass(frozen=True)
class LandsatProduct(_Landsat):
    """
    Landsat Collection product
    """
    convention = 'landsat'

    sensor: Sensor
    satellite: int
    processing_level: ProcessingLevel
    wrs_path: int
    wrs_row: int
    acquisition_date: date
    processing_date: date
    collection_number: int
    collection_category: CollectionCategory


@dataclass(frozen=True)
class LandsatSceneID(_Landsat):
    """
    Landsat pre-collection scene id
    """
    convention = 'landsat_scene'

    sensor: Sensor
    satellite: int
    wrs_path: int
    wrs_row: int
    acquisition_date: date
    ground_station: str
    archive_version: int


def _wrs(path_width, row_width):
    return (Field('wrs_path', path_width, parse_integer, minimum=1, maximum=WRS_PATH_MAX),
            Field('wrs_row', row_width, parse_integer, minimum=1, maximum=WRS_ROW_MAX))


_sensor = Field('sensor', 1, parse_enum, mapping={x: x for x in SENSOR_CODES})


class LandsatProductDecoder(Convention):
    """
    Decoder for Landsat Collection 1 and 2 product identifiers:

    LXSS_LLLL_PPPRRR_YYYYMMDD_yyyymmdd_CC_TX
    """
    name = 'landsat'
    description = 'Landsat product'
    signature = patterns.landsat
    delimiter = '_'
    extensions = ('.tar', '.tar.gz', '.zip')
    grammar = (Token(Literal('L'), _sensor,
                     Field('satellite', 2, parse_integer, minimum=1, maximum=9)),
               Token(Field('processing_level', 4, parse_enum, mapping={x.value: x for x in ProcessingLevel})),
               Token(*_wrs(3, 3)),
               Token(Field('acquisition_date', 8, parse_date)),
               Token(Field('processing_date', 8, parse_date)),
               Token(Field('collection_number', 2, parse_integer, minimum=1, maximum=99)),
               Token(Field('collection_category', 2, parse_enum,
                           mapping={x.value: x for x in CollectionCategory})))
    record = LandsatProduct

    def assemble(self, fields):
        fields['sensor'] = sensor(fields['sensor'], fields['satellite'])
        return self.record(**fields)


class LandsatSceneDecoder(Convention):
    """
    Decoder for Landsat pre-collection scene ids:

    LXSPPPRRRYYYYDDDGSIVV
    """
    name = 'landsat_scene'
    description = 'Landsat scene id'
    signature = patterns.landsat_scene
    delimiter = None
    extensions = ('.tar', '.tar.gz', '.zip')
    grammar = (Token(Literal('L'), _sensor,
                     Field('satellite', 1, parse_integer, minimum=1, maximum=9)),
               Token(*_wrs(3, 3)),
               Token(Field('acquisition_date', 7, parse_julian_date)),
               Token(Field('ground_station', 3, parse_pattern, pattern=patterns.alphanumeric,
                           description='alphanumeric characters')),
               Token(Field('archive_version', 2, parse_integer)))
    record = LandsatSceneID

    def assemble(self, fields):
        fields['sensor'] = sensor(fields['sensor'], fields['satellite'])
        return self.record(**fields)
