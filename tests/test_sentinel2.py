import pytest
from datetime import datetime

from eoID import identify, Mission
from eoID.sentinel2 import Sentinel2Product, Sentinel2ProductDecoder, MissionUnit, ProductLevel, Baseline
from eoID.errors import MalformedStructure, InvalidField, NotThisConvention, UnrecognizedFormat


def replace_token(name, index, value):
    tokens = name.split('_')
    tokens[index] = value
    return '_'.join(tokens)


def test_decode(s2_name):
    product = identify(s2_name)
    assert isinstance(product, Sentinel2Product)
    assert product.convention == 'sentinel2'
    assert product.mission_unit == MissionUnit.A
    assert product.product_level == ProductLevel.L1C
    assert product.start_datetime == datetime(2017, 1, 5, 1, 34, 42)
    assert product.processing_baseline == Baseline(2, 4)
    assert str(product.processing_baseline) == '02.04'
    assert product.relative_orbit_number == 31
    assert product.tile_id == '53NMJ'
    assert product.generation_datetime == datetime(2017, 1, 5, 1, 34, 43)
    assert product.mission == Mission.SENTINEL2
    assert product.start == product.start_datetime
    assert product.stop is None


def test_samples(samples):
    names = samples('sentinel2.txt')
    for name in names:
        product = identify(name)
        assert isinstance(product, Sentinel2Product)
        tokens = name.split('_')
        assert product.tile_id == tokens[5][1:]
        assert product.relative_orbit_number == int(tokens[4][1:])
    assert identify(names[1]).mission_unit == MissionUnit.B
    assert identify(names[1]).product_level == ProductLevel.L2A


def test_determinism(s2_name):
    assert identify(s2_name) == identify(s2_name)
    assert identify(s2_name).export2dict() == identify(s2_name).export2dict()


def test_frozen(s2_name):
    product = identify(s2_name)
    with pytest.raises(AttributeError):
        product.tile_id = '32TNS'


def test_extension(s2_name):
    for extension in ['.SAFE', '.zip', '.SAFE.zip']:
        assert identify(s2_name + extension) == identify(s2_name)
    # other extensions are not removed and end up in the last token
    with pytest.raises(InvalidField) as e:
        identify(s2_name + '.tif')
    assert e.value.field_name == 'generation_datetime'


@pytest.mark.parametrize('index', range(7))
def test_segment_removed(s2_name, index):
    tokens = s2_name.split('_')
    del tokens[index]
    with pytest.raises(MalformedStructure) as e:
        identify('_'.join(tokens))
    assert e.value.expected == 7
    assert e.value.actual == 6


@pytest.mark.parametrize('index', range(7))
def test_segment_duplicated(s2_name, index):
    tokens = s2_name.split('_')
    tokens.insert(index, tokens[index])
    with pytest.raises(MalformedStructure) as e:
        identify('_'.join(tokens))
    assert e.value.actual == 8


@pytest.mark.parametrize('orbit', ['R001', 'R143'])
def test_orbit_boundaries_valid(s2_name, orbit):
    product = identify(replace_token(s2_name, 4, orbit))
    assert product.relative_orbit_number == int(orbit[1:])


@pytest.mark.parametrize('orbit', ['R000', 'R144'])
def test_orbit_boundaries_invalid(s2_name, orbit):
    with pytest.raises(InvalidField) as e:
        identify(replace_token(s2_name, 4, orbit))
    assert e.value.field_name == 'relative_orbit_number'
    assert e.value.raw_value == orbit[1:]
    assert e.value.rule == 'OutOfRange'


@pytest.mark.parametrize('token', ['20171305T013442', '20170132T013442', '20170105T243442', '20170229T013442'])
def test_calendar_invalid(s2_name, token):
    with pytest.raises(InvalidField) as e:
        identify(replace_token(s2_name, 2, token))
    assert e.value.field_name == 'start_datetime'
    assert e.value.rule == 'InvalidCalendarDate'


def test_calendar_leap_year(s2_name):
    product = identify(replace_token(s2_name, 2, '20160229T013442'))
    assert product.start_datetime == datetime(2016, 2, 29, 1, 34, 42)


def test_generation_before_start(s2_name):
    # the product discriminator may be earlier than the sensing start
    product = identify(replace_token(s2_name, 6, '20170105T013441'))
    assert product.generation_datetime < product.start_datetime


def test_unrecognized():
    with pytest.raises(UnrecognizedFormat) as e:
        identify('RANDOM_STRING_123')
    assert e.value.name == 'RANDOM_STRING_123'
    assert not isinstance(e.value, MalformedStructure)


def test_enum_strictness(s2_name):
    with pytest.raises(InvalidField) as e:
        identify(replace_token(s2_name, 1, 'MSIXXX'))
    assert e.value.field_name == 'product_level'
    assert e.value.rule == 'UnknownToken'
    with pytest.raises(InvalidField) as e:
        identify(replace_token(s2_name, 0, 'S2D'))
    assert e.value.field_name == 'mission_unit'


def test_case_sensitive(s2_name):
    with pytest.raises(InvalidField):
        identify(replace_token(s2_name, 1, 'MSIl1c'))


@pytest.mark.parametrize('tile,valid', [('T53NMJ', True), ('T01CAA', True), ('T60XZV', True),
                                        ('T61NMJ', False), ('T00NMJ', False), ('T53IMJ', False),
                                        ('T53NMW', False), ('T53NOJ', False), ('T53nmj', False)])
def test_tile(s2_name, tile, valid):
    name = replace_token(s2_name, 5, tile)
    if valid:
        assert identify(name).tile_id == tile[1:]
    else:
        with pytest.raises(InvalidField) as e:
            identify(name)
        assert e.value.field_name == 'tile_id'
        assert e.value.rule == 'InvalidCharacters'


def test_prefix_literals(s2_name):
    with pytest.raises(InvalidField) as e:
        identify(replace_token(s2_name, 3, 'X0204'))
    assert e.value.field_name == 'processing_baseline'
    assert e.value.rule == 'UnexpectedLiteral'
    with pytest.raises(InvalidField) as e:
        identify(replace_token(s2_name, 4, 'R31'))
    assert e.value.rule == 'InvalidWidth'


def test_not_this_convention():
    decoder = Sentinel2ProductDecoder()
    with pytest.raises(NotThisConvention):
        decoder.try_decode('LC08_L1GT_029030_20151209_20160131_01_RT')


def test_str(s2_name):
    lines = str(identify(s2_name)).split('\n')
    assert lines[0] == 'eoID identifier of type Sentinel2Product'
    assert 'processing_baseline: 02.04' in lines
    assert 'start_datetime: 20170105T013442' in lines
    assert 'tile_id: 53NMJ' in lines
