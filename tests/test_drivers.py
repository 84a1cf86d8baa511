import logging
import pytest

from eoID import identify, identify_many, Dispatcher, default_dispatcher, CONVENTIONS, Identifier, \
    UnrecognizedFormat, MalformedStructure, InvalidField, DecodeError
from eoID.config import ConfigHandler
from eoID.grammar import Convention, Token, Field
from eoID.parsers import parse_digits
from eoID.sentinel2 import Sentinel2Product, Sentinel2ProductDecoder
from eoID.landsat import LandsatProduct, LandsatProductDecoder


def test_registration_order():
    assert Dispatcher().names == ['sentinel1', 'sentinel2', 'sentinel3', 'landsat', 'landsat_scene',
                                 'sentinel1_dataset']
    assert [x.name for x in CONVENTIONS] == Dispatcher().names


@pytest.mark.parametrize('filename', ['sentinel1.txt', 'sentinel2.txt', 'sentinel3.txt', 'landsat.txt',
                                      'sentinel1_dataset.txt'])
def test_single_claim(samples, filename):
    # each valid name is claimed by its own convention only
    for name in samples(filename):
        claimed = [x.name for x in CONVENTIONS if x.claims(name)]
        assert claimed == [identify(name).convention]


def test_unique_names():
    with pytest.raises(ValueError):
        Dispatcher([Sentinel2ProductDecoder(), Sentinel2ProductDecoder()])


def test_type_error():
    for value in [None, 123, b'S2A_MSIL1C']:
        with pytest.raises(TypeError):
            identify(value)


def test_unrecognized():
    for name in ['RANDOM_STRING_123', '', 'S4A_XYZ_123', 's2a_msil1c_20170105t013442']:
        with pytest.raises(UnrecognizedFormat):
            identify(name)


def test_subset(s2_name):
    dispatcher = Dispatcher([LandsatProductDecoder()])
    with pytest.raises(UnrecognizedFormat):
        identify(s2_name, dispatcher=dispatcher)
    assert isinstance(identify('LC08_L1GT_029030_20151209_20160131_01_RT', dispatcher), LandsatProduct)


def test_claim_is_final(s2_name):
    # a claimed but malformed name is never offered to the next convention
    class Greedy(Convention):
        name = 'greedy'
        description = 'greedy'
        signature = r'^S2'
        grammar = (Token(Field('digits', 3, parse_digits)),)

    dispatcher = Dispatcher([Sentinel2ProductDecoder(), Greedy()])
    with pytest.raises(MalformedStructure):
        identify(s2_name + '_X', dispatcher)
    dispatcher = Dispatcher([Greedy(), Sentinel2ProductDecoder()])
    with pytest.raises(MalformedStructure) as e:
        identify(s2_name, dispatcher)
    assert e.value.convention == 'greedy'


def test_log(s2_name, caplog):
    with caplog.at_level(logging.DEBUG, logger='eoID'):
        identify(s2_name)
    assert 'Sentinel-2 product' in caplog.text


def test_identify_many(samples, caplog):
    names = samples('sentinel2.txt') + samples('invalid.txt')
    with caplog.at_level(logging.DEBUG, logger='eoID'):
        ids = identify_many(names, verbose=False, sortkey='start')
    assert len(ids) == 4
    assert all(isinstance(x, Sentinel2Product) for x in ids)
    assert [x.start for x in ids] == sorted(x.start for x in ids)
    assert 'skipping RANDOM_STRING_123' in caplog.text


def test_identify_many_passthrough(samples):
    decoded = identify_many(samples('landsat.txt'), verbose=False)
    ids = identify_many(decoded + samples('sentinel1.txt'), verbose=True)
    assert len(ids) == 9
    assert ids[:6] == decoded
    assert all(isinstance(x, Identifier) for x in ids)


def test_config(s2_name):
    config = ConfigHandler()
    config.add_section('IDENTIFY')
    config.set('IDENTIFY', 'conventions', ['landsat', 'sentinel2'])
    assert default_dispatcher().names == ['landsat', 'sentinel2']
    assert isinstance(identify(s2_name), Sentinel2Product)
    with pytest.raises(UnrecognizedFormat):
        identify('S1A_IW_GRDH_1SDV_20180829T170656_20180829T170721_023464_028DE0_F7BD')


def test_config_default():
    assert default_dispatcher().names == Dispatcher().names
    assert default_dispatcher() is default_dispatcher()


def test_config_unknown():
    config = ConfigHandler()
    config.add_section('IDENTIFY')
    config.set('IDENTIFY', 'conventions', ['sentinel2', 'modis'])
    with pytest.raises(ValueError, match='modis'):
        default_dispatcher()


def test_config_invalid():
    config = ConfigHandler()
    config.add_section('IDENTIFY')
    config.set('IDENTIFY', 'conventions', 'sentinel2')
    with pytest.raises(ValueError):
        Dispatcher.from_config(config)


def test_errors_are_value_errors():
    assert issubclass(DecodeError, ValueError)
    assert issubclass(InvalidField, DecodeError)
    with pytest.raises(ValueError):
        identify('RANDOM_STRING_123')
