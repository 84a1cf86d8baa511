from eoID.config import ConfigHandler
import os
import pytest


class TestConfigHandler:

    def test_make_dir_and_config(self, tmp_home):
        conf = ConfigHandler()

        path_eoid = os.path.exists(conf._ConfigHandler__GLOBAL['path'])
        path_config = os.path.isfile(conf.file)

        assert path_eoid is True
        assert path_config is True
        assert conf.file == os.path.join(str(tmp_home), '.eoid', 'config.ini')

    def test_singleton(self):
        assert ConfigHandler() is ConfigHandler()

    def test_options(self):
        conf = ConfigHandler()
        conf.add_section('FOO')
        assert 'FOO' in conf.sections

        with pytest.raises(RuntimeError):
            conf.add_section('FOO')

        conf.set('FOO', 'bar', 'foobar')

        # cannot set attribute for section that does not exist
        with pytest.raises(AttributeError):
            conf.set('IDENTIFYY', 'conventions', ['sentinel2'])

        assert conf['FOO']['bar'] == 'foobar'
        assert conf['FOO'] == {'bar': 'foobar'}
        assert list(conf['FOO'].keys()) == ['bar']
        assert conf.get('FOO', 'bar') == 'foobar'
        assert conf.get('FOO', 'baz') is None
        assert conf.get('BAZ', 'bar', default='x') == 'x'

        with pytest.raises(RuntimeError):
            conf.set('FOO', 'bar', 'loremipsum')

        conf.set('FOO', 'bar', 'loremipsum', overwrite=True)
        assert conf['FOO']['bar'] == 'loremipsum'

    def test_list(self):
        conf = ConfigHandler()
        conf.add_section('IDENTIFY')
        conf.set('IDENTIFY', 'conventions', ['sentinel2', 'landsat'])
        assert conf['IDENTIFY']['conventions'] == '["sentinel2", "landsat"]'
        assert conf.getlist('IDENTIFY', 'conventions') == ['sentinel2', 'landsat']
        assert conf.getlist('IDENTIFY', 'foo') is None
        conf.set('IDENTIFY', 'foo', '{"a": 1}')
        with pytest.raises(ValueError):
            conf.getlist('IDENTIFY', 'foo')

    def test_persistence(self):
        conf = ConfigHandler()
        conf.add_section('IDENTIFY')
        conf.set('IDENTIFY', 'conventions', ['landsat'])
        ConfigHandler._instance = None
        conf = ConfigHandler()
        assert conf.getlist('IDENTIFY', 'conventions') == ['landsat']
        assert 'Sections : 1' in str(conf)

    def test_remove(self):
        conf = ConfigHandler()
        conf.add_section('FOO')
        conf.set('FOO', 'bar', 'foobar')

        with pytest.raises(AttributeError):
            conf.remove_option('FOO', 'kex')

        with pytest.raises(AttributeError):
            conf.remove_option('FOOO', 'bar')

        conf.remove_option('FOO', 'bar')
        assert list(conf['FOO'].keys()) == []

        conf.remove_section('FOO')
        with pytest.raises(AttributeError):
            conf['FOO']
