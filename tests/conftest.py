import os
import pytest
import platform

from eoID.config import ConfigHandler
from eoID.drivers import default_dispatcher


@pytest.fixture
def testdir():
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')


@pytest.fixture
def samples(testdir):
    """
    read the identifiers listed in a file of the test data directory
    """
    def read(filename):
        with open(os.path.join(testdir, filename), 'r') as f:
            lines = [x.strip() for x in f.readlines()]
        return [x for x in lines if x != '' and not x.startswith('#')]
    return read


@pytest.fixture
def s2_name():
    return 'S2A_MSIL1C_20170105T013442_N0204_R031_T53NMJ_20170105T013443'


@pytest.fixture
def tmp_home(monkeypatch, tmp_path):
    home = tmp_path / 'tmp_home'
    home.mkdir()
    var = 'USERPROFILE' if platform.system() == 'Windows' else 'HOME'
    monkeypatch.setenv(var, str(home))
    assert os.path.expanduser('~') == str(home)
    yield home


@pytest.fixture(autouse=True)
def fresh_config(tmp_home):
    """
    isolate the configuration and the cached default dispatcher of each test
    """
    ConfigHandler._instance = None
    default_dispatcher.cache_clear()
    yield
    ConfigHandler._instance = None
    default_dispatcher.cache_clear()
