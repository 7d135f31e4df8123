from pathlib import Path

import pytest

from scopeconf import ConfigFile

DATA_DIR = Path(__file__).parent / 'data'


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def sample_conf() -> ConfigFile:
    """`test1.conf` with two defaults preloaded, already loaded."""
    cf = ConfigFile(DATA_DIR / 'test1.conf')
    cf.preload({
        'non-var': "doesn't exist",
        'var1': "get's overridden",
    })
    assert cf.load(), cf.errors()
    return cf
