import pytest

from geohash64.settings import get_settings


@pytest.fixture()
def fresh_settings():
    # Settings are cached per process; tests that patch the environment need
    # a clean read.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
