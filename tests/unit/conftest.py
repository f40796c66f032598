import pytest

from fakes import FakeClock


@pytest.fixture
def fake_clock():
    return FakeClock()
