import pytest

from fakes import FakePort


@pytest.fixture
def port() -> FakePort:
    return FakePort()
