import pytest

from rinha.output import BufferOutput
from rinha.types.environment import Environment


@pytest.fixture
def env():
    """A fresh, empty top-level environment."""
    return Environment()


@pytest.fixture
def output():
    """Collects everything print writes during a test."""
    return BufferOutput()
