"""Fixtures shared by the unit tests."""
import pytest

from chainassert import current_collector


@pytest.fixture(autouse=True)
def no_leaked_scope():
    """Every test must leave the failure context in hard mode."""
    assert current_collector() is None
    yield
    assert current_collector() is None
