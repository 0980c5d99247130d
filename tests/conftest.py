"""Shared pytest fixtures for all tests."""
from typing import Callable, List

import pytest


@pytest.fixture
def calls() -> List[object]:
    """Records the arguments functions under test were called with."""
    return []


@pytest.fixture
def recorder(calls: List[object]) -> Callable[[object], object]:
    """An identity function that appends its argument to ``calls``."""

    def record(value: object) -> object:
        calls.append(value)
        return value

    return record
