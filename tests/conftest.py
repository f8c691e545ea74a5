"""Shared test configuration."""

import pytest

from tests.fakes import Calls


@pytest.fixture
def calls() -> Calls:
    return Calls()
