"""Общие фикстуры для unit-тестов."""

import pytest

from tests.vectors import G2_ADDRESS, G2_X, G2_Y, G_ADDRESS, G_X, G_Y


@pytest.fixture
def generator_point():
    """(X, Y, address) для privkey = 1."""
    return G_X, G_Y, G_ADDRESS


@pytest.fixture
def double_generator_point():
    """(X, Y, address) для privkey = 2."""
    return G2_X, G2_Y, G2_ADDRESS
