"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from stringy import configure


@pytest.fixture(autouse=True)
def fast_settings():
    """Cheap key derivation and bcrypt cost, fresh backends per test."""
    configure(cipher_iterations=1_000, bcrypt_rounds=4)
    yield
    configure()


@pytest.fixture
def unicode_text():
    return "fòôbàř"
