"""
Pytest configuration and fixtures for macaddress tests.
"""

import pytest
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from macaddress import MacAddress
from macaddress.logging_setup import reset_logging


@pytest.fixture
def sample_eui():
    """Octets of 12:34:56:ab:cd:ef."""
    return [0x12, 0x34, 0x56, 0xAB, 0xCD, 0xEF]


@pytest.fixture
def sample_mac(sample_eui):
    """The 12:34:56:ab:cd:ef address."""
    return MacAddress.from_bytes(sample_eui)


@pytest.fixture
def random_mac():
    """Generate a random address."""
    return MacAddress.from_bytes(os.urandom(6))


@pytest.fixture
def clean_logging():
    """Detach any handlers a test installed on the library logger."""
    reset_logging()
    yield
    reset_logging()
