"""Shared fixtures for the test-suite."""
import logging
import sys

import pytest

from hilo_poker.core.hand import parse_cards


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for all tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )


@pytest.fixture
def cards():
    """Parse a string like 'As Kh' into a list of cards."""
    return parse_cards
