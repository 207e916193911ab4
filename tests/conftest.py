"""Shared test fixtures and utilities for all tests."""
import logging

import pytest

from src.annual_review.containers import Container
from src.annual_review.core.domain.postal_address import PostalAddress
from src.client.schemas import UnvalidatedPostalAddress
from tests.builders import create_postal_address, create_unvalidated_postal_address


@pytest.fixture
def postal_address() -> PostalAddress:
    """A fully populated, valid postal address."""
    return create_postal_address()


@pytest.fixture
def unvalidated_postal_address() -> UnvalidatedPostalAddress:
    """A valid raw postal address payload."""
    return create_unvalidated_postal_address()


@pytest.fixture
def test_container():
    """
    Create a fresh container per test.

    Tests override providers (calendar, config) on this instance; overrides
    are reset afterwards so nothing leaks between tests.
    """
    container = Container()
    yield container
    container.reset_override()


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
