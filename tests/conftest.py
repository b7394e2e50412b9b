"""Shared fixtures for ledger tests."""

from datetime import datetime, timezone

import pytest

from repo_ledger import Repository, reset_identifier_generator

FIXED_TIME = datetime(2024, 3, 14, 15, 9, 26, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_ids():
    """Start every test with commit id "0"."""
    reset_identifier_generator()
    yield
    reset_identifier_generator()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def repo1():
    return Repository("repo1")


@pytest.fixture
def repo2():
    return Repository("repo2")
