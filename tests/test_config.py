"""Tests for LedgerSettings."""

import pytest
from pydantic import ValidationError

from repo_ledger import DEFAULT_SETTINGS, LedgerSettings


def test_defaults():
    assert DEFAULT_SETTINGS.timestamp_format == "%Y-%m-%d at %H:%M:%S %Z"
    assert DEFAULT_SETTINGS.history_separator == "\n"


def test_empty_timestamp_format_rejected():
    with pytest.raises(ValidationError):
        LedgerSettings(timestamp_format="")


def test_settings_are_frozen():
    settings = LedgerSettings()

    with pytest.raises(ValidationError):
        settings.history_separator = ","
