"""Shared fixtures for flagset tests."""

import pytest

from flagset import ParserConfig


@pytest.fixture
def reported():
    """Errors passed to the error hook, in order."""
    return []


@pytest.fixture
def quiet_config(reported):
    """Config that records errors instead of printing and exiting."""
    return ParserConfig.quiet(on_error=lambda options, error: reported.append(error))
