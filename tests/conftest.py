"""Shared fixtures for the wgkeys test suite."""

import pytest

import wgkeys.config


@pytest.fixture(autouse=True)
def reset_settings():
    """Give every test a freshly loaded settings singleton."""
    wgkeys.config._settings = None
    yield
    wgkeys.config._settings = None
