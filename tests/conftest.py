"""Shared pytest fixtures."""

import os

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """
    Start from an empty process environment; monkeypatch restores it afterwards.

    Use the returned monkeypatch to set variables for the test.
    """
    for key in list(os.environ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
