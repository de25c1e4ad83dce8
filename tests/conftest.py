"""
Pytest configuration and shared fixtures for namewise tests.

This module provides common test fixtures used across the test suite:
isolated global state plus a small sample symbol table.
"""

import pytest

from namewise.host import get_platform_cache
from namewise.naming import SymbolTable, set_symbol_table
from namewise.utils.config import set_config
from namewise.utils.constants import HOST_OS_ENV_VAR, LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """Reset configuration, platform cache and default table around each test."""
    monkeypatch.delenv(HOST_OS_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    set_config(None)
    set_symbol_table(None)
    get_platform_cache().reset()
    yield
    set_config(None)
    set_symbol_table(None)
    get_platform_cache().reset()


@pytest.fixture
def symbol_table():
    """
    Sample table:

        String            root only
        Timeout           root and Net
        Net::Timeout
        Net::Shared       Net only
        Net::Client
        Net::HTTP::Request
        Net::HTTP::Status
    """
    table = SymbolTable()
    table.register("String", "root-string")
    table.register("Timeout", "root-timeout")
    table.register("Net::Timeout", "net-timeout")
    table.register("Net::Shared", "net-shared")
    table.register("Net::Client", "net-client")
    table.register("Net::HTTP::Request", "http-request")
    table.register("Net::HTTP::Status", "http-status")
    return table


@pytest.fixture
def host_os(monkeypatch):
    """Return a setter that pins the host identifier through the environment."""

    def _set(identifier):
        monkeypatch.setenv(HOST_OS_ENV_VAR, identifier)
        set_config(None)
        get_platform_cache().reset()

    return _set
