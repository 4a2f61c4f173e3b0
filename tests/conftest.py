# tests/conftest.py

import pytest

from db_connector.mysql_driver import MySQLDriverInfo
from db_connector.registry import DriverRegistry


@pytest.fixture
def empty_registry(monkeypatch):
    """Point the MySQL driver info at an empty registry for the duration of a test."""
    registry = DriverRegistry()
    monkeypatch.setattr(MySQLDriverInfo, "registry", registry)
    return registry
