from importlib.metadata import version

__version__ = version("db-connector-mysql")   # reads pyproject.toml metadata

from .database_info import DatabaseInfo
from .driver_info import DriverInfo
from .registry import (
    DRIVER_REGISTRY,
    DBConnectorError,
    Driver,
    DriverRegistry,
    DriverRegistryError,
)
from .mysql_driver import MYSQL_DRIVER_INFO, MySQLDriverInfo
from .mysql_utils import PYMYSQL_DRIVER, PyMySQLDriver, parse_url
from .config import load_config, load_database_info

__all__ = [
    "__version__",
    "DatabaseInfo",
    "DriverInfo",
    "Driver",
    "DriverRegistry",
    "DRIVER_REGISTRY",
    "DBConnectorError",
    "DriverRegistryError",
    "MySQLDriverInfo",
    "MYSQL_DRIVER_INFO",
    "PyMySQLDriver",
    "PYMYSQL_DRIVER",
    "parse_url",
    "load_config",
    "load_database_info",
]
