# db_connector/mysql_driver.py

from typing import Optional

from .database_info import DatabaseInfo
from .driver_info import DriverInfo

DEFAULT_PORT = 3306


class MySQLDriverInfo(DriverInfo):
    """
    DriverInfo for MySQL, addressing MySQL Connector/J.

    There is exactly one instance per process: constructing the class again
    returns `MySQLDriverInfo.INSTANCE`.
    """

    INSTANCE: "MySQLDriverInfo"
    _instance: Optional["MySQLDriverInfo"] = None

    def __new__(cls) -> "MySQLDriverInfo":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def name(self) -> str:
        return "MySQLDriver"

    @property
    def driver_address(self) -> str:
        return "com.mysql.cj.jdbc.Driver"

    def generate_uri(self, info: DatabaseInfo) -> str:
        """
        Build a MySQL JDBC URI from `info`.

        Args:
            info: Host, port, database name and connection options.

        Returns:
            jdbc:mysql://host:port[/database][?option1=value1&option2=value2]
            The port falls back to 3306. Options whose value is None are left out.
            Nothing is escaped or validated.
        """
        port = info.port if info.port is not None else DEFAULT_PORT
        database = info.database or ""
        options = "&".join(
            f"{key}={value}"
            for key, value in info.connection_option.items()
            if value is not None
        )

        uri = f"jdbc:mysql://{info.uri}:{port}"
        if database:
            uri += f"/{database}"
        if options:
            uri += f"?{options}"
        return uri


MySQLDriverInfo.INSTANCE = MYSQL_DRIVER_INFO = MySQLDriverInfo()
