# db_connector/mysql_utils.py

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import pymysql
import pymysql.cursors

from .registry import DRIVER_REGISTRY

logger = logging.getLogger(__name__)

URL_PREFIX = "jdbc:mysql://"
DEFAULT_PORT = 3306


def parse_url(url: str) -> Dict[str, Any]:
    """
    Split a MySQL JDBC URL into its parts.

    Args:
        url: jdbc:mysql://host[:port][/database][?key=value&...]

    Returns:
        Dict with host, port, database (None if absent) and options.
        Options keep their order; the first occurrence of a key wins and a key
        without '=' maps to None. Values are taken as-is, without unquoting.

    Raises:
        ValueError: If the URL is not a MySQL JDBC URL or the port is not a number.
    """
    if not url.startswith(URL_PREFIX):
        raise ValueError(f"Not a MySQL JDBC URL: {url}")

    parts = urlsplit(url[len("jdbc:"):])
    # netloc keeps the host as written; hostname would lowercase it
    hostport = parts.netloc.rpartition("@")[2]
    if hostport.startswith("["):
        host = hostport[1:hostport.find("]")]
    else:
        host = hostport.partition(":")[0]
    if not host:
        raise ValueError(f"MySQL JDBC URL has no host: {url}")

    options: Dict[str, Optional[str]] = {}
    for pair in filter(None, parts.query.split("&")):
        key, sep, value = pair.partition("=")
        options.setdefault(key, value if sep else None)

    return {
        "host": host,
        "port": parts.port if parts.port is not None else DEFAULT_PORT,
        "database": parts.path.lstrip("/") or None,
        "options": options,
    }


def _connect_args(options: Dict[str, Optional[str]]) -> Dict[str, Any]:
    """
    Translate Connector/J style URL options into pymysql.connect keyword arguments.
    Unknown options are logged and dropped.
    """
    args: Dict[str, Any] = {}
    for key, value in options.items():
        if value is None:
            continue
        if key in ("user", "password"):
            args[key] = value
        elif key == "characterEncoding":
            args["charset"] = value.lower().replace("-", "")
        elif key == "connectTimeout":
            # Connector/J takes milliseconds, PyMySQL seconds; 0 means no timeout
            timeout_ms = int(value)
            args["connect_timeout"] = max(1, timeout_ms // 1000) if timeout_ms > 0 else None
        elif key == "useSSL":
            args["ssl_disabled"] = value.lower() != "true"
        else:
            logger.debug("Ignoring unsupported MySQL URL option %s=%s", key, value)
    return args


class PyMySQLDriver:
    """
    Driver for jdbc:mysql:// URLs, using PyMySQL under the hood.

    It only translates the URL; everything past pymysql.connect (protocol,
    cursors, transactions) is PyMySQL's job.
    """

    def accepts_url(self, url: str) -> bool:
        if not isinstance(url, str):
            raise TypeError(f"URL must be a string, got {type(url).__name__}")
        return url.startswith(URL_PREFIX)

    def connect(self, url: str, as_dict: bool = False, **overrides: Any) -> pymysql.connections.Connection:
        """
        Open a PyMySQL connection for `url`.

        Args:
            url:       MySQL JDBC URL.
            as_dict:   If True, cursors return each row as a dict; otherwise as tuple.
            overrides: Extra pymysql.connect arguments; these win over URL options.

        Returns:
            The open pymysql connection.
        """
        parsed = parse_url(url)
        conn_args: Dict[str, Any] = {
            "host": parsed["host"],
            "port": parsed["port"],
            "cursorclass": pymysql.cursors.DictCursor if as_dict else pymysql.cursors.Cursor,
        }
        if parsed["database"]:
            conn_args["database"] = parsed["database"]
        conn_args.update(_connect_args(parsed["options"]))
        conn_args.update(overrides)

        logger.info("Connecting to MySQL at %s:%s", conn_args["host"], conn_args["port"])
        try:
            return pymysql.connect(**conn_args)
        except Exception as e:
            logger.error("DB connection failed", exc_info=e)
            raise

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


PYMYSQL_DRIVER = PyMySQLDriver()
DRIVER_REGISTRY.register(PYMYSQL_DRIVER)
