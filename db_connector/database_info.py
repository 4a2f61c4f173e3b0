# db_connector/database_info.py

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class DatabaseInfo:
    """
    Connection settings handed to a DriverInfo when building a URI.

    Attributes:
        uri:               Host name or address of the server.
        port:              Server port, or None to let the driver pick its default.
        database:          Default schema to select, or None.
        connection_option: Extra options, in the order they should appear in the URI.
                           A None value means "not set" and the option is skipped.
    """
    uri: str
    port: Optional[int] = None
    database: Optional[str] = None
    connection_option: Mapping[str, Optional[str]] = field(default_factory=dict)

    def with_options(self, **options: Optional[str]) -> "DatabaseInfo":
        """Return a copy with `options` merged over the existing connection options."""
        merged: Dict[str, Optional[str]] = dict(self.connection_option)
        merged.update(options)
        return DatabaseInfo(self.uri, self.port, self.database, merged)
