# db_connector/driver_info.py

import logging
from typing import Optional

from .database_info import DatabaseInfo
from .registry import DRIVER_REGISTRY, DriverRegistry

logger = logging.getLogger(__name__)


class DriverInfo:
    """
    Base class for driver descriptions. A connector picks one of these per database
    type to learn which driver to load and how to address it.

    Subclasses must provide `name`, `driver_address` and `generate_uri`.
    """

    # Registry consulted by is_valid_uri when none is passed in
    registry: DriverRegistry = DRIVER_REGISTRY

    @property
    def name(self) -> str:
        """Human readable driver name."""
        raise NotImplementedError

    @property
    def driver_address(self) -> str:
        """Fully qualified class name of the driver implementation."""
        raise NotImplementedError

    def generate_uri(self, info: DatabaseInfo) -> str:
        """Build the connection URI for `info`."""
        raise NotImplementedError

    def is_valid_uri(self, uri: str, registry: Optional[DriverRegistry] = None) -> bool:
        """
        Ask the driver registry whether any registered driver accepts `uri`.

        Args:
            uri:      Connection URI to check.
            registry: Registry to scan. Defaults to `self.registry`, the process-wide one.

        Returns:
            True if some driver accepts the URI. False if none does, or if the
            registry scan raised.
        """
        try:
            if registry is None:
                registry = self.registry
            return registry.accepts(uri)
        except Exception as e:
            logger.debug("URI check failed for %r", uri, exc_info=e)
            return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} ({self.driver_address})>"
