# db_connector/registry.py

import logging
import threading
from typing import Any, List, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class DBConnectorError(Exception):
    """Base exception for db-connector errors."""


class DriverRegistryError(DBConnectorError):
    """Raised when a registry operation refers to an unknown driver."""


@runtime_checkable
class Driver(Protocol):
    """Protocol implemented by drivers that can be registered."""

    def accepts_url(self, url: str) -> bool:
        """Return True if this driver can open `url`."""

    def connect(self, url: str, **kwargs: Any) -> Any:
        """Open a connection to `url` and return it."""


class DriverRegistry:
    """
    Pool of drivers available to the process. Drivers register themselves when
    their module is imported; callers scan the pool to find one that accepts a URL.
    """

    def __init__(self) -> None:
        self._drivers: List[Driver] = []
        self._lock = threading.Lock()

    def register(self, driver: Driver) -> None:
        """Add `driver` to the pool. Registering the same driver twice does nothing."""
        with self._lock:
            if driver in self._drivers:
                return
            self._drivers.append(driver)
        logger.debug("Registered driver %r", driver)

    def deregister(self, driver: Driver) -> None:
        """
        Remove `driver` from the pool.

        Raises:
            DriverRegistryError: If the driver was never registered.
        """
        with self._lock:
            try:
                self._drivers.remove(driver)
            except ValueError:
                raise DriverRegistryError(f"Driver not registered: {driver!r}") from None
        logger.debug("Deregistered driver %r", driver)

    def get_drivers(self) -> List[Driver]:
        """Snapshot of the registered drivers, in registration order."""
        with self._lock:
            return list(self._drivers)

    def accepts(self, url: str) -> bool:
        """
        Return True if any registered driver accepts `url`.
        Exceptions raised by a driver propagate to the caller.
        """
        return any(driver.accepts_url(url) for driver in self.get_drivers())


DRIVER_REGISTRY = DriverRegistry()
