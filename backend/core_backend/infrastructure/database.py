"""
Explicit, lifecycle-managed access to the database connection.

Django already opens connections lazily per thread; ``DatabaseHandle`` adds
the checks the rest of the backend relies on: configuration is validated on
first use, a broken connection is dropped and re-established once, and
failures surface as ``ConfigurationError`` / ``PersistenceError`` instead of
driver-specific exceptions.
"""
import logging

from django.db import connections
from django.db.utils import OperationalError, InterfaceError

from core_backend.exceptions import ConfigurationError, PersistenceError

logger = logging.getLogger(__name__)


class DatabaseHandle:
    """Handle to one configured database alias."""

    REQUIRED_SETTINGS = {
        "django.db.backends.postgresql": ("NAME", "USER", "HOST"),
        "django.db.backends.sqlite3": ("NAME",),
    }

    def __init__(self, alias: str = "default"):
        self.alias = alias
        self._ready = False

    @property
    def connection(self):
        return connections[self.alias]

    def check_configuration(self) -> None:
        settings_dict = self.connection.settings_dict
        engine = settings_dict.get("ENGINE", "")
        missing = [
            key for key in self.REQUIRED_SETTINGS.get(engine, ("NAME",))
            if not settings_dict.get(key)
        ]
        if missing:
            raise ConfigurationError(
                f"Database '{self.alias}' is missing required settings: {', '.join(missing)}"
            )

    def ensure_ready(self) -> None:
        """
        Validate configuration and make sure a usable connection exists.

        A failed connection attempt is retried exactly once after closing the
        stale connection; a second failure raises PersistenceError.
        """
        self.check_configuration()

        try:
            self.connection.ensure_connection()
        except (OperationalError, InterfaceError) as first_error:
            logger.warning(f"Database '{self.alias}' connection failed, re-initialising: {first_error}")
            self.connection.close()
            self._ready = False
            try:
                self.connection.ensure_connection()
            except (OperationalError, InterfaceError) as e:
                raise PersistenceError(f"Database '{self.alias}' is unreachable.") from e

        if not self._ready:
            logger.info(f"Database '{self.alias}' connection ready ({self.connection.vendor})")
            self._ready = True

    def is_ready(self) -> bool:
        try:
            self.ensure_ready()
        except (ConfigurationError, PersistenceError) as e:
            logger.error(f"Database health check failed: {e.message}")
            return False
        return True

    def close(self) -> None:
        self.connection.close()
        self._ready = False
