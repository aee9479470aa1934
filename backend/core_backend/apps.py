from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)


class CoreBackendConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core_backend"

    def ready(self):
        """
        Build the shared database handle once per process.
        Views receive it through ``get_database_handle()`` instead of
        reaching for a module-level connection.
        """
        from core_backend.infrastructure.database import DatabaseHandle

        self.database = DatabaseHandle("default")
        logger.debug("Database handle constructed for alias 'default'")


def get_database_handle():
    from django.apps import apps

    return apps.get_app_config("core_backend").database
