import time

from django.core.management.base import BaseCommand, CommandError

from core_backend.apps import get_database_handle
from core_backend.exceptions import ConfigurationError, PersistenceError


class Command(BaseCommand):
    help = "Block until the configured database accepts connections."

    def add_arguments(self, parser):
        parser.add_argument("--retries", type=int, default=30)
        parser.add_argument("--interval", type=float, default=3.0)

    def handle(self, *args, **options):
        retries = options["retries"]
        interval = options["interval"]
        handle = get_database_handle()

        for attempt in range(1, retries + 1):
            try:
                handle.ensure_ready()
            except ConfigurationError as e:
                # Retrying cannot fix a missing setting.
                raise CommandError(e.message)
            except PersistenceError as e:
                self.stdout.write(
                    f"Database not ready yet (attempt {attempt}/{retries}): {e.message}. "
                    f"Waiting {interval} seconds..."
                )
                time.sleep(interval)
                continue

            self.stdout.write(self.style.SUCCESS("Database connection successful."))
            return

        raise CommandError(f"Database was not ready after {retries} attempts.")
