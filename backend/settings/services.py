"""
Settings Service Layer

Business logic for reading and updating the cafe's GlobalSettings row.
"""
import logging
from typing import Dict, Any

from django.db import transaction

from .models import GlobalSettings

logger = logging.getLogger(__name__)


class SettingsService:
    """Service layer for the single GlobalSettings instance."""

    @staticmethod
    def get_global_settings() -> GlobalSettings:
        """
        Get the GlobalSettings instance, creating it with defaults on first access.
        """
        return GlobalSettings.load()

    @staticmethod
    @transaction.atomic
    def update_global_settings(update_data: Dict[str, Any]) -> GlobalSettings:
        """
        Apply already-validated field values to the settings row.
        """
        SettingsService.get_global_settings()
        settings_obj = GlobalSettings.objects.select_for_update().get(pk=GlobalSettings.SINGLETON_PK)
        for field, value in update_data.items():
            setattr(settings_obj, field, value)
        settings_obj.save()

        logger.info(f"Global settings updated: {', '.join(sorted(update_data))}")
        return settings_obj
