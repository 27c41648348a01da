"""
Core App Configuration
Starts the event bus listener
"""
from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    _initialized = False

    def ready(self):
        # Django can call ready() more than once
        if CoreConfig._initialized:
            return

        from core.services import EventBus

        EventBus.start_listener()
        CoreConfig._initialized = True
        logger.info("Core services initialized")
