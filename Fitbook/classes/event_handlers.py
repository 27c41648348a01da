"""
Event handlers for the classes module
Keeps the cached catalogue in step with committed bookings and new classes
"""
import logging

from core.cache import CacheService
from core.services import EventBus, EventTypes

logger = logging.getLogger(__name__)

CATALOGUE_CACHE_PREFIX = 'fitnessclass'


def invalidate_catalogue(event):
    """Drop cached catalogue pages so booked counts and new classes show up"""
    CacheService.invalidate_model(CATALOGUE_CACHE_PREFIX)
    logger.debug(f"Catalogue cache cleared after {event.event_type} ({event.data.get('class_id')})")


def register_handlers():
    EventBus.subscribe(EventTypes.CLASS_CREATED, invalidate_catalogue)
    EventBus.subscribe(EventTypes.BOOKING_CREATED, invalidate_catalogue)
    logger.info("Classes event handlers registered")
