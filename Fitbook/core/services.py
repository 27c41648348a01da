"""
Event bus for decoupled inter-module communication
Publishes domain events over Redis pub/sub, or to in-process
subscribers when Redis is not configured
"""

import json
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Optional, List

import redis
from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)


class Event:
    """
    Event object for inter-module communication
    """
    def __init__(self, event_type: str, data: Dict[str, Any], source_module: str, event_id: str = None):
        self.event_type = event_type
        self.data = data
        self.source_module = source_module
        self.event_id = event_id or self._generate_id()

    def _generate_id(self):
        return f"{self.event_type}:{timezone.now().timestamp()}:{uuid.uuid4().hex[:8]}"

    def to_dict(self):
        return {
            'event_id': self.event_id,
            'event_type': self.event_type,
            'data': self.data,
            'source_module': self.source_module
        }

    @classmethod
    def from_dict(cls, data: Dict):
        return cls(
            event_type=data['event_type'],
            data=data['data'],
            source_module=data['source_module'],
            event_id=data.get('event_id')
        )


class EventBus:
    """
    Event bus for publishing and subscribing to events
    """

    CHANNEL_PREFIX = "fitbook:events:"

    _subscribers: Dict[str, List[Callable]] = {}
    _redis_client: Optional[redis.Redis] = None
    _pubsub = None
    _listener_thread = None
    _processed_events: set = set()

    @classmethod
    def _get_redis_client(cls):
        """Get or create Redis client, None when Redis is not configured"""
        redis_url = getattr(settings, 'REDIS_URL', None)
        if not redis_url:
            return None
        if cls._redis_client is None:
            try:
                cls._redis_client = redis.Redis.from_url(redis_url, decode_responses=True)
                cls._redis_client.ping()
            except redis.RedisError as e:
                logger.error(f"Failed to connect to Redis: {str(e)}")
                cls._redis_client = None
        return cls._redis_client

    @classmethod
    def publish(cls, event: Event):
        """
        Publish an event to Redis, or to local subscribers without Redis.
        Publishing never fails the caller.
        """
        try:
            redis_client = cls._get_redis_client()
            if redis_client:
                channel = f"{cls.CHANNEL_PREFIX}{event.event_type}"
                redis_client.publish(channel, json.dumps(event.to_dict()))
                logger.debug(f"Published to Redis: {event.event_type}")
            else:
                cls._notify_local_subscribers(event)

            logger.info(f"Event published: {event.event_type} from {event.source_module}")
        except Exception as e:
            logger.error(f"Failed to publish event {event.event_type}: {str(e)}")

    @classmethod
    def subscribe(cls, event_type: str, handler: Callable):
        """
        Subscribe a local handler to an event type
        """
        handlers = cls._subscribers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.info(f"Subscribed to event: {event_type}")

    @classmethod
    def unsubscribe(cls, event_type: str, handler: Callable):
        handlers = cls._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    @classmethod
    def _notify_local_subscribers(cls, event: Event):
        if event.event_id in cls._processed_events:
            logger.debug(f"Skipping duplicate event: {event.event_id}")
            return

        cls._processed_events.add(event.event_id)

        if len(cls._processed_events) > 10000:
            cls._processed_events = set(list(cls._processed_events)[1000:])

        for handler in cls._subscribers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.event_type}: {str(e)}")

    @classmethod
    def start_listener(cls):
        """
        Start Redis pub/sub listener in a background thread
        """
        if cls._listener_thread and cls._listener_thread.is_alive():
            logger.info("Event listener already running")
            return

        redis_client = cls._get_redis_client()
        if not redis_client:
            logger.info("Redis not configured, using local-only event bus")
            return

        cls._pubsub = redis_client.pubsub()
        cls._pubsub.psubscribe(f"{cls.CHANNEL_PREFIX}*")

        def listen():
            logger.info("Redis event listener started")
            for message in cls._pubsub.listen():
                if message['type'] == 'pmessage':
                    try:
                        event = Event.from_dict(json.loads(message['data']))
                        cls._notify_local_subscribers(event)
                    except Exception as e:
                        logger.error(f"Error processing event: {str(e)}")

        cls._listener_thread = threading.Thread(target=listen, daemon=True)
        cls._listener_thread.start()

    @classmethod
    def stop_listener(cls):
        if cls._pubsub:
            cls._pubsub.close()
            cls._pubsub = None
        logger.info("Event listener stopped")


class EventTypes:
    # User events
    USER_REGISTERED = "user.registered"

    # Class events
    CLASS_CREATED = "class.created"

    # Booking events
    BOOKING_CREATED = "booking.created"

    # Ledger events
    MINUTES_CREDITED = "minutes.credited"
    MINUTES_DEBITED = "minutes.debited"

    # Payment events
    PACKAGE_CREATED = "package.created"
    PAYMENT_COMPLETED = "payment.completed"
    PAYMENT_FAILED = "payment.failed"
    WEBHOOK_RECEIVED = "webhook.received"
