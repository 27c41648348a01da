"""
Caching utilities for Fitbook
Provides centralized caching service with consistent key naming
"""

import json
import hashlib
from typing import Any, Optional, Callable
from django.core.cache import cache
import logging

logger = logging.getLogger(__name__)


class CacheService:
    """
    Centralized caching service for consistent cache management
    """

    # Default cache timeouts (in seconds)
    TIMEOUT_SHORT = 60 * 5
    TIMEOUT_MEDIUM = 60 * 30
    TIMEOUT_LONG = 60 * 60 * 2

    @staticmethod
    def generate_key(prefix: str, *args, **kwargs) -> str:
        """
        Generate a cache key from prefix and parameters

        Args:
            prefix: Key prefix (e.g., 'classes', 'booking')
            *args: Positional arguments to include in key
            **kwargs: Keyword arguments to include in key

        Returns:
            Generated cache key
        """
        params = list(args) + sorted(kwargs.items())
        params_str = json.dumps(params, sort_keys=True, default=str)

        # Long parameter strings are hashed to keep keys short
        if len(params_str) > 100:
            params_hash = hashlib.md5(params_str.encode()).hexdigest()
            return f"{prefix}:{params_hash}"

        return f"{prefix}:{params_str}"

    @staticmethod
    def get(key: str, default: Any = None) -> Any:
        try:
            value = cache.get(key, default)
            if value is not None:
                logger.debug(f"Cache HIT: {key}")
            else:
                logger.debug(f"Cache MISS: {key}")
            return value
        except Exception as e:
            logger.error(f"Cache GET error for {key}: {str(e)}")
            return default

    @staticmethod
    def set(key: str, value: Any, timeout: int = TIMEOUT_MEDIUM) -> bool:
        try:
            cache.set(key, value, timeout)
            logger.debug(f"Cache SET: {key} (timeout={timeout}s)")
            return True
        except Exception as e:
            logger.error(f"Cache SET error for {key}: {str(e)}")
            return False

    @staticmethod
    def delete_pattern(pattern: str) -> bool:
        """
        Delete all keys matching pattern
        Only the django-redis backend supports this; other backends are skipped
        """
        if not hasattr(cache, 'delete_pattern'):
            logger.debug(f"Cache backend has no delete_pattern, skipping: {pattern}")
            return False
        try:
            cache.delete_pattern(pattern)
            logger.debug(f"Cache DELETE PATTERN: {pattern}")
            return True
        except Exception as e:
            logger.error(f"Cache DELETE PATTERN error for {pattern}: {str(e)}")
            return False

    @staticmethod
    def get_or_set(key: str, default_func: Callable, timeout: int = TIMEOUT_MEDIUM) -> Any:
        value = CacheService.get(key)

        if value is None:
            value = default_func()
            CacheService.set(key, value, timeout)

        return value

    @staticmethod
    def invalidate_model(model_name: str, instance_id: Optional[str] = None):
        """
        Invalidate cache for a model

        Args:
            model_name: Name of the model (e.g., 'fitnessclass')
            instance_id: Optional specific instance ID
        """
        if instance_id:
            pattern = f"{model_name}:{instance_id}:*"
        else:
            pattern = f"{model_name}:*"

        CacheService.delete_pattern(pattern)
        logger.info(f"Invalidated cache for {model_name}" + (f":{instance_id}" if instance_id else ""))
