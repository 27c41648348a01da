"""
Throttling classes for rate limiting
"""

from rest_framework.throttling import AnonRateThrottle, UserRateThrottle


class AnonSustainedThrottle(AnonRateThrottle):
    """
    Sustained throttle for anonymous users (login, register)
    """
    scope = 'anon_sustained'


class AnonBurstThrottle(AnonRateThrottle):
    scope = 'anon_burst'


class UserBurstThrottle(UserRateThrottle):
    """
    Burst throttle for authenticated users hitting write endpoints
    """
    scope = 'user_burst'
