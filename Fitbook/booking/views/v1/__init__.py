"""
Booking V1 Views
"""
from .booking import BookingViewSet

__all__ = ['BookingViewSet']
