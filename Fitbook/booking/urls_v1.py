"""
Booking V1 URL Configuration
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from booking.views.v1 import BookingViewSet

app_name = 'booking_v1'

router = DefaultRouter()
router.register(r'bookings', BookingViewSet, basename='booking')

urlpatterns = [
    path('', include(router.urls)),
]
