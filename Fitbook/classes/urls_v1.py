"""
Classes V1 URL Configuration
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from classes.views.v1 import FitnessClassViewSet

app_name = 'classes_v1'

router = DefaultRouter()
router.register(r'classes', FitnessClassViewSet, basename='class')

urlpatterns = [
    path('', include(router.urls)),
]
