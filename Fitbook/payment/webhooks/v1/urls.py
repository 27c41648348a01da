"""
Payment Webhook URLs V1
"""
from django.urls import path

from payment.webhooks.v1 import views

urlpatterns = [
    path('webhook/', views.stripe_webhook, name='stripe_webhook'),
]
