"""
Payment Models - hour packages and provider webhooks
"""
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from core.mixins import UUIDModelMixin, TimestampedModelMixin
from user.models import User


class Package(UUIDModelMixin, TimestampedModelMixin, models.Model):
    """One purchase attempt of an hour package"""

    PACKAGE_TYPE_CHOICES = [
        ('standard', 'Standard'),
        ('premium', 'Premium'),
    ]

    # pending -> paid | failed, never back
    PACKAGE_STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('paid', 'Paid'),
        ('failed', 'Failed'),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='packages')
    package_type = models.CharField(max_length=20, choices=PACKAGE_TYPE_CHOICES)
    amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    currency = models.CharField(max_length=3, default='USD')
    hours = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    status = models.CharField(max_length=20, choices=PACKAGE_STATUS_CHOICES, default='pending')

    stripe_payment_intent_id = models.CharField(max_length=255, unique=True)

    paid_at = models.DateTimeField(blank=True, null=True)
    failed_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = 'payment_package'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'status'], name='payment_pkg_user_status_idx'),
        ]

    def __str__(self):
        return f"{self.get_package_type_display()} package ({self.hours}h) - {self.user.email} - {self.status}"

    @property
    def minutes(self):
        return self.hours * 60


class PaymentWebhook(UUIDModelMixin, models.Model):
    """Every signed event received from the payment provider"""

    WEBHOOK_STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('processed', 'Processed'),
        ('failed', 'Failed'),
        ('ignored', 'Ignored'),
    ]

    gateway_event_id = models.CharField(max_length=255, unique=True)
    event_type = models.CharField(max_length=100)
    payload = models.JSONField()

    status = models.CharField(max_length=20, choices=WEBHOOK_STATUS_CHOICES, default='pending')
    processed_at = models.DateTimeField(blank=True, null=True)
    error_message = models.TextField(blank=True, null=True)

    received_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'payment_webhook'
        ordering = ['-received_at']
        indexes = [
            models.Index(fields=['event_type', 'status'], name='payment_webhook_type_idx'),
        ]

    def __str__(self):
        return f"Webhook {self.gateway_event_id} ({self.event_type})"
