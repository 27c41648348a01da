"""
Audit trail for remaining-minute balance changes
"""
from django.core.validators import MinValueValidator
from django.db import models

from core.mixins import UUIDModelMixin, TimestampedModelMixin
from user.models import User


class MinuteTransaction(UUIDModelMixin, TimestampedModelMixin, models.Model):
    """One immutable credit or debit against a user's remaining minutes"""

    TRANSACTION_TYPE_CHOICES = [
        ('credit', 'Credit'),
        ('debit', 'Debit'),
    ]

    CATEGORY_CHOICES = [
        ('booking', 'Class Booking'),
        ('package_purchase', 'Package Purchase'),
    ]

    reference = models.CharField(max_length=100, unique=True)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='minute_transactions')
    transaction_type = models.CharField(max_length=10, choices=TRANSACTION_TYPE_CHOICES)
    category = models.CharField(max_length=30, choices=CATEGORY_CHOICES)
    minutes = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    # Balance tracking; negative only when FITBOOK_ALLOW_NEGATIVE_BALANCE is on
    balance_before = models.IntegerField()
    balance_after = models.IntegerField()

    booking = models.ForeignKey('booking.Booking', on_delete=models.SET_NULL, null=True, blank=True, related_name='minute_transactions')
    package = models.ForeignKey('payment.Package', on_delete=models.SET_NULL, null=True, blank=True, related_name='minute_transactions')

    description = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'ledger_minute_transaction'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', '-created_at'], name='ledger_user_created_idx'),
            models.Index(fields=['reference'], name='ledger_reference_idx'),
        ]

    def __str__(self):
        sign = '+' if self.transaction_type == 'credit' else '-'
        return f"{self.reference}: {sign}{self.minutes} min for {self.user.email}"
