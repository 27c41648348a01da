"""
Booking Models
"""
from django.core.validators import MinValueValidator
from django.db import models

from classes.models import FitnessClass
from core.mixins import UUIDModelMixin, TimestampedModelMixin
from user.models import User


class Booking(UUIDModelMixin, TimestampedModelMixin, models.Model):
    """A user's seat in a fitness class"""

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='bookings')
    fitness_class = models.ForeignKey(FitnessClass, on_delete=models.CASCADE, related_name='bookings')
    # Fixed at booking time; later edits to the class do not change it
    minutes_spent = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        db_table = 'booking_booking'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['user', 'fitness_class'], name='booking_unique_user_class'),
        ]
        indexes = [
            models.Index(fields=['user', '-created_at'], name='booking_user_created_idx'),
        ]

    def __str__(self):
        return f"Booking {self.id} - {self.user.email} - {self.fitness_class.title}"

    def status_on(self, day=None):
        """Derived from the class schedule: upcoming or completed"""
        return self.fitness_class.status_on(day)
