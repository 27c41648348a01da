"""
Fitness class models
"""
from django.core.validators import MinValueValidator, RegexValidator
from django.db import models
from django.utils import timezone

from classes.scheduling import class_total_minutes
from core.mixins import UUIDModelMixin, TimestampedModelMixin
from user.models import User

clock_validator = RegexValidator(
    regex=r'^([01]?\d|2[0-3]):([0-5]\d)$',
    message='Time must be in 24-hour HH:MM format'
)


class Frequency(models.TextChoices):
    DAILY = 'Daily', 'Daily'
    WEEKLY = 'Weekly', 'Weekly'
    BI_WEEKLY = 'Bi-weekly', 'Bi-weekly'
    MONTHLY = 'Monthly', 'Monthly'


class FitnessClass(UUIDModelMixin, TimestampedModelMixin, models.Model):
    """A trainer-led class, optionally repeating until end_date"""

    trainer = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='classes_taught',
        limit_choices_to={'role__in': ['trainer', 'admin']}
    )
    title = models.CharField(max_length=200)
    date = models.DateField(help_text='Date of the (first) session')
    class_type = models.CharField(max_length=50)
    start_time = models.CharField(max_length=5, validators=[clock_validator])
    end_time = models.CharField(max_length=5, validators=[clock_validator])
    location = models.CharField(max_length=255)
    max_capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    description = models.TextField()
    requirements = models.TextField(blank=True, default='')

    # Recurrence
    is_recurring_class = models.BooleanField(default=False)
    frequency = models.CharField(max_length=20, choices=Frequency.choices, blank=True, null=True)
    end_date = models.DateField(blank=True, null=True, help_text='Last day of the series (inclusive)')

    # Uniqueness is enforced by BookingService, not by this relation
    attendees = models.ManyToManyField(User, related_name='attended_classes', blank=True)

    class Meta:
        db_table = 'classes_fitness_class'
        ordering = ['date', 'start_time']
        indexes = [
            models.Index(fields=['trainer', 'date'], name='classes_trainer_date_idx'),
            models.Index(fields=['date'], name='classes_date_idx'),
        ]

    def __str__(self):
        return f"{self.title} on {self.date} {self.start_time}-{self.end_time}"

    @property
    def booked_count(self):
        return self.attendees.count()

    @property
    def total_minutes(self):
        return class_total_minutes(self)

    @property
    def last_session_date(self):
        if self.is_recurring_class and self.end_date:
            return self.end_date
        return self.date

    def status_on(self, day=None):
        """'completed' once the last session date has passed, else 'upcoming'"""
        day = day or timezone.localdate()
        return 'completed' if self.last_session_date < day else 'upcoming'
