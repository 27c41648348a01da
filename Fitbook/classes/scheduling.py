"""
Class duration calculations

Converts a class's clock times and recurrence rule into the number of
minutes a booking consumes. Everything here is pure and deterministic.
"""
import enum
import math
import re

from core.exceptions import ValidationError

CLOCK_PATTERN = re.compile(r'^([01]?\d|2[0-3]):([0-5]\d)$')
SECONDS_PER_DAY = 24 * 60 * 60


def parse_clock(value):
    """Return minutes since midnight for a 24-hour ``HH:MM`` string."""
    match = CLOCK_PATTERN.match((value or '').strip())
    if not match:
        raise ValidationError(
            f"Invalid time '{value}', expected HH:MM",
            errors={'time': [f"'{value}' is not a valid HH:MM time"]}
        )
    hours, minutes = match.groups()
    return int(hours) * 60 + int(minutes)


def single_class_minutes(start_time, end_time):
    """
    Length of one session in minutes.

    Sessions must end after they start on the same day; overnight or
    zero-length sessions are rejected.
    """
    minutes = parse_clock(end_time) - parse_clock(start_time)
    if minutes <= 0:
        raise ValidationError(
            "End time must be after start time",
            errors={'end_time': ["End time must be after start time"]}
        )
    return minutes


def _elapsed_days(start_date, end_date):
    # Partial days count as a whole day
    return math.ceil((end_date - start_date).total_seconds() / SECONDS_PER_DAY)


def _daily_occurrences(start_date, end_date):
    return _elapsed_days(start_date, end_date) + 1


def _weekly_occurrences(start_date, end_date):
    return math.ceil(_elapsed_days(start_date, end_date) / 7)


def _bi_weekly_occurrences(start_date, end_date):
    return math.ceil(_elapsed_days(start_date, end_date) / 14)


def _monthly_occurrences(start_date, end_date):
    return (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month) + 1


def _single_occurrence(start_date, end_date):
    return 1


class Recurrence(enum.Enum):
    """Closed set of recurrence rules a class can follow"""

    DAILY = 'daily'
    WEEKLY = 'weekly'
    BI_WEEKLY = 'bi-weekly'
    MONTHLY = 'monthly'
    SINGLE = 'single'

    @classmethod
    def from_frequency(cls, frequency):
        """
        Map a stored frequency label ("Daily", "Bi-weekly", ...) to a rule.
        Unknown or empty labels fall back to a single occurrence.
        """
        if not frequency:
            return cls.SINGLE
        try:
            return cls(str(frequency).strip().lower())
        except ValueError:
            return cls.SINGLE

    def occurrences(self, start_date, end_date):
        """Number of sessions between two dates, both inclusive"""
        return _OCCURRENCE_COUNTERS[self](start_date, end_date)


_OCCURRENCE_COUNTERS = {
    Recurrence.DAILY: _daily_occurrences,
    Recurrence.WEEKLY: _weekly_occurrences,
    Recurrence.BI_WEEKLY: _bi_weekly_occurrences,
    Recurrence.MONTHLY: _monthly_occurrences,
    Recurrence.SINGLE: _single_occurrence,
}


def recurring_series_minutes(start_date, end_date, frequency, single_minutes):
    """Total minutes for a recurring series of ``single_minutes`` sessions."""
    if start_date is None or end_date is None:
        raise ValidationError(
            "Recurring classes need a start date and an end date",
            errors={'end_date': ["This field is required for recurring classes"]}
        )
    if end_date < start_date:
        raise ValidationError(
            "End date must not be before the class date",
            errors={'end_date': ["End date must not be before the class date"]}
        )
    return Recurrence.from_frequency(frequency).occurrences(start_date, end_date) * single_minutes


def class_total_minutes(fitness_class):
    """Minutes a booking of ``fitness_class`` consumes from the balance."""
    single = single_class_minutes(fitness_class.start_time, fitness_class.end_time)
    if not fitness_class.is_recurring_class:
        return single
    return recurring_series_minutes(
        fitness_class.date,
        fitness_class.end_date,
        fitness_class.frequency,
        single,
    )


def format_duration(minutes):
    """Human readable duration, e.g. "1 hour 30 minutes"."""
    hours, remainder = divmod(int(minutes), 60)
    if hours == 0:
        return f"{remainder} minutes"
    hour_label = f"{hours} hour{'s' if hours > 1 else ''}"
    if remainder == 0:
        return hour_label
    return f"{hour_label} {remainder} minutes"
