"""
Booking Guard - validates and commits class bookings
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from booking.models import Booking
from classes.models import FitnessClass
from classes.scheduling import class_total_minutes
from core.exceptions import AlreadyBooked, ClassFull, NotFound, PersistenceError
from core.services import EventBus, Event, EventTypes
from ledger.services import CreditLedger

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking classes against the user's minute balance"""

    @staticmethod
    def create_booking(user, class_id):
        """
        Book ``class_id`` for ``user``

        Checks, in order: the class exists, the user has not booked it yet,
        the class has a free seat. The booking row, the attendee entry and
        the ledger debit are committed together or not at all.

        Raises:
            NotFound, AlreadyBooked, ClassFull, InsufficientMinutes,
            PersistenceError
        """
        try:
            with transaction.atomic():
                booking = BookingService._book(user, class_id)
        except IntegrityError:
            # Lost a race against a concurrent booking of the same pair
            raise AlreadyBooked()
        except DatabaseError as e:
            logger.error(f"Booking of class {class_id} by {user.email} failed: {str(e)}")
            raise PersistenceError(f"Could not save booking: {str(e)}")

        return booking

    @staticmethod
    def _book(user, class_id):
        try:
            # Row lock serialises capacity checks for the same class
            fitness_class = FitnessClass.objects.select_for_update().get(id=class_id)
        except (FitnessClass.DoesNotExist, DjangoValidationError):
            raise NotFound('Class not found')

        if Booking.objects.filter(user=user, fitness_class=fitness_class).exists():
            raise AlreadyBooked()

        if fitness_class.attendees.count() >= fitness_class.max_capacity:
            raise ClassFull()

        minutes = class_total_minutes(fitness_class)
        booking = Booking.objects.create(
            user=user,
            fitness_class=fitness_class,
            minutes_spent=minutes,
        )
        fitness_class.attendees.add(user)
        CreditLedger.debit(
            user,
            minutes,
            category='booking',
            description=f"Booked {fitness_class.title} on {fitness_class.date}",
            booking=booking,
        )
        logger.info(f"{user.email} booked class {fitness_class.id} for {minutes} minutes")

        transaction.on_commit(lambda: EventBus.publish(Event(
            event_type=EventTypes.BOOKING_CREATED,
            data={
                'booking_id': str(booking.id),
                'class_id': str(fitness_class.id),
                'class_title': fitness_class.title,
                'trainer_id': str(fitness_class.trainer_id),
                'user_id': str(user.id),
                'user_email': user.email,
                'minutes_spent': minutes,
                'timestamp': timezone.now().isoformat()
            },
            source_module='booking'
        )))
        return booking

    @staticmethod
    def bookings_for_user(user):
        """
        The user's bookings, upcoming ones first (soonest first), then
        completed ones (most recent first)
        """
        bookings = list(
            Booking.objects.filter(user=user)
            .select_related('fitness_class', 'fitness_class__trainer', 'user')
        )
        today = timezone.localdate()

        def class_key(b):
            return (b.fitness_class.date, b.fitness_class.start_time)

        upcoming = sorted((b for b in bookings if b.status_on(today) == 'upcoming'), key=class_key)
        others = sorted((b for b in bookings if b.status_on(today) != 'upcoming'), key=class_key, reverse=True)
        return upcoming + others

    @staticmethod
    def upcoming_bookings(user):
        """
        Upcoming bookings visible to ``user``: admins see all,
        trainers see bookings for the classes they teach, members their own
        """
        today = timezone.localdate()
        queryset = Booking.objects.select_related(
            'fitness_class', 'fitness_class__trainer', 'user'
        )
        if user.role == 'trainer':
            queryset = queryset.filter(fitness_class__trainer=user)
        elif user.role != 'admin':
            queryset = queryset.filter(user=user)

        bookings = [b for b in queryset if b.status_on(today) == 'upcoming']
        return sorted(bookings, key=lambda b: (b.fitness_class.date, b.fitness_class.start_time))
