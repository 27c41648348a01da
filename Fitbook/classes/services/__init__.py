"""
Class catalogue services
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import Count
from django.utils import timezone

from classes.event_handlers import CATALOGUE_CACHE_PREFIX
from classes.models import FitnessClass
from core.exceptions import NotFound
from core.services import EventBus, Event, EventTypes

logger = logging.getLogger(__name__)


class ClassService:
    """Service for creating and looking up fitness classes"""

    CACHE_PREFIX = CATALOGUE_CACHE_PREFIX

    @staticmethod
    @transaction.atomic
    def create_class(trainer, **fields):
        """
        Create a class owned by ``trainer``

        Fields are expected to be validated already (see
        FitnessClassCreateSerializer); recurrence fields are dropped
        for one-off classes.
        """
        if not fields.get('is_recurring_class'):
            fields['frequency'] = None
            fields['end_date'] = None

        fitness_class = FitnessClass.objects.create(trainer=trainer, **fields)
        logger.info(f"Trainer {trainer.email} created class {fitness_class.id} ({fitness_class.title})")

        transaction.on_commit(lambda: EventBus.publish(Event(
            event_type=EventTypes.CLASS_CREATED,
            data={
                'class_id': str(fitness_class.id),
                'trainer_id': str(trainer.id),
                'title': fitness_class.title,
                'date': fitness_class.date.isoformat(),
                'timestamp': timezone.now().isoformat()
            },
            source_module='classes'
        )))
        return fitness_class

    @staticmethod
    def get_class(class_id):
        try:
            return FitnessClass.objects.select_related('trainer').get(id=class_id)
        except (FitnessClass.DoesNotExist, DjangoValidationError):
            raise NotFound('Class not found')

    @staticmethod
    def catalogue():
        """All classes with their booked count, soonest first"""
        return (
            FitnessClass.objects
            .select_related('trainer')
            .annotate(booked=Count('attendees', distinct=True))
            .order_by('date', 'start_time')
        )

    @staticmethod
    def classes_for_trainer(trainer):
        """The trainer's classes, upcoming ones first"""
        today = timezone.localdate()
        classes = list(ClassService.catalogue().filter(trainer=trainer))
        upcoming = [c for c in classes if c.status_on(today) == 'upcoming']
        past = sorted(
            (c for c in classes if c.status_on(today) == 'completed'),
            key=lambda c: (c.date, c.start_time),
            reverse=True
        )
        return upcoming + past
