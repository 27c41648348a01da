"""
Credit Ledger - the only code path that changes User.remaining_minutes
"""
import logging
import uuid

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from core.exceptions import InsufficientMinutes, NotFound, ValidationError
from core.services import EventBus, Event, EventTypes
from ledger.models import MinuteTransaction
from user.models import User

logger = logging.getLogger(__name__)


def _reference():
    return f"MIN-{uuid.uuid4().hex[:12].upper()}"


class CreditLedger:
    """Service for crediting and debiting remaining class minutes"""

    @staticmethod
    def _validate_minutes(minutes):
        if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes <= 0:
            raise ValidationError(
                "Minutes must be a positive whole number",
                errors={'minutes': [f"Invalid amount: {minutes!r}"]}
            )

    @staticmethod
    def _lock_user(user):
        try:
            return User.objects.select_for_update().get(pk=user.pk)
        except User.DoesNotExist:
            raise NotFound('User not found')

    @staticmethod
    def _apply(user, minutes, transaction_type, category, description, booking=None, package=None, reference=None):
        locked = CreditLedger._lock_user(user)
        balance_before = locked.remaining_minutes

        if transaction_type == 'debit':
            balance_after = balance_before - minutes
            allow_negative = getattr(settings, 'FITBOOK_ALLOW_NEGATIVE_BALANCE', False)
            if balance_after < 0 and not allow_negative:
                raise InsufficientMinutes(
                    f"This class needs {minutes} minutes but only {balance_before} remain",
                    errors={'remaining_minutes': balance_before, 'required_minutes': minutes}
                )
        else:
            balance_after = balance_before + minutes

        locked.remaining_minutes = balance_after
        locked.save(update_fields=['remaining_minutes'])
        # Keep the caller's instance in step with the stored balance
        user.remaining_minutes = balance_after

        entry = MinuteTransaction.objects.create(
            reference=reference or _reference(),
            user=locked,
            transaction_type=transaction_type,
            category=category,
            minutes=minutes,
            balance_before=balance_before,
            balance_after=balance_after,
            booking=booking,
            package=package,
            description=description,
        )
        logger.info(
            f"Ledger {transaction_type} {entry.reference}: {minutes} min for {locked.email} "
            f"({balance_before} -> {balance_after})"
        )

        event_type = EventTypes.MINUTES_CREDITED if transaction_type == 'credit' else EventTypes.MINUTES_DEBITED
        transaction.on_commit(lambda: EventBus.publish(Event(
            event_type=event_type,
            data={
                'transaction_id': str(entry.id),
                'reference': entry.reference,
                'user_id': str(locked.id),
                'user_email': locked.email,
                'minutes': minutes,
                'balance': balance_after,
                'category': category,
                'timestamp': timezone.now().isoformat()
            },
            source_module='ledger'
        )))

        return entry

    @staticmethod
    @transaction.atomic
    def debit(user, minutes, category='booking', description='', **kwargs):
        """
        Take ``minutes`` from the user's balance

        Raises InsufficientMinutes when the balance would drop below zero,
        unless FITBOOK_ALLOW_NEGATIVE_BALANCE is enabled.
        """
        CreditLedger._validate_minutes(minutes)
        return CreditLedger._apply(user, minutes, 'debit', category, description, **kwargs)

    @staticmethod
    @transaction.atomic
    def credit(user, minutes, category='package_purchase', description='', **kwargs):
        """Add ``minutes`` to the user's balance"""
        CreditLedger._validate_minutes(minutes)
        return CreditLedger._apply(user, minutes, 'credit', category, description, **kwargs)

    @staticmethod
    def history(user):
        return MinuteTransaction.objects.filter(user=user).select_related('booking', 'package')
