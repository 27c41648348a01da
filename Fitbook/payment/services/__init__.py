"""
Payment Service Layer - package checkout and reconciliation
"""
import logging
from decimal import Decimal

from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone

from core.exceptions import NotFound, PaymentNotSucceeded, PersistenceError, ValidationError
from core.services import EventBus, Event, EventTypes
from ledger.services import CreditLedger
from payment.gateways import StripeGateway
from payment.models import Package

logger = logging.getLogger(__name__)


class PaymentService:
    """Service for selling hour packages and settling their payments"""

    @staticmethod
    def catalogue():
        """Configured packages keyed by package type"""
        return {
            package_type: {
                'package_type': package_type,
                'name': entry.get('name', package_type.title()),
                'amount': Decimal(str(entry['amount'])),
                'currency': entry.get('currency', 'USD'),
                'hours': int(entry['hours']),
            }
            for package_type, entry in settings.FITBOOK_PACKAGES.items()
        }

    @staticmethod
    def create_payment_intent(user, package_type, gateway=None):
        """
        Start checkout for a package

        Returns:
            tuple: (pending Package, client secret for the frontend)
        """
        offer = PaymentService.catalogue().get(package_type)
        if offer is None:
            raise ValidationError(
                "Invalid package type",
                errors={'package_type': [f"'{package_type}' is not an available package"]}
            )

        gateway = gateway or StripeGateway()
        intent = gateway.create_payment_intent(
            offer['amount'],
            offer['currency'],
            metadata={
                'user_id': str(user.id),
                'package_type': package_type,
                'hours': offer['hours'],
            }
        )

        try:
            package = Package.objects.create(
                user=user,
                package_type=package_type,
                amount=offer['amount'],
                currency=offer['currency'],
                hours=offer['hours'],
                status='pending',
                stripe_payment_intent_id=intent['id'],
            )
        except DatabaseError as e:
            logger.error(f"Could not store package for intent {intent['id']} ({user.email}): {str(e)}")
            raise PersistenceError(f"Could not save package: {str(e)}")
        logger.info(f"Created pending {package_type} package {package.id} for {user.email} ({intent['id']})")

        EventBus.publish(Event(
            event_type=EventTypes.PACKAGE_CREATED,
            data={
                'package_id': str(package.id),
                'user_id': str(user.id),
                'package_type': package_type,
                'amount': str(package.amount),
                'hours': package.hours,
                'payment_intent_id': intent['id'],
                'timestamp': timezone.now().isoformat()
            },
            source_module='payment'
        ))
        return package, intent['client_secret']

    @staticmethod
    def get_package_by_intent(intent_id, user=None):
        queryset = Package.objects.select_related('user')
        if user is not None:
            queryset = queryset.filter(user=user)
        try:
            return queryset.get(stripe_payment_intent_id=intent_id)
        except Package.DoesNotExist:
            raise NotFound('Package not found')

    @staticmethod
    def mark_paid(package):
        """
        Move a package from pending to paid and credit its minutes

        The status change is a conditional update, so however many times the
        webhook and the client confirmation fire, only one caller wins and
        the ledger is credited once.

        Returns:
            bool: True if this call issued the credit

        Raises:
            PersistenceError: the transition or the credit could not be stored
        """
        try:
            with transaction.atomic():
                return PaymentService._settle_paid(package)
        except DatabaseError as e:
            logger.error(f"Settling package {package.pk} failed: {str(e)}")
            raise PersistenceError(f"Could not settle package: {str(e)}")

    @staticmethod
    def _settle_paid(package):
        now = timezone.now()
        updated = Package.objects.filter(pk=package.pk, status='pending').update(
            status='paid', paid_at=now, updated_at=now
        )
        package.refresh_from_db()

        if not updated:
            logger.info(f"Package {package.id} is already {package.status}, no credit issued")
            return False

        CreditLedger.credit(
            package.user,
            package.minutes,
            category='package_purchase',
            description=f"{package.get_package_type_display()} package ({package.hours} hours)",
            package=package,
        )

        transaction.on_commit(lambda: EventBus.publish(Event(
            event_type=EventTypes.PAYMENT_COMPLETED,
            data={
                'package_id': str(package.id),
                'user_id': str(package.user_id),
                'user_email': package.user.email,
                'minutes': package.minutes,
                'amount': str(package.amount),
                'payment_intent_id': package.stripe_payment_intent_id,
                'timestamp': now.isoformat()
            },
            source_module='payment'
        )))
        logger.info(f"Package {package.id} paid, credited {package.minutes} minutes to {package.user.email}")
        return True

    @staticmethod
    def mark_failed(package, reason=None):
        """Move a package from pending to failed; paid packages stay paid"""
        try:
            with transaction.atomic():
                return PaymentService._settle_failed(package, reason)
        except DatabaseError as e:
            logger.error(f"Failing package {package.pk} failed: {str(e)}")
            raise PersistenceError(f"Could not update package: {str(e)}")

    @staticmethod
    def _settle_failed(package, reason):
        now = timezone.now()
        updated = Package.objects.filter(pk=package.pk, status='pending').update(
            status='failed', failed_at=now, updated_at=now
        )
        package.refresh_from_db()

        if not updated:
            logger.info(f"Package {package.id} is already {package.status}, not marking failed")
            return False

        transaction.on_commit(lambda: EventBus.publish(Event(
            event_type=EventTypes.PAYMENT_FAILED,
            data={
                'package_id': str(package.id),
                'user_id': str(package.user_id),
                'payment_intent_id': package.stripe_payment_intent_id,
                'reason': reason,
                'timestamp': now.isoformat()
            },
            source_module='payment'
        )))
        logger.info(f"Package {package.id} marked failed: {reason or 'no reason given'}")
        return True

    @staticmethod
    def confirm_payment(user, intent_id, gateway=None):
        """
        Client-side confirmation: re-check the intent with Stripe and, if it
        succeeded, settle the package the same way the webhook does

        Returns:
            tuple: (Package, whether this call issued the credit)
        """
        package = PaymentService.get_package_by_intent(intent_id, user=user)

        gateway = gateway or StripeGateway()
        intent = gateway.retrieve_payment_intent(intent_id)
        if intent['status'] != 'succeeded':
            raise PaymentNotSucceeded('Payment not succeeded')

        credited = PaymentService.mark_paid(package)
        if package.status != 'paid':
            raise PaymentNotSucceeded(f"Package is {package.status} and can no longer be paid")
        return package, credited

    @staticmethod
    def history(user):
        return Package.objects.filter(user=user)
