"""
Payment Webhook Handlers V1 - Stripe
"""
import logging

from payment.gateways import StripeGateway
from payment.models import Package
from payment.services import PaymentService

logger = logging.getLogger(__name__)


class StripeWebhookHandler:
    """Handle Stripe payment intent webhooks V1"""

    def __init__(self, gateway=None):
        self.gateway = gateway or StripeGateway()

    def verify_signature(self, request_body, signature_header):
        return self.gateway.verify_signature(request_body, signature_header)

    @staticmethod
    def _intent(payload):
        data = payload.get('data') or {}
        intent = data.get('object') if isinstance(data, dict) else None
        return intent if isinstance(intent, dict) else {}

    def _package_for(self, payload):
        intent_id = self._intent(payload).get('id')
        if not intent_id or not isinstance(intent_id, str):
            return None, 'No payment intent in payload'
        package = Package.objects.select_related('user').filter(stripe_payment_intent_id=intent_id).first()
        if package is None:
            logger.warning(f"Package for payment intent {intent_id} not found")
            return None, 'Package not found'
        return package, None

    def handle_payment_succeeded(self, payload):
        package, error = self._package_for(payload)
        if package is None:
            return {'success': False, 'error': error}

        credited = PaymentService.mark_paid(package)
        if credited:
            return {'success': True, 'message': f"Package {package.id} paid"}
        return {'success': True, 'message': f"Package {package.id} already {package.status}"}

    def handle_payment_failed(self, payload):
        package, error = self._package_for(payload)
        if package is None:
            return {'success': False, 'error': error}

        last_error = self._intent(payload).get('last_payment_error')
        reason = last_error.get('message') if isinstance(last_error, dict) else None
        if PaymentService.mark_failed(package, reason=reason):
            return {'success': True, 'message': f"Package {package.id} failed"}
        return {'success': True, 'message': f"Package {package.id} already {package.status}"}

    def process_webhook(self, event_type, payload):
        """
        Dispatch a verified event

        Returns:
            dict: success flag, plus 'ignored' for event types we do not handle
        """
        handlers = {
            'payment_intent.succeeded': self.handle_payment_succeeded,
            'payment_intent.payment_failed': self.handle_payment_failed,
        }
        handler = handlers.get(event_type)
        if handler is None:
            logger.info(f"Ignoring Stripe event {event_type}")
            return {'success': True, 'ignored': True, 'message': f"Unhandled event type {event_type}"}
        return handler(payload)
