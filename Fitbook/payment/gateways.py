"""
Payment Gateway Integration Module
"""
import hashlib
import hmac
import logging
import time
from decimal import Decimal

import requests
from django.conf import settings

from core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class StripeGateway:
    """Stripe payment intents over the REST API"""

    base_url = "https://api.stripe.com/v1"

    def __init__(self):
        self.secret_key = settings.STRIPE_SECRET_KEY
        self.webhook_secret = settings.STRIPE_WEBHOOK_SECRET
        self.signature_tolerance = getattr(settings, 'STRIPE_WEBHOOK_TOLERANCE', 300)
        self.headers = {
            "Authorization": f"Bearer {self.secret_key}",
        }

    def _request(self, method, path, data=None):
        try:
            response = requests.request(
                method,
                f"{self.base_url}{path}",
                data=data,
                headers=self.headers,
                timeout=30
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Stripe API error: {str(e)}")
            raise ExternalServiceError(f"Network error: {str(e)}")

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code != 200:
            error = body.get('error', {}).get('message', 'Stripe request failed')
            logger.error(f"Stripe {method} {path} returned {response.status_code}: {error}")
            raise ExternalServiceError(error)
        return body

    def create_payment_intent(self, amount, currency, metadata=None):
        """
        Create a payment intent

        Args:
            amount (Decimal): Amount in major units (e.g. dollars)
            currency (str): ISO currency code
            metadata (dict): Values echoed back on the intent

        Returns:
            dict: id, client_secret and status of the intent
        """
        data = {
            "amount": int(Decimal(str(amount)) * 100),  # Convert to cents
            "currency": currency.lower(),
            "automatic_payment_methods[enabled]": "true",
        }
        for key, value in (metadata or {}).items():
            data[f"metadata[{key}]"] = str(value)

        intent = self._request("POST", "/payment_intents", data=data)
        return {
            'id': intent['id'],
            'client_secret': intent.get('client_secret'),
            'status': intent.get('status'),
        }

    def retrieve_payment_intent(self, intent_id):
        """Current state of an intent as Stripe sees it"""
        intent = self._request("GET", f"/payment_intents/{intent_id}")
        return {
            'id': intent['id'],
            'status': intent.get('status'),
            'amount': Decimal(str(intent.get('amount', 0))) / 100,  # Convert from cents
            'currency': (intent.get('currency') or '').upper(),
            'metadata': intent.get('metadata', {}),
        }

    def verify_signature(self, request_body, signature_header):
        """
        Verify a Stripe-Signature header (``t=<ts>,v1=<hex>[,v1=...]``)

        The signed payload is ``"<ts>.<raw body>"`` under HMAC-SHA256 with the
        webhook secret; timestamps outside the tolerance are rejected.

        Returns:
            bool: True if signature is valid
        """
        if not signature_header:
            logger.warning("No signature header provided")
            return False
        if not self.webhook_secret:
            logger.error("STRIPE_WEBHOOK_SECRET is not configured")
            return False

        if isinstance(request_body, str):
            request_body = request_body.encode('utf-8')

        timestamp = None
        signatures = []
        for item in signature_header.split(','):
            key, _, value = item.strip().partition('=')
            if key == 't':
                timestamp = value
            elif key == 'v1':
                signatures.append(value)

        if not timestamp or not timestamp.isdigit() or not signatures:
            logger.warning("Malformed Stripe-Signature header")
            return False

        if abs(time.time() - int(timestamp)) > self.signature_tolerance:
            logger.warning(f"Stripe webhook timestamp {timestamp} outside tolerance")
            return False

        signed_payload = timestamp.encode('utf-8') + b'.' + request_body
        expected = hmac.new(
            self.webhook_secret.encode('utf-8'),
            signed_payload,
            hashlib.sha256
        ).hexdigest()

        # Timing-safe comparison
        is_valid = any(hmac.compare_digest(expected, candidate) for candidate in signatures)
        if not is_valid:
            logger.warning("Stripe signature mismatch")
        return is_valid
