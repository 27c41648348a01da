import hashlib
import hmac
import time
from decimal import Decimal
from unittest.mock import MagicMock, patch

import requests
from django.test import SimpleTestCase, override_settings

from core.exceptions import ExternalServiceError
from payment.gateways import StripeGateway

WEBHOOK_SECRET = 'whsec_test_secret'


def sign(body, secret=WEBHOOK_SECRET, timestamp=None):
    timestamp = str(timestamp if timestamp is not None else int(time.time()))
    digest = hmac.new(secret.encode(), f"{timestamp}.{body}".encode(), hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={digest}"


@override_settings(STRIPE_SECRET_KEY='sk_test_123', STRIPE_WEBHOOK_SECRET=WEBHOOK_SECRET)
class TestStripeSignature(SimpleTestCase):

    body = '{"id": "evt_1", "type": "payment_intent.succeeded"}'

    def test_valid_signature(self):
        self.assertTrue(StripeGateway().verify_signature(self.body.encode(), sign(self.body)))

    def test_any_v1_signature_may_match(self):
        header = sign(self.body) + ",v1=deadbeef"
        self.assertTrue(StripeGateway().verify_signature(self.body, header))

    def test_wrong_secret(self):
        self.assertFalse(StripeGateway().verify_signature(self.body, sign(self.body, secret='whsec_other')))

    def test_tampered_body(self):
        self.assertFalse(StripeGateway().verify_signature(self.body.replace('evt_1', 'evt_2'), sign(self.body)))

    def test_stale_timestamp(self):
        header = sign(self.body, timestamp=int(time.time()) - 3600)
        self.assertFalse(StripeGateway().verify_signature(self.body, header))

    def test_missing_or_malformed_header(self):
        gateway = StripeGateway()
        self.assertFalse(gateway.verify_signature(self.body, None))
        self.assertFalse(gateway.verify_signature(self.body, 'garbage'))
        self.assertFalse(gateway.verify_signature(self.body, 't=abc,v1=123'))


@override_settings(STRIPE_SECRET_KEY='sk_test_123', STRIPE_WEBHOOK_SECRET=WEBHOOK_SECRET)
class TestStripeRequests(SimpleTestCase):

    def _response(self, status_code, body):
        response = MagicMock(status_code=status_code)
        response.json.return_value = body
        return response

    @patch('payment.gateways.requests.request')
    def test_create_payment_intent_sends_cents(self, mock_request):
        mock_request.return_value = self._response(200, {
            'id': 'pi_123', 'client_secret': 'pi_123_secret', 'status': 'requires_payment_method'
        })

        intent = StripeGateway().create_payment_intent(Decimal('350.00'), 'USD', metadata={'package_type': 'standard'})

        self.assertEqual(intent, {'id': 'pi_123', 'client_secret': 'pi_123_secret', 'status': 'requires_payment_method'})
        method, url = mock_request.call_args[0]
        self.assertEqual((method, url), ('POST', 'https://api.stripe.com/v1/payment_intents'))
        data = mock_request.call_args[1]['data']
        self.assertEqual(data['amount'], 35000)
        self.assertEqual(data['currency'], 'usd')
        self.assertEqual(data['metadata[package_type]'], 'standard')
        self.assertEqual(mock_request.call_args[1]['headers']['Authorization'], 'Bearer sk_test_123')

    @patch('payment.gateways.requests.request')
    def test_retrieve_payment_intent(self, mock_request):
        mock_request.return_value = self._response(200, {
            'id': 'pi_123', 'status': 'succeeded', 'amount': 60000, 'currency': 'usd', 'metadata': {}
        })
        intent = StripeGateway().retrieve_payment_intent('pi_123')
        self.assertEqual(intent['status'], 'succeeded')
        self.assertEqual(intent['amount'], Decimal('600'))
        self.assertEqual(intent['currency'], 'USD')

    @patch('payment.gateways.requests.request')
    def test_provider_error_raises(self, mock_request):
        mock_request.return_value = self._response(404, {'error': {'message': 'No such payment_intent'}})
        with self.assertRaises(ExternalServiceError) as ctx:
            StripeGateway().retrieve_payment_intent('pi_missing')
        self.assertEqual(ctx.exception.message, 'No such payment_intent')

    @patch('payment.gateways.requests.request', side_effect=requests.exceptions.ConnectionError("down"))
    def test_network_error_raises(self, mock_request):
        with self.assertRaises(ExternalServiceError):
            StripeGateway().retrieve_payment_intent('pi_123')
