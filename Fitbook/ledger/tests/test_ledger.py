from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from core.exceptions import InsufficientMinutes, ValidationError
from ledger.models import MinuteTransaction
from ledger.services import CreditLedger
from user.models import User


class TestCreditLedger(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(
            email="ledger@example.com", password="TestPass123!", full_name="Lee Ledger", remaining_minutes=100
        )

    def test_credit_adds_minutes_and_records_entry(self):
        entry = CreditLedger.credit(self.user, 600, description="Standard package")

        self.assertEqual(self.user.remaining_minutes, 700)
        self.user.refresh_from_db()
        self.assertEqual(self.user.remaining_minutes, 700)
        self.assertEqual(entry.transaction_type, 'credit')
        self.assertEqual(entry.category, 'package_purchase')
        self.assertEqual((entry.balance_before, entry.balance_after), (100, 700))
        self.assertTrue(entry.reference.startswith('MIN-'))

    def test_debit_takes_minutes(self):
        entry = CreditLedger.debit(self.user, 60)
        self.user.refresh_from_db()
        self.assertEqual(self.user.remaining_minutes, 40)
        self.assertEqual(entry.transaction_type, 'debit')
        self.assertEqual(entry.category, 'booking')

    def test_debit_to_exactly_zero_is_allowed(self):
        CreditLedger.debit(self.user, 100)
        self.user.refresh_from_db()
        self.assertEqual(self.user.remaining_minutes, 0)

    def test_debit_below_zero_is_refused(self):
        with self.assertRaises(InsufficientMinutes) as ctx:
            CreditLedger.debit(self.user, 101)
        self.assertEqual(ctx.exception.errors, {'remaining_minutes': 100, 'required_minutes': 101})
        self.user.refresh_from_db()
        self.assertEqual(self.user.remaining_minutes, 100)
        self.assertFalse(MinuteTransaction.objects.exists())

    @override_settings(FITBOOK_ALLOW_NEGATIVE_BALANCE=True)
    def test_negative_balance_when_enabled(self):
        entry = CreditLedger.debit(self.user, 160)
        self.assertEqual(entry.balance_after, -60)
        self.user.refresh_from_db()
        self.assertEqual(self.user.remaining_minutes, -60)

    def test_amount_must_be_positive_integer(self):
        for amount in (0, -5, 1.5, '60', True):
            with self.assertRaises(ValidationError):
                CreditLedger.credit(self.user, amount)
        self.user.refresh_from_db()
        self.assertEqual(self.user.remaining_minutes, 100)

    def test_stale_instance_does_not_overwrite_balance(self):
        stale = User.objects.get(pk=self.user.pk)
        CreditLedger.credit(self.user, 50)
        CreditLedger.debit(stale, 30)
        self.user.refresh_from_db()
        self.assertEqual(self.user.remaining_minutes, 120)


class TestLedgerAPI(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="ledger@example.com", password="TestPass123!", full_name="Lee Ledger", remaining_minutes=0
        )
        refresh = RefreshToken.for_user(self.user)
        self.auth_headers = {"HTTP_AUTHORIZATION": f"Bearer {str(refresh.access_token)}"}

    def test_balance(self):
        CreditLedger.credit(self.user, 90)
        resp = self.client.get(reverse('ledger_v1:balance'), **self.auth_headers)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['balance'], {
            'remaining_minutes': 90,
            'remaining_hours': 1.5,
            'formatted': '1 hour 30 minutes',
        })

    def test_transactions_scoped_to_user(self):
        CreditLedger.credit(self.user, 600)
        CreditLedger.debit(self.user, 45)
        other = User.objects.create_user(email="other@example.com", password="TestPass123!", full_name="O")
        CreditLedger.credit(other, 60)

        resp = self.client.get(reverse('ledger_v1:transactions'), **self.auth_headers)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['count'], 2)
        self.assertEqual(
            sorted((t['transaction_type'], t['minutes']) for t in resp.data['results']),
            [('credit', 600), ('debit', 45)]
        )

    def test_requires_authentication(self):
        resp = self.client.get(reverse('ledger_v1:balance'))
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)
