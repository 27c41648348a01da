import uuid
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from payment.models import Package
from user.models import User


def auth_headers(user):
    refresh = RefreshToken.for_user(user)
    return {"HTTP_AUTHORIZATION": f"Bearer {str(refresh.access_token)}"}


class MemberAdminAPITests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.list_url = reverse('user_v1:member-list')
        self.admin = User.objects.create_user(
            email='admin@example.com', password='TestPassword123!', full_name='Ada Admin', role='admin'
        )
        self.alice = User.objects.create_user(
            email='alice@example.com', password='TestPassword123!', full_name='Alice', remaining_minutes=90
        )
        self.bob = User.objects.create_user(
            email='bob@example.com', password='TestPassword123!', full_name='Bob', remaining_minutes=600
        )
        User.objects.create_user(
            email='coach@example.com', password='TestPassword123!', full_name='Coach', role='trainer'
        )
        for index, package_status in enumerate(['paid', 'paid', 'failed']):
            Package.objects.create(
                user=self.bob, package_type='standard', amount=Decimal('350.00'), currency='USD',
                hours=10, status=package_status, stripe_payment_intent_id=f'pi_bob_{index}',
            )

    def block_url(self, user_id):
        return reverse('user_v1:member-block', kwargs={'user_id': user_id})

    def test_lists_members_only(self):
        response = self.client.get(self.list_url, **auth_headers(self.admin))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        emails = [m['email'] for m in response.data['results']]
        self.assertEqual(emails, ['alice@example.com', 'bob@example.com'])

        bob = response.data['results'][1]
        self.assertEqual(bob['total_packages'], 2)
        self.assertEqual(bob['remaining_hours'], 10.0)
        self.assertFalse(bob['blocked'])

    def test_search_and_sort(self):
        response = self.client.get(self.list_url, {'search': 'ALI'}, **auth_headers(self.admin))
        self.assertEqual([m['email'] for m in response.data['results']], ['alice@example.com'])

        response = self.client.get(self.list_url, {'sort': 'minutes', 'order': 'desc'}, **auth_headers(self.admin))
        self.assertEqual([m['email'] for m in response.data['results']], ['bob@example.com', 'alice@example.com'])

    def test_members_cannot_list(self):
        response = self.client.get(self.list_url, **auth_headers(self.alice))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_block_and_unblock(self):
        response = self.client.patch(self.block_url(self.alice.id), {'blocked': True}, format='json', **auth_headers(self.admin))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['user']['blocked'])
        self.alice.refresh_from_db()
        self.assertFalse(self.alice.is_active)
        self.assertEqual(self.alice.remaining_minutes, 90)

        login = self.client.post(reverse('user_v1:login'), {
            'email': 'alice@example.com', 'password': 'TestPassword123!'
        }, format='json')
        self.assertEqual(login.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.patch(self.block_url(self.alice.id), {'blocked': False}, format='json', **auth_headers(self.admin))
        self.assertFalse(response.data['user']['blocked'])
        self.alice.refresh_from_db()
        self.assertTrue(self.alice.is_active)

    def test_blocked_user_token_is_rejected(self):
        headers = auth_headers(self.alice)
        self.client.patch(self.block_url(self.alice.id), {'blocked': True}, format='json', **auth_headers(self.admin))

        response = self.client.get(reverse('user_v1:profile'), **headers)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_block_unknown_user(self):
        response = self.client.patch(self.block_url(uuid.uuid4()), {'blocked': True}, format='json', **auth_headers(self.admin))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'User not found')

    def test_admin_cannot_block_self(self):
        response = self.client.patch(self.block_url(self.admin.id), {'blocked': True}, format='json', **auth_headers(self.admin))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.admin.refresh_from_db()
        self.assertTrue(self.admin.is_active)

    def test_blocked_flag_is_required(self):
        response = self.client.patch(self.block_url(self.alice.id), {}, format='json', **auth_headers(self.admin))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('blocked', response.data['errors'])
