from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from classes.models import FitnessClass
from user.models import TrainerProfile, User


def auth_headers(user):
    refresh = RefreshToken.for_user(user)
    return {"HTTP_AUTHORIZATION": f"Bearer {str(refresh.access_token)}"}


class ChangePasswordAPITests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.url = reverse('user_v1:change-password')
        self.user = User.objects.create_user(
            email='member@example.com', password='TestPassword123!', full_name='Member'
        )

    def test_change_password(self):
        response = self.client.patch(self.url, {
            'current_password': 'TestPassword123!',
            'new_password': 'N3wer!Passphrase',
            'confirm_password': 'N3wer!Passphrase',
        }, format='json', **auth_headers(self.user))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['user']['email'], 'member@example.com')
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('N3wer!Passphrase'))

    def test_wrong_current_password(self):
        response = self.client.patch(self.url, {
            'current_password': 'not-it',
            'new_password': 'N3wer!Passphrase',
            'confirm_password': 'N3wer!Passphrase',
        }, format='json', **auth_headers(self.user))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('current_password', response.data['errors'])
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('TestPassword123!'))

    def test_new_password_must_differ(self):
        response = self.client.patch(self.url, {
            'current_password': 'TestPassword123!',
            'new_password': 'TestPassword123!',
            'confirm_password': 'TestPassword123!',
        }, format='json', **auth_headers(self.user))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('new_password', response.data['errors'])

    def test_password_change_keeps_balance(self):
        request_user = User.objects.get(pk=self.user.pk)
        User.objects.filter(pk=self.user.pk).update(remaining_minutes=120)

        self.client.force_authenticate(request_user)
        response = self.client.patch(self.url, {
            'current_password': 'TestPassword123!',
            'new_password': 'N3wer!Passphrase',
            'confirm_password': 'N3wer!Passphrase',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.remaining_minutes, 120)

    def test_requires_authentication(self):
        response = self.client.patch(self.url, {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class TrainerProfileAPITests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.me_url = reverse('user_v1:trainer-me')
        self.trainer = User.objects.create_user(
            email='coach@example.com', password='TestPassword123!', full_name='Coach Carter', role='trainer'
        )
        self.member = User.objects.create_user(
            email='member@example.com', password='TestPassword123!', full_name='Member'
        )

    def test_registering_as_trainer_creates_profile(self):
        response = self.client.post(reverse('user_v1:register'), {
            'email': 'new.coach@example.com',
            'full_name': 'New Coach',
            'password': 'Str0ngPass!word',
            'confirm_password': 'Str0ngPass!word',
            'role': 'trainer',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(TrainerProfile.objects.filter(user__email='new.coach@example.com').exists())

    def test_get_own_profile(self):
        response = self.client.get(self.me_url, **auth_headers(self.trainer))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['trainer']['full_name'], 'Coach Carter')
        self.assertEqual(response.data['trainer']['specialties'], [])

    def test_update_profile(self):
        User.objects.filter(pk=self.trainer.pk).update(remaining_minutes=45)

        response = self.client.patch(self.me_url, {
            'full_name': 'Coach C.',
            'bio': 'Ten years of strength coaching',
            'specialties': ['HIIT', 'Strength'],
            'availability': 'Weekday mornings',
        }, format='json', **auth_headers(self.trainer))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        trainer = response.data['trainer']
        self.assertEqual(trainer['full_name'], 'Coach C.')
        self.assertEqual(trainer['specialties'], ['HIIT', 'Strength'])
        self.assertEqual(trainer['availability'], 'Weekday mornings')

        self.trainer.refresh_from_db()
        self.assertEqual(self.trainer.remaining_minutes, 45)

    def test_invalid_specialties_rejected(self):
        response = self.client.patch(self.me_url, {'specialties': 'HIIT'}, format='json', **auth_headers(self.trainer))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('specialties', response.data['errors'])

    def test_member_has_no_trainer_profile(self):
        response = self.client.get(self.me_url, **auth_headers(self.member))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_trainer_list_reports_class_counts(self):
        TrainerProfile.objects.create(user=self.trainer, specialties=['Yoga'])
        FitnessClass.objects.create(
            trainer=self.trainer, title="Yoga", date=timezone.localdate() + timedelta(days=1), class_type="YOGA",
            start_time="10:00", end_time="11:00", location="Studio B", max_capacity=5, description="Flow",
        )
        User.objects.create_user(
            email='second@example.com', password='TestPassword123!', full_name='Another Coach', role='trainer'
        )

        response = self.client.get(reverse('user_v1:trainer-list'), **auth_headers(self.member))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 2)
        entries = {t['email']: t for t in response.data['trainers']}
        self.assertEqual(entries['coach@example.com']['classes'], 1)
        self.assertEqual(entries['coach@example.com']['specialties'], ['Yoga'])
        self.assertEqual(entries['second@example.com']['classes'], 0)
        self.assertEqual(entries['second@example.com']['specialties'], [])
        self.assertTrue(entries['second@example.com']['active'])
