from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from classes.models import FitnessClass
from user.models import User


def auth_headers(user):
    refresh = RefreshToken.for_user(user)
    return {"HTTP_AUTHORIZATION": f"Bearer {str(refresh.access_token)}"}


class TestFitnessClassAPI(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.trainer = User.objects.create_user(
            email="coach@example.com", password="TestPass123!", full_name="Coach Carter", role="trainer"
        )
        self.member = User.objects.create_user(
            email="member@example.com", password="TestPass123!", full_name="Member One"
        )
        self.today = timezone.localdate()
        self.payload = {
            "title": "Morning HIIT",
            "date": (self.today + timedelta(days=2)).isoformat(),
            "class_type": "HIIT",
            "start_time": "07:00",
            "end_time": "07:45",
            "location": "Studio A",
            "max_capacity": 12,
            "description": "High intensity intervals",
        }

    def test_trainer_creates_class(self):
        resp = self.client.post(reverse('classes_v1:class-list'), self.payload, format='json', **auth_headers(self.trainer))
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertTrue(resp.data['success'])
        self.assertEqual(resp.data['class']['total_minutes'], 45)
        self.assertEqual(resp.data['class']['duration'], '45 minutes')
        self.assertEqual(FitnessClass.objects.get().trainer, self.trainer)

    def test_member_cannot_create_class(self):
        resp = self.client.post(reverse('classes_v1:class-list'), self.payload, format='json', **auth_headers(self.member))
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(FitnessClass.objects.exists())

    def test_end_before_start_rejected(self):
        self.payload["end_time"] = "06:30"
        resp = self.client.post(reverse('classes_v1:class-list'), self.payload, format='json', **auth_headers(self.trainer))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('end_time', resp.data['errors'])

    def test_recurring_class_requires_frequency_and_end_date(self):
        self.payload["is_recurring_class"] = True
        resp = self.client.post(reverse('classes_v1:class-list'), self.payload, format='json', **auth_headers(self.trainer))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('frequency', resp.data['errors'])
        self.assertIn('end_date', resp.data['errors'])

    def test_unknown_frequency_rejected(self):
        self.payload.update({
            "is_recurring_class": True,
            "frequency": "Yearly",
            "end_date": (self.today + timedelta(days=60)).isoformat(),
        })
        resp = self.client.post(reverse('classes_v1:class-list'), self.payload, format='json', **auth_headers(self.trainer))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('frequency', resp.data['errors'])

    def test_weekly_series_without_sessions_rejected(self):
        self.payload.update({
            "is_recurring_class": True,
            "frequency": "Weekly",
            "end_date": self.payload["date"],
        })
        resp = self.client.post(reverse('classes_v1:class-list'), self.payload, format='json', **auth_headers(self.trainer))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('end_date', resp.data['errors'])

    def test_recurring_class_total_minutes(self):
        start = self.today + timedelta(days=1)
        self.payload.update({
            "date": start.isoformat(),
            "is_recurring_class": True,
            "frequency": "Weekly",
            "end_date": (start + timedelta(days=14)).isoformat(),
        })
        resp = self.client.post(reverse('classes_v1:class-list'), self.payload, format='json', **auth_headers(self.trainer))
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data['class']['total_minutes'], 90)
        self.assertEqual(resp.data['class']['duration'], '1 hour 30 minutes')

    def test_list_is_public_and_reports_booking_figures(self):
        fitness_class = FitnessClass.objects.create(
            trainer=self.trainer, title="Yoga", date=self.today - timedelta(days=1), class_type="YOGA",
            start_time="10:00", end_time="11:00", location="Studio B", max_capacity=5, description="Flow",
        )
        fitness_class.attendees.add(self.member)

        resp = self.client.get(reverse('classes_v1:class-list'))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        entry = resp.data['results'][0]
        self.assertEqual(entry['type'], 'yoga')
        self.assertEqual(entry['capacity'], 5)
        self.assertEqual(entry['booked'], 1)
        self.assertEqual(entry['trainer'], 'Coach Carter')
        self.assertEqual(entry['status'], 'completed')

    def test_detail_and_missing_class(self):
        fitness_class = FitnessClass.objects.create(
            trainer=self.trainer, title="Spin", date=self.today, class_type="Cycling",
            start_time="17:00", end_time="18:30", location="Bike room", max_capacity=20, description="Ride",
        )
        resp = self.client.get(reverse('classes_v1:class-detail', args=[fitness_class.id]))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['class']['duration'], '1 hour 30 minutes')
        self.assertEqual(resp.data['class']['status'], 'upcoming')

        resp = self.client.get(reverse('classes_v1:class-detail', args=['00000000-0000-0000-0000-000000000000']))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data['message'], 'Class not found')

    def test_mine_lists_upcoming_first(self):
        past = FitnessClass.objects.create(
            trainer=self.trainer, title="Past", date=self.today - timedelta(days=3), class_type="Pilates",
            start_time="09:00", end_time="10:00", location="Studio C", max_capacity=8, description="Core",
        )
        upcoming = FitnessClass.objects.create(
            trainer=self.trainer, title="Upcoming", date=self.today + timedelta(days=3), class_type="Pilates",
            start_time="09:00", end_time="10:00", location="Studio C", max_capacity=8, description="Core",
        )
        resp = self.client.get(reverse('classes_v1:class-mine'), **auth_headers(self.trainer))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual([c['id'] for c in resp.data['classes']], [str(upcoming.id), str(past.id)])
