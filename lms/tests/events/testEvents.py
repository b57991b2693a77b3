from datetime import datetime

from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from lms.access.roles import Role
from lms.events.models import Event
from lms.tests.helpers import authenticate, create_user

EVENTS_URL = "/api/lms/events/"


def at(year, month, day, hour=10):
    return timezone.make_aware(datetime(year, month, day, hour))


class EventViewTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.tutor = create_user("tutor", Role.TUTOR)
        cls.student = create_user("student", Role.STUDENT)
        Event.objects.create(title="Frontend Basics", starts_at=at(2025, 4, 15), event_type="lecture")
        Event.objects.create(title="React Fundamentals", starts_at=at(2025, 4, 18), event_type="assignment")
        Event.objects.create(title="TypeScript Workshop", starts_at=at(2025, 4, 18, 16), event_type="workshop")

    def setUp(self):
        self.client = authenticate(APIClient(), self.student)

    def test_all_events(self):
        body = self.client.get(EVENTS_URL).json()
        self.assertEqual([e["title"] for e in body], ["Frontend Basics", "React Fundamentals", "TypeScript Workshop"])

    def test_events_on_date(self):
        body = self.client.get(EVENTS_URL, {"date": "2025-04-18"}).json()
        self.assertEqual([e["event_type"] for e in body], ["assignment", "workshop"])
        self.assertEqual(self.client.get(EVENTS_URL, {"date": "2025-04-16"}).json(), [])

    def test_invalid_date(self):
        response = self.client.get(EVENTS_URL, {"date": "18.04.2025"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_tutor_creates_event(self):
        client = authenticate(APIClient(), self.tutor)
        response = client.post(
            EVENTS_URL,
            {"title": "Office Hours", "starts_at": "2025-04-20T09:00:00Z", "event_type": "lecture"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()["created_by"], self.tutor.id)

    def test_invalid_event_type(self):
        client = authenticate(APIClient(), self.tutor)
        response = client.post(
            EVENTS_URL,
            {"title": "Party", "starts_at": "2025-04-20T09:00:00Z", "event_type": "party"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_student_cannot_create_event(self):
        response = self.client.post(
            EVENTS_URL, {"title": "X", "starts_at": "2025-04-20T09:00:00Z"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
