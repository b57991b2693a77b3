from datetime import date, datetime, time, timedelta
from unittest import mock

from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from lms.access.roles import Role
from lms.batches.models import Batch, BatchEnrollment
from lms.dashboard.models import Announcement
from lms.dashboard.services import active_student_count, learning_streak
from lms.roadmap.models import Module, ModuleTask, TaskCompletion
from lms.tests.helpers import authenticate, create_user

DASHBOARD_URL = "/api/lms/dashboard/"


class DashboardSummaryTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = create_user("admin", Role.ADMIN, display_name="Admin User")
        cls.student = create_user("student", Role.STUDENT)
        today = timezone.localdate()

        cls.done = Module.objects.create(title="Web Development: HTML", order=1)
        cls.open = Module.objects.create(title="Web Development: React", order=2)
        Module.objects.create(title="Web Development: Node", order=3)
        Module.objects.create(title="Web Development: MongoDB", order=4)

        finished = ModuleTask.objects.create(module=cls.done, title="Semantics", due_date=today - timedelta(days=10))
        TaskCompletion.objects.create(user=cls.student, task=finished)
        cls.due_today = ModuleTask.objects.create(module=cls.open, title="Hooks", due_date=today, order=1)
        cls.due_tomorrow = ModuleTask.objects.create(
            module=cls.open, title="Context", due_date=today + timedelta(days=1), order=2
        )
        cls.later = ModuleTask.objects.create(
            module=cls.open, title="Patterns", due_date=today + timedelta(days=10), order=3
        )
        ModuleTask.objects.create(module=cls.open, title="No date", order=4)

        Announcement.objects.create(title="Older", content="...", date=today - timedelta(days=5), author=cls.admin)
        Announcement.objects.create(title="Newer", content="...", date=today, author=cls.admin)

    def test_student_dashboard(self):
        client = authenticate(APIClient(), self.student)
        response = client.get(DASHBOARD_URL)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()

        # HTML 100 %, React 0 %, two empty modules 0 %
        self.assertEqual(body["overall_progress"], 25)
        self.assertEqual(body["completed_tasks"], 1)
        self.assertEqual(body["pending_tasks"], 4)
        self.assertEqual(body["current_module"]["id"], self.open.id)
        self.assertEqual(len(body["recent_modules"]), 3)
        self.assertEqual([a["title"] for a in body["announcements"]], ["Newer", "Older"])
        self.assertEqual(body["announcements"][0]["author"], "Admin User")
        self.assertIn("learning_streak", body)
        self.assertNotIn("active_students", body)

    def test_upcoming_tasks(self):
        body = authenticate(APIClient(), self.student).get(DASHBOARD_URL).json()
        upcoming = body["upcoming_tasks"]
        self.assertEqual([t["title"] for t in upcoming], ["Hooks", "Context", "Patterns", "No date"])
        self.assertEqual(upcoming[0]["module"], "Web Development: React")
        self.assertEqual([t["due_label"] for t in upcoming[:2]], ["Today", "Tomorrow"])
        self.assertEqual([t["due_soon"] for t in upcoming], [True, True, False, False])
        self.assertEqual(upcoming[2]["due_label"], self.later.due_date.isoformat())

    def test_admin_gets_active_students(self):
        batch = Batch.objects.create(name="Batch 1")
        BatchEnrollment.objects.create(batch=batch, student=self.student, status=BatchEnrollment.Status.APPROVED)
        body = authenticate(APIClient(), self.admin).get(DASHBOARD_URL).json()
        self.assertEqual(body["active_students"], 1)
        self.assertNotIn("learning_streak", body)

    def test_announcement_posting(self):
        client = authenticate(APIClient(), self.admin)
        response = client.post(
            "/api/lms/announcements/", {"title": "Monthly Coding Challenge", "content": "Join!"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()["date"], timezone.localdate().isoformat())

        student_client = authenticate(APIClient(), self.student)
        response = student_client.post("/api/lms/announcements/", {"title": "X", "content": "Y"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class DashboardFigureTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.student = create_user("student", Role.STUDENT)
        cls.module = Module.objects.create(title="Web Development: HTML")

    def complete_on(self, day: date, title: str):
        task = ModuleTask.objects.create(module=self.module, title=title)
        moment = timezone.make_aware(datetime.combine(day, time(12)))
        with mock.patch("django.utils.timezone.now", return_value=moment):
            TaskCompletion.objects.create(user=self.student, task=task)

    def test_learning_streak(self):
        today = date(2025, 4, 20)
        self.complete_on(today, "a")
        self.complete_on(today - timedelta(days=1), "b")
        self.complete_on(today - timedelta(days=1), "c")
        self.complete_on(today - timedelta(days=2), "d")
        self.complete_on(today - timedelta(days=4), "e")
        self.assertEqual(learning_streak(self.student, today), 3)

    def test_streak_is_zero_without_completion_today(self):
        today = date(2025, 4, 20)
        self.complete_on(today - timedelta(days=1), "a")
        self.assertEqual(learning_streak(self.student, today), 0)

    def test_active_students_need_approved_enrollment(self):
        pending = create_user("pending", Role.STUDENT)
        batch = Batch.objects.create(name="Batch 1")
        BatchEnrollment.objects.create(batch=batch, student=pending)
        BatchEnrollment.objects.create(batch=batch, student=self.student, status=BatchEnrollment.Status.APPROVED)
        other = Batch.objects.create(name="Batch 2")
        BatchEnrollment.objects.create(batch=other, student=self.student, status=BatchEnrollment.Status.APPROVED)
        self.assertEqual(active_student_count(), 1)
