from datetime import date

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from lms.access.roles import Role
from lms.tasks.board import group_by_status, sort_tasks
from lms.tasks.models import Task
from lms.tests.helpers import authenticate, create_user

TASKS_URL = "/api/lms/tasks/"


class BoardOrderingTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.tutor = create_user("tutor", Role.TUTOR)

    def make(self, title, **kwargs):
        return Task.objects.create(title=title, owner=self.tutor, **kwargs)

    def test_due_date_then_priority_then_creation(self):
        no_due = self.make("no due", priority=Task.Priority.HIGH)
        late = self.make("late", due_date=date(2025, 4, 30))
        early_low = self.make("early low", due_date=date(2025, 4, 20), priority=Task.Priority.LOW)
        early_high = self.make("early high", due_date=date(2025, 4, 20), priority=Task.Priority.HIGH)
        early_high_2 = self.make("early high 2", due_date=date(2025, 4, 20), priority=Task.Priority.HIGH)

        ordered = sort_tasks(Task.objects.all())
        self.assertEqual(ordered, [early_high, early_high_2, early_low, late, no_due])

    def test_group_by_status_has_all_columns(self):
        self.make("doing", status=Task.Status.IN_PROGRESS)
        columns = group_by_status(Task.objects.all())
        self.assertEqual(list(columns), ["todo", "in-progress", "completed"])
        self.assertEqual([t.title for t in columns["in-progress"]], ["doing"])
        self.assertEqual(columns["todo"], [])

    def test_toggle_completion(self):
        task = self.make("toggle", status=Task.Status.IN_PROGRESS)
        task.toggle_completion()
        self.assertEqual(task.status, Task.Status.COMPLETED)
        task.toggle_completion()
        self.assertEqual(task.status, Task.Status.TODO)


class TaskViewSetTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = create_user("admin", Role.ADMIN)
        cls.tutor = create_user("tutor", Role.TUTOR, display_name="Tutor User")
        cls.student = create_user("student", Role.STUDENT)
        cls.own = Task.objects.create(title="Review submissions", owner=cls.tutor, priority=Task.Priority.HIGH)
        cls.assigned = Task.objects.create(
            title="Prepare workshop",
            owner=cls.admin,
            assignee=cls.tutor,
            status=Task.Status.IN_PROGRESS,
        )
        cls.foreign = Task.objects.create(title="Admin only", owner=cls.admin)

    def setUp(self):
        self.client = authenticate(APIClient(), self.tutor)

    def test_sees_owned_and_assigned_tasks(self):
        titles = {t["title"] for t in self.client.get(TASKS_URL).json()}
        self.assertEqual(titles, {"Review submissions", "Prepare workshop"})

    def test_status_filter(self):
        body = self.client.get(TASKS_URL, {"status": "in-progress"}).json()
        self.assertEqual([t["id"] for t in body], [self.assigned.id])
        self.assertEqual(body[0]["assignee_name"], "Tutor User")

    def test_unknown_status_filter(self):
        response = self.client.get(TASKS_URL, {"status": "blocked"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_board(self):
        body = self.client.get(f"{TASKS_URL}board/").json()
        self.assertEqual([t["id"] for t in body["todo"]], [self.own.id])
        self.assertEqual([t["id"] for t in body["in-progress"]], [self.assigned.id])
        self.assertEqual(body["completed"], [])

    def test_create_with_defaults(self):
        response = self.client.post(TASKS_URL, {"title": "Update curriculum"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual((body["status"], body["priority"]), ("todo", "medium"))
        self.assertEqual(body["owner"], self.tutor.id)

    def test_title_required(self):
        response = self.client.post(TASKS_URL, {"title": ""}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["title"], ["Task title is required"])

    def test_change_status_and_priority(self):
        response = self.client.patch(
            f"{TASKS_URL}{self.own.id}/", {"status": "in-progress", "priority": "low"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.own.refresh_from_db()
        self.assertEqual((self.own.status, self.own.priority), ("in-progress", "low"))

    def test_invalid_priority(self):
        response = self.client.patch(f"{TASKS_URL}{self.own.id}/", {"priority": "urgent"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_toggle(self):
        url = f"{TASKS_URL}{self.own.id}/toggle/"
        self.assertEqual(self.client.post(url).json()["status"], "completed")
        self.assertEqual(self.client.post(url).json()["status"], "todo")

    def test_foreign_task_is_not_found(self):
        response = self.client.patch(f"{TASKS_URL}{self.foreign.id}/", {"status": "completed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_students_have_no_board(self):
        client = authenticate(APIClient(), self.student)
        self.assertEqual(client.get(TASKS_URL).status_code, status.HTTP_403_FORBIDDEN)
