from datetime import date

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from lms.access.roles import Role
from lms.roadmap.models import Module, ModuleTask, TaskCompletion
from lms.tests.helpers import authenticate, create_user

MODULES_URL = "/api/lms/roadmap/modules/"


class RoadmapViewTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.tutor = create_user("tutor", Role.TUTOR)
        cls.student = create_user("student", Role.STUDENT)
        cls.other_student = create_user("other", Role.STUDENT)

        cls.html = Module.objects.create(
            title="Web Development: HTML", description="Markup", order=1
        )
        cls.html_tasks = [
            ModuleTask.objects.create(module=cls.html, title="Structure", order=1, due_date=date(2025, 1, 7)),
            ModuleTask.objects.create(module=cls.html, title="Semantics", order=2, due_date=date(2025, 1, 14)),
        ]
        cls.pandas = Module.objects.create(
            title="Data Science: Pandas", course_type="Data Science", order=2
        )
        ModuleTask.objects.create(module=cls.pandas, title="DataFrames", order=1)

        for task in cls.html_tasks:
            TaskCompletion.objects.create(user=cls.student, task=task)

    def setUp(self):
        self.client = authenticate(APIClient(), self.student)

    def test_progress_is_per_user(self):
        body = self.client.get(MODULES_URL).json()
        self.assertEqual([(m["title"], m["progress"], m["complete"]) for m in body], [
            ("Web Development: HTML", 100, True),
            ("Data Science: Pandas", 0, False),
        ])

        other = authenticate(APIClient(), self.other_student).get(MODULES_URL).json()
        self.assertEqual(other[0]["progress"], 0)

    def test_filters(self):
        self.assertEqual(len(self.client.get(MODULES_URL, {"tab": "completed"}).json()), 1)
        self.assertEqual(
            [m["id"] for m in self.client.get(MODULES_URL, {"tab": "in-progress"}).json()],
            [self.pandas.id],
        )
        self.assertEqual(
            [m["id"] for m in self.client.get(MODULES_URL, {"course_type": "Data Science"}).json()],
            [self.pandas.id],
        )
        self.assertEqual(
            [m["id"] for m in self.client.get(MODULES_URL, {"search": "semantics"}).json()],
            [self.html.id],
        )

    def test_unknown_tab(self):
        response = self.client.get(MODULES_URL, {"tab": "archived"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_complete_and_reopen_task(self):
        task = ModuleTask.objects.get(title="DataFrames")
        url = f"/api/lms/roadmap/tasks/{task.id}/complete/"

        response = self.client.post(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["progress"], 100)
        self.assertTrue(response.json()["tasks"][0]["complete"])

        # Completing twice keeps a single completion
        self.client.post(url)
        self.assertEqual(TaskCompletion.objects.filter(user=self.student, task=task).count(), 1)

        response = self.client.delete(url)
        self.assertEqual(response.json()["progress"], 0)

    def test_complete_unknown_task(self):
        response = self.client.post("/api/lms/roadmap/tasks/9999/complete/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_course_types(self):
        response = self.client.get("/api/lms/roadmap/course-types/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()[0], "Web Development")


class ModuleManagementTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.tutor = create_user("tutor", Role.TUTOR)
        cls.student = create_user("student", Role.STUDENT)

    def setUp(self):
        self.client = authenticate(APIClient(), self.tutor)

    def test_create_module_with_prefix_and_tasks(self):
        response = self.client.post(
            MODULES_URL,
            {
                "title": "React Fundamentals",
                "description": "Components and hooks",
                "course_type": "Web Development",
                "duration_weeks": 4,
                "tasks": [
                    {"title": "JSX", "due_date": "2025-02-07"},
                    {"title": "Hooks", "due_date": "2025-02-14"},
                ],
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(body["title"], "Web Development: React Fundamentals")
        self.assertEqual(body["duration_weeks"], 4)
        self.assertEqual([t["title"] for t in body["tasks"]], ["JSX", "Hooks"])
        self.assertEqual(body["progress"], 0)

    def test_default_course_type(self):
        response = self.client.post(MODULES_URL, {"title": "Git"}, format="json")
        self.assertEqual(response.json()["title"], "Web Development: Git")
        self.assertEqual(response.json()["duration_weeks"], 1)

    def test_blank_title(self):
        response = self.client.post(MODULES_URL, {"title": "   "}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["detail"], "Module title is required")

    def test_title_too_long_with_prefix(self):
        response = self.client.post(
            MODULES_URL, {"title": "x" * 200, "course_type": "Mobile Development"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["error_code"], "title_too_long")
        self.assertFalse(Module.objects.exists())

        # "Mobile Development: " takes 20 of the 200 characters
        response = self.client.post(
            MODULES_URL, {"title": "x" * 180, "course_type": "Mobile Development"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(Module.objects.get().title), 200)

    def test_course_type_change_must_fit_title(self):
        module = Module.objects.create(title="Web Development: " + "x" * 183, course_type="Web Development")
        response = self.client.patch(
            f"{MODULES_URL}{module.id}/", {"course_type": "Mobile Development"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        module.refresh_from_db()
        self.assertEqual(module.course_type, "Web Development")

    def test_unknown_course_type(self):
        response = self.client.post(
            MODULES_URL, {"title": "X", "course_type": "Basket Weaving"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_duration_must_be_positive(self):
        response = self.client.post(MODULES_URL, {"title": "X", "duration_weeks": 0}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_keeps_prefix(self):
        module = Module.objects.create(title="Web Development: Old")
        response = self.client.patch(f"{MODULES_URL}{module.id}/", {"title": "New"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["title"], "Web Development: New")

        response = self.client.patch(
            f"{MODULES_URL}{module.id}/", {"course_type": "Data Science"}, format="json"
        )
        self.assertEqual(response.json()["title"], "Data Science: New")

    def test_delete_module(self):
        module = Module.objects.create(title="Web Development: Temp")
        response = self.client.delete(f"{MODULES_URL}{module.id}/")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Module.objects.filter(id=module.id).exists())

    def test_student_cannot_manage_modules(self):
        module = Module.objects.create(title="Web Development: Locked")
        client = authenticate(APIClient(), self.student)
        self.assertEqual(
            client.patch(f"{MODULES_URL}{module.id}/", {"title": "X"}, format="json").status_code,
            status.HTTP_403_FORBIDDEN,
        )
        self.assertEqual(client.delete(f"{MODULES_URL}{module.id}/").status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(client.get(f"{MODULES_URL}{module.id}/").status_code, status.HTTP_200_OK)
