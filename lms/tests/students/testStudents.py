from django.test import SimpleTestCase, TestCase
from rest_framework import status
from rest_framework.test import APIClient

from lms.access.roles import Role
from lms.batches.models import Batch, BatchEnrollment
from lms.roadmap.models import Module, ModuleTask, TaskCompletion
from lms.students.services import progress_band
from lms.tests.helpers import authenticate, create_user

STUDENTS_URL = "/api/lms/students/"


class ProgressBandTests(SimpleTestCase):
    def test_bands(self):
        self.assertEqual(progress_band(100), "high")
        self.assertEqual(progress_band(75), "high")
        self.assertEqual(progress_band(74), "medium")
        self.assertEqual(progress_band(50), "medium")
        self.assertEqual(progress_band(25), "low")
        self.assertEqual(progress_band(24), "critical")
        self.assertEqual(progress_band(0), "critical")


class StudentListTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.tutor = create_user("tutor", Role.TUTOR)
        cls.alex = create_user("alex", Role.STUDENT, display_name="Alex Johnson", email="alex@example.com")
        cls.emma = create_user("emma", Role.STUDENT, display_name="Emma Williams", email="emma@example.com")
        cls.olivia = create_user("olivia", Role.STUDENT, display_name="Olivia Davis", email="olivia@example.com")
        cls.michael = create_user("michael", Role.STUDENT, display_name="Michael Brown", email="michael@example.com")

        frontend = Batch.objects.create(name="Batch 3 - Frontend")
        backend = Batch.objects.create(name="Batch 2 - Backend")
        fullstack = Batch.objects.create(name="Batch 1 - Full Stack")

        # Alex: approved in frontend, later pending in backend
        BatchEnrollment.objects.create(batch=frontend, student=cls.alex, status=BatchEnrollment.Status.APPROVED)
        BatchEnrollment.objects.create(batch=backend, student=cls.alex)
        # Olivia: only pending
        BatchEnrollment.objects.create(batch=fullstack, student=cls.olivia)
        # Michael: rejected only
        BatchEnrollment.objects.create(batch=backend, student=cls.michael, status=BatchEnrollment.Status.REJECTED)

        module = Module.objects.create(title="Web Development: HTML")
        tasks = [ModuleTask.objects.create(module=module, title=f"Task {i}") for i in range(4)]
        for task in tasks[:3]:
            TaskCompletion.objects.create(user=cls.alex, task=task)
        TaskCompletion.objects.create(user=cls.michael, task=tasks[0])

    def setUp(self):
        self.client = authenticate(APIClient(), self.tutor)

    def rows(self, **params):
        response = self.client.get(STUDENTS_URL, params)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return {row["name"]: row for row in response.json()}

    def test_rows(self):
        rows = self.rows()
        self.assertEqual(len(rows), 4)
        self.assertEqual(
            (rows["Alex Johnson"]["batch"], rows["Alex Johnson"]["status"], rows["Alex Johnson"]["progress"]),
            ("Batch 3 - Frontend", "active", 75),
        )
        self.assertEqual(rows["Alex Johnson"]["progress_band"], "high")
        self.assertEqual((rows["Olivia Davis"]["batch"], rows["Olivia Davis"]["status"]), ("Batch 1 - Full Stack", "pending"))
        self.assertEqual((rows["Michael Brown"]["batch"], rows["Michael Brown"]["status"]), ("Batch 2 - Backend", "inactive"))
        self.assertEqual(rows["Michael Brown"]["progress_band"], "low")
        self.assertEqual((rows["Emma Williams"]["batch"], rows["Emma Williams"]["status"]), ("", "inactive"))
        self.assertEqual(rows["Emma Williams"]["progress_band"], "critical")

    def test_search_over_name_email_and_batch(self):
        self.assertEqual(set(self.rows(search="emma@")), {"Emma Williams"})
        self.assertEqual(set(self.rows(search="johnson")), {"Alex Johnson"})
        self.assertEqual(set(self.rows(search="full stack")), {"Olivia Davis"})

    def test_status_filter(self):
        self.assertEqual(set(self.rows(status="active")), {"Alex Johnson"})
        self.assertEqual(set(self.rows(status="inactive")), {"Emma Williams", "Michael Brown"})
        self.assertEqual(len(self.rows(status="all")), 4)

    def test_unknown_status(self):
        response = self.client.get(STUDENTS_URL, {"status": "graduated"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_students_cannot_list_students(self):
        client = authenticate(APIClient(), self.alex)
        self.assertEqual(client.get(STUDENTS_URL).status_code, status.HTTP_403_FORBIDDEN)
