from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from backend.custom_auth import ACCESS_COOKIE
from lms.access.roles import Role
from lms.tests.helpers import authenticate, create_user

RESOLVE_URL = "/api/lms/access/resolve/"
NAVIGATION_URL = "/api/lms/access/navigation/"


class RouteResolveViewTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = create_user("admin", Role.ADMIN)
        cls.student = create_user("student", Role.STUDENT)

    def setUp(self):
        self.client = APIClient()

    def test_anonymous_is_sent_to_login(self):
        response = self.client.get(RESOLVE_URL, {"path": "/dashboard"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.json(), {"path": "/dashboard", "allowed": False, "redirect_to": "/login"}
        )

    def test_invalid_token_is_treated_as_logged_out(self):
        self.client.cookies[ACCESS_COOKIE] = "not-a-token"
        response = self.client.get(RESOLVE_URL, {"path": "/dashboard"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["redirect_to"], "/login")

    def test_student_is_sent_to_landing_for_admin_view(self):
        authenticate(self.client, self.student)
        response = self.client.get(RESOLVE_URL, {"path": "/users/"})
        self.assertEqual(response.json(), {"path": "/users", "allowed": False, "redirect_to": "/dashboard"})

    def test_admin_is_allowed(self):
        authenticate(self.client, self.admin)
        response = self.client.get(RESOLVE_URL, {"path": "/students"})
        self.assertTrue(response.json()["allowed"])
        self.assertIsNone(response.json()["redirect_to"])

    def test_unknown_path(self):
        authenticate(self.client, self.admin)
        response = self.client.get(RESOLVE_URL, {"path": "/nowhere"})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_missing_path(self):
        response = self.client.get(RESOLVE_URL)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_role_change_applies_to_next_request(self):
        authenticate(self.client, self.student)
        self.assertFalse(self.client.get(RESOLVE_URL, {"path": "/tasks"}).json()["allowed"])

        profile = self.student.profile
        profile.role = Role.TUTOR
        profile.save()

        # Same token, new role
        self.assertTrue(self.client.get(RESOLVE_URL, {"path": "/tasks"}).json()["allowed"])


class NavigationViewTests(TestCase):
    def test_student_sidebar(self):
        client = authenticate(APIClient(), create_user("student", Role.STUDENT, display_name="Student User"))
        response = client.get(NAVIGATION_URL)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body["user"]["display_name"], "Student User")
        self.assertEqual(body["user"]["role"], "student")
        self.assertNotIn("/users", [item["path"] for item in body["items"]])
        self.assertEqual(body["items"][0], {"path": "/dashboard", "label": "Dashboard", "icon": "layout-dashboard"})

    def test_anonymous_gets_401(self):
        response = APIClient().get(NAVIGATION_URL)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class RoleGateTests(TestCase):
    """The API guard maps login redirects to 401 and landing redirects to 403."""

    @classmethod
    def setUpTestData(cls):
        cls.student = create_user("student", Role.STUDENT)
        cls.tutor = create_user("tutor", Role.TUTOR)
        cls.nobody = create_user("nobody", None)

    def test_anonymous_request_is_401(self):
        response = APIClient().get("/api/lms/statistics/")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_wrong_role_is_403(self):
        client = authenticate(APIClient(), self.tutor)
        response = client.get("/api/lms/statistics/")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()["detail"], "You don't have permission to access this page")

    def test_user_without_role_may_use_open_views(self):
        client = authenticate(APIClient(), self.nobody)
        self.assertEqual(client.get("/api/lms/dashboard/").status_code, status.HTTP_200_OK)
        self.assertEqual(client.get("/api/lms/tasks/").status_code, status.HTTP_403_FORBIDDEN)

    def test_write_roles_apply_to_unsafe_methods(self):
        client = authenticate(APIClient(), self.student)
        self.assertEqual(client.get("/api/lms/roadmap/modules/").status_code, status.HTTP_200_OK)
        response = client.post("/api/lms/roadmap/modules/", {"title": "Nope"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
