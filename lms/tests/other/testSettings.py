from django.conf import settings
from django.test import SimpleTestCase


class SettingsTests(SimpleTestCase):
    def test_route_gate_entry_points(self):
        self.assertEqual(settings.LMS_LOGIN_PATH, "/login")
        self.assertEqual(settings.LMS_LANDING_PATH, "/dashboard")

    def test_no_unused_frontend_url(self):
        # Redirect targets come from the LMS_* paths only
        self.assertFalse(hasattr(settings, "FRONTEND_URL"))
