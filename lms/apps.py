"""
LMS Application Configuration

Django application configuration of the DevMastery learning dashboard.

Author: DevMastery Development Team
Version: 1.0.0
"""

from django.apps import AppConfig


class LmsConfig(AppConfig):
    """
    Configuration class for the LMS Django application.

    Attributes:
        default_auto_field: Default primary key field type for models
        name: Application name for Django registration
        verbose_name: Human-readable application name for admin interface
    """

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "lms"
    verbose_name: str = "DevMastery LMS"

    def ready(self) -> None:
        """Register the profile signal handlers."""
        super().ready()
        from .users import models  # noqa: F401
