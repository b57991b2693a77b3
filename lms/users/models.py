"""
LMS User Management Models

This module defines the user-related models for the LMS, extending Django's
built-in User model with the dashboard profile: role, display name and avatar.
Profiles are managed automatically through Django signals.

Models:
- Profile: Role and presentation data of a user

Author: DevMastery Development Team
Version: 1.0.0
"""

from django.db import models
from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils.translation import gettext_lazy as _

from ..access.roles import Role


class Profile(models.Model):
    """
    Extended user profile model for the LMS.

    Attributes:
        user: One-to-one relationship with Django User model
        role: Dashboard role (admin, tutor, student); empty when not assigned
        display_name: Name shown in the dashboard
        avatar_url: Optional avatar image URL

    The profile is automatically created when a new user is registered
    and maintains a one-to-one relationship with the User model.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
        verbose_name=_("User"),
        help_text=_("Associated user account"),
    )

    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        blank=True,
        null=True,
        verbose_name=_("Role"),
        help_text=_("Decides which dashboard views the user may enter"),
    )

    display_name = models.CharField(
        max_length=150,
        blank=True,
        verbose_name=_("Display Name"),
    )

    avatar_url = models.URLField(
        max_length=500,
        blank=True,
        verbose_name=_("Avatar URL"),
    )

    class Meta:
        verbose_name = _("User Profile")
        verbose_name_plural = _("User Profiles")
        db_table = "lms_profile"

    def __str__(self) -> str:
        return f"{self.user.username} Profile"

    def __repr__(self) -> str:
        return f"<Profile(user={self.user.username}, role={self.role})>"

    def get_display_name(self) -> str:
        """
        Name shown in the dashboard.

        Returns:
            The display name, else first/last name, else the username
        """
        if self.display_name:
            return self.display_name
        full_name = self.user.get_full_name()
        if full_name:
            return full_name
        return self.user.get_username()

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_tutor(self) -> bool:
        return self.role == Role.TUTOR

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT


# --- Signal Handlers for Automatic Profile Management ---


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_profile(sender, instance, created: bool, **kwargs) -> None:
    """
    Automatically create a user profile when a new user is created.

    Args:
        sender: The User model class
        instance: The actual User instance that was saved
        created: Boolean indicating if this is a new instance
        **kwargs: Additional signal arguments
    """
    if created:
        Profile.objects.get_or_create(user=instance)


def role_of(user):
    """Role of a user, None when the user has no profile or no role."""
    profile = getattr(user, "profile", None)
    return profile.role if profile else None
