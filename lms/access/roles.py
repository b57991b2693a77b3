"""Closed set of roles governing which dashboard views an identity may enter."""

from typing import FrozenSet, Iterable, Optional

from django.db import models
from django.utils.translation import gettext_lazy as _


class Role(models.TextChoices):
    ADMIN = "admin", _("Admin")
    TUTOR = "tutor", _("Tutor")
    STUDENT = "student", _("Student")


# Permitted-roles sets used across views. An empty set means any authenticated identity.
ANY_ROLE: FrozenSet[str] = frozenset()
ADMIN_ONLY: FrozenSet[str] = frozenset({Role.ADMIN})
STAFF_ROLES: FrozenSet[str] = frozenset({Role.ADMIN, Role.TUTOR})
STUDENT_ONLY: FrozenSet[str] = frozenset({Role.STUDENT})


def normalize_role(value: Optional[str]) -> Optional[str]:
    """Return the role value if it is a known role, otherwise None."""
    if value in Role.values:
        return value
    return None


def role_set(roles: Iterable[str]) -> FrozenSet[str]:
    return frozenset(str(role) for role in roles)
