"""
LMS User Management CRUD Views

Administrative user directory: list with search, retrieve, create, update
(including the role) and delete. Admin role only.

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging

from django.contrib.auth.models import User
from django.db.models import Q, QuerySet
from rest_framework import viewsets

from ...access.roles import ADMIN_ONLY
from ..serializers import UserAdminSerializer

logger = logging.getLogger(__name__)


class UserCrudViewSet(viewsets.ModelViewSet):
    """
    User management ViewSet for administrators.

    Query Parameters:
        search: Case-insensitive match on name, email or role
    """

    serializer_class = UserAdminSerializer
    permitted_roles = ADMIN_ONLY

    def get_queryset(self) -> QuerySet[User]:
        queryset = User.objects.select_related("profile").order_by("id")

        search = self.request.query_params.get("search", None)
        if search:
            queryset = queryset.filter(
                Q(profile__display_name__icontains=search)
                | Q(first_name__icontains=search)
                | Q(last_name__icontains=search)
                | Q(username__icontains=search)
                | Q(email__icontains=search)
                | Q(profile__role__icontains=search)
            )

        return queryset

    def perform_update(self, serializer: UserAdminSerializer) -> None:
        user = serializer.save()
        logger.info(
            f"User {user.id} updated by admin {self.request.user.id} "
            f"(role={user.profile.role})"
        )

    def perform_destroy(self, instance: User) -> None:
        logger.info(f"User {instance.id} deleted by admin {self.request.user.id}")
        super().perform_destroy(instance)
