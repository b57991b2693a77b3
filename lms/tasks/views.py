"""
LMS Task Board Views

TaskViewSet (admin, tutor):
- GET    tasks/                  -> tasks of the user, optional ?status=
- GET    tasks/board/            -> {"todo": [...], "in-progress": [...], "completed": [...]}
- POST   tasks/                  -> create (status todo, priority medium by default)
- PATCH  tasks/<id>/             -> change status, priority or other fields
- POST   tasks/<id>/toggle/      -> completed <-> todo
- DELETE tasks/<id>/

A user sees the tasks they own or are assigned to.

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging

from django.db.models import Q
from django.utils.translation import gettext_lazy as _
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from ..access.roles import STAFF_ROLES
from .board import group_by_status, sort_tasks
from .models import Task
from .serializers import TaskSerializer

logger = logging.getLogger(__name__)


class TaskViewSet(viewsets.ModelViewSet):
    permitted_roles = STAFF_ROLES
    serializer_class = TaskSerializer

    def get_queryset(self):
        user = self.request.user
        return (
            Task.objects.filter(Q(owner=user) | Q(assignee=user))
            .select_related("assignee", "assignee__profile")
            .distinct()
        )

    def list(self, request: Request, *args, **kwargs) -> Response:
        queryset = self.get_queryset()
        status_filter = request.query_params.get("status")
        if status_filter:
            if status_filter not in Task.Status.values:
                return Response(
                    {"detail": _("Unknown status '%(status)s'.") % {"status": status_filter}},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            queryset = queryset.filter(status=status_filter)

        serializer = self.get_serializer(sort_tasks(queryset), many=True)
        return Response(serializer.data)

    @action(detail=False, methods=["get"])
    def board(self, request: Request) -> Response:
        columns = group_by_status(self.get_queryset())
        return Response(
            {column: self.get_serializer(tasks, many=True).data for column, tasks in columns.items()}
        )

    @action(detail=True, methods=["post"])
    def toggle(self, request: Request, pk=None) -> Response:
        task = self.get_object()
        task.toggle_completion()
        task.save(update_fields=["status"])
        logger.info(f"Task {task.id} toggled to {task.status} by user {request.user.id}")
        return Response(self.get_serializer(task).data)

    def perform_create(self, serializer):
        task = serializer.save(owner=self.request.user)
        logger.info(f"Task {task.id} created by user {self.request.user.id}")

    def perform_update(self, serializer):
        task = serializer.save()
        logger.info(
            f"Task {task.id} updated by user {self.request.user.id}: "
            f"status={task.status}, priority={task.priority}"
        )

    def perform_destroy(self, instance):
        logger.info(f"Task {instance.id} deleted by user {self.request.user.id}")
        instance.delete()
