"""
LMS Roadmap Views

Views:
- ModuleListCreateView: Roadmap of the current user with filters; admins and
  tutors create modules
- ModuleDetailView: Single module; admins and tutors update and delete
- ModuleTaskCompletionView: Complete (POST) or reopen (DELETE) a module task
- CourseTypeListView: Configured course types

Every module is rendered with the progress of the requesting user.

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging

from django.shortcuts import get_object_or_404
from django.utils.translation import gettext_lazy as _
from rest_framework import generics, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ..access.roles import ANY_ROLE, STAFF_ROLES
from .models import Module, ModuleTask, TaskCompletion, course_types
from .progress import TABS, TAB_ALL, filter_modules, load_roadmap
from .serializers import ModuleViewSerializer, ModuleWriteSerializer

logger = logging.getLogger(__name__)


def module_payload(module: Module, user) -> dict:
    """Render one module with the progress of ``user``."""
    view = load_roadmap(user, Module.objects.filter(pk=module.pk))[0]
    return ModuleViewSerializer(view).data


class ModuleListCreateView(generics.ListCreateAPIView):
    """
    GET: Roadmap modules with the user's progress.

    Query parameters:
        search: Text in title, description or a task title
        tab: all | in-progress | completed
        course_type: Course type, empty for all

    POST (admin, tutor): Create a module, optionally with tasks.
    """

    permitted_roles = ANY_ROLE
    write_roles = STAFF_ROLES
    serializer_class = ModuleWriteSerializer
    queryset = Module.objects.all()

    def list(self, request: Request, *args, **kwargs) -> Response:
        tab = request.query_params.get("tab") or TAB_ALL
        if tab not in TABS:
            return Response(
                {"detail": _("Unknown tab '%(tab)s'.") % {"tab": tab}},
                status=status.HTTP_400_BAD_REQUEST,
            )

        modules = filter_modules(
            load_roadmap(request.user),
            search=request.query_params.get("search", ""),
            tab=tab,
            course_type=request.query_params.get("course_type", ""),
        )
        return Response(ModuleViewSerializer(modules, many=True).data)

    def create(self, request: Request, *args, **kwargs) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        module = serializer.save()
        logger.info(f"Module {module.id} '{module.title}' created by user {request.user.id}")
        return Response(module_payload(module, request.user), status=status.HTTP_201_CREATED)


class ModuleDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Handle Module CRUD operations: GET (retrieve), PUT/PATCH (update), DELETE (destroy)."""

    permitted_roles = ANY_ROLE
    write_roles = STAFF_ROLES
    serializer_class = ModuleWriteSerializer
    queryset = Module.objects.all()

    def retrieve(self, request: Request, *args, **kwargs) -> Response:
        return Response(module_payload(self.get_object(), request.user))

    def update(self, request: Request, *args, **kwargs) -> Response:
        instance = self.get_object()
        serializer = self.get_serializer(
            instance, data=request.data, partial=kwargs.pop("partial", False)
        )
        serializer.is_valid(raise_exception=True)
        module = serializer.save()
        logger.info(f"Module {module.id} updated by user {request.user.id}")
        return Response(module_payload(module, request.user))

    def perform_destroy(self, instance: Module) -> None:
        logger.info(f"Module {instance.id} '{instance.title}' deleted by user {self.request.user.id}")
        instance.delete()


class ModuleTaskCompletionView(APIView):
    """
    POST: Mark a module task as completed for the current user.
    DELETE: Reopen it.

    Both answer with the module and its recomputed progress.
    """

    permitted_roles = ANY_ROLE

    def post(self, request: Request, pk: int) -> Response:
        task = get_object_or_404(ModuleTask.objects.select_related("module"), pk=pk)
        TaskCompletion.objects.get_or_create(user=request.user, task=task)
        return Response(module_payload(task.module, request.user))

    def delete(self, request: Request, pk: int) -> Response:
        task = get_object_or_404(ModuleTask.objects.select_related("module"), pk=pk)
        TaskCompletion.objects.filter(user=request.user, task=task).delete()
        return Response(module_payload(task.module, request.user))


class CourseTypeListView(APIView):
    permitted_roles = ANY_ROLE

    def get(self, request: Request) -> Response:
        return Response(course_types())
