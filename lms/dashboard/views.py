"""
LMS Dashboard Views

- GET  dashboard/      -> home page summary of the current user
- GET  announcements/  -> announcements, newest first
- POST announcements/  -> post an announcement (admin, tutor)

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging

from rest_framework import generics, serializers
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ..access.roles import ANY_ROLE, STAFF_ROLES
from ..roadmap.serializers import ModuleViewSerializer
from .models import Announcement
from .services import dashboard_summary

logger = logging.getLogger(__name__)


class AnnouncementSerializer(serializers.ModelSerializer):
    author = serializers.CharField(source="author_name", read_only=True)

    class Meta:
        model = Announcement
        fields = ["id", "title", "content", "date", "author"]
        read_only_fields = ["id"]


class UpcomingTaskSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    module = serializers.CharField()
    due_date = serializers.DateField(allow_null=True)
    due_soon = serializers.BooleanField()
    due_label = serializers.CharField(allow_blank=True)


class DashboardSerializer(serializers.Serializer):
    overall_progress = serializers.IntegerField()
    completed_tasks = serializers.IntegerField()
    pending_tasks = serializers.IntegerField()
    current_module = ModuleViewSerializer(allow_null=True)
    upcoming_tasks = UpcomingTaskSerializer(many=True)
    recent_modules = ModuleViewSerializer(many=True)
    announcements = AnnouncementSerializer(many=True)
    active_students = serializers.IntegerField(required=False)
    learning_streak = serializers.IntegerField(required=False)


class DashboardView(APIView):
    permitted_roles = ANY_ROLE

    def get(self, request: Request) -> Response:
        return Response(DashboardSerializer(dashboard_summary(request.user)).data)


class AnnouncementListCreateView(generics.ListCreateAPIView):
    permitted_roles = ANY_ROLE
    write_roles = STAFF_ROLES
    serializer_class = AnnouncementSerializer
    queryset = Announcement.objects.select_related("author", "author__profile")

    def perform_create(self, serializer):
        announcement = serializer.save(author=self.request.user)
        logger.info(f"Announcement {announcement.id} posted by user {self.request.user.id}")
