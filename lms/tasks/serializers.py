from django.contrib.auth.models import User
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from .models import Task

TASK_TITLE_REQUIRED = _("Task title is required")


class TaskSerializer(serializers.ModelSerializer):
    """Board task; the owner is always the creating user."""

    title = serializers.CharField(
        max_length=200,
        error_messages={"required": TASK_TITLE_REQUIRED, "blank": TASK_TITLE_REQUIRED},
    )
    owner = serializers.PrimaryKeyRelatedField(read_only=True)
    assignee = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(), required=False, allow_null=True
    )
    assignee_name = serializers.SerializerMethodField()

    class Meta:
        model = Task
        fields = [
            "id",
            "title",
            "description",
            "status",
            "priority",
            "due_date",
            "owner",
            "assignee",
            "assignee_name",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]

    def get_assignee_name(self, obj: Task) -> str:
        if obj.assignee is None:
            return ""
        profile = getattr(obj.assignee, "profile", None)
        return profile.get_display_name() if profile else obj.assignee.get_username()
