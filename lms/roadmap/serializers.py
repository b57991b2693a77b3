"""
LMS Roadmap Serializers

Serializers:
- ModuleTaskWriteSerializer: A task submitted together with a module
- ModuleWriteSerializer: Create/update of a module by admins and tutors
- TaskViewSerializer / ModuleViewSerializer: Read side, rendering the
  per-user snapshots from ``lms.roadmap.progress``

Author: DevMastery Development Team
Version: 1.0.0
"""

from typing import Any, Dict, List

from django.db import transaction
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from ..exceptions import ValidationFailed
from .models import Module, ModuleTask, course_types

MODULE_TITLE_REQUIRED = _("Module title is required")


def prefixed_title(course_type: str, title: str) -> str:
    """
    Store a module title as "<course type>: <title>".

    A title that already carries the prefix is kept as it is.
    """
    title = title.strip()
    prefix = f"{course_type}: "
    if title.startswith(prefix):
        return title
    return f"{prefix}{title}"


class ModuleTaskWriteSerializer(serializers.ModelSerializer):
    class Meta:
        model = ModuleTask
        fields = ["title", "due_date"]


class ModuleWriteSerializer(serializers.ModelSerializer):
    """
    Create and update roadmap modules.

    The submitted title is the short title; the stored title gets the course
    type prefix. On update the prefix follows the (possibly new) course type.
    Tasks may be submitted with a new module and are appended in order.
    """

    title = serializers.CharField(
        allow_blank=True, max_length=200, error_messages={"required": MODULE_TITLE_REQUIRED}
    )
    course_type = serializers.ChoiceField(choices=[], required=False)
    tasks = ModuleTaskWriteSerializer(many=True, required=False)

    class Meta:
        model = Module
        fields = ["id", "title", "description", "course_type", "duration_weeks", "tasks"]
        read_only_fields = ["id"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["course_type"].choices = course_types()

    def validate_title(self, value: str) -> str:
        if not value.strip():
            raise ValidationFailed(str(MODULE_TITLE_REQUIRED), error_code="title_required")
        return value.strip()

    def _short_title(self, title: str) -> str:
        if self.instance is not None:
            prefix = f"{self.instance.course_type}: "
            if title.startswith(prefix):
                return title[len(prefix):]
        return title

    def _course_type(self, attrs: Dict[str, Any]) -> str:
        if attrs.get("course_type"):
            return attrs["course_type"]
        if self.instance is not None:
            return self.instance.course_type
        return Module._meta.get_field("course_type").default

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        title = attrs.get("title")
        if title is None and self.instance is not None:
            title = self.instance.title
        if title is not None:
            # The stored title carries the course type prefix
            stored = prefixed_title(self._course_type(attrs), self._short_title(title))
            max_length = Module._meta.get_field("title").max_length
            if len(stored) > max_length:
                raise ValidationFailed(
                    f"Module title is too long (at most {max_length} characters "
                    "including the course type)",
                    error_code="title_too_long",
                    details={"max_length": max_length, "length": len(stored)},
                )
        return attrs

    @transaction.atomic
    def create(self, validated_data: Dict[str, Any]) -> Module:
        tasks: List[Dict[str, Any]] = validated_data.pop("tasks", [])
        course_type = validated_data.get("course_type") or Module._meta.get_field(
            "course_type"
        ).default
        validated_data["course_type"] = course_type
        validated_data["title"] = prefixed_title(course_type, validated_data["title"])
        if "order" not in validated_data:
            validated_data["order"] = Module.objects.count() + 1

        module = Module.objects.create(**validated_data)
        for index, task in enumerate(tasks, start=1):
            ModuleTask.objects.create(module=module, order=index, **task)
        return module

    @transaction.atomic
    def update(self, instance: Module, validated_data: Dict[str, Any]) -> Module:
        validated_data.pop("tasks", None)
        course_type = validated_data.get("course_type", instance.course_type)
        title = validated_data.get("title", instance.title)
        validated_data["title"] = prefixed_title(course_type, self._short_title(title))
        return super().update(instance, validated_data)


class TaskViewSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    due_date = serializers.DateField(allow_null=True)
    complete = serializers.BooleanField()


class ModuleViewSerializer(serializers.Serializer):
    """Module snapshot with the progress of the requesting user."""

    id = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    course_type = serializers.CharField()
    duration_weeks = serializers.IntegerField()
    progress = serializers.IntegerField()
    complete = serializers.BooleanField()
    tasks = TaskViewSerializer(many=True)
