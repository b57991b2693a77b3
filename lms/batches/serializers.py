from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from .models import Batch, BatchEnrollment

UNKNOWN_STUDENT = _("Unknown Student")


class BatchSerializer(serializers.ModelSerializer):
    """
    Batch with the enrollment status of the requesting student.

    ``enrollment_status`` is read from the ``statuses`` mapping in the
    serializer context (batch id -> status); it is null for staff and for
    batches the student has not requested.
    """

    name = serializers.CharField(
        max_length=200,
        error_messages={
            "required": _("Batch name is required"),
            "blank": _("Batch name is required"),
        },
    )
    enrollment_status = serializers.SerializerMethodField()
    created_by = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Batch
        fields = [
            "id",
            "name",
            "description",
            "start_date",
            "end_date",
            "created_by",
            "created_at",
            "enrollment_status",
        ]
        read_only_fields = ["id", "created_at"]

    def get_enrollment_status(self, obj):
        return self.context.get("statuses", {}).get(obj.id)

    def validate(self, attrs):
        start = attrs.get("start_date", getattr(self.instance, "start_date", None))
        end = attrs.get("end_date", getattr(self.instance, "end_date", None))
        if start and end and end < start:
            raise serializers.ValidationError(
                {"end_date": _("End date must not be before the start date.")}
            )
        return attrs


class EnrollmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = BatchEnrollment
        fields = ["id", "batch", "student", "status", "approved_by", "approved_at", "created_at"]
        read_only_fields = fields


class EnrollmentRequestSerializer(serializers.ModelSerializer):
    """Pending request as listed for admins and tutors."""

    batch_name = serializers.CharField(source="batch.name", read_only=True)
    student_name = serializers.SerializerMethodField()
    student_avatar = serializers.SerializerMethodField()

    class Meta:
        model = BatchEnrollment
        fields = [
            "id",
            "batch",
            "batch_name",
            "student",
            "student_name",
            "student_avatar",
            "status",
            "created_at",
        ]
        read_only_fields = fields

    def get_student_name(self, obj: BatchEnrollment) -> str:
        profile = getattr(obj.student, "profile", None)
        if profile is None:
            return str(UNKNOWN_STUDENT)
        return profile.display_name or obj.student.get_full_name() or str(UNKNOWN_STUDENT)

    def get_student_avatar(self, obj: BatchEnrollment) -> str:
        profile = getattr(obj.student, "profile", None)
        return profile.avatar_url if profile else ""
