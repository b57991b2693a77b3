"""
LMS Batch Models

A batch is a cohort students can request to join. Requests go through a
small state machine:

    pending -> approved
    pending -> rejected

Models:
- Batch: Named cohort with optional start and end date
- BatchEnrollment: A student's enrollment request for a batch

Author: DevMastery Development Team
Version: 1.0.0
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class Batch(models.Model):
    name = models.CharField(max_length=200, verbose_name=_("Batch Name"))
    description = models.TextField(blank=True, verbose_name=_("Description"))
    start_date = models.DateField(null=True, blank=True, verbose_name=_("Start Date"))
    end_date = models.DateField(null=True, blank=True, verbose_name=_("End Date"))
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_batches",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Batch")
        verbose_name_plural = _("Batches")
        ordering = ["-created_at", "-id"]
        db_table = "lms_batch"

    def __str__(self) -> str:
        return self.name

    def clean(self) -> None:
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError({"end_date": _("End date must not be before the start date.")})


class BatchEnrollment(models.Model):
    """
    Enrollment request of a student for a batch.

    Attributes:
        status: pending until an admin or tutor decides
        approved_by: Who decided the request (approved or rejected)
        approved_at: When the request was decided
    """

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        APPROVED = "approved", _("Approved")
        REJECTED = "rejected", _("Rejected")

    batch = models.ForeignKey(Batch, on_delete=models.CASCADE, related_name="enrollments")
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="batch_enrollments",
    )
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PENDING,
        verbose_name=_("Status"),
    )
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="decided_enrollments",
    )
    approved_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Batch Enrollment")
        verbose_name_plural = _("Batch Enrollments")
        ordering = ["-created_at", "-id"]
        db_table = "lms_batch_enrollment"
        constraints = [
            models.UniqueConstraint(fields=["batch", "student"], name="unique_batch_student"),
        ]

    def __str__(self) -> str:
        return f"{self.student} -> {self.batch} ({self.status})"

    @property
    def is_pending(self) -> bool:
        return self.status == self.Status.PENDING
