"""
Batch Enrollment Service

Business rules of the enrollment workflow:

- only students enroll, once per batch; a new enrollment is pending
- only pending requests can be approved or rejected
- the decider and the time of the decision are recorded

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging
from typing import Dict, Optional

from django.db import IntegrityError, transaction
from django.utils import timezone
from django.utils.translation import gettext as _

from ..exceptions import StateConflict, ValidationFailed
from .models import Batch, BatchEnrollment

logger = logging.getLogger(__name__)

DECISIONS = {
    "approve": BatchEnrollment.Status.APPROVED,
    "reject": BatchEnrollment.Status.REJECTED,
}


def enroll_student(batch: Batch, student) -> BatchEnrollment:
    """
    Create a pending enrollment request.

    Args:
        batch: Batch to join
        student: Requesting user

    Returns:
        The new pending BatchEnrollment

    Raises:
        StateConflict: The student already has an enrollment for this batch
    """
    if BatchEnrollment.objects.filter(batch=batch, student=student).exists():
        raise StateConflict(_("You are already enrolled in this batch"), error_code="already_enrolled")

    try:
        with transaction.atomic():
            enrollment = BatchEnrollment.objects.create(batch=batch, student=student)
    except IntegrityError:
        raise StateConflict(_("You are already enrolled in this batch"), error_code="already_enrolled")

    logger.info(f"User {student.id} requested enrollment in batch {batch.id}")
    return enrollment


def decide_enrollment(enrollment: BatchEnrollment, decider, action: str) -> BatchEnrollment:
    """
    Approve or reject a pending enrollment request.

    Args:
        enrollment: The request to decide
        decider: Admin or tutor taking the decision
        action: "approve" or "reject"

    Returns:
        The updated enrollment

    Raises:
        ValidationFailed: Unknown action
        StateConflict: The request is no longer pending
    """
    new_status = DECISIONS.get(action)
    if new_status is None:
        raise ValidationFailed(
            _("Unknown action '%(action)s'.") % {"action": action},
            error_code="unknown_action",
        )
    if not enrollment.is_pending:
        raise StateConflict(
            _("This enrollment request has already been %(status)s.") % {"status": enrollment.status},
            error_code="already_decided",
        )

    enrollment.status = new_status
    enrollment.approved_by = decider
    enrollment.approved_at = timezone.now()
    enrollment.save(update_fields=["status", "approved_by", "approved_at"])
    logger.info(f"Enrollment {enrollment.id} {new_status} by user {decider.id}")
    return enrollment


def enrollment_statuses(student) -> Dict[int, str]:
    """Enrollment status per batch id for one student."""
    return dict(
        BatchEnrollment.objects.filter(student=student).values_list("batch_id", "status")
    )


def enrollment_status(batch: Batch, student) -> Optional[str]:
    """pending | approved | rejected, or None without an enrollment."""
    return enrollment_statuses(student).get(batch.id)


def pending_requests():
    return (
        BatchEnrollment.objects.filter(status=BatchEnrollment.Status.PENDING)
        .select_related("batch", "student", "student__profile")
        .order_by("-created_at", "-id")
    )
