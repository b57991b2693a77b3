"""
Student Overview Service

Derives the admin/tutor view of student accounts:

- batch:    name of the approved enrollment's batch, else of the latest
            enrollment's batch, else empty
- status:   active (approved enrollment), pending (only pending
            enrollments), inactive otherwise
- progress: overall roadmap progress of the student
- band:     high >= 75, medium >= 50, low >= 25, critical below

Author: DevMastery Development Team
Version: 1.0.0
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Sequence

from django.contrib.auth.models import User

from ..access.roles import Role
from ..batches.models import BatchEnrollment
from ..roadmap.models import Module, TaskCompletion
from ..roadmap.progress import module_view, overall_progress

STATUS_ACTIVE = "active"
STATUS_PENDING = "pending"
STATUS_INACTIVE = "inactive"
STATUSES = (STATUS_ACTIVE, STATUS_PENDING, STATUS_INACTIVE)


def progress_band(progress: int) -> str:
    if progress >= 75:
        return "high"
    if progress >= 50:
        return "medium"
    if progress >= 25:
        return "low"
    return "critical"


def student_status(enrollments: Sequence[BatchEnrollment]) -> str:
    statuses = {enrollment.status for enrollment in enrollments}
    if BatchEnrollment.Status.APPROVED in statuses:
        return STATUS_ACTIVE
    if statuses == {BatchEnrollment.Status.PENDING}:
        return STATUS_PENDING
    return STATUS_INACTIVE


def student_batch(enrollments: Sequence[BatchEnrollment]) -> str:
    """
    Batch name shown for a student.

    Args:
        enrollments: The student's enrollments, newest first

    Returns:
        Approved batch name, else the latest enrollment's batch name, else ""
    """
    for enrollment in enrollments:
        if enrollment.status == BatchEnrollment.Status.APPROVED:
            return enrollment.batch.name
    return enrollments[0].batch.name if enrollments else ""


def _progress_by_student(student_ids: Iterable[int]) -> Dict[int, int]:
    modules = list(Module.objects.prefetch_related("tasks"))
    completed = defaultdict(set)
    for user_id, task_id in TaskCompletion.objects.filter(user_id__in=student_ids).values_list(
        "user_id", "task_id"
    ):
        completed[user_id].add(task_id)
    return {
        student_id: overall_progress([module_view(module, completed[student_id]) for module in modules])
        for student_id in student_ids
    }


def student_rows(search: str = "", status: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Overview rows of all students, filtered like the students page.

    Args:
        search: Case-insensitive text in name, email or batch
        status: active | pending | inactive; None or "all" for every student
    """
    students = list(
        User.objects.filter(profile__role=Role.STUDENT)
        .select_related("profile")
        .order_by("id")
    )
    enrollments = defaultdict(list)
    for enrollment in (
        BatchEnrollment.objects.filter(student__in=students)
        .select_related("batch")
        .order_by("-created_at", "-id")
    ):
        enrollments[enrollment.student_id].append(enrollment)
    progress = _progress_by_student([student.id for student in students])

    needle = (search or "").strip().lower()
    rows = []
    for student in students:
        own = enrollments[student.id]
        row = {
            "id": student.id,
            "name": student.profile.get_display_name(),
            "email": student.email,
            "avatar_url": student.profile.avatar_url,
            "batch": student_batch(own),
            "status": student_status(own),
            "progress": progress[student.id],
            "progress_band": progress_band(progress[student.id]),
        }
        if needle and not any(
            needle in row[key].lower() for key in ("name", "email", "batch")
        ):
            continue
        if status and status != "all" and row["status"] != status:
            continue
        rows.append(row)
    return rows
