"""
Statistics Service

Aggregations for the admin statistics page:

- enrollments_per_month: enrollment requests created per calendar month
- module_completion:     per module, share of student task completions vs. pending
- role_distribution:     users per role with percentages
- enrollments_per_batch: approved enrollments per batch

Author: DevMastery Development Team
Version: 1.0.0
"""

from typing import Any, Dict, List

from django.contrib.auth.models import User
from django.db.models import Count, Q
from django.db.models.functions import TruncMonth

from ..access.roles import Role
from ..batches.models import Batch, BatchEnrollment
from ..roadmap.models import Module, TaskCompletion
from ..roadmap.progress import round_half_up


def percentage(part: int, whole: int) -> int:
    if not whole:
        return 0
    return round_half_up(part / whole * 100)


def enrollments_per_month() -> List[Dict[str, Any]]:
    rows = (
        BatchEnrollment.objects.annotate(month=TruncMonth("created_at"))
        .values("month")
        .annotate(students=Count("id"))
        .order_by("month")
    )
    return [
        {
            "month": row["month"].strftime("%Y-%m"),
            "label": row["month"].strftime("%b"),
            "students": row["students"],
        }
        for row in rows
    ]


def module_completion() -> List[Dict[str, Any]]:
    """
    Completed vs. pending percentage per module across all students.

    The base is every (student, task) pair of the module; a module without
    tasks or a roadmap without students reports 0 / 0.
    """
    student_count = User.objects.filter(profile__role=Role.STUDENT).count()
    modules = Module.objects.annotate(task_count=Count("tasks", distinct=True))
    completions = dict(
        TaskCompletion.objects.filter(user__profile__role=Role.STUDENT)
        .values("task__module")
        .annotate(total=Count("id"))
        .values_list("task__module", "total")
    )

    result = []
    for module in modules:
        possible = module.task_count * student_count
        completed = percentage(completions.get(module.id, 0), possible)
        result.append(
            {
                "module_id": module.id,
                "name": module.title,
                "completed": completed,
                "pending": 100 - completed if possible else 0,
            }
        )
    return result


def role_distribution() -> List[Dict[str, Any]]:
    counts = dict(
        User.objects.filter(profile__role__in=Role.values)
        .values("profile__role")
        .annotate(total=Count("id"))
        .values_list("profile__role", "total")
    )
    total = sum(counts.values())
    return [
        {
            "role": role.value,
            "label": str(role.label),
            "count": counts.get(role.value, 0),
            "percent": percentage(counts.get(role.value, 0), total),
        }
        for role in Role
    ]


def enrollments_per_batch() -> List[Dict[str, Any]]:
    batches = Batch.objects.annotate(
        enrolled=Count(
            "enrollments",
            filter=Q(enrollments__status=BatchEnrollment.Status.APPROVED),
        )
    ).order_by("name", "id")
    return [{"batch_id": batch.id, "name": batch.name, "enrolled": batch.enrolled} for batch in batches]


def statistics_overview() -> Dict[str, Any]:
    return {
        "enrollments_per_month": enrollments_per_month(),
        "module_completion": module_completion(),
        "role_distribution": role_distribution(),
        "enrollments_per_batch": enrollments_per_batch(),
    }
