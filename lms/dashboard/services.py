"""
Dashboard Summary Service

Builds the data of the dashboard home page for one user:

- overall progress and completed / pending task counts
- the current module and the next upcoming tasks
- the first modules of the roadmap and all announcements
- a role dependent fourth figure: active students for admins and tutors,
  the learning streak for students

Author: DevMastery Development Team
Version: 1.0.0
"""

from datetime import date, timedelta
from typing import Any, Dict, Optional

from django.conf import settings
from django.contrib.auth.models import User
from django.utils import timezone

from ..access.roles import Role
from ..batches.models import BatchEnrollment
from ..roadmap.models import TaskCompletion
from ..roadmap.progress import (
    count_completed,
    current_module,
    due_label,
    flatten_tasks,
    is_due_soon,
    load_roadmap,
    overall_progress,
    upcoming_tasks,
)
from ..users.models import role_of
from .models import Announcement


def active_student_count() -> int:
    """Students with at least one approved enrollment."""
    return (
        User.objects.filter(
            profile__role=Role.STUDENT,
            batch_enrollments__status=BatchEnrollment.Status.APPROVED,
        )
        .distinct()
        .count()
    )


def learning_streak(user, today: Optional[date] = None) -> int:
    """
    Consecutive days, ending today, on which the user completed a task.

    Args:
        user: Student
        today: Reference day, defaults to the local date

    Returns:
        Number of days; 0 when nothing was completed today
    """
    today = today or timezone.localdate()
    days = {
        timezone.localtime(completed_at).date()
        for completed_at in TaskCompletion.objects.filter(user=user).values_list(
            "completed_at", flat=True
        )
    }
    streak = 0
    day = today
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def dashboard_summary(user, today: Optional[date] = None) -> Dict[str, Any]:
    today = today or timezone.localdate()
    modules = load_roadmap(user)
    tasks = flatten_tasks(modules)
    completed = count_completed(tasks)
    current = current_module(modules)
    due_soon_days = settings.LMS_DUE_SOON_DAYS

    summary: Dict[str, Any] = {
        "overall_progress": overall_progress(modules),
        "completed_tasks": completed,
        "pending_tasks": len(tasks) - completed,
        "current_module": current,
        "upcoming_tasks": [
            {
                "id": task.id,
                "title": task.title,
                "module": task.module_title,
                "due_date": task.due_date,
                "due_soon": is_due_soon(task.due_date, today, due_soon_days),
                "due_label": due_label(task.due_date, today),
            }
            for task in upcoming_tasks(modules, settings.LMS_UPCOMING_TASKS_LIMIT)
        ],
        "recent_modules": modules[: settings.LMS_RECENT_MODULES_LIMIT],
        "announcements": Announcement.objects.select_related("author", "author__profile"),
    }

    if role_of(user) in (Role.ADMIN, Role.TUTOR):
        summary["active_students"] = active_student_count()
    else:
        summary["learning_streak"] = learning_streak(user, today)
    return summary
