"""
LMS Roadmap Models

This module defines the learning roadmap: modules grouped by course type,
the tasks inside a module, and per-user task completion.

Models:
- Module: A roadmap unit (e.g. "Web Development: React Fundamentals")
- ModuleTask: A dated task inside a module
- TaskCompletion: Marks a module task as completed by a user

Progress is never stored. It is derived per user from TaskCompletion rows
(see ``lms.roadmap.progress``).

Author: DevMastery Development Team
Version: 1.0.0
"""

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


def course_types():
    return list(getattr(settings, "LMS_COURSE_TYPES", []))


class Module(models.Model):
    """
    Roadmap module.

    Attributes:
        title: Title, stored as "<course type>: <title>"
        description: What the module covers
        course_type: One of the configured course types
        duration_weeks: Planned duration, at least one week
        order: Position within the roadmap
    """

    title = models.CharField(max_length=200, verbose_name=_("Module Title"))
    description = models.TextField(blank=True, verbose_name=_("Description"))
    course_type = models.CharField(
        max_length=100,
        default="Web Development",
        verbose_name=_("Course Type"),
    )
    duration_weeks = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        verbose_name=_("Duration (weeks)"),
    )
    order = models.PositiveIntegerField(default=0, verbose_name=_("Order"))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Roadmap Module")
        verbose_name_plural = _("Roadmap Modules")
        ordering = ["order", "id"]
        db_table = "lms_module"

    def __str__(self) -> str:
        return self.title

    @property
    def short_title(self) -> str:
        """Title without the "<course type>: " prefix."""
        prefix = f"{self.course_type}: "
        if self.title.startswith(prefix):
            return self.title[len(prefix):]
        return self.title


class ModuleTask(models.Model):
    module = models.ForeignKey(
        Module,
        on_delete=models.CASCADE,
        related_name="tasks",
        verbose_name=_("Module"),
    )
    title = models.CharField(max_length=200, verbose_name=_("Task Title"))
    due_date = models.DateField(null=True, blank=True, verbose_name=_("Due Date"))
    order = models.PositiveIntegerField(default=0, verbose_name=_("Order"))

    class Meta:
        verbose_name = _("Module Task")
        verbose_name_plural = _("Module Tasks")
        ordering = ["order", "id"]
        db_table = "lms_module_task"

    def __str__(self) -> str:
        return f"{self.module.title} - {self.title}"


class TaskCompletion(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="task_completions",
    )
    task = models.ForeignKey(
        ModuleTask,
        on_delete=models.CASCADE,
        related_name="completions",
    )
    completed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Task Completion")
        verbose_name_plural = _("Task Completions")
        unique_together = ("user", "task")
        db_table = "lms_task_completion"

    def __str__(self) -> str:
        return f"{self.user} completed {self.task}"
