"""
LMS Task Board Models

Work items of admins and tutors, shown on a three-column board
(todo, in-progress, completed).

Author: DevMastery Development Team
Version: 1.0.0
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Task(models.Model):
    """
    Board task.

    Attributes:
        status: Board column
        priority: low, medium or high
        due_date: Optional deadline
        owner: Creator of the task
        assignee: Optional user the task is assigned to
    """

    class Status(models.TextChoices):
        TODO = "todo", _("To Do")
        IN_PROGRESS = "in-progress", _("In Progress")
        COMPLETED = "completed", _("Completed")

    class Priority(models.TextChoices):
        LOW = "low", _("Low")
        MEDIUM = "medium", _("Medium")
        HIGH = "high", _("High")

    title = models.CharField(max_length=200, verbose_name=_("Title"))
    description = models.TextField(blank=True, verbose_name=_("Description"))
    status = models.CharField(
        max_length=12, choices=Status.choices, default=Status.TODO, verbose_name=_("Status")
    )
    priority = models.CharField(
        max_length=6, choices=Priority.choices, default=Priority.MEDIUM, verbose_name=_("Priority")
    )
    due_date = models.DateField(null=True, blank=True, verbose_name=_("Due Date"))
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="owned_tasks",
    )
    assignee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="assigned_tasks",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Board Task")
        verbose_name_plural = _("Board Tasks")
        ordering = ["created_at", "id"]
        db_table = "lms_board_task"

    def __str__(self) -> str:
        return self.title

    def toggle_completion(self) -> None:
        """completed -> todo, anything else -> completed"""
        if self.status == self.Status.COMPLETED:
            self.status = self.Status.TODO
        else:
            self.status = self.Status.COMPLETED
