from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Event(models.Model):
    """Calendar entry: lecture, assignment deadline or workshop."""

    class EventType(models.TextChoices):
        LECTURE = "lecture", _("Lecture")
        ASSIGNMENT = "assignment", _("Assignment")
        WORKSHOP = "workshop", _("Workshop")

    title = models.CharField(max_length=200, verbose_name=_("Title"))
    description = models.TextField(blank=True, verbose_name=_("Description"))
    starts_at = models.DateTimeField(verbose_name=_("Starts At"))
    event_type = models.CharField(
        max_length=12,
        choices=EventType.choices,
        default=EventType.LECTURE,
        verbose_name=_("Type"),
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_events",
    )

    class Meta:
        verbose_name = _("Event")
        verbose_name_plural = _("Events")
        ordering = ["starts_at", "id"]
        db_table = "lms_event"

    def __str__(self) -> str:
        return f"{self.title} ({self.event_type})"
