from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Announcement(models.Model):
    title = models.CharField(max_length=200, verbose_name=_("Title"))
    content = models.TextField(verbose_name=_("Content"))
    date = models.DateField(default=timezone.localdate, verbose_name=_("Date"))
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="announcements",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Announcement")
        verbose_name_plural = _("Announcements")
        ordering = ["-date", "-created_at", "-id"]
        db_table = "lms_announcement"

    def __str__(self) -> str:
        return self.title

    @property
    def author_name(self) -> str:
        if self.author is None:
            return ""
        profile = getattr(self.author, "profile", None)
        return profile.get_display_name() if profile else self.author.get_username()
