"""
LMS Django Admin Configuration

Admin interface (jazzmin skin) for all LMS models:
- User Management: User admin with the profile (role, display name, avatar) inline
- Roadmap: Modules with their tasks, task completions
- Batches: Batches with enrollment requests
- Collaboration: Board tasks, conversations, events, announcements

Author: DevMastery Development Team
Version: 1.0.0
"""

from typing import Optional

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User
from django.db.models import Count, QuerySet
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _

from .models import (
    Announcement,
    Batch,
    BatchEnrollment,
    Conversation,
    Event,
    Message,
    Module,
    ModuleTask,
    Profile,
    Task,
    TaskCompletion,
)

# --- User Management Administration ---


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    verbose_name_plural = "Profile Information"
    fk_name = "user"
    fields = ("role", "display_name", "avatar_url")

    def get_extra(self, request: HttpRequest, obj: Optional[User] = None, **kwargs) -> int:
        """Return 0 extra forms since the profile is created automatically."""
        return 0


class UserAdmin(BaseUserAdmin):
    inlines = (ProfileInline,)
    list_display = ("username", "email", "first_name", "last_name", "get_role", "is_active")
    list_select_related = ("profile",)
    list_filter = ("is_staff", "is_active", "profile__role", "date_joined")
    search_fields = ("username", "first_name", "last_name", "email", "profile__display_name")
    ordering = ("username",)

    @admin.display(description=_("Role"))
    def get_role(self, instance: User) -> Optional[str]:
        try:
            return instance.profile.role
        except Profile.DoesNotExist:
            return None


admin.site.unregister(User)
admin.site.register(User, UserAdmin)

# --- Roadmap Administration ---


class ModuleTaskInline(admin.TabularInline):
    model = ModuleTask
    extra = 1
    fields = ("title", "due_date", "order")
    ordering = ("order",)


@admin.register(Module)
class ModuleAdmin(admin.ModelAdmin):
    list_display = ("title", "course_type", "duration_weeks", "order", "task_count")
    list_filter = ("course_type",)
    search_fields = ("title", "description", "tasks__title")
    inlines = [ModuleTaskInline]

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return super().get_queryset(request).annotate(_task_count=Count("tasks"))

    @admin.display(description=_("Tasks"), ordering="_task_count")
    def task_count(self, obj: Module) -> int:
        return obj._task_count


@admin.register(TaskCompletion)
class TaskCompletionAdmin(admin.ModelAdmin):
    list_display = ("user", "task", "completed_at")
    list_filter = ("task__module",)
    search_fields = ("user__username", "user__email", "task__title")
    list_select_related = ("user", "task", "task__module")


# --- Batch Administration ---


class BatchEnrollmentInline(admin.TabularInline):
    model = BatchEnrollment
    fk_name = "batch"
    extra = 0
    fields = ("student", "status", "approved_by", "approved_at")
    readonly_fields = ("approved_at",)


@admin.register(Batch)
class BatchAdmin(admin.ModelAdmin):
    list_display = ("name", "start_date", "end_date", "created_by", "created_at")
    search_fields = ("name", "description")
    inlines = [BatchEnrollmentInline]


@admin.register(BatchEnrollment)
class BatchEnrollmentAdmin(admin.ModelAdmin):
    list_display = ("student", "batch", "status", "approved_by", "approved_at", "created_at")
    list_filter = ("status", "batch")
    search_fields = ("student__username", "student__email", "batch__name")
    list_select_related = ("student", "batch", "approved_by")


# --- Collaboration Administration ---


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ("title", "status", "priority", "due_date", "owner", "assignee")
    list_filter = ("status", "priority")
    search_fields = ("title", "description")


class MessageInline(admin.TabularInline):
    model = Message
    extra = 0
    fields = ("sender", "text", "created_at", "read_at")
    readonly_fields = ("created_at",)


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ("participant_one", "participant_two", "last_activity_at")
    search_fields = ("participant_one__username", "participant_two__username")
    inlines = [MessageInline]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("title", "event_type", "starts_at", "created_by")
    list_filter = ("event_type",)
    search_fields = ("title", "description")


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ("title", "date", "author")
    search_fields = ("title", "content")
