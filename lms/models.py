"""
LMS Application Models Registry

Imports the models of all functional areas so they are registered with the
Django ORM under the single ``lms`` app label.

Architecture:
- users/:     Profile with role, display name and avatar
- roadmap/:   Modules, module tasks and per-user completion
- batches/:   Batches and enrollment requests
- tasks/:     Task board of admins and tutors
- messaging/: Two-party conversations
- events/:    Calendar events
- dashboard/: Announcements

Author: DevMastery Development Team
Version: 1.0.0
"""

from .users.models import Profile
from .roadmap.models import Module, ModuleTask, TaskCompletion
from .batches.models import Batch, BatchEnrollment
from .tasks.models import Task
from .messaging.models import Conversation, Message
from .events.models import Event
from .dashboard.models import Announcement

__all__ = [
    "Profile",
    "Module",
    "ModuleTask",
    "TaskCompletion",
    "Batch",
    "BatchEnrollment",
    "Task",
    "Conversation",
    "Message",
    "Event",
    "Announcement",
]
