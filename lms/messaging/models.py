"""
LMS Messaging Models

Models:
- Conversation: A thread between exactly two users
- Message: A text message inside a conversation

A message is unread for the recipient until ``read_at`` is set.

Author: DevMastery Development Team
Version: 1.0.0
"""

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _


class ConversationQuerySet(models.QuerySet):
    def for_user(self, user):
        return self.filter(Q(participant_one=user) | Q(participant_two=user))

    def between(self, user, other):
        return self.filter(
            Q(participant_one=user, participant_two=other)
            | Q(participant_one=other, participant_two=user)
        )


class Conversation(models.Model):
    participant_one = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="conversations_started",
    )
    participant_two = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="conversations_received",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    last_activity_at = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = ConversationQuerySet.as_manager()

    class Meta:
        verbose_name = _("Conversation")
        verbose_name_plural = _("Conversations")
        ordering = ["-last_activity_at", "-id"]
        db_table = "lms_conversation"

    def __str__(self) -> str:
        return f"{self.participant_one} <-> {self.participant_two}"

    def has_participant(self, user) -> bool:
        return user.pk in (self.participant_one_id, self.participant_two_id)

    def other_participant(self, user):
        if self.participant_one_id == user.pk:
            return self.participant_two
        return self.participant_one


class Message(models.Model):
    conversation = models.ForeignKey(
        Conversation, on_delete=models.CASCADE, related_name="messages"
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
    )
    text = models.TextField(verbose_name=_("Text"))
    created_at = models.DateTimeField(auto_now_add=True)
    read_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = _("Message")
        verbose_name_plural = _("Messages")
        ordering = ["created_at", "id"]
        db_table = "lms_message"

    def __str__(self) -> str:
        return f"{self.sender}: {self.text[:40]}"
