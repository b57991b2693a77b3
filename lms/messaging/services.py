"""
Messaging Service

Operations on two-party conversations: start (or reuse) a conversation,
post a message, mark the other party's messages read and build the
per-user conversation overview.

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, List, Tuple

from django.db.models import Count, Q
from django.utils import timezone
from django.utils.translation import gettext as _

from ..exceptions import ValidationFailed
from .models import Conversation, Message

logger = logging.getLogger(__name__)


def start_conversation(user, other) -> Tuple[Conversation, bool]:
    """
    Return the conversation between ``user`` and ``other``, creating it if needed.

    Returns:
        (conversation, created) like ``get_or_create``

    Raises:
        ValidationFailed: ``other`` is the user themselves
    """
    if user.pk == other.pk:
        raise ValidationFailed(_("You cannot start a conversation with yourself."))

    conversation = Conversation.objects.between(user, other).first()
    if conversation is not None:
        return conversation, False

    conversation = Conversation.objects.create(participant_one=user, participant_two=other)
    logger.info(f"Conversation {conversation.id} started by user {user.id} with user {other.id}")
    return conversation, True


def post_message(conversation: Conversation, sender, text: str) -> Message:
    """
    Add a message and bump the conversation's activity time.

    Raises:
        ValidationFailed: Blank text
    """
    text = (text or "").strip()
    if not text:
        raise ValidationFailed(_("Message text must not be empty."), error_code="empty_message")

    message = Message.objects.create(conversation=conversation, sender=sender, text=text)
    conversation.last_activity_at = message.created_at
    conversation.save(update_fields=["last_activity_at"])
    return message


def mark_read(conversation: Conversation, reader) -> int:
    """Mark the messages ``reader`` received in this conversation as read."""
    return (
        conversation.messages.filter(read_at__isnull=True)
        .exclude(sender=reader)
        .update(read_at=timezone.now())
    )


def conversation_summaries(user) -> List[Dict[str, Any]]:
    """
    Conversation overview for ``user``, most recent activity first.

    Each entry names the other participant and carries the last message
    text and the number of unread messages from the other participant.
    """
    conversations = (
        Conversation.objects.for_user(user)
        .select_related(
            "participant_one", "participant_one__profile",
            "participant_two", "participant_two__profile",
        )
        .annotate(
            unread=Count(
                "messages",
                filter=Q(messages__read_at__isnull=True) & ~Q(messages__sender=user),
            )
        )
        .order_by("-last_activity_at", "-id")
    )

    summaries = []
    for conversation in conversations:
        other = conversation.other_participant(user)
        profile = getattr(other, "profile", None)
        last = conversation.messages.order_by("-created_at", "-id").first()
        summaries.append(
            {
                "id": conversation.id,
                "user_id": other.id,
                "name": profile.get_display_name() if profile else other.get_username(),
                "role": profile.role if profile else None,
                "avatar_url": profile.avatar_url if profile else "",
                "last_message": last.text if last else "",
                "last_activity_at": conversation.last_activity_at,
                "unread": conversation.unread,
            }
        )
    return summaries
