"""
LMS Messaging Views

- GET  conversations/                 -> overview of the user's conversations
- POST conversations/ {"user_id"}     -> start or reuse a conversation
- GET  conversations/<id>/            -> messages oldest first, marks them read
- POST conversations/<id>/messages/   -> send a message

Only participants can see a conversation; for everybody else it does not exist.

Author: DevMastery Development Team
Version: 1.0.0
"""

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ..access.roles import ANY_ROLE
from .models import Conversation
from .serializers import (
    ConversationSummarySerializer,
    MessageCreateSerializer,
    MessageSerializer,
    StartConversationSerializer,
)
from .services import conversation_summaries, mark_read, post_message, start_conversation


def get_conversation(request: Request, pk: int) -> Conversation:
    return get_object_or_404(Conversation.objects.for_user(request.user), pk=pk)


class ConversationListCreateView(APIView):
    permitted_roles = ANY_ROLE

    def get(self, request: Request) -> Response:
        summaries = conversation_summaries(request.user)
        return Response(ConversationSummarySerializer(summaries, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = StartConversationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        conversation, created = start_conversation(request.user, serializer.validated_data["user"])
        return Response(
            {"id": conversation.id},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class ConversationDetailView(APIView):
    permitted_roles = ANY_ROLE

    def get(self, request: Request, pk: int) -> Response:
        conversation = get_conversation(request, pk)
        mark_read(conversation, request.user)
        messages = conversation.messages.order_by("created_at", "id")
        return Response(
            {
                "id": conversation.id,
                "messages": MessageSerializer(
                    messages, many=True, context={"request": request}
                ).data,
            }
        )


class MessageCreateView(APIView):
    permitted_roles = ANY_ROLE

    def post(self, request: Request, pk: int) -> Response:
        conversation = get_conversation(request, pk)
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = post_message(conversation, request.user, serializer.validated_data["text"])
        return Response(
            MessageSerializer(message, context={"request": request}).data,
            status=status.HTTP_201_CREATED,
        )
