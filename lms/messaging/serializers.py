from django.contrib.auth.models import User
from rest_framework import serializers

from .models import Message


class ConversationSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    name = serializers.CharField()
    role = serializers.CharField(allow_null=True)
    avatar_url = serializers.CharField(allow_blank=True)
    last_message = serializers.CharField(allow_blank=True)
    last_activity_at = serializers.DateTimeField()
    unread = serializers.IntegerField()


class MessageSerializer(serializers.ModelSerializer):
    """Message flagged from the viewpoint of the requesting user (self | other)."""

    sender = serializers.SerializerMethodField()

    class Meta:
        model = Message
        fields = ["id", "text", "sender", "created_at", "read_at"]

    def get_sender(self, obj: Message) -> str:
        user = self.context["request"].user
        return "self" if obj.sender_id == user.pk else "other"


class MessageCreateSerializer(serializers.Serializer):
    text = serializers.CharField(allow_blank=True, trim_whitespace=False)


class StartConversationSerializer(serializers.Serializer):
    user_id = serializers.PrimaryKeyRelatedField(queryset=User.objects.all(), source="user")
