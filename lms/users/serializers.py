"""
LMS User Management Serializers

Serializers:
- EmailLoginSerializer: Email + password login issuing a JWT pair
- SessionUserSerializer: The session identity returned to the dashboard
- ProfileUpdateSerializer: Self-service update of display name and avatar
- UserAdminSerializer: Administrative user directory entry

Author: DevMastery Development Team
Version: 1.0.0
"""

from typing import Any, Dict

from django.contrib.auth import authenticate
from django.contrib.auth.models import User
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.tokens import RefreshToken

from ..access.roles import Role
from ..access.session import SessionUser
from .models import Profile

INVALID_CREDENTIALS = _("Invalid credentials. Try using one of the demo accounts.")


class EmailLoginSerializer(serializers.Serializer):
    """
    Authenticates a user by email (case-insensitive) and password.

    On success ``validated_data`` carries the user and a fresh refresh token;
    the view turns the token pair into cookies.
    """

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        user = User.objects.filter(email__iexact=attrs["email"]).order_by("id").first()
        if user is None:
            raise AuthenticationFailed(INVALID_CREDENTIALS)

        authenticated = authenticate(
            request=self.context.get("request"),
            username=user.get_username(),
            password=attrs["password"],
        )
        if authenticated is None:
            raise AuthenticationFailed(INVALID_CREDENTIALS)

        refresh = RefreshToken.for_user(authenticated)
        attrs["user"] = authenticated
        attrs["refresh"] = refresh
        return attrs


class SessionUserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    display_name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField(allow_null=True)
    avatar_url = serializers.CharField(allow_blank=True)

    def to_representation(self, instance):
        if isinstance(instance, User):
            instance = SessionUser.from_user(instance)
        return super().to_representation(instance)


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """
    Self-service profile update.

    Only the display name and the avatar can be changed here; email and role
    are managed by administrators.
    """

    class Meta:
        model = Profile
        fields = ("display_name", "avatar_url")

    def validate_display_name(self, value: str) -> str:
        value = value.strip()
        if not value:
            raise serializers.ValidationError(_("Name must not be empty."))
        return value


class UserAdminSerializer(serializers.ModelSerializer):
    """
    Administrative user directory entry.

    Role, display name and avatar are read from and written to the profile.
    """

    role = serializers.ChoiceField(
        choices=Role.choices, source="profile.role", allow_null=True, required=False
    )
    display_name = serializers.CharField(
        source="profile.display_name", required=False, allow_blank=True
    )
    avatar_url = serializers.URLField(
        source="profile.avatar_url", required=False, allow_blank=True
    )
    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = (
            "id",
            "username",
            "email",
            "name",
            "display_name",
            "role",
            "avatar_url",
            "is_active",
            "date_joined",
        )
        read_only_fields = ("id", "date_joined")

    def get_name(self, obj: User) -> str:
        profile = getattr(obj, "profile", None)
        return profile.get_display_name() if profile else obj.get_username()

    def validate_email(self, value: str) -> str:
        if value:
            user_id = self.instance.id if self.instance else None
            if User.objects.filter(email__iexact=value).exclude(id=user_id).exists():
                raise serializers.ValidationError(
                    _("A user with this email address already exists.")
                )
        return value

    def create(self, validated_data: Dict[str, Any]) -> User:
        profile_data = validated_data.pop("profile", {})
        user = User.objects.create_user(**validated_data)
        self._save_profile(user, profile_data)
        return user

    def update(self, instance: User, validated_data: Dict[str, Any]) -> User:
        profile_data = validated_data.pop("profile", {})
        instance = super().update(instance, validated_data)
        self._save_profile(instance, profile_data)
        return instance

    @staticmethod
    def _save_profile(user: User, profile_data: Dict[str, Any]) -> None:
        try:
            profile = user.profile
        except Profile.DoesNotExist:
            profile = Profile(user=user)
        for attr, value in profile_data.items():
            setattr(profile, attr, value)
        profile.save()
