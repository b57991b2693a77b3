"""
LMS Profile Views

The signed-in user's own session identity and self-service profile update.
"""

import logging

from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ...access.session import Session, SessionUser
from ..models import Profile
from ..serializers import ProfileUpdateSerializer, SessionUserSerializer

logger = logging.getLogger(__name__)


class MeView(APIView):
    """
    GET:   the session user (id, display_name, email, role, avatar_url)
    PATCH: update display_name and/or avatar_url; email and role are read-only
    """

    def get(self, request: Request) -> Response:
        return Response(SessionUserSerializer(request.user).data)

    def patch(self, request: Request) -> Response:
        try:
            profile = request.user.profile
        except Profile.DoesNotExist:
            profile = Profile.objects.create(user=request.user)
        serializer = ProfileUpdateSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        session = Session.from_request(request)
        session.set_user(SessionUser.from_user(request.user))
        logger.info(f"Profile of user {request.user.id} updated")

        return Response(
            {
                "detail": _("Profile updated successfully"),
                "user": session.current_user.to_dict(),
            },
            status=status.HTTP_200_OK,
        )
