"""
LMS User Authentication Views

This module provides the authentication endpoints of the dashboard: login,
token refresh and logout. JWT tokens never appear in response bodies; they
are stored in HTTP-only cookies.

Views:
- LoginView: Email + password login, sets the token cookies
- CookieTokenRefreshView: Rotates tokens from the refresh cookie
- LogoutView: Blacklists the refresh token and clears the cookies

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging

from django.conf import settings
from django.utils.translation import gettext_lazy as _
from rest_framework import permissions, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.tokens import RefreshToken

from backend.custom_auth import ACCESS_COOKIE, REFRESH_COOKIE, LenientJWTAuthentication
from ..serializers import EmailLoginSerializer, SessionUserSerializer

logger = logging.getLogger(__name__)


def set_token_cookies(response: Response, access=None, refresh=None) -> Response:
    """
    Store JWT tokens in HTTP-only cookies.

    Args:
        response: Response to attach the cookies to
        access: Access token (string or token object), optional
        refresh: Refresh token (string or token object), optional

    Returns:
        The same response
    """
    cookie_flags = {
        "httponly": True,
        "secure": settings.JWT_COOKIE_SECURE,
        "samesite": settings.JWT_COOKIE_SAMESITE,
        "path": "/",
    }
    if refresh:
        response.set_cookie(
            REFRESH_COOKIE,
            str(refresh),
            max_age=settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"],
            **cookie_flags,
        )
    if access:
        response.set_cookie(
            ACCESS_COOKIE,
            str(access),
            max_age=settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"],
            **cookie_flags,
        )
    return response


class LoginView(APIView):
    """
    Signs a user in with email and password.

    Request Body Example (JSON):
        {"email": "student@devmastery.com", "password": "password"}

    Response (success):
        {"detail": "Logged in successfully", "user": {...session user...}}

    Response (failure, 401):
        {"detail": "Invalid credentials. Try using one of the demo accounts."}
    """

    authentication_classes = [LenientJWTAuthentication]
    permission_classes = [permissions.AllowAny]

    def post(self, request: Request) -> Response:
        serializer = EmailLoginSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data["user"]
        refresh = serializer.validated_data["refresh"]
        logger.info(f"User {user.id} logged in")

        response = Response(
            {
                "detail": _("Logged in successfully"),
                "user": SessionUserSerializer(user).data,
            },
            status=status.HTTP_200_OK,
        )
        return set_token_cookies(response, access=refresh.access_token, refresh=refresh)


class CookieTokenRefreshView(APIView):
    """
    Refreshes the JWT pair from the refresh cookie and stores the new tokens
    in cookies again.
    """

    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request: Request) -> Response:
        refresh_token = request.COOKIES.get(REFRESH_COOKIE)
        if not refresh_token:
            return Response(
                {"detail": _("Refresh token not provided")},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = TokenRefreshSerializer(data={"refresh": refresh_token})
        try:
            serializer.is_valid(raise_exception=True)
        except TokenError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        response = Response(status=status.HTTP_200_OK)
        return set_token_cookies(
            response, access=data.get("access"), refresh=data.get("refresh")
        )


class LogoutView(APIView):
    """
    Logs the user out by invalidating the refresh token and clearing cookies.

    - Blacklists the refresh token from the cookie when present and valid.
    - Always answers 205 Reset Content without a body and deletes both cookies, so the
      session is torn down even if the token was already invalid.
    """

    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request: Request) -> Response:
        refresh_token = request.COOKIES.get(REFRESH_COOKIE)
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as e:
                logger.info(f"Logout with unusable refresh token: {e}")

        response = Response(status=status.HTTP_205_RESET_CONTENT)
        response.delete_cookie(REFRESH_COOKIE, path="/")
        response.delete_cookie(ACCESS_COOKIE, path="/")
        return response
