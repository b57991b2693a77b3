import logging
from typing import Optional, TypeVar

from django.contrib.auth.models import AbstractBaseUser
from rest_framework import HTTP_HEADER_ENCODING
from rest_framework.request import Request

from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.tokens import Token
from rest_framework_simplejwt.authentication import JWTAuthentication as original_auth

logger = logging.getLogger(__name__)

ACCESS_COOKIE = "access_token"
REFRESH_COOKIE = "refresh_token"

AuthUser = TypeVar("AuthUser", AbstractBaseUser, TokenUser)


class JWTAuthentication(original_auth):
    """
    Custom JWT redefinition, read the JWT token from the cookie contents first and
    fall back to the Authorization header. Everything else is inherited from SimpleJWT.
    """

    www_authenticate_realm = "api"
    media_type = "application/json"

    def authenticate(self, request: Request) -> Optional[tuple[AuthUser, Token]]:
        cookie = request.COOKIES.get(ACCESS_COOKIE) or None
        if cookie is None:
            return super().authenticate(request)

        raw_token = cookie.encode(HTTP_HEADER_ENCODING)
        validated_token = self.get_validated_token(raw_token)

        return self.get_user(validated_token), validated_token


class LenientJWTAuthentication(JWTAuthentication):
    """
    Same as JWTAuthentication, but an invalid or expired token yields an anonymous
    request instead of a 401. Used where a torn down session is a valid answer.
    """

    def authenticate(self, request: Request) -> Optional[tuple[AuthUser, Token]]:
        try:
            return super().authenticate(request)
        except (InvalidToken, AuthenticationFailed) as e:
            logger.info(f"Ignoring invalid token on lenient endpoint: {e}")
            return None
