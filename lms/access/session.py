"""
Session State

A Session is the record of the current authenticated identity and its
credential. It is empty at start, filled by ``login``, refreshed by
``set_user`` after a profile update and emptied by ``logout``.

On the server a Session is rebuilt for every request from the validated JWT
and the user row behind it, so the role it carries is always the one stored
right now.

Author: DevMastery Development Team
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from rest_framework.request import Request

from .roles import normalize_role


@dataclass
class SessionUser:
    """Identity of the signed-in user as seen by the dashboard."""

    id: int
    display_name: str
    email: str
    role: Optional[str] = None
    avatar_url: str = ""

    @classmethod
    def from_user(cls, user) -> "SessionUser":
        """
        Build the session identity from a Django user and its profile.

        Args:
            user: Django User instance

        Returns:
            SessionUser with the current profile values
        """
        profile = getattr(user, "profile", None)
        return cls(
            id=user.pk,
            display_name=profile.get_display_name() if profile else user.get_username(),
            email=user.email,
            role=normalize_role(profile.role) if profile else None,
            avatar_url=profile.avatar_url if profile else "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "email": self.email,
            "role": self.role,
            "avatar_url": self.avatar_url,
        }


@dataclass
class Session:
    token: Optional[str] = None
    current_user: Optional[SessionUser] = field(default=None)

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @property
    def role(self) -> Optional[str]:
        return self.current_user.role if self.current_user else None

    def login(self, token: str, user: SessionUser) -> None:
        self.token = token
        self.current_user = user

    def logout(self) -> None:
        self.token = None
        self.current_user = None

    def set_user(self, user: SessionUser) -> None:
        self.current_user = user

    @classmethod
    def from_request(cls, request: Request) -> "Session":
        """
        Rebuild the session for a DRF request.

        The token is the validated JWT attached by the authentication class. A
        request without a valid token yields an empty session.

        Args:
            request: DRF request

        Returns:
            Session for this request
        """
        session = cls()
        user = getattr(request, "user", None)
        token = getattr(request, "auth", None)
        if token is None or user is None or not user.is_authenticated:
            return session

        session.login(str(token), SessionUser.from_user(user))
        return session
