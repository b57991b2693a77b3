"""
Role-Gated Route Authorization

This module contains the authorization decision used for every navigation
and every API request. The decision is a pure function of the session state
and the permitted-roles set of the requested view:

- not authenticated                          -> redirect to the login entry point
- permitted roles non-empty, role not in it   -> redirect to the landing view
- otherwise                                   -> allow

The decision is never cached. Callers evaluate it again on each navigation,
so a role change between two navigations is reflected immediately.

Author: DevMastery Development Team
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from django.conf import settings

from .roles import role_set


def login_path() -> str:
    return getattr(settings, "LMS_LOGIN_PATH", "/login")


def landing_path() -> str:
    return getattr(settings, "LMS_LANDING_PATH", "/dashboard")


@dataclass(frozen=True)
class AccessDecision:
    """
    Outcome of a route authorization.

    Attributes:
        allowed: True if the requested view may be rendered
        redirect_to: Target path when the view is denied, None when allowed
    """

    allowed: bool
    redirect_to: Optional[str] = None

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def redirect(cls, target: str) -> "AccessDecision":
        return cls(allowed=False, redirect_to=target)

    @property
    def requires_login(self) -> bool:
        return not self.allowed and self.redirect_to == login_path()

    def to_dict(self) -> Dict[str, Any]:
        return {"allowed": self.allowed, "redirect_to": self.redirect_to}


def evaluate(
    is_authenticated: bool,
    role: Optional[str],
    permitted_roles: Iterable[str] = (),
) -> AccessDecision:
    """
    Decide whether a session may enter a view.

    Args:
        is_authenticated: Whether the session holds a credential
        role: Role of the current user, None if absent
        permitted_roles: Roles allowed to render the view; empty means any
            authenticated identity

    Returns:
        AccessDecision, either allow or a concrete redirect target

    Example:
        >>> evaluate(True, "student", {"admin"}).redirect_to
        '/dashboard'
    """
    if not is_authenticated:
        return AccessDecision.redirect(login_path())

    permitted = role_set(permitted_roles)
    if permitted and role not in permitted:
        return AccessDecision.redirect(landing_path())

    return AccessDecision.allow()
