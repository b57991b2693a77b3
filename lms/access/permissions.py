import logging
from typing import FrozenSet

from django.utils.translation import gettext_lazy as _
from rest_framework.exceptions import NotAuthenticated
from rest_framework.permissions import BasePermission, SAFE_METHODS

from .gate import evaluate
from .roles import ANY_ROLE
from .session import Session

logger = logging.getLogger(__name__)


def permitted_roles_for(request, view) -> FrozenSet[str]:
    """
    Permitted roles declared by a view for this request.

    Views declare ``permitted_roles`` and may add ``write_roles`` that replace
    it for unsafe methods. ``get_permitted_roles(request)`` overrides both.
    """
    getter = getattr(view, "get_permitted_roles", None)
    if callable(getter):
        return frozenset(getter(request))

    write_roles = getattr(view, "write_roles", None)
    if write_roles is not None and request.method not in SAFE_METHODS:
        return frozenset(write_roles)

    return frozenset(getattr(view, "permitted_roles", ANY_ROLE))


class RoleGate(BasePermission):
    """
    Runs the route authorization decision for every API request.

    A redirect to the login entry point becomes 401, a redirect to the landing
    view becomes 403. The session is rebuilt per request, nothing is cached.
    """

    message = _("You don't have permission to access this page")

    def has_permission(self, request, view):
        session = Session.from_request(request)
        decision = evaluate(
            session.is_authenticated, session.role, permitted_roles_for(request, view)
        )
        if decision.allowed:
            return True

        if decision.requires_login:
            raise NotAuthenticated()

        logger.info(
            f"Denied {request.method} {request.path} for user "
            f"{session.current_user.id if session.current_user else None} with role {session.role}"
        )
        return False
