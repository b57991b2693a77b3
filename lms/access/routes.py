"""
Dashboard Route Registry

Declares every dashboard view with its permitted-roles set and, where the view
appears in the sidebar, its navigation label. The registry is the single place
that answers "may this session enter this view" for the frontend router.

Author: DevMastery Development Team
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional

from .gate import AccessDecision, evaluate
from .roles import ADMIN_ONLY, ANY_ROLE, STAFF_ROLES
from .session import Session


@dataclass(frozen=True)
class RouteEntry:
    path: str
    permitted_roles: FrozenSet[str] = ANY_ROLE
    nav_label: Optional[str] = None
    icon: str = ""


# Sidebar order follows the order of declaration.
ROUTES: List[RouteEntry] = [
    RouteEntry("/dashboard", ANY_ROLE, "Dashboard", "layout-dashboard"),
    RouteEntry("/users", ADMIN_ONLY, "Users", "users"),
    RouteEntry("/statistics", ADMIN_ONLY, "Statistics", "bar-chart-2"),
    RouteEntry("/tasks", STAFF_ROLES, "Tasks", "check-circle-2"),
    RouteEntry("/students", STAFF_ROLES, "Students", "users"),
    RouteEntry("/roadmap", ANY_ROLE, "Learning Roadmap", "book-open"),
    RouteEntry("/calendar", ANY_ROLE, "Calendar", "calendar"),
    RouteEntry("/messages", ANY_ROLE, "Messages", "message-square"),
    RouteEntry("/settings", ANY_ROLE, "Settings", "settings"),
    RouteEntry("/profile", ANY_ROLE),
    RouteEntry("/batches", ANY_ROLE),
    RouteEntry("/batches/create", ADMIN_ONLY),
    RouteEntry("/enrollment-requests", STAFF_ROLES),
]

PUBLIC_PATHS = frozenset({"/login"})

_ROUTES_BY_PATH: Dict[str, RouteEntry] = {route.path: route for route in ROUTES}


def normalize_path(path: str) -> str:
    """Strip query string and trailing slash, keep a leading slash."""
    path = (path or "").split("?", 1)[0].strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/")
    return path


def find_route(path: str) -> Optional[RouteEntry]:
    return _ROUTES_BY_PATH.get(normalize_path(path))


def resolve_route(session: Session, path: str) -> Optional[AccessDecision]:
    """
    Authorize navigation to a dashboard path.

    Args:
        session: Session of the navigating user
        path: Requested frontend path

    Returns:
        AccessDecision for known and public paths, None for unknown paths
    """
    normalized = normalize_path(path)
    if normalized in PUBLIC_PATHS:
        return AccessDecision.allow()

    route = find_route(normalized)
    if route is None:
        return None

    return evaluate(session.is_authenticated, session.role, route.permitted_roles)


def navigation_for(session: Session) -> List[RouteEntry]:
    """Sidebar entries the session may enter, in sidebar order."""
    return [
        route
        for route in ROUTES
        if route.nav_label
        and evaluate(session.is_authenticated, session.role, route.permitted_roles).allowed
    ]
