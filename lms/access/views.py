"""
Access Views

Endpoints the frontend router calls to authorize navigation:

- GET /api/lms/access/resolve/?path=/users  -> allow or redirect decision
- GET /api/lms/access/navigation/           -> sidebar entries for the session

The resolver answers for anonymous sessions too, and treats an invalid or
expired token as a torn down session (redirect to login).

Author: DevMastery Development Team
Version: 1.0.0
"""

from django.utils.translation import gettext_lazy as _
from rest_framework import permissions, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.custom_auth import LenientJWTAuthentication
from .routes import navigation_for, normalize_path, resolve_route
from .session import Session


class RouteResolveView(APIView):
    authentication_classes = [LenientJWTAuthentication]
    permission_classes = [permissions.AllowAny]

    def get(self, request: Request) -> Response:
        path = request.query_params.get("path")
        if not path:
            return Response(
                {"detail": _("Query parameter 'path' is required.")},
                status=status.HTTP_400_BAD_REQUEST,
            )

        session = Session.from_request(request)
        decision = resolve_route(session, path)
        if decision is None:
            return Response(
                {"detail": _("Page not found."), "path": normalize_path(path)},
                status=status.HTTP_404_NOT_FOUND,
            )

        return Response({"path": normalize_path(path), **decision.to_dict()})


class NavigationView(APIView):
    def get(self, request: Request) -> Response:
        session = Session.from_request(request)
        items = [
            {"path": route.path, "label": route.nav_label, "icon": route.icon}
            for route in navigation_for(session)
        ]
        return Response({"user": session.current_user.to_dict(), "items": items})
