"""
LMS Calendar Views

- GET  events/?date=YYYY-MM-DD -> events on that local date, all events without a date
- POST events/                 -> create an event (admin, tutor)

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging
from datetime import datetime

from django.utils.translation import gettext_lazy as _
from rest_framework import generics, serializers, status
from rest_framework.request import Request
from rest_framework.response import Response

from ..access.roles import ANY_ROLE, STAFF_ROLES
from .models import Event

logger = logging.getLogger(__name__)


class EventSerializer(serializers.ModelSerializer):
    created_by = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Event
        fields = ["id", "title", "description", "starts_at", "event_type", "created_by"]
        read_only_fields = ["id"]


class EventListCreateView(generics.ListCreateAPIView):
    permitted_roles = ANY_ROLE
    write_roles = STAFF_ROLES
    serializer_class = EventSerializer
    queryset = Event.objects.all()

    def list(self, request: Request, *args, **kwargs) -> Response:
        queryset = self.get_queryset()
        raw_date = request.query_params.get("date")
        if raw_date:
            try:
                day = datetime.strptime(raw_date, "%Y-%m-%d").date()
            except ValueError:
                return Response(
                    {"detail": _("Invalid date '%(date)s', expected YYYY-MM-DD.") % {"date": raw_date}},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            # __date compares in the current time zone
            queryset = queryset.filter(starts_at__date=day)

        return Response(self.get_serializer(queryset, many=True).data)

    def perform_create(self, serializer):
        event = serializer.save(created_by=self.request.user)
        logger.info(f"Event {event.id} '{event.title}' created by user {self.request.user.id}")
