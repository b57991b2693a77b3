from django.utils.translation import gettext_lazy as _
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ..access.roles import STAFF_ROLES
from .services import STATUSES, student_rows


class StudentRowSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.CharField(allow_blank=True)
    avatar_url = serializers.CharField(allow_blank=True)
    batch = serializers.CharField(allow_blank=True)
    status = serializers.CharField()
    progress = serializers.IntegerField()
    progress_band = serializers.CharField()


class StudentListView(APIView):
    """
    GET students/?search=&status=all|active|pending|inactive

    Student accounts with batch, status and roadmap progress.
    """

    permitted_roles = STAFF_ROLES

    def get(self, request: Request) -> Response:
        status_filter = request.query_params.get("status") or "all"
        if status_filter != "all" and status_filter not in STATUSES:
            return Response(
                {"detail": _("Unknown status '%(status)s'.") % {"status": status_filter}},
                status=status.HTTP_400_BAD_REQUEST,
            )

        rows = student_rows(request.query_params.get("search", ""), status_filter)
        return Response(StudentRowSerializer(rows, many=True).data)
