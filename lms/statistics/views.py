from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ..access.roles import ADMIN_ONLY
from .services import statistics_overview


class StatisticsView(APIView):
    """Admin statistics: enrollments, module completion, roles and batches."""

    permitted_roles = ADMIN_ONLY

    def get(self, request: Request) -> Response:
        return Response(statistics_overview())
