"""
LMS Batch Views

Views:
- BatchListCreateView: All batches (with the student's enrollment status);
  admins create batches
- BatchEnrollView: A student requests to join a batch
- EnrollmentRequestListView: Pending requests for admins and tutors
- EnrollmentDecisionView: Approve or reject a pending request

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging

from django.shortcuts import get_object_or_404
from rest_framework import generics, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ..access.roles import ADMIN_ONLY, ANY_ROLE, STAFF_ROLES, STUDENT_ONLY, Role
from ..users.models import role_of
from .models import Batch, BatchEnrollment
from .serializers import BatchSerializer, EnrollmentRequestSerializer, EnrollmentSerializer
from .services import decide_enrollment, enroll_student, enrollment_statuses, pending_requests

logger = logging.getLogger(__name__)


class BatchListCreateView(generics.ListCreateAPIView):
    permitted_roles = ANY_ROLE
    write_roles = ADMIN_ONLY
    serializer_class = BatchSerializer
    queryset = Batch.objects.all()

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if role_of(self.request.user) == Role.STUDENT:
            context["statuses"] = enrollment_statuses(self.request.user)
        return context

    def perform_create(self, serializer):
        batch = serializer.save(created_by=self.request.user)
        logger.info(f"Batch {batch.id} '{batch.name}' created by user {self.request.user.id}")


class BatchEnrollView(APIView):
    permitted_roles = STUDENT_ONLY

    def post(self, request: Request, pk: int) -> Response:
        batch = get_object_or_404(Batch, pk=pk)
        enrollment = enroll_student(batch, request.user)
        return Response(EnrollmentSerializer(enrollment).data, status=status.HTTP_201_CREATED)


class EnrollmentRequestListView(generics.ListAPIView):
    permitted_roles = STAFF_ROLES
    serializer_class = EnrollmentRequestSerializer

    def get_queryset(self):
        return pending_requests()


class EnrollmentDecisionView(APIView):
    """
    POST /enrollments/<pk>/approve/ or /enrollments/<pk>/reject/

    Answers 409 when the request was already decided.
    """

    permitted_roles = STAFF_ROLES
    decision = None

    def post(self, request: Request, pk: int) -> Response:
        enrollment = get_object_or_404(BatchEnrollment, pk=pk)
        enrollment = decide_enrollment(enrollment, request.user, self.decision)
        return Response(EnrollmentSerializer(enrollment).data)
