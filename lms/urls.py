"""
LMS Application URL Configuration

URL Structure (below /api/lms/):
- token/, token/refresh/, users/logout/: Cookie based JWT authentication
- access/:          Route resolution and sidebar navigation
- users/:           Own profile and the admin user directory
- roadmap/:         Modules, module task completion, course types
- dashboard/:       Home page summary
- announcements/:   Announcements
- batches/:         Batches and the enrollment workflow
- tasks/:           Task board (admin, tutor)
- conversations/:   Messaging
- events/:          Calendar
- students/:        Student overview (admin, tutor)
- statistics/:      Admin statistics

Author: DevMastery Development Team
Version: 1.0.0
"""

from typing import List

from django.urls import URLPattern, include, path
from rest_framework.routers import DefaultRouter, SimpleRouter

from .access import views as access_views
from .batches import views as batch_views
from .dashboard import views as dashboard_views
from .events import views as event_views
from .messaging import views as messaging_views
from .roadmap import views as roadmap_views
from .statistics import views as statistics_views
from .students import views as student_views
from .tasks import views as task_views
from .users import views as user_views

app_name = "lms"


def _create_users_router() -> DefaultRouter:
    router = DefaultRouter()
    router.register(r"admin/users", user_views.UserCrudViewSet, basename="admin-users")
    return router


def _create_tasks_router() -> SimpleRouter:
    router = SimpleRouter()
    router.register(r"", task_views.TaskViewSet, basename="task")
    return router


users_router = _create_users_router()
tasks_router = _create_tasks_router()

# --- Access ---

access_urlpatterns: List[URLPattern] = [
    path("resolve/", access_views.RouteResolveView.as_view(), name="resolve"),
    path("navigation/", access_views.NavigationView.as_view(), name="navigation"),
]

# --- Users ---

users_urlpatterns: List[URLPattern] = [
    path("logout/", user_views.LogoutView.as_view(), name="logout"),
    path("me/", user_views.MeView.as_view(), name="me"),
    path("", include(users_router.urls)),
]

# --- Roadmap ---

roadmap_urlpatterns: List[URLPattern] = [
    path("modules/", roadmap_views.ModuleListCreateView.as_view(), name="module-list"),
    path("modules/<int:pk>/", roadmap_views.ModuleDetailView.as_view(), name="module-detail"),
    path(
        "tasks/<int:pk>/complete/",
        roadmap_views.ModuleTaskCompletionView.as_view(),
        name="task-complete",
    ),
    path("course-types/", roadmap_views.CourseTypeListView.as_view(), name="course-types"),
]

# --- Batches ---

batches_urlpatterns: List[URLPattern] = [
    path("", batch_views.BatchListCreateView.as_view(), name="batch-list"),
    path("<int:pk>/enroll/", batch_views.BatchEnrollView.as_view(), name="batch-enroll"),
    path(
        "enrollment-requests/",
        batch_views.EnrollmentRequestListView.as_view(),
        name="enrollment-requests",
    ),
    path(
        "enrollments/<int:pk>/approve/",
        batch_views.EnrollmentDecisionView.as_view(decision="approve"),
        name="enrollment-approve",
    ),
    path(
        "enrollments/<int:pk>/reject/",
        batch_views.EnrollmentDecisionView.as_view(decision="reject"),
        name="enrollment-reject",
    ),
]

# --- Messaging ---

messaging_urlpatterns: List[URLPattern] = [
    path("", messaging_views.ConversationListCreateView.as_view(), name="conversation-list"),
    path("<int:pk>/", messaging_views.ConversationDetailView.as_view(), name="conversation-detail"),
    path("<int:pk>/messages/", messaging_views.MessageCreateView.as_view(), name="message-create"),
]

# --- Main URL Configuration ---

urlpatterns: List[URLPattern] = [
    path("token/", user_views.LoginView.as_view(), name="token_obtain_pair"),
    path("token/refresh/", user_views.CookieTokenRefreshView.as_view(), name="token_refresh"),
    path("access/", include((access_urlpatterns, "access"))),
    path("users/", include((users_urlpatterns, "users"))),
    path("roadmap/", include((roadmap_urlpatterns, "roadmap"))),
    path("dashboard/", dashboard_views.DashboardView.as_view(), name="dashboard"),
    path(
        "announcements/",
        dashboard_views.AnnouncementListCreateView.as_view(),
        name="announcements",
    ),
    path("batches/", include((batches_urlpatterns, "batches"))),
    path("tasks/", include((tasks_router.urls, "tasks"))),
    path("conversations/", include((messaging_urlpatterns, "messaging"))),
    path("events/", event_views.EventListCreateView.as_view(), name="events"),
    path("students/", student_views.StudentListView.as_view(), name="students"),
    path("statistics/", statistics_views.StatisticsView.as_view(), name="statistics"),
]
