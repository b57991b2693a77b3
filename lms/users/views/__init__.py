"""
LMS Users Views Package

Authentication, self-service profile and administrative user management.
"""

from .auth_views import (
    LoginView,
    CookieTokenRefreshView,
    LogoutView,
)
from .profile_views import MeView
from .user_crud_view import UserCrudViewSet
