"""
DevMastery LMS URL Configuration

Routes the Django admin and the LMS API. All LMS endpoints live under /api/lms/.
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/lms/", include("lms.urls")),
]
