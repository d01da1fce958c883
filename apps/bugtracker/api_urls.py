from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .api import BugReportViewSet

app_name = "bugtracker_api"

# Only the collection itself, at exactly /api/bug-reports (no API root, no format suffixes).
router = SimpleRouter(trailing_slash=False)
router.register(r"bug-reports", BugReportViewSet, basename="bug-report")

urlpatterns = [
    path("", include(router.urls)),
]
