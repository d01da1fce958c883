# apps/bugtracker/api.py
from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from drf_spectacular.utils import extend_schema, extend_schema_view

from .constants import CREATED_MESSAGE
from .models import BugReport
from .results import Created
from .schemas import (
    BugReportCreated201,
    BugReportInvalid422,
    CreateBugReportExample,
    CreatedResponseExample,
    InvalidResponseExample,
    MinimalBugReportExample,
)
from .serializers import BugReportSerializer
from .services import submit_bug_report


@extend_schema_view(
    create=extend_schema(
        summary="Report a bug",
        tags=["Bug reports"],
        description=(
            "Create a bug report. `severity` is optional and defaults to `medium` when omitted or empty. "
            "Invalid input returns **422** with per-field messages. Emits `bug_report.create` audit."
        ),
        request=BugReportSerializer,
        examples=[
            CreateBugReportExample,
            MinimalBugReportExample,
            CreatedResponseExample,
            InvalidResponseExample,
        ],
        responses={201: BugReportCreated201, 422: BugReportInvalid422},
    ),
)
class BugReportViewSet(mixins.CreateModelMixin, viewsets.GenericViewSet):
    """
    Create-only collection. Reports are never listed, edited or deleted here.
    """
    queryset = BugReport.objects.all()
    serializer_class = BugReportSerializer
    permission_classes = [IsAuthenticated]

    def create(self, request, *args, **kwargs):
        result = submit_bug_report(request.data if isinstance(request.data, dict) else {}, request=request)

        if isinstance(result, Created):
            return Response(
                {"message": CREATED_MESSAGE, "bug_report": result.record},
                status=status.HTTP_201_CREATED,
            )

        return Response(
            {"message": result.message, "errors": result.errors},
            status=422,
        )
