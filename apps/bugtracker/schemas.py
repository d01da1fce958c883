# apps/bugtracker/schemas.py
# Swagger/OpenAPI examples & inline serializers for the bug report endpoint,
# so /api/docs shows prefilled requests and typed responses.
from drf_spectacular.utils import OpenApiExample, inline_serializer
from rest_framework import serializers

from .constants import CREATED_MESSAGE, INVALID_DATA_MESSAGE, TITLE_TOO_LONG

_RECORD_FIELDS = {
    "id": serializers.IntegerField(),
    "title": serializers.CharField(),
    "description": serializers.CharField(allow_blank=True),
    "severity": serializers.ChoiceField(choices=["low", "medium", "high"]),
}

# 201 body
BugReportCreated201 = inline_serializer(
    name="BugReportCreated201",
    fields={
        "message": serializers.CharField(),
        "bug_report": inline_serializer(name="BugReportRecord", fields=_RECORD_FIELDS),
    },
)

# 422 body: errors is {field: [messages]}
BugReportInvalid422 = inline_serializer(
    name="BugReportInvalid422",
    fields={
        "message": serializers.CharField(),
        "errors": serializers.DictField(child=serializers.ListField(child=serializers.CharField())),
    },
)

# ---- request body examples (prefilled) ----

CreateBugReportExample = OpenApiExample(
    "New bug report",
    value={
        "title": "Login button does nothing",
        "description": "Clicking 'Sign in' on Safari 17 has no effect.",
        "severity": "high",
    },
    request_only=True,
)

MinimalBugReportExample = OpenApiExample(
    "Title only (severity defaults to medium)",
    value={"title": "Typo on the dashboard"},
    request_only=True,
)

CreatedResponseExample = OpenApiExample(
    "Created",
    value={
        "message": CREATED_MESSAGE,
        "bug_report": {"id": 1, "title": "Typo on the dashboard", "description": "", "severity": "medium"},
    },
    response_only=True,
    status_codes=["201"],
)

InvalidResponseExample = OpenApiExample(
    "Title too long",
    value={"message": INVALID_DATA_MESSAGE, "errors": {"title": [TITLE_TOO_LONG]}},
    response_only=True,
    status_codes=["422"],
)
