# apps/bugtracker/serializers.py
from __future__ import annotations

from rest_framework import serializers

from .constants import (
    DEFAULT_SEVERITY,
    DESCRIPTION_NOT_STRING,
    SEVERITIES,
    SEVERITY_INVALID,
    TITLE_FIELD_REQUIRED,
    TITLE_MAX_LENGTH,
    TITLE_NOT_STRING,
    TITLE_TOO_LONG,
)
from .models import BugReport


class StrictCharField(serializers.CharField):
    """CharField that rejects numbers instead of turning them into text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class BugReportSerializer(serializers.ModelSerializer):
    # I word the errors the way the form shows them, so clients can render them as-is.
    title = StrictCharField(
        max_length=TITLE_MAX_LENGTH,
        error_messages={
            "required": TITLE_FIELD_REQUIRED,
            "blank": TITLE_FIELD_REQUIRED,
            "null": TITLE_FIELD_REQUIRED,
            "max_length": TITLE_TOO_LONG,
            "invalid": TITLE_NOT_STRING,
        },
    )
    description = StrictCharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        error_messages={"invalid": DESCRIPTION_NOT_STRING},
    )
    # Empty/null is accepted here and replaced with the default in validate().
    severity = serializers.ChoiceField(
        choices=SEVERITIES,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={"invalid_choice": SEVERITY_INVALID},
    )

    class Meta:
        model = BugReport
        fields = ["id", "title", "description", "severity"]
        read_only_fields = ["id"]

    def validate(self, attrs):
        attrs["severity"] = attrs.get("severity") or DEFAULT_SEVERITY
        attrs["description"] = attrs.get("description") or ""
        return attrs
