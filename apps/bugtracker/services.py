# apps/bugtracker/services.py
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from django.db import transaction

from apps.audit.utils import log_event

from .models import BugReport
from .results import Created, SubmissionResult, ValidationFailed, normalize_errors
from .serializers import BugReportSerializer

logger = logging.getLogger(__name__)


def record_bug_report(validated_data: Dict[str, Any], request=None) -> BugReport:
    """
    Persist one already-validated report and return it with its id.
    Database errors propagate to the caller.
    """
    with transaction.atomic():
        bug = BugReport.objects.create(**validated_data)
        if request is not None:
            log_event(request, "bug_report.create", "BugReport", bug.id)
    logger.info("bug report %s stored (severity=%s)", bug.id, bug.severity)
    return bug


def submit_bug_report(data: Mapping[str, Any], request=None) -> SubmissionResult:
    """
    Validate ``data`` and store it. I return ``ValidationFailed`` instead of
    raising so the API view and the HTML page handle rejections the same way.
    """
    serializer = BugReportSerializer(data=data if data is not None else {})
    if not serializer.is_valid():
        errors = normalize_errors(serializer.errors)
        logger.debug("bug report rejected: %s", sorted(errors))
        return ValidationFailed(errors=errors)

    bug = record_bug_report(dict(serializer.validated_data), request=request)
    return Created(record=BugReportSerializer(bug).data)


class InProcessSubmitter:
    """
    Same ``submit(payload)`` shape as ``BugReportClient``, but calls the
    create operation directly. The server-rendered page uses this.
    """

    def __init__(self, request=None) -> None:
        self.request = request

    def submit(self, payload: Mapping[str, Any]) -> SubmissionResult:
        return submit_bug_report(payload, request=self.request)
