# apps/bugtracker/client.py
"""
HTTP client for the bug report endpoint.

Every response is folded into a ``SubmissionResult`` so callers branch on the
result type instead of poking at status codes and body keys. Transport errors
are reported as ``Fault``; ``submit`` does not raise for them.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .constants import API_PATH, CREATED_MESSAGE, INVALID_DATA_MESSAGE, REQUEST_HEADERS
from .results import Created, Fault, SubmissionResult, ValidationFailed, normalize_errors

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


class BugReportClient:
    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        token: str = "",
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.url = base_url.rstrip("/") + API_PATH
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers: Dict[str, str] = dict(REQUEST_HEADERS)
        self.headers["Accept"] = "application/json"
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    @classmethod
    def from_settings(cls, **kwargs) -> "BugReportClient":
        """Build a client pointed at ``settings.BUG_REPORT_API_URL``."""
        from django.conf import settings

        return cls(settings.BUG_REPORT_API_URL, **kwargs)

    def submit(self, payload: Mapping[str, Any]) -> SubmissionResult:
        try:
            resp = self.session.post(
                self.url,
                json=dict(payload),
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("bug report POST %s failed: %s", self.url, exc)
            return Fault(reason=str(exc))
        return self._to_result(resp)

    def _to_result(self, resp: requests.Response) -> SubmissionResult:
        body = self._json(resp)

        if 200 <= resp.status_code < 300:
            record = body.get("bug_report") if isinstance(body, dict) else None
            message = body.get("message") if isinstance(body, dict) else None
            return Created(record=dict(record or {}), message=message or CREATED_MESSAGE)

        if resp.status_code == 422 and isinstance(body, dict) and isinstance(body.get("errors"), dict):
            errors = normalize_errors(body["errors"])
            if errors:
                return ValidationFailed(errors=errors, message=body.get("message") or INVALID_DATA_MESSAGE)

        reason = body.get("message") if isinstance(body, dict) else ""
        logger.warning("bug report POST %s answered %s", self.url, resp.status_code)
        return Fault(reason=str(reason or resp.reason or ""), status=resp.status_code)

    @staticmethod
    def _json(resp: requests.Response) -> Any:
        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError:
            return None
