# apps/bugtracker/report_form.py
"""
The "Report a Bug" form, as a small state machine.

    IDLE --submit (title ok)--> SUBMITTING --Created----------> SETTLED_SUCCESS
      ^                              |--ValidationFailed/Fault--> SETTLED_ERROR
      |_____ submit with blank title stays IDLE (no request sent)

Settled states are interactive, just like IDLE. Only SUBMITTING locks the
submit control. The submitter is anything with ``submit(payload) ->
SubmissionResult``: ``BugReportClient`` over HTTP or ``InProcessSubmitter``
inside the server.
"""
from __future__ import annotations

import enum
import logging
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Optional, Protocol, Tuple

from .constants import (
    DRAFT_FIELDS,
    GENERAL_ERROR,
    INITIAL_DRAFT,
    SUBMIT_LABEL,
    SUBMITTING_LABEL,
    SUCCESS_MESSAGE,
    TITLE_REQUIRED,
)
from .results import Created, Fault, SubmissionResult, ValidationFailed

logger = logging.getLogger(__name__)


class Submitter(Protocol):
    def submit(self, payload: Dict[str, Any]) -> SubmissionResult: ...


class SubmissionInProgress(RuntimeError):
    """Raised when submit() is called while a request is still in flight."""


class FormStatus(enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SETTLED_SUCCESS = "settled_success"
    SETTLED_ERROR = "settled_error"


@dataclass
class Draft:
    title: str = INITIAL_DRAFT["title"]
    description: str = INITIAL_DRAFT["description"]
    severity: str = INITIAL_DRAFT["severity"]

    @classmethod
    def initial(cls) -> "Draft":
        return cls()

    def as_payload(self) -> Dict[str, str]:
        return asdict(self)


class ReportForm:
    def __init__(self, submitter: Submitter) -> None:
        self.submitter = submitter
        self.status = FormStatus.IDLE
        self.reset()

    def reset(self) -> None:
        """Back to a blank draft with nothing on screen."""
        self.draft = Draft.initial()
        self.field_errors: Dict[str, List[str]] = {}
        self.general_error = ""
        self.success_message = ""

    # ---- view helpers --------------------------------------------------------

    @property
    def is_interactive(self) -> bool:
        return self.status is not FormStatus.SUBMITTING

    @property
    def submit_disabled(self) -> bool:
        return not self.is_interactive

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if self.status is FormStatus.SUBMITTING else SUBMIT_LABEL

    def field_error(self, name: str) -> str:
        msgs = self.field_errors.get(name) or []
        return msgs[0] if msgs else ""

    @property
    def banner(self) -> Optional[Tuple[str, str]]:
        """The one page-level message to show, as ``(kind, text)``."""
        if self.success_message:
            return ("success", self.success_message)
        if self.general_error:
            return ("error", self.general_error)
        return None

    def as_context(self) -> Dict[str, Any]:
        return {
            "draft": self.draft,
            "status": self.status.value,
            "errors": {name: self.field_error(name) for name in self.field_errors},
            "general_error": self.general_error,
            "success_message": self.success_message,
            "submit_label": self.submit_label,
            "submit_disabled": self.submit_disabled,
        }

    # ---- transitions ---------------------------------------------------------

    def change(self, name: str, value: str) -> None:
        """
        Edit one draft field. A field error on that field goes away right
        away; other errors and the banners stay as they are.
        """
        if name not in DRAFT_FIELDS:
            raise KeyError(name)
        setattr(self.draft, name, value)
        self.field_errors.pop(name, None)

    def submit(self) -> Optional[SubmissionResult]:
        """
        Run one submission attempt. Returns the result, or None when the
        local title check stopped it before any request was made.
        """
        if self.status is FormStatus.SUBMITTING:
            raise SubmissionInProgress("a bug report is already being submitted")

        if not self.draft.title.strip():
            self.field_errors = {"title": [TITLE_REQUIRED]}
            self.general_error = ""
            self.success_message = ""
            self.status = FormStatus.IDLE
            return None

        self.field_errors = {}
        self.general_error = ""
        self.success_message = ""

        with self._in_flight():
            try:
                result = self.submitter.submit(self.draft.as_payload())
            except Exception as exc:
                logger.exception("bug report submission blew up")
                result = Fault(reason=str(exc))
            self._settle(result)
        return result

    @contextmanager
    def _in_flight(self) -> Iterator[None]:
        # Whatever happens inside, the control is usable again afterwards.
        self.status = FormStatus.SUBMITTING
        try:
            yield
        finally:
            if self.status is FormStatus.SUBMITTING:
                self.status = FormStatus.IDLE

    def _settle(self, result: SubmissionResult) -> None:
        if isinstance(result, Created):
            self.draft = Draft.initial()
            self.success_message = SUCCESS_MESSAGE
            self.status = FormStatus.SETTLED_SUCCESS
        elif isinstance(result, ValidationFailed) and result.errors:
            self.field_errors = {name: list(msgs) for name, msgs in result.errors.items()}
            self.status = FormStatus.SETTLED_ERROR
        else:
            self.general_error = GENERAL_ERROR
            self.status = FormStatus.SETTLED_ERROR
