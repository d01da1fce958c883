# apps/bugtracker/results.py
"""
Outcome of one submission attempt, shared by the HTTP client, the in-process
submitter and the form. Exactly one of:

- ``Created``          the record was stored (201)
- ``ValidationFailed`` the endpoint rejected fields (422 with ``errors``)
- ``Fault``            anything else: transport error, 5xx, 401, bad body
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .constants import CREATED_MESSAGE, INVALID_DATA_MESSAGE


@dataclass(frozen=True)
class Created:
    record: Dict[str, Any] = field(default_factory=dict)
    message: str = CREATED_MESSAGE


@dataclass(frozen=True)
class ValidationFailed:
    errors: Dict[str, List[str]] = field(default_factory=dict)
    message: str = INVALID_DATA_MESSAGE


@dataclass(frozen=True)
class Fault:
    reason: str = ""
    status: Optional[int] = None


SubmissionResult = Union[Created, ValidationFailed, Fault]


def normalize_errors(raw: Any) -> Dict[str, List[str]]:
    """
    I coerce an ``errors`` mapping into ``{field: [str, ...]}``.
    Bare strings become one-item lists; empty entries are dropped.
    """
    out: Dict[str, List[str]] = {}
    if not isinstance(raw, dict):
        return out
    for name, value in raw.items():
        if isinstance(value, (list, tuple)):
            msgs = [str(v) for v in value if v not in (None, "")]
        elif value in (None, ""):
            msgs = []
        else:
            msgs = [str(value)]
        if msgs:
            out[str(name)] = msgs
    return out
