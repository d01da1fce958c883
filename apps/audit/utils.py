import logging

from django.core.exceptions import ValidationError
from django.core.validators import validate_ipv46_address

from apps.audit.models import AuditEvent

logger = logging.getLogger(__name__)


def _valid_ip(value) -> str | None:
    try:
        validate_ipv46_address(value)
    except ValidationError:
        return None
    return value


def _client_ip(request) -> str | None:
    # X-Forwarded-For is client-controlled; anything that isn't an address is dropped.
    xff = request.META.get("HTTP_X_FORWARDED_FOR")
    if xff:
        ip = _valid_ip(xff.split(",")[0].strip())
        if ip:
            return ip
    return _valid_ip(request.META.get("REMOTE_ADDR") or "")


def _actor(request):
    user = getattr(request, "user", None)
    return user if user is not None and user.is_authenticated else None


def log_event(request, action: str, object_type: str = "", object_id: str | int | None = None) -> AuditEvent:
    """I store one audit row and mirror it to the log stream."""
    actor = _actor(request)
    event = AuditEvent.objects.create(
        actor=actor,
        action=action,
        object_type=object_type,
        object_id=str(object_id or ""),
        ip=_client_ip(request),
        user_agent=request.META.get("HTTP_USER_AGENT", ""),
    )
    logger.info(
        "audit %s %s:%s by %s",
        action,
        object_type,
        event.object_id,
        getattr(actor, "pk", None) or "anonymous",
    )
    return event
