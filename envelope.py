"""Inbound request envelope sent by the voice platform.

Only the request type and (for intent requests) the intent name drive
routing; the rest is platform metadata kept for logging.
"""

from enum import Enum
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict


class RequestType(str, Enum):
    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class RequestEnvelope(BaseModel):
    """Immutable view of one platform invocation."""

    model_config = ConfigDict(frozen=True)

    request_type: str = ""
    intent_name: Optional[str] = None
    request_id: Optional[str] = None
    locale: Optional[str] = None
    session_id: Optional[str] = None
    application_id: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "RequestEnvelope":
        """Read the platform JSON event.

        Never raises on a malformed event: missing parts simply come back
        empty, and an empty request type matches no handler.
        """
        request = _section(event, "request")
        session = _section(event, "session")
        application = _section(session, "application")

        request_type = _text(request.get("type")) or ""
        intent_name = None
        if request_type == RequestType.INTENT.value:
            intent_name = _text(_section(request, "intent").get("name"))

        return cls(
            request_type=request_type,
            intent_name=intent_name,
            request_id=_text(request.get("requestId")),
            locale=_text(request.get("locale")),
            session_id=_text(session.get("sessionId")),
            application_id=_text(application.get("applicationId")),
            reason=_text(request.get("reason")),
        )


def _section(data: Any, key: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        return {}
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def is_request_type(request_type: str) -> Callable[[RequestEnvelope], bool]:
    """Predicate matching envelopes of the given request type."""
    return lambda envelope: envelope.request_type == request_type


def is_intent_name(intent_name: str) -> Callable[[RequestEnvelope], bool]:
    """Predicate matching intent requests for the given intent."""
    return lambda envelope: (
        envelope.request_type == RequestType.INTENT.value
        and envelope.intent_name == intent_name
    )
