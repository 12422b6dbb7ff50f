"""Request router for the skill.

Maps inbound request envelopes to handler objects. Handlers are checked in
registration order and the first one whose ``matches`` returns true builds
the response. Anything that goes wrong ends up at the error handler, so every
call produces exactly one response.
"""

import logging
from typing import Iterable, List, Optional, Protocol

from envelope import RequestEnvelope
from response import Response, ResponseBuilder

log = logging.getLogger(__name__)

APOLOGY_SPEECH = "Sorry, I can't understand the command. Please say again."


class Handler(Protocol):
    def matches(self, envelope: RequestEnvelope) -> bool: ...

    def respond(self, envelope: RequestEnvelope) -> Response: ...


class ErrorHandler(Protocol):
    def handle(self, envelope: RequestEnvelope, error: "SkillError") -> Response: ...


class SkillError(Exception):
    """Base class for routing failures passed to the error handler."""


class NoHandlerMatched(SkillError):
    def __init__(self, envelope: RequestEnvelope):
        self.envelope = envelope
        detail = envelope.request_type or "<missing>"
        if envelope.intent_name:
            detail = f"{detail}/{envelope.intent_name}"
        super().__init__(f"No handler matched request {detail}")


class HandlerFailed(SkillError):
    def __init__(self, handler_name: str, cause: BaseException):
        self.handler_name = handler_name
        self.cause = cause
        super().__init__(f"{handler_name} failed: {cause}")


def apology_response() -> Response:
    return (
        ResponseBuilder()
        .speak(APOLOGY_SPEECH)
        .reprompt(APOLOGY_SPEECH)
        .get_response()
    )


def handler_name(handler: object) -> str:
    return type(handler).__name__


class SkillRouter:
    def __init__(self, error_handler: ErrorHandler, handlers: Optional[Iterable[Handler]] = None):
        self.error_handler = error_handler
        self.handlers: List[Handler] = list(handlers or [])

    def register(self, handler: Handler) -> None:
        """Append ``handler``; earlier registrations win ties."""
        self.handlers.append(handler)

    def route(self, envelope: RequestEnvelope) -> Response:
        for handler in self.handlers:
            try:
                if not handler.matches(envelope):
                    continue
                log.debug("Request %s handled by %s", envelope.request_id, handler_name(handler))
                return handler.respond(envelope)
            except Exception as exc:
                return self._fail(envelope, HandlerFailed(handler_name(handler), exc))
        return self._fail(envelope, NoHandlerMatched(envelope))

    def _fail(self, envelope: RequestEnvelope, error: SkillError) -> Response:
        try:
            return self.error_handler.handle(envelope, error)
        except Exception:
            log.exception("Error handler %s raised", handler_name(self.error_handler))
            return apology_response()
