"""Built-in request handlers for the Hello World skill.

Each handler pairs a ``matches`` predicate with a ``respond`` action. Whether a
response carries a reprompt matters to the platform: without one the session
closes after speaking.
"""

import logging
from typing import List

from config import DEFAULT_CARD_TITLE
from envelope import RequestEnvelope, RequestType, is_intent_name, is_request_type
from response import Response, ResponseBuilder
from router import Handler, HandlerFailed, NoHandlerMatched, SkillError, apology_response

log = logging.getLogger(__name__)

WELCOME_SPEECH = "Welcome to the Alexa Skills Kit, you can say hello!"
HELLO_SPEECH = "Hello World!"
HELP_SPEECH = "You can say hello to me!"
GOODBYE_SPEECH = "Goodbye!"


class LaunchRequestHandler:
    """Skill opened without a specific intent."""

    def __init__(self, card_title: str = DEFAULT_CARD_TITLE):
        self.card_title = card_title

    def matches(self, envelope: RequestEnvelope) -> bool:
        return is_request_type(RequestType.LAUNCH.value)(envelope)

    def respond(self, envelope: RequestEnvelope) -> Response:
        return (
            ResponseBuilder()
            .speak(WELCOME_SPEECH)
            .reprompt(WELCOME_SPEECH)
            .with_simple_card(self.card_title, WELCOME_SPEECH)
            .get_response()
        )


class HelloWorldIntentHandler:
    def __init__(self, card_title: str = DEFAULT_CARD_TITLE):
        self.card_title = card_title

    def matches(self, envelope: RequestEnvelope) -> bool:
        return is_intent_name("HelloWorldIntent")(envelope)

    def respond(self, envelope: RequestEnvelope) -> Response:
        return (
            ResponseBuilder()
            .speak(HELLO_SPEECH)
            .with_simple_card(self.card_title, HELLO_SPEECH)
            .get_response()
        )


class HelpIntentHandler:
    def __init__(self, card_title: str = DEFAULT_CARD_TITLE):
        self.card_title = card_title

    def matches(self, envelope: RequestEnvelope) -> bool:
        return is_intent_name("AMAZON.HelpIntent")(envelope)

    def respond(self, envelope: RequestEnvelope) -> Response:
        return (
            ResponseBuilder()
            .speak(HELP_SPEECH)
            .reprompt(HELP_SPEECH)
            .with_simple_card(self.card_title, HELP_SPEECH)
            .get_response()
        )


class CancelAndStopIntentHandler:
    """One handler for both AMAZON.CancelIntent and AMAZON.StopIntent."""

    def __init__(self, card_title: str = DEFAULT_CARD_TITLE):
        self.card_title = card_title

    def matches(self, envelope: RequestEnvelope) -> bool:
        return is_intent_name("AMAZON.CancelIntent")(envelope) or is_intent_name(
            "AMAZON.StopIntent"
        )(envelope)

    def respond(self, envelope: RequestEnvelope) -> Response:
        return (
            ResponseBuilder()
            .speak(GOODBYE_SPEECH)
            .with_simple_card(self.card_title, GOODBYE_SPEECH)
            .get_response()
        )


class SessionEndedRequestHandler:
    """Cleanup hook. The platform ignores speech or cards sent here."""

    def matches(self, envelope: RequestEnvelope) -> bool:
        return is_request_type(RequestType.SESSION_ENDED.value)(envelope)

    def respond(self, envelope: RequestEnvelope) -> Response:
        log.info("Session %s ended: %s", envelope.session_id, envelope.reason or "unknown")
        return ResponseBuilder().get_response()


class CatchAllErrorHandler:
    """Terminal fallback for unmatched requests and failing handlers."""

    def handle(self, envelope: RequestEnvelope, error: SkillError) -> Response:
        if isinstance(error, NoHandlerMatched):
            log.warning("Error handled [no_match]: %s", error)
        elif isinstance(error, HandlerFailed):
            log.error("Error handled [handler_failed]: %s", error, exc_info=error.cause)
        else:
            log.error("Error handled: %s", error)
        return apology_response()


def default_handlers(card_title: str = DEFAULT_CARD_TITLE) -> List[Handler]:
    """Built-in handlers in registration order."""
    return [
        LaunchRequestHandler(card_title),
        HelloWorldIntentHandler(card_title),
        HelpIntentHandler(card_title),
        CancelAndStopIntentHandler(card_title),
        SessionEndedRequestHandler(),
    ]
