"""Skill responses and the fluent builder that produces them."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel

RESPONSE_VERSION = "1.0"


class BuilderFinalizedError(RuntimeError):
    """Raised when a builder is used after ``get_response``."""


class OutputSpeech(BaseModel):
    type: str = "PlainText"
    text: str


class Reprompt(BaseModel):
    outputSpeech: OutputSpeech


class SimpleCard(BaseModel):
    type: str = "Simple"
    title: str
    content: str


class ResponseBody(BaseModel):
    outputSpeech: Optional[OutputSpeech] = None
    reprompt: Optional[Reprompt] = None
    card: Optional[SimpleCard] = None
    shouldEndSession: bool


class ResponseEnvelope(BaseModel):
    """Wire shape returned to the platform."""

    version: str = RESPONSE_VERSION
    response: ResponseBody


@dataclass(frozen=True)
class Card:
    title: str
    content: str


@dataclass(frozen=True)
class Response:
    output_speech: Optional[str] = None
    reprompt_speech: Optional[str] = None
    card: Optional[Card] = None
    should_end_session: bool = True

    def to_envelope(self) -> ResponseEnvelope:
        body = ResponseBody(shouldEndSession=self.should_end_session)
        if self.output_speech is not None:
            body.outputSpeech = OutputSpeech(text=self.output_speech)
        if self.reprompt_speech is not None:
            body.reprompt = Reprompt(outputSpeech=OutputSpeech(text=self.reprompt_speech))
        if self.card is not None:
            body.card = SimpleCard(title=self.card.title, content=self.card.content)
        return ResponseEnvelope(response=body)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the platform's JSON response shape.

        Absent speech, reprompt and card are left out; ``shouldEndSession`` is
        always present.
        """
        return self.to_envelope().model_dump(exclude_none=True)


class ResponseBuilder:
    """Accumulate response parts, then finalize exactly once.

    Usage::
        response = (
            ResponseBuilder()
            .speak("Hello World!")
            .with_simple_card("Hello World", "Hello World!")
            .get_response()
        )

    Leaving out the reprompt ends the session after speaking; adding one keeps
    it open. ``set_should_end_session`` overrides either default.
    """

    def __init__(self):
        self._speech: Optional[str] = None
        self._reprompt: Optional[str] = None
        self._card: Optional[Card] = None
        self._should_end_session: Optional[bool] = None
        self._finalized = False

    def speak(self, text: str) -> "ResponseBuilder":
        self._check_open()
        self._speech = text
        return self

    def reprompt(self, text: str) -> "ResponseBuilder":
        self._check_open()
        self._reprompt = text
        return self

    def with_simple_card(self, title: str, content: str) -> "ResponseBuilder":
        self._check_open()
        self._card = Card(title=title, content=content)
        return self

    def set_should_end_session(self, should_end_session: bool) -> "ResponseBuilder":
        self._check_open()
        self._should_end_session = should_end_session
        return self

    def get_response(self) -> Response:
        self._check_open()
        self._finalized = True
        should_end = self._should_end_session
        if should_end is None:
            should_end = self._reprompt is None
        return Response(
            output_speech=self._speech,
            reprompt_speech=self._reprompt,
            card=self._card,
            should_end_session=should_end,
        )

    def _check_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError("Response already built")
