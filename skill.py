"""Skill assembly shared by the Lambda and HTTP entry points."""

import logging
from typing import Any, Dict, Mapping, Optional

from config import Settings
from envelope import RequestEnvelope
from handlers import CatchAllErrorHandler, default_handlers
from router import SkillRouter

log = logging.getLogger(__name__)


def build_router(settings: Optional[Settings] = None) -> SkillRouter:
    """Register the built-in handlers and the catch-all error handler."""
    settings = settings or Settings()
    return SkillRouter(
        error_handler=CatchAllErrorHandler(),
        handlers=default_handlers(settings.card_title),
    )


def invoke(router: SkillRouter, event: Mapping[str, Any]) -> Dict[str, Any]:
    """Parse ``event``, route it and return the serialized response."""
    envelope = RequestEnvelope.from_event(event)
    log.info(
        "Request %s type=%s intent=%s",
        envelope.request_id,
        envelope.request_type or "<missing>",
        envelope.intent_name,
    )
    return router.route(envelope).to_dict()
