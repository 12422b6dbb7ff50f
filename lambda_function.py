"""AWS Lambda entry point for the skill.

The router is built once per container and reused across invocations; it
holds no per-request state.
"""

from typing import Any, Dict

from config import Settings, configure_logging
from skill import build_router, invoke

settings = Settings.from_env()
configure_logging(settings.log_level)

router = build_router(settings)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return invoke(router, event)
