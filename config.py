"""Runtime configuration for the skill.

Values come from the environment (optionally seeded from a ``.env`` file).
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

log = logging.getLogger(__name__)

DEFAULT_CARD_TITLE = "Hello World"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    card_title: str = DEFAULT_CARD_TITLE

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``env`` (defaults to ``os.environ``).

        Reads ``LOG_LEVEL``, ``SKILL_HOST``, ``SKILL_PORT`` and
        ``SKILL_CARD_TITLE``. A ``.env`` file is only consulted when no explicit
        mapping is given.
        """
        if env is None:
            load_dotenv()
            env = os.environ
        defaults = cls()

        raw_port = env.get("SKILL_PORT")
        port = defaults.port
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError:
                log.warning("Invalid SKILL_PORT %r, using %d", raw_port, defaults.port)

        log_level = (env.get("LOG_LEVEL") or defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log.warning("Invalid LOG_LEVEL %r, using %s", log_level, defaults.log_level)
            log_level = defaults.log_level

        return cls(
            log_level=log_level,
            host=env.get("SKILL_HOST") or defaults.host,
            port=port,
            card_title=env.get("SKILL_CARD_TITLE") or defaults.card_title,
        )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the entry points (Lambda, uvicorn)."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Lambda pre-installs a root handler, so basicConfig alone leaves its level untouched
    logging.getLogger().setLevel(level.upper())
