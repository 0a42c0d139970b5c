import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

from .strategies import Difficulty

log = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_DELAY_MS = 500          # pause before the system answers
DEFAULT_DIFFICULTY = Difficulty.MEDIUM
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

ENV_PREFIX = "TTT_SOLO_"


@dataclass(frozen=True)
class GameConfig:
    """
    runtime settings; nothing here is persisted
    """
    system_delay_ms: int = DEFAULT_DELAY_MS
    default_difficulty: Difficulty = DEFAULT_DIFFICULTY
    log_level: str = DEFAULT_LOG_LEVEL
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ=None):
        """
        read TTT_SOLO_* variables; bad values keep the default
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw = env.get(ENV_PREFIX + "DELAY_MS")
        if raw is not None:
            try:
                config = config.with_delay(int(raw))
            except ValueError:
                log.warning("ignoring %sDELAY_MS=%r", ENV_PREFIX, raw)

        raw = env.get(ENV_PREFIX + "DIFFICULTY")
        if raw is not None:
            try:
                config = replace(config, default_difficulty=Difficulty.parse(raw))
            except ValueError:
                log.warning("ignoring %sDIFFICULTY=%r", ENV_PREFIX, raw)

        raw = env.get(ENV_PREFIX + "LOG_LEVEL")
        if raw:
            level = raw.strip().upper()
            if level in LOG_LEVELS:
                config = replace(config, log_level=level)
            else:
                log.warning("ignoring %sLOG_LEVEL=%r", ENV_PREFIX, raw)

        raw = env.get(ENV_PREFIX + "SEED")
        if raw:
            try:
                config = replace(config, seed=int(raw))
            except ValueError:
                log.warning("ignoring %sSEED=%r", ENV_PREFIX, raw)

        return config

    def with_delay(self, delay_ms):
        if delay_ms < 0:
            raise ValueError("delay must be >= 0")
        return replace(self, system_delay_ms=delay_ms)


def configure_logging(level=DEFAULT_LOG_LEVEL):
    """
    root handler for the app entry point
    """
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING),
                        format=LOG_FORMAT)
