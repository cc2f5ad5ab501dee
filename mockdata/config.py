# =============================================================================
# mockdata/config.py  -  Environment-driven settings
# =============================================================================
#
# All knobs come from environment variables.  main.py calls load_dotenv()
# first, so a local .env file works too.
#
#   MOCK_DATA_SEED=1234        seed the process-wide Faker for reproducible
#                              output (unset = fresh randomness every run)
#   MOCK_DATA_LOG_LEVEL=DEBUG  stderr log level (default INFO)
#   MOCK_DATA_LOG_COLOR=false  turn off ANSI colours (default true)
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring MOCK_DATA_SEED={raw!r}: not an integer")
        return None


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    log_level: str = "INFO"
    log_color: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        level = env.get("MOCK_DATA_LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"
        return cls(
            seed=_parse_seed(env.get("MOCK_DATA_SEED")),
            log_level=level,
            log_color=env.get("MOCK_DATA_LOG_COLOR", "true").lower() == "true",
        )
