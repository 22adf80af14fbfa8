"""
Configuration settings for the GSF combat log parser.

Handles environment variables and defaults for reading CombatLog files.
"""

import os
import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)

TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ParserSettings:
    """Parser configuration settings."""

    # CombatLog files are written by the game client without a BOM
    encoding: str = "utf-8"
    errors: str = "ignore"

    # Emit a match that is still open when the log ends
    flush_trailing_match: bool = False

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ParserSettings":
        """Load parser settings from environment variables."""
        return cls(
            encoding=os.getenv("GSFLOG_ENCODING", "utf-8"),
            errors=os.getenv("GSFLOG_ERRORS", "ignore"),
            flush_trailing_match=os.getenv("GSFLOG_FLUSH_TRAILING_MATCH", "false").lower()
            in TRUE_VALUES,
            log_level=os.getenv("GSFLOG_LOG_LEVEL", "INFO").upper(),
        )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level, INFO if the name is unknown."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO
