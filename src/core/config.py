"""
Runtime configuration

Values come from environment variables (PAWNS_*) and can be overridden by command line flags.
The starting position is only checked for presence here, the console request models validate its content.
"""

import logging
import os
import sys
from typing import Mapping, Optional, Self

from pydantic import BaseModel, field_validator

ENV_PREFIX = "PAWNS_"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    log_level: str = "WARNING"
    starting_position: Optional[str] = None
    white_player: Optional[str] = None
    black_player: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("starting_position", "white_player", "black_player")
    @classmethod
    def blank_means_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Collect all PAWNS_* variables. Unknown ones are ignored."""
        environ = os.environ if environ is None else environ
        values = {
            name: environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in environ
        }
        return cls(**values)

    def with_overrides(self, **overrides: Optional[str]) -> Self:
        """Command line flags win over the environment (None = flag not given)"""
        given = {key: value for key, value in overrides.items() if value is not None}
        return self.model_validate({**self.model_dump(), **given})


def configure_logging(settings: Settings) -> None:
    """Logs go to stderr so they never end up in between the board printed on stdout."""
    logging.basicConfig(
        level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr, force=True
    )
