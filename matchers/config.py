"""
Runtime settings for the scoring engine.

Values are read from the environment with the ``FUZZY_`` prefix, e.g.
``FUZZY_DEGENERATE_POLICY=neutral``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="fuzzy_")

    # What to do when two fused scores are certain and contradictory (0 and 1).
    # "raise" -> DegenerateCombination, "neutral" -> neutral_score
    degenerate_policy: Literal["raise", "neutral"] = "raise"
    neutral_score: float = 0.5

    # Character n-gram length used by cosine, dice and jaccard
    shingle_size: int = 3

    @field_validator("neutral_score")
    @classmethod
    def check_probability(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("neutral_score must be between 0 and 1")
        return value

    @field_validator("shingle_size")
    @classmethod
    def check_shingle_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("shingle_size must be a positive integer")
        return value


# logging
DEFAULT_LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)8s] - %(name)s@%(funcName)s: %(message)s"
        }
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr"
        },
    },
    "loggers": {
        "matchers": {
            "handlers": ["console"],
            "level": "INFO"
        }
    }
}
