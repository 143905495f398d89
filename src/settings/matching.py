"""Role-name matching configuration.

Thresholds deciding when two role labels denote the same character.
Both are on a 0-100 scale.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.settings.base import ENV_CONFIG


class MatchingSettings(BaseSettings):
    """Fuzzy role matching thresholds.

    Attributes:
        token_set_threshold: Minimum token-set score (word order and
            subset tolerant).
        ratio_threshold: Minimum plain edit-distance score. Rejects a
            short label matching as a subset of an unrelated longer one.
    """

    model_config = ENV_CONFIG

    token_set_threshold: int = Field(default=80, alias="MATCH_TOKEN_SET_THRESHOLD")
    ratio_threshold: int = Field(default=50, alias="MATCH_RATIO_THRESHOLD")

    @field_validator("token_set_threshold", "ratio_threshold")
    @classmethod
    def validate_range(cls, v: int) -> int:
        """Validate threshold lies on the 0-100 scale."""
        if not 0 <= v <= 100:
            raise ValueError("Matching thresholds must be between 0 and 100")
        return v
