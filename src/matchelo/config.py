"""
Configuration management for matchelo.

Uses Pydantic Settings to load default rating parameters from environment
variables (prefixed MATCHELO_) or a .env file. These are only defaults:
CalculatorBuilder.from_settings() feeds them through the builder, and
anything can still be overridden per calculator or per match.

Usage:
    from matchelo.config import get_settings
    print(get_settings().k)

Nothing is read until get_settings() is first called, so importing the
library never touches the environment.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables can be set directly or via a .env file
    in the project root directory, e.g. MATCHELO_K=40.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MATCHELO_",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Rating Defaults
    # ==========================================================================

    k: float = Field(
        default=32.0,
        description="K-factor: maximum rating change per match",
    )
    deviation: float = Field(
        default=400.0,
        gt=0,
        description="Rating gap that makes a player 10x more likely to win",
    )
    score_weight: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Dampening of the scored strategy's dominance bonus for favourites",
    )
    ignore_draws: bool = Field(
        default=False,
        description="Leave ratings unchanged when a match is drawn",
    )
    strategy: str = Field(
        default="outcome",
        description="Built-in strategy name: 'outcome' or 'scored'",
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Format string passed to logging.basicConfig",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        """Ensure the strategy is one of the built-ins."""
        from matchelo.elo.strategy import STRATEGIES

        lower_v = v.lower()
        if lower_v not in STRATEGIES:
            raise ValueError(f"strategy must be one of {sorted(STRATEGIES)}")
        return lower_v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures we only load settings once,
    which is important because loading from .env can be slow.
    """
    return Settings()
