from functools import cached_property, lru_cache

import pydantic
from pydantic_settings import BaseSettings, SettingsConfigDict

from courserank.common.exceptions import InvalidConfigurationError
from courserank.infra.config.groups import LoggingConfig, RankingConfig


class Settings(BaseSettings):
    """
    CourseRank Application Settings

    Environment variables should use COURSERANK_ prefix.
    Example: COURSERANK_PAGERANK_DAMPING=0.9, COURSERANK_LOG_LEVEL=DEBUG

    Grouped access:
        settings.ranking    # RankingConfig
        settings.logging    # LoggingConfig

    Invalid group values raise InvalidConfigurationError.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COURSERANK_",
        extra="ignore",
    )

    # ========================================================================
    # Grouped Config Accessors
    # ========================================================================

    @cached_property
    def ranking(self) -> RankingConfig:
        """PageRank settings group."""
        try:
            return RankingConfig(
                damping_factor=self.pagerank_damping,
                max_iterations=self.pagerank_max_iterations,
                tolerance=self.pagerank_tolerance,
                default_top_n=self.default_top_n,
            )
        except pydantic.ValidationError as e:
            raise InvalidConfigurationError("Invalid ranking settings", {"errors": _summarize(e)}) from e

    @cached_property
    def logging(self) -> LoggingConfig:
        """Logging settings group."""
        try:
            return LoggingConfig(level=self.log_level, format=self.log_format)
        except pydantic.ValidationError as e:
            raise InvalidConfigurationError("Invalid logging settings", {"errors": _summarize(e)}) from e

    # ========================================================================
    # PageRank
    # ========================================================================

    pagerank_damping: float = 0.85
    pagerank_max_iterations: int = 100
    pagerank_tolerance: float = 1e-6
    default_top_n: int = 10

    # ========================================================================
    # Logging
    # ========================================================================

    log_level: str = "WARNING"
    log_format: str = "console"


def _summarize(error: pydantic.ValidationError) -> list[str]:
    return [f"{'.'.join(str(p) for p in item['loc'])}: {item['msg']}" for item in error.errors()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the process-wide settings instance.

    Raises:
        InvalidConfigurationError: If an environment value cannot be parsed
    """
    try:
        return Settings()
    except pydantic.ValidationError as e:
        raise InvalidConfigurationError("Invalid settings", {"errors": _summarize(e)}) from e
