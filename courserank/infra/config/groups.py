"""
Settings groups.

Settings are split into logical groups. Each group can be used on its own
and is assembled from the flat environment-backed fields in Settings.
"""

from typing import Literal

from pydantic import BaseModel, Field


class RankingConfig(BaseModel):
    """
    PageRank engine settings.

    A value of 0 means "use the engine default", as with PageRankEngine.
    """

    damping_factor: float = Field(default=0.85, ge=0.0, lt=1.0, description="Damping factor (0 = default)")
    max_iterations: int = Field(default=100, ge=0, description="Power iteration cap (0 = default)")
    tolerance: float = Field(default=1e-6, ge=0.0, description="Convergence threshold on max score delta (0 = default)")
    default_top_n: int = Field(default=10, ge=1, description="Courses shown by top-N views")


class LoggingConfig(BaseModel):
    """Structured logging settings."""

    level: str = Field(default="WARNING", description="Log level")
    format: Literal["json", "console"] = Field(default="console", description="Log renderer")
