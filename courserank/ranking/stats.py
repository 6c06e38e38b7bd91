"""
Ranking statistics for display.
"""

from collections.abc import Sequence

from pydantic import BaseModel

from courserank.ranking.models import RankResult

MIN_BAR_PERCENT = 5.0


class RankingStats(BaseModel):
    """Summary of a ranking's score distribution."""

    count: int = 0
    total_score: float = 0.0
    avg_score: float = 0.0
    max_score: float = 0.0
    min_score: float = 0.0


def compute_stats(results: Sequence[RankResult]) -> RankingStats:
    """Summarize scores; an empty ranking gives all-zero stats."""
    if not results:
        return RankingStats()

    scores = [r.score for r in results]
    total = sum(scores)
    return RankingStats(
        count=len(scores),
        total_score=total,
        avg_score=total / len(scores),
        max_score=max(scores),
        min_score=min(scores),
    )


def score_bar_width(score: float, max_score: float) -> float:
    """Bar length as a percentage of the top score, never below 5%."""
    if max_score <= 0:
        return MIN_BAR_PERCENT
    return max(score / max_score * 100.0, MIN_BAR_PERCENT)
