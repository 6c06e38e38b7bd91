"""
PageRank Ranking for Course Prerequisites

Graph-based importance scoring of courses.

Components:
- GraphAdapter: Course records → reversed NetworkX graph
- PageRankEngine: Power iteration, ranking and top-N views
- compute_stats: Score distribution summary
"""

from .engine import PageRankEngine
from .graph_adapter import GraphAdapter
from .models import (
    Course,
    CourseNode,
    FoundationalCourse,
    Prerequisite,
    RankingRun,
    RankResult,
)
from .stats import RankingStats, compute_stats, score_bar_width

__all__ = [
    "Course",
    "CourseNode",
    "FoundationalCourse",
    "GraphAdapter",
    "PageRankEngine",
    "Prerequisite",
    "RankResult",
    "RankingRun",
    "RankingStats",
    "compute_stats",
    "score_bar_width",
]
