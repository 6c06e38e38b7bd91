"""
Tests for ranking statistics.
"""

import pytest

from courserank.ranking import PageRankEngine, RankResult, compute_stats, score_bar_width


def test_empty_ranking_stats():
    stats = compute_stats([])

    assert stats.count == 0
    assert stats.avg_score == 0.0
    assert stats.max_score == 0.0
    assert stats.min_score == 0.0


def test_stats_values():
    results = [
        RankResult(course_id="A", rank=1, score=0.5),
        RankResult(course_id="B", rank=2, score=0.3),
        RankResult(course_id="C", rank=3, score=0.1),
    ]

    stats = compute_stats(results)

    assert stats.count == 3
    assert stats.total_score == pytest.approx(0.9)
    assert stats.avg_score == pytest.approx(0.3)
    assert stats.max_score == 0.5
    assert stats.min_score == 0.1


def test_stats_on_engine_output(sample):
    results = PageRankEngine().compute_ranking(sample.courses, sample.prerequisites)
    stats = compute_stats(results)

    assert stats.max_score == results[0].score
    assert stats.min_score == results[-1].score
    assert stats.min_score <= stats.avg_score <= stats.max_score


@pytest.mark.parametrize(
    "score,max_score,expected",
    [
        (0.5, 0.5, 100.0),
        (0.25, 0.5, 50.0),
        (0.01, 1.0, 5.0),
        (0.0, 0.0, 5.0),
    ],
)
def test_score_bar_width(score, max_score, expected):
    assert score_bar_width(score, max_score) == pytest.approx(expected)
