"""
PageRank Engine

Rank courses by how foundational they are.

Runs a power iteration over the reversed prerequisite graph built by
GraphAdapter. Courses that many others depend on (directly or
transitively) end up with the highest scores.

Deviations from textbook PageRank:
- Rank held by a course with no prerequisites (a dangling node in the
  reversed graph) is not redistributed, so scores need not sum to 1.
- A falsy constructor argument (None or 0) means "use the default".
"""

from collections.abc import Sequence

import networkx as nx

from courserank.common.exceptions import InvalidConfigurationError
from courserank.common.observability import get_logger
from courserank.infra.config.groups import RankingConfig
from courserank.ranking.models import (
    Course,
    CourseNode,
    FoundationalCourse,
    Prerequisite,
    RankingRun,
    RankResult,
)

from .graph_adapter import GraphAdapter

logger = get_logger(__name__)

DEFAULT_DAMPING_FACTOR = 0.85
DEFAULT_MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 1e-6


class PageRankEngine:
    """
    Compute foundational-course rankings.

    The engine keeps no state between calls apart from its three
    parameters, which are fixed at construction time.

    Usage:
        engine = PageRankEngine(damping_factor=0.9)
        results = engine.compute_ranking(courses, prerequisites)
    """

    def __init__(
        self,
        damping_factor: float | None = None,
        max_iterations: int | None = None,
        tolerance: float | None = None,
    ):
        """
        Initialize PageRank engine.

        Args:
            damping_factor: Probability of following a link, in (0, 1). Default 0.85
            max_iterations: Power iteration cap. Default 100
            tolerance: Stop once the largest score change is below this. Default 1e-6

        Raises:
            InvalidConfigurationError: If a supplied value is out of range
        """
        self._damping_factor = DEFAULT_DAMPING_FACTOR
        self._max_iterations = DEFAULT_MAX_ITERATIONS
        self._tolerance = DEFAULT_TOLERANCE

        # Falsy overrides (None, 0, 0.0) fall back to the defaults
        if damping_factor:
            if not 0.0 < damping_factor < 1.0:
                raise InvalidConfigurationError(
                    "damping_factor must be between 0 and 1",
                    {"damping_factor": damping_factor},
                )
            self._damping_factor = damping_factor
        if max_iterations:
            if max_iterations < 0:
                raise InvalidConfigurationError(
                    "max_iterations must be positive",
                    {"max_iterations": max_iterations},
                )
            self._max_iterations = int(max_iterations)
        if tolerance:
            if tolerance < 0:
                raise InvalidConfigurationError(
                    "tolerance must be positive",
                    {"tolerance": tolerance},
                )
            self._tolerance = tolerance

        self.adapter = GraphAdapter()

    @classmethod
    def from_config(cls, config: RankingConfig) -> "PageRankEngine":
        """Create an engine from the ranking settings group."""
        return cls(
            damping_factor=config.damping_factor,
            max_iterations=config.max_iterations,
            tolerance=config.tolerance,
        )

    @property
    def damping_factor(self) -> float:
        return self._damping_factor

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def compute_ranking(self, courses: Sequence[Course], prerequisites: Sequence[Prerequisite]) -> list[RankResult]:
        """
        Rank all courses, most foundational first.

        Args:
            courses: Courses; their order decides ties
            prerequisites: Prerequisite pairs; unknown course IDs are ignored

        Returns:
            One RankResult per course, sorted by score descending,
            with ranks 1..N
        """
        return self.run(courses, prerequisites).results

    def run(self, courses: Sequence[Course], prerequisites: Sequence[Prerequisite]) -> RankingRun:
        """
        Rank all courses and report how the iteration ended.

        Not converging within max_iterations is not an error: the last
        computed scores are ranked and `converged` is False.

        Args:
            courses: Courses; their order decides ties
            prerequisites: Prerequisite pairs; unknown course IDs are ignored

        Returns:
            RankingRun with results and convergence information
        """
        G = self.adapter.build_graph(courses, prerequisites)
        scores, iterations, converged, max_delta = self._iterate(G)

        # Python's sort is stable, so equal scores keep input order
        ordered = sorted(scores.items(), key=lambda x: x[1], reverse=True)
        results = [
            RankResult(course_id=course_id, rank=position, score=score)
            for position, (course_id, score) in enumerate(ordered, start=1)
        ]

        return RankingRun(
            results=results,
            iterations=iterations,
            converged=converged,
            max_delta=max_delta,
        )

    def build_nodes(self, courses: Sequence[Course], prerequisites: Sequence[Prerequisite]) -> dict[str, CourseNode]:
        """
        Build the enriched node view with final scores.

        Args:
            courses: Courses
            prerequisites: Prerequisite pairs

        Returns:
            Dict mapping course_id to CourseNode (degrees, adjacency, score),
            in input order
        """
        prerequisites = list(prerequisites)
        G = self.adapter.build_graph(courses, prerequisites)
        nodes = self.adapter.build_nodes(G, prerequisites)

        scores, _, _, _ = self._iterate(G)
        for course_id, score in scores.items():
            nodes[course_id].score = score

        return nodes

    def top_foundational(
        self,
        courses: Sequence[Course],
        prerequisites: Sequence[Prerequisite],
        top_n: int = 10,
    ) -> list[FoundationalCourse]:
        """
        Get the top N most foundational courses.

        Degree fields and adjacency lists are not filled in; call
        build_nodes() for those.

        Args:
            courses: Courses
            prerequisites: Prerequisite pairs
            top_n: Number of courses to return (capped at the course count)

        Returns:
            Up to top_n FoundationalCourse entries, best first
        """
        return self.foundational_view(courses, self.compute_ranking(courses, prerequisites), top_n)

    def foundational_view(
        self,
        courses: Sequence[Course],
        results: Sequence[RankResult],
        top_n: int = 10,
    ) -> list[FoundationalCourse]:
        """
        Join the first top_n ranked results back to their courses.

        Lets callers that already hold a ranking build the top-N view
        without another power iteration.

        Args:
            courses: Courses the ranking was computed from
            results: Output of compute_ranking() or run().results
            top_n: Number of courses to return (capped at the result count)
        """
        course_map = {course.id: course for course in courses}

        return [
            FoundationalCourse(
                id=result.course_id,
                name=course_map[result.course_id].name,
                description=course_map[result.course_id].description,
                weight=course_map[result.course_id].weight,
                score=result.score,
                rank=result.rank,
            )
            for result in results[: max(top_n, 0)]
        ]

    def _iterate(self, G: nx.DiGraph) -> tuple[dict[str, float], int, bool, float]:
        """
        Run the power iteration on the reversed graph.

        Every update reads the previous iteration's scores only.

        Returns:
            (scores, iterations, converged, max_delta)
        """
        n = G.number_of_nodes()
        if n == 0:
            return {}, 0, True, 0.0

        d = self._damping_factor
        base = (1.0 - d) / n
        out_degree = dict(G.out_degree())
        scores = {node_id: 1.0 / n for node_id in G.nodes}

        iterations = 0
        max_delta = 0.0
        converged = False

        for iteration in range(self._max_iterations):
            new_scores: dict[str, float] = {}
            max_delta = 0.0

            for node_id in G.nodes:
                rank = base
                # Predecessors in the reversed graph are the dependents
                for dependent_id in G.predecessors(node_id):
                    if out_degree[dependent_id] > 0:
                        rank += d * (scores[dependent_id] / out_degree[dependent_id])
                new_scores[node_id] = rank
                max_delta = max(max_delta, abs(rank - scores[node_id]))

            scores = new_scores
            iterations = iteration + 1

            if max_delta < self._tolerance:
                converged = True
                break

        if converged:
            logger.debug("pagerank_converged", iterations=iterations, courses=n)
        else:
            logger.warning(
                "pagerank_not_converged",
                iterations=iterations,
                max_delta=max_delta,
                tolerance=self._tolerance,
            )

        return scores, iterations, converged, max_delta
