"""
Graph Adapter for PageRank

Converts course/prerequisite records to the PageRank input graph.

Process:
1. Add one node per course, in input order
2. Drop prerequisite pairs whose endpoints are not known courses
3. Add REVERSED edges (course -> prerequisite) to a NetworkX DiGraph

In the reversed graph a course's incoming links are the courses that
depend on it, so foundational courses collect rank from their dependents.
"""

from collections.abc import Iterable, Iterator

import networkx as nx

from courserank.common.observability import get_logger
from courserank.ranking.models import Course, CourseNode, Prerequisite

logger = get_logger(__name__)


class GraphAdapter:
    """
    Adapt course data for PageRank computation.

    Builds the reversed prerequisite graph and the enriched node view.
    """

    def build_graph(self, courses: Iterable[Course], prerequisites: Iterable[Prerequisite]) -> nx.DiGraph:
        """
        Build the reversed NetworkX DiGraph.

        Args:
            courses: Courses, in the enumeration order used for ranking
            prerequisites: Prerequisite pairs (not required to be acyclic)

        Returns:
            DiGraph with an edge course -> prerequisite per distinct valid pair
        """
        G = nx.DiGraph()

        # A repeated ID keeps its first position; the last record's attributes win
        for course in courses:
            G.add_node(course.id, course=course)

        dropped = 0
        for pair in prerequisites:
            if pair.prerequisite in G and pair.course in G:
                G.add_edge(pair.course, pair.prerequisite)
            else:
                dropped += 1

        if dropped:
            logger.debug("prerequisites_dropped", dropped=dropped, reason="unknown_course")

        return G

    def iter_valid_pairs(self, graph: nx.DiGraph, prerequisites: Iterable[Prerequisite]) -> Iterator[Prerequisite]:
        """Yield the pairs whose endpoints are both nodes of `graph`."""
        for pair in prerequisites:
            if pair.prerequisite in graph and pair.course in graph:
                yield pair

    def get_degree_stats(self, graph: nx.DiGraph) -> dict[str, dict[str, int]]:
        """
        Get reversed in-degree and out-degree for all courses.

        Returns:
            Dict mapping course_id to {in_degree, out_degree}
            (in_degree = dependents, out_degree = prerequisites)
        """
        return {
            node_id: {
                "in_degree": graph.in_degree(node_id),
                "out_degree": graph.out_degree(node_id),
            }
            for node_id in graph.nodes
        }

    def build_nodes(self, graph: nx.DiGraph, prerequisites: Iterable[Prerequisite]) -> dict[str, CourseNode]:
        """
        Build the enriched node view for every course in `graph`.

        Adjacency lists get one entry per valid input pair, so a repeated
        pair is listed twice while the degrees count it once.

        Args:
            graph: Graph returned by build_graph()
            prerequisites: The same pairs passed to build_graph()

        Returns:
            Dict mapping course_id to CourseNode, in graph node order
        """
        nodes = {node_id: CourseNode.from_course(data["course"]) for node_id, data in graph.nodes(data=True)}

        for pair in self.iter_valid_pairs(graph, prerequisites):
            nodes[pair.prerequisite].dependents.append(pair.course)
            nodes[pair.course].prerequisites.append(pair.prerequisite)

        for node_id, degree in self.get_degree_stats(graph).items():
            nodes[node_id].in_degree = degree["in_degree"]
            nodes[node_id].out_degree = degree["out_degree"]

        return nodes
