"""
Tests for the reversed prerequisite graph.
"""

import pytest

from courserank.ranking import GraphAdapter
from helpers import make_course, make_prereq


@pytest.fixture
def adapter():
    return GraphAdapter()


class TestBuildGraph:
    def test_edges_point_from_course_to_prerequisite(self, adapter, chain):
        courses, prerequisites = chain

        G = adapter.build_graph(courses, prerequisites)

        assert list(G.nodes) == ["A", "B", "C"]
        assert set(G.edges) == {("B", "A"), ("C", "B")}

    def test_unknown_endpoints_are_dropped(self, adapter):
        courses = [make_course("A"), make_course("B")]
        prerequisites = [make_prereq("A", "B"), make_prereq("A", "Z"), make_prereq("Z", "B")]

        G = adapter.build_graph(courses, prerequisites)

        assert set(G.edges) == {("B", "A")}
        assert "Z" not in G

    def test_duplicate_pairs_collapse(self, adapter, chain):
        courses, prerequisites = chain

        G = adapter.build_graph(courses, prerequisites * 3)

        assert G.number_of_edges() == 2

    def test_self_loop_is_kept(self, adapter):
        G = adapter.build_graph([make_course("A")], [make_prereq("A", "A")])

        assert G.has_edge("A", "A")

    def test_repeated_course_id_keeps_first_position_and_last_record(self, adapter):
        courses = [make_course("A", "First"), make_course("B"), make_course("A", "Second")]

        G = adapter.build_graph(courses, [])

        assert list(G.nodes) == ["A", "B"]
        assert G.nodes["A"]["course"].name == "Second"


class TestDegreeStats:
    def test_reversed_degrees(self, adapter, sample):
        G = adapter.build_graph(sample.courses, sample.prerequisites)

        stats = adapter.get_degree_stats(G)

        # CS102 is required by CS301 and CS302, and requires CS101
        assert stats["CS102"] == {"in_degree": 2, "out_degree": 1}
        assert stats["CS401"] == {"in_degree": 0, "out_degree": 4}
        assert set(stats) == {c.id for c in sample.courses}


class TestBuildNodes:
    def test_adjacency_lists_follow_edge_order(self, adapter):
        courses = [make_course(c) for c in "ABCD"]
        prerequisites = [make_prereq("A", "D"), make_prereq("C", "D"), make_prereq("B", "D")]

        G = adapter.build_graph(courses, prerequisites)
        nodes = adapter.build_nodes(G, prerequisites)

        assert nodes["D"].prerequisites == ["A", "C", "B"]
        assert nodes["D"].out_degree == 3
        assert nodes["A"].dependents == ["D"]

    def test_repeated_pair_listed_twice_counted_once(self, adapter):
        courses = [make_course("A"), make_course("B")]
        prerequisites = [make_prereq("A", "B"), make_prereq("A", "B")]

        G = adapter.build_graph(courses, prerequisites)
        nodes = adapter.build_nodes(G, prerequisites)

        assert nodes["A"].dependents == ["B", "B"]
        assert nodes["A"].in_degree == 1
        assert nodes["B"].out_degree == 1

    def test_scores_start_at_zero(self, adapter, chain):
        courses, prerequisites = chain

        G = adapter.build_graph(courses, prerequisites)
        nodes = adapter.build_nodes(G, prerequisites)

        assert all(node.score == 0.0 for node in nodes.values())
