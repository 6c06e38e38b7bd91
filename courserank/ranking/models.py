"""
Ranking Data Models

Courses, prerequisite edges and the views produced by the PageRank engine.

- Course / Prerequisite: input records supplied by a loader
- CourseNode: enriched per-course view (degrees, adjacency, score)
- RankResult: one ranked entry of the final ordering
- FoundationalCourse: top-N presentation view joining results to courses
"""

from pydantic import BaseModel, ConfigDict, Field


class Course(BaseModel):
    """
    A course in the prerequisite graph.

    Identity is `id`. Uniqueness is the caller's responsibility.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    """Unique course identifier (e.g. "MATH101")"""

    name: str
    """Display name"""

    description: str = ""
    """Free-form description"""

    weight: int = 3
    """Course weight (credit hours)"""


class Prerequisite(BaseModel):
    """
    Directed prerequisite relationship.

    `prerequisite` must be taken before `course`.
    """

    model_config = ConfigDict(frozen=True)

    prerequisite: str
    """Course ID that must come first"""

    course: str
    """Course ID that depends on the prerequisite"""


class CourseNode(BaseModel):
    """
    Enriched course view, rebuilt on every computation.

    Degrees are measured in the reversed graph, where every course links
    to its prerequisites:
    - in_degree: number of distinct courses depending on this one
    - out_degree: number of distinct direct prerequisites
    """

    id: str
    name: str
    description: str = ""
    weight: int = 3

    score: float = 0.0
    """PageRank score"""

    in_degree: int = 0
    """Reversed in-degree (dependents)"""

    out_degree: int = 0
    """Reversed out-degree (prerequisites)"""

    prerequisites: list[str] = Field(default_factory=list)
    """Direct prerequisite IDs, in edge order"""

    dependents: list[str] = Field(default_factory=list)
    """IDs of courses that directly require this one, in edge order"""

    @classmethod
    def from_course(cls, course: Course) -> "CourseNode":
        """Create an empty node carrying the course attributes."""
        return cls(
            id=course.id,
            name=course.name,
            description=course.description,
            weight=course.weight,
        )


class RankResult(BaseModel):
    """One entry of the final ranking."""

    model_config = ConfigDict(frozen=True)

    course_id: str
    """Ranked course ID"""

    rank: int
    """1-based position in the ordering"""

    score: float
    """Final (converged or iteration-capped) PageRank score"""


class FoundationalCourse(CourseNode):
    """
    Top-N view returned by top_foundational().

    Degree fields and adjacency lists are left empty here; use the
    enriched node view when those are needed.
    """

    rank: int
    """1-based position in the ordering"""


class RankingRun(BaseModel):
    """Ranking output together with convergence information."""

    model_config = ConfigDict(frozen=True)

    results: list[RankResult] = Field(default_factory=list)
    """Courses ordered by score, descending"""

    iterations: int = 0
    """Power iterations actually performed"""

    converged: bool = False
    """True if max_delta dropped below the tolerance"""

    max_delta: float = 0.0
    """Largest per-course score change in the last iteration"""
