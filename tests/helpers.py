"""
Shared test data builders.
"""

from courserank.ranking import Course, Prerequisite


def make_course(
    course_id: str,
    name: str | None = None,
    description: str | None = None,
    weight: int = 3,
) -> Course:
    """Helper to create a course."""
    return Course(
        id=course_id,
        name=name or course_id,
        description=description if description is not None else f"Course: {course_id}",
        weight=weight,
    )


def make_prereq(prerequisite: str, course: str) -> Prerequisite:
    """Helper to create a prerequisite pair."""
    return Prerequisite(prerequisite=prerequisite, course=course)
