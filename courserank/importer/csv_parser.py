"""
CSV Import/Export

Formats:
- Prerequisites: `prerequisite,course` (header optional)
- Courses: `id,name,description,credits` (header required)
- Ranking export: `Course ID,Course Name,Rank,PageRank Score`

Fields are split on commas and double quotes are stripped, so quoted
fields cannot contain commas.
"""

import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from courserank.common.exceptions import DataExportError, DataLoadError, InvalidInputError
from courserank.common.observability import get_logger
from courserank.ranking.models import Course, Prerequisite, RankResult

logger = get_logger(__name__)

DEFAULT_CREDITS = 3
PREREQUISITE_HEADER = "prerequisite,course"
RANKING_HEADER = "Course ID,Course Name,Rank,PageRank Score"

_WORD_START = re.compile(r"\b\w")


class ParseResult(BaseModel):
    """Courses and prerequisites read from one source."""

    courses: list[Course] = Field(default_factory=list)
    prerequisites: list[Prerequisite] = Field(default_factory=list)


def _split_fields(line: str) -> list[str]:
    return [field.strip().replace('"', "") for field in line.split(",")]


def _display_name(course_id: str) -> str:
    """MATH_101_intro -> MATH 101 Intro"""
    return _WORD_START.sub(lambda m: m.group(0).upper(), course_id.replace("_", " "))


def parse_prerequisites(content: str) -> ParseResult:
    """
    Parse a two-column prerequisite CSV.

    The first line is skipped when it mentions "prerequisite". Blank lines
    and rows with an empty field are ignored. Courses are generated for
    every ID seen, in first-seen order.

    Args:
        content: CSV text

    Returns:
        ParseResult with generated courses and the parsed pairs
    """
    lines = content.strip().split("\n")
    data_lines = lines[1:] if "prerequisite" in lines[0].lower() else lines

    prerequisites: list[Prerequisite] = []
    course_ids: dict[str, None] = {}

    for line in data_lines:
        trimmed = line.strip()
        if not trimmed:
            continue

        fields = _split_fields(trimmed)
        prerequisite = fields[0]
        course = fields[1] if len(fields) > 1 else ""

        if prerequisite and course:
            prerequisites.append(Prerequisite(prerequisite=prerequisite, course=course))
            course_ids.setdefault(prerequisite)
            course_ids.setdefault(course)

    courses = [
        Course(
            id=course_id,
            name=_display_name(course_id),
            description=f"Course: {course_id}",
            weight=DEFAULT_CREDITS,
        )
        for course_id in course_ids
    ]

    logger.debug("prerequisites_parsed", courses=len(courses), prerequisites=len(prerequisites))
    return ParseResult(courses=courses, prerequisites=prerequisites)


def parse_courses(content: str) -> list[Course]:
    """
    Parse a course CSV with columns id,name,description,credits.

    The first line is always treated as a header. Rows without an id or
    name are skipped.

    Raises:
        InvalidInputError: If a credits value is not an integer
    """
    lines = content.strip().split("\n")
    courses: list[Course] = []

    for line_no, line in enumerate(lines[1:], start=2):
        trimmed = line.strip()
        if not trimmed:
            continue

        fields = _split_fields(trimmed) + ["", "", "", ""]
        course_id, name, description, credits = fields[:4]

        if not (course_id and name):
            continue

        try:
            weight = int(credits) if credits else DEFAULT_CREDITS
        except ValueError as e:
            raise InvalidInputError(
                "Credits must be an integer",
                {"line": line_no, "value": credits},
            ) from e

        courses.append(
            Course(
                id=course_id,
                name=name,
                description=description or f"Course: {name}",
                weight=weight,
            )
        )

    return courses


def merge_course_details(parsed: ParseResult, courses: Sequence[Course]) -> ParseResult:
    """
    Replace generated course records with detailed ones where available.

    Courses only present in `courses` are appended after the parsed ones.
    """
    details = {course.id: course for course in courses}
    merged = [details.pop(course.id, course) for course in parsed.courses]
    merged.extend(details.values())
    return ParseResult(courses=merged, prerequisites=parsed.prerequisites)


def sample_data() -> ParseResult:
    """Demonstration curriculum: 12 math/CS courses and 14 prerequisites."""
    courses = [
        Course(id="MATH100", name="Basic Mathematics", description="Fundamental mathematical concepts", weight=3),
        Course(id="MATH101", name="Calculus I", description="Introduction to differential calculus", weight=4),
        Course(id="MATH102", name="Calculus II", description="Integral calculus and series", weight=4),
        Course(id="MATH201", name="Linear Algebra", description="Vector spaces and matrices", weight=3),
        Course(id="CS100", name="Introduction to Computing", description="Basic computer concepts", weight=3),
        Course(id="CS101", name="Programming I", description="Introduction to programming", weight=3),
        Course(id="CS102", name="Programming II", description="Data structures and algorithms", weight=3),
        Course(id="CS201", name="Computer Architecture", description="Hardware and system design", weight=3),
        Course(id="CS301", name="Database Systems", description="Database design and management", weight=3),
        Course(id="CS302", name="Software Engineering", description="Software development lifecycle", weight=3),
        Course(id="CS401", name="Machine Learning", description="AI and machine learning algorithms", weight=3),
        Course(id="STATS101", name="Statistics", description="Probability and statistical inference", weight=3),
    ]

    pairs = [
        ("MATH100", "MATH101"),
        ("MATH101", "MATH102"),
        ("MATH100", "MATH201"),
        ("MATH102", "CS401"),
        ("MATH201", "CS401"),
        ("CS100", "CS101"),
        ("CS101", "CS102"),
        ("CS100", "CS201"),
        ("CS102", "CS301"),
        ("CS102", "CS302"),
        ("CS201", "CS302"),
        ("CS301", "CS401"),
        ("MATH100", "STATS101"),
        ("STATS101", "CS401"),
    ]
    prerequisites = [Prerequisite(prerequisite=p, course=c) for p, c in pairs]

    return ParseResult(courses=courses, prerequisites=prerequisites)


def export_prerequisites_csv(prerequisites: Iterable[Prerequisite]) -> str:
    """Serialize prerequisite pairs with a header line."""
    lines = [PREREQUISITE_HEADER]
    lines.extend(f"{p.prerequisite},{p.course}" for p in prerequisites)
    return "\n".join(lines) + "\n"


def export_rankings_csv(results: Iterable[RankResult], courses: Iterable[Course]) -> str:
    """
    Serialize a ranking with course names.

    Names are quoted; unknown IDs fall back to the ID as name.
    """
    names = {course.id: course.name for course in courses}
    lines = [RANKING_HEADER]
    for result in results:
        name = names.get(result.course_id, result.course_id).replace('"', '""')
        lines.append(f'{result.course_id},"{name}",{result.rank},{result.score:.6f}')
    return "\n".join(lines)


def _read_text(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DataLoadError("Cannot read CSV file", {"path": str(path)}) from e


def load_prerequisites(path: str | Path) -> ParseResult:
    """Read and parse a prerequisite CSV file."""
    return parse_prerequisites(_read_text(path))


def load_courses(path: str | Path) -> list[Course]:
    """Read and parse a course CSV file."""
    return parse_courses(_read_text(path))


def save_csv(path: str | Path, content: str) -> None:
    """
    Write exported CSV text to a file.

    Raises:
        DataExportError: If the file cannot be written
    """
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise DataExportError("Cannot write CSV file", {"path": str(path)}) from e
