"""
Global test configuration and fixtures
"""

import pytest

from courserank.importer import ParseResult, sample_data
from courserank.ranking import Course, Prerequisite
from helpers import make_course, make_prereq


@pytest.fixture
def chain() -> tuple[list[Course], list[Prerequisite]]:
    """A -> B -> C: B requires A, C requires B."""
    courses = [make_course("A"), make_course("B"), make_course("C")]
    prerequisites = [make_prereq("A", "B"), make_prereq("B", "C")]
    return courses, prerequisites


@pytest.fixture
def sample() -> ParseResult:
    """Demonstration curriculum."""
    return sample_data()


# Pytest hooks
def pytest_configure(config):
    """Register markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (CLI, files)")


def pytest_collection_modifyitems(config, items):
    """Mark tests by directory."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
