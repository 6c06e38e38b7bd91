"""
Course data import/export.
"""

from .csv_parser import (
    ParseResult,
    export_prerequisites_csv,
    export_rankings_csv,
    load_courses,
    load_prerequisites,
    merge_course_details,
    parse_courses,
    parse_prerequisites,
    sample_data,
    save_csv,
)

__all__ = [
    "ParseResult",
    "export_prerequisites_csv",
    "export_rankings_csv",
    "load_courses",
    "load_prerequisites",
    "merge_course_details",
    "parse_courses",
    "parse_prerequisites",
    "sample_data",
    "save_csv",
]
