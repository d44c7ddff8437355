"""
Coursework Matching

Fuzzy-matches resume coursework against a university course catalog and
sorts catalog courses into subject categories.

Usage:
    from resume_insights.matching import extract_coursework, match_coursework

    courses = extract_coursework(education[0]["achievements"])
    matches = match_coursework(courses, catalog, threshold=60)
"""

from .categorizer import categorize_course
from .config import CATEGORY_LABELS, DEFAULT_MATCH_THRESHOLD, UF_CS_PREFIXES
from .course_matcher import (
    categorize_catalog,
    extract_coursework,
    filter_undergraduate_courses,
    match_coursework,
    run_course_matching,
)
from .similarity import calculate_similarity

__all__ = [
    "CATEGORY_LABELS",
    "DEFAULT_MATCH_THRESHOLD",
    "UF_CS_PREFIXES",
    "calculate_similarity",
    "categorize_catalog",
    "categorize_course",
    "extract_coursework",
    "filter_undergraduate_courses",
    "match_coursework",
    "run_course_matching",
]
