"""
Course Matcher

Orchestrates coursework matching:
1. Extract course names from resume achievement lines
2. Fuzzy-match each course name against the catalog
3. Categorize matches and the full catalog for display
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .categorizer import categorize_course
from .config import (
    CATALOG_EXCLUDED_CODES,
    CATALOG_EXCLUDED_PATTERNS,
    DEFAULT_MATCH_THRESHOLD,
    EXCLUDED,
    UNDERGRADUATE_RANGE,
)
from .similarity import calculate_similarity

logger = logging.getLogger(__name__)

COURSEWORK_PATTERN = re.compile(r"relevant coursework:(.+)", re.IGNORECASE)
COURSE_NUMBER_PATTERN = re.compile(r"(\d+)")


def extract_coursework(achievements: List[str]) -> List[str]:
    """
    Extract course names from resume achievement lines.

    Example: "Relevant Coursework: Data Structures, Operating Systems"
    yields ["Data Structures", "Operating Systems"].

    Args:
        achievements: Achievement strings from an education entry

    Returns:
        Course names in encounter order (duplicates kept)
    """
    coursework: List[str] = []

    for achievement in achievements or []:
        match = COURSEWORK_PATTERN.search(achievement or "")
        if not match:
            continue
        courses = [c.strip() for c in match.group(1).split(",")]
        coursework.extend(c for c in courses if c)

    logger.debug(f"Extracted {len(coursework)} courses from {len(achievements or [])} achievements")
    return coursework


def match_coursework(
    resume_courses: List[str],
    catalog: List[Dict[str, str]],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
) -> List[Dict[str, Any]]:
    """
    Match resume coursework to catalog courses using fuzzy matching.

    Only the catalog title is compared. Each resume course keeps its best
    candidate; a later candidate replaces it only with a strictly higher
    score, so ties keep the first one seen.

    Args:
        resume_courses: Course names from the resume
        catalog: Catalog entries with "code" and "name"
        threshold: Minimum similarity score (0-100) to consider a match

    Returns:
        Matches sorted by score (highest first), at most one per resume course
    """
    matches: List[Dict[str, Any]] = []

    for resume_course in resume_courses:
        best_match: Optional[Dict[str, Any]] = None
        best_score = 0.0

        for course in catalog:
            score = calculate_similarity(resume_course, course.get("name", ""))
            if score > best_score and score >= threshold:
                best_score = score
                best_match = {
                    "resume_course": resume_course,
                    "uf_course": {"code": course.get("code", ""), "name": course.get("name", "")},
                    "score": score,
                }

        if best_match:
            logger.debug(
                f"'{resume_course}' -> {best_match['uf_course']['code']} "
                f"({best_match['score']:.2f})"
            )
            matches.append(best_match)
        else:
            logger.debug(f"'{resume_course}' has no catalog match >= {threshold}")

    matches.sort(key=lambda m: m["score"], reverse=True)
    return matches


def is_catalog_excluded(code: str) -> bool:
    """Check a code against the catalog-level exclusion lists."""
    if code in CATALOG_EXCLUDED_CODES:
        return True
    return any(re.search(pattern, code) for pattern in CATALOG_EXCLUDED_PATTERNS)


def filter_undergraduate_courses(catalog: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """
    Keep 3000-4999 level courses that are not excluded from matching.

    Courses whose code has no number are dropped.
    """
    low, high = UNDERGRADUATE_RANGE
    filtered = []

    for course in catalog:
        code = course.get("code", "")
        match = COURSE_NUMBER_PATTERN.search(code)
        if not match:
            continue

        course_number = int(match.group(1))
        if course_number < low or course_number > high:
            continue
        if is_catalog_excluded(code):
            continue

        filtered.append(course)

    logger.info(f"Filtered catalog to {len(filtered)}/{len(catalog)} undergraduate courses")
    return filtered


def categorize_matches(matches: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Attach a category label to each match."""
    return [
        {
            **match,
            "category": categorize_course(match["uf_course"]["code"], match["uf_course"]["name"]),
        }
        for match in matches
    ]


def group_by_category(items: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Group categorized items by their category, preserving order."""
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for item in items:
        grouped.setdefault(item["category"], []).append(item)
    return grouped


def categorize_catalog(catalog: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """
    Categorize every catalog course, dropping EXCLUDED ones.

    Returns:
        Catalog entries with an added "category" key
    """
    categorized = [
        {
            "code": course.get("code", ""),
            "name": course.get("name", ""),
            "category": categorize_course(course.get("code", ""), course.get("name", "")),
        }
        for course in catalog
    ]
    return [course for course in categorized if course["category"] != EXCLUDED]


def run_course_matching(
    achievements: List[str],
    catalog: Optional[List[Dict[str, str]]],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
) -> Dict[str, Any]:
    """
    Run a full coursework matching pass for one resume.

    Args:
        achievements: Achievement lines from the resume's first education entry
        catalog: Raw catalog for the term, or None when it could not be fetched
        threshold: Minimum similarity score (0-100)

    Returns:
        {
            "success": bool,
            "resume_courses": [...],
            "matches": [...],            # categorized, highest score first
            "by_category": {label: [...]},
            "all_courses": [...],        # categorized catalog, EXCLUDED removed
            "all_by_category": {label: [...]},  # all_courses grouped by category
            "total_matches": int,
            "courses_scanned": int,
            "last_updated": ISO timestamp,
            "message": str              # only when nothing could be matched
        }
    """
    logger.info("=" * 60)
    logger.info("Starting coursework matching")
    logger.info("=" * 60)

    resume_courses = extract_coursework(achievements)
    result: Dict[str, Any] = {
        "success": True,
        "resume_courses": resume_courses,
        "matches": [],
        "by_category": {},
        "all_courses": [],
        "all_by_category": {},
        "total_matches": 0,
        "courses_scanned": 0,
        "last_updated": datetime.now(timezone.utc).isoformat(),
    }

    if not resume_courses:
        logger.info("No relevant coursework found in resume")
        result["message"] = "No relevant coursework found in resume"
        return result

    if catalog is None:
        logger.warning("Course catalog unavailable, returning empty matches")
        result["message"] = "Course catalog unavailable"
        return result

    logger.info(f"Found {len(resume_courses)} courses in resume: {resume_courses}")

    undergraduate_courses = filter_undergraduate_courses(catalog)
    matches = categorize_matches(match_coursework(resume_courses, undergraduate_courses, threshold))
    all_courses = categorize_catalog(undergraduate_courses)

    result.update(
        {
            "matches": matches,
            "by_category": group_by_category(matches),
            "all_courses": all_courses,
            "all_by_category": group_by_category(all_courses),
            "total_matches": len(matches),
            "courses_scanned": len(all_courses),
        }
    )

    logger.info(f"MATCHING COMPLETE - {len(matches)} matches across {len(all_courses)} courses")
    return result
