"""
UF Schedule of Courses client.

Fetches catalog listings for a term. Every call degrades to an empty list
on network or payload errors so matching can carry on without a catalog.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .matching.config import UF_CS_PREFIXES

logger = logging.getLogger(__name__)

UF_API_BASE_URL = "https://one.ufl.edu/apix/soc/schedule/"
DEFAULT_TERM = "2251"  # Spring 2025
DEFAULT_TIMEOUT_SECONDS = 20


def parse_catalog_response(data: Any) -> List[Dict[str, str]]:
    """
    Flatten the API payload (a list of pages, each with a COURSES list)
    into {"code", "name"} records.
    """
    courses: List[Dict[str, str]] = []
    if not isinstance(data, list):
        logger.warning(f"Unexpected catalog payload type: {type(data).__name__}")
        return courses

    for page in data:
        if not isinstance(page, dict):
            continue
        for course in page.get("COURSES") or []:
            courses.append({
                "code": course.get("code") or "",
                "name": course.get("name") or "",
            })
    return courses


def fetch_courses_by_prefix(
    course_code: str,
    term: str = DEFAULT_TERM,
    timeout: int = DEFAULT_TIMEOUT_SECONDS,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, str]]:
    """
    Fetch catalog courses for a prefix ("COP") or a full code ("COP3530").

    Returns:
        Course records, or [] when the request fails
    """
    params = {
        "category": "CWSP",
        "term": term,
        "course-code": course_code,
        "last-row": "0",
    }
    http = session or requests

    try:
        resp = http.get(UF_API_BASE_URL, params=params, timeout=timeout)
        if resp.status_code != 200:
            logger.error(f"UF API returned status {resp.status_code} for {course_code}")
            return []
        courses = parse_catalog_response(resp.json())
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Error fetching UF courses for {course_code}: {e}")
        return []

    logger.info(f"Fetched {len(courses)} courses for {course_code}")
    return courses


def fetch_catalog(
    prefixes: Optional[List[str]] = None,
    term: str = DEFAULT_TERM,
    timeout: int = DEFAULT_TIMEOUT_SECONDS,
) -> Optional[List[Dict[str, str]]]:
    """
    Fetch the catalog for every prefix.

    Returns:
        Concatenated course records, or None when no prefix returned anything
        (treated by callers as "catalog unavailable")
    """
    prefixes = prefixes or UF_CS_PREFIXES
    catalog: List[Dict[str, str]] = []

    with requests.Session() as session:
        for prefix in prefixes:
            catalog.extend(fetch_courses_by_prefix(prefix, term, timeout, session=session))

    if not catalog:
        logger.warning(f"No catalog courses available for term {term}")
        return None

    logger.info(f"Total catalog courses fetched: {len(catalog)}")
    return catalog


def fetch_courses_by_codes(
    codes: List[str],
    term: str = DEFAULT_TERM,
    timeout: int = DEFAULT_TIMEOUT_SECONDS,
) -> List[Dict[str, str]]:
    """Fetch specific courses; blank codes are skipped."""
    courses: List[Dict[str, str]] = []
    for code in codes:
        code = code.strip()
        if code:
            courses.extend(fetch_courses_by_prefix(code, term, timeout))
    return courses
