"""
Resume Insights

Two deterministic engines over a structured resume record:
1. Coursework matching: fuzzy-match self-reported courses to a course catalog
   and sort catalog courses into subject categories
2. Quality scoring: six-dimension quality/quantity score with ranked insights

Usage:
    from resume_insights import calculate_resume_score_detailed, run_course_matching

    result = calculate_resume_score_detailed(resume)
    print(f"Score: {result['total_score']}")
"""

from .matching import categorize_course, match_coursework, run_course_matching
from .scoring import calculate_resume_score_detailed, generate_all_insights

__all__ = [
    "calculate_resume_score_detailed",
    "categorize_course",
    "generate_all_insights",
    "match_coursework",
    "run_course_matching",
]
__version__ = "1.0.0"
