"""
Resume Quality Scoring

Scores a structured resume on six dimensions (projects, experience, skills,
links, GPA, coursework), each on a quality and a quantity axis, and combines
them into a weighted 0-100 total with ranked, actionable insights.

Usage:
    from resume_insights.scoring import calculate_resume_score_detailed

    result = calculate_resume_score_detailed(resume)
    print(f"Score: {result['total_score']}")
"""

from .completeness import calculate_completeness_score, get_completeness_flags
from .config import WEIGHTS
from .insights import build_insights, generate_all_insights
from .quality_analysis import (
    analyze_coursework_quality,
    analyze_experience_quality,
    analyze_gpa_quality,
    analyze_links_quality,
    analyze_project_quality,
    analyze_resume,
    analyze_skills_quality,
    analyze_text_quality,
)
from .scoring_engine import (
    calculate_resume_score,
    calculate_resume_score_detailed,
    get_improvement_message,
    get_score_status,
)

__all__ = [
    "WEIGHTS",
    "analyze_coursework_quality",
    "analyze_experience_quality",
    "analyze_gpa_quality",
    "analyze_links_quality",
    "analyze_project_quality",
    "analyze_resume",
    "analyze_skills_quality",
    "analyze_text_quality",
    "build_insights",
    "calculate_completeness_score",
    "calculate_resume_score",
    "calculate_resume_score_detailed",
    "generate_all_insights",
    "get_completeness_flags",
    "get_improvement_message",
    "get_score_status",
]
