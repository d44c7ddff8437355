"""
Completeness Score

A simpler score built from raw presence checks rather than the
quality/quantity engine. It is reported next to the quality score and
never blended into it.
"""

import logging
from typing import Any, Dict, List

from .config import (
    COMPLETENESS_POINTS,
    COMPLETENESS_WEIGHTS,
    GPA_SCALE,
    PROJECT_DOMAINS,
    SKILL_CATEGORIES,
)
from .quality_analysis import first_gpa, round_half_up

logger = logging.getLogger(__name__)


def _filled(value: Any) -> bool:
    return bool(str(value or "").strip())


def get_completeness_flags(resume: Dict[str, Any]) -> Dict[str, bool]:
    """Presence flags for links and optional resume sections."""
    resume = resume or {}
    basics = resume.get("basics") or {}
    return {
        "has_github": _filled(basics.get("github")),
        "has_linkedin": _filled(basics.get("linkedin")),
        "has_portfolio": _filled(basics.get("portfolio")),
        "has_projects": bool(resume.get("projects")),
        "has_experience": bool(resume.get("experience")),
        "has_certifications": bool(resume.get("certifications")),
        "has_extracurriculars": bool(resume.get("extracurriculars")),
    }


def coursework_points(resume: Dict[str, Any]) -> int:
    education = resume.get("education") or [{}]
    achievements = (education[0] or {}).get("achievements") or []
    return min(len(achievements) * 20, 100)


def skills_points(resume: Dict[str, Any]) -> int:
    """Coverage (up to 50) plus count (3 per skill, up to 50)."""
    skills = resume.get("skills")
    if not skills:
        return 0

    counts = [len(skills.get(field) or []) for field in SKILL_CATEGORIES]
    coverage_score = (len([c for c in counts if c > 0]) / len(counts)) * 50
    count_score = min(sum(counts) * 3, 50)
    return round_half_up(coverage_score + count_score)


def completeness_points(resume: Dict[str, Any]) -> int:
    flags = get_completeness_flags(resume)
    return sum(points for key, points in COMPLETENESS_POINTS.items() if flags[f"has_{key}"])


def gpa_points(resume: Dict[str, Any]) -> int:
    """GPA scaled linearly from 2.5-4.0 onto 0-100."""
    gpa = first_gpa(resume.get("education"))
    if not gpa:
        return 0
    normalized = (float(gpa) - GPA_SCALE["min"]) / (GPA_SCALE["max"] - GPA_SCALE["min"])
    return round_half_up(max(0.0, min(1.0, normalized)) * 100)


def categorize_project(technologies: List[str]) -> str:
    tech_lower = [str(t).lower() for t in technologies or []]
    for domain, hints in PROJECT_DOMAINS:
        if any(hint in tech for tech in tech_lower for hint in hints):
            return domain
    return "Other"


def project_points(resume: Dict[str, Any]) -> int:
    """Count (up to 40) plus domain diversity (up to 20) plus a flat 20."""
    projects = resume.get("projects") or []
    if not projects:
        return 0

    domains = {categorize_project(p.get("technologies")) for p in projects}
    score = min(len(projects) * 10, 40)
    score += min(len(domains) * 10, 20)
    score += 20
    return min(score, 100)


def internship_points(resume: Dict[str, Any]) -> int:
    internships = [
        entry for entry in resume.get("experience") or []
        if "intern" in (entry.get("position") or "").lower()
    ]
    if not internships:
        return 0
    return min(min(len(internships) * 35, 70) + 15, 100)


def calculate_completeness_score(resume: Dict[str, Any]) -> int:
    """
    Calculate the completeness-based resume score (0-100).

    Weights: coursework 5, skills 20, resume completeness 15, GPA 15,
    projects 25, internships 20.
    """
    resume = resume or {}
    scores = {
        "coursework": coursework_points(resume),
        "skills": skills_points(resume),
        "resume_completeness": completeness_points(resume),
        "gpa": gpa_points(resume),
        "projects": project_points(resume),
        "internships": internship_points(resume),
    }
    weighted = sum(scores[key] * weight for key, weight in COMPLETENESS_WEIGHTS.items())
    total = round_half_up(weighted / 100)

    logger.info(f"Completeness score: {total} {scores}")
    return total
