"""
Quality Analysis

Scores resume sections for quality indicators (quantifiable impact,
action verbs, technical depth) and quantity. All functions are
deterministic and never raise for missing sections: an absent section
scores zero and returns a single "get started" insight.
"""

import logging
import math
import re
from typing import Any, Dict, List, Optional

from .config import (
    ACTION_VERBS,
    COURSEWORK_SCORING,
    EXPERIENCE_QUALITY_WEIGHTS,
    EXPERIENCE_SCORING,
    EXPERIENCE_TYPES,
    GPA_FLOOR,
    GPA_TIERS,
    IMPACT_PATTERNS,
    INSIGHTS,
    LINK_POINTS,
    MAX_INSIGHTS_PER_DIMENSION,
    PROJECT_QUALITY_WEIGHTS,
    PROJECT_SCORING,
    RELEVANT_COURSEWORK_KEYWORDS,
    SKILL_CATEGORIES,
    SKILL_DEPTH_TIERS,
    SKILLS_SCORING,
    TECHNICAL_KEYWORDS,
    TEXT_SCORING,
)

logger = logging.getLogger(__name__)

ACTION_VERB_PATTERNS = [re.compile(rf"\b{verb}\b", re.IGNORECASE) for verb in ACTION_VERBS]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def _join_text(*parts: Any) -> str:
    pieces: List[str] = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            pieces.extend(str(p) for p in part if p)
        elif part:
            pieces.append(str(part))
    return " ".join(pieces)


def analyze_text_quality(text: str) -> Dict[str, Any]:
    """
    Analyze free text for quality indicators.

    Scores:
    - impact: patterns matched * 20 (each pattern counts once)
    - action verbs: whole-word verbs matched * 15
    - technical: technical keywords present * 12
    All capped at 100.
    """
    text = text or ""
    text_lower = text.lower()
    cap = TEXT_SCORING["max"]

    impact_matches = [p for p in IMPACT_PATTERNS if p.search(text)]
    action_verb_matches = [p for p in ACTION_VERB_PATTERNS if p.search(text_lower)]
    technical_matches = [k for k in TECHNICAL_KEYWORDS if k in text_lower]

    return {
        "has_quantifiable_impact": len(impact_matches) > 0,
        "impact_score": min(len(impact_matches) * TEXT_SCORING["impact_points"], cap),
        "has_action_verbs": len(action_verb_matches) > 0,
        "action_verb_score": min(len(action_verb_matches) * TEXT_SCORING["action_verb_points"], cap),
        "has_technical_depth": len(technical_matches) > 0,
        "technical_score": min(len(technical_matches) * TEXT_SCORING["technical_points"], cap),
    }


def analyze_project_quality(projects: Optional[List[Dict[str, Any]]]) -> Dict[str, Any]:
    """
    Analyze project quality and quantity.

    Formula:
    - Quantity: min(count * 25, 100)
    - Per project: impact*0.4 + action_verb*0.3 + technical*0.3
      + min(technologies * 5, 20), capped at 100
    - Quality: rounded mean of per-project scores

    Args:
        projects: Project entries with name, description, highlights, technologies

    Returns:
        {"quality_score", "quantity_score", "insights"}
    """
    if not projects:
        return {
            "quality_score": 0,
            "quantity_score": 0,
            "insights": [INSIGHTS["projects_empty"]],
        }

    insights: List[str] = []
    total_quality = 0.0
    quantity_score = min(len(projects) * PROJECT_SCORING["points_per_project"], 100)

    for project in projects:
        project_text = _join_text(project.get("description"), project.get("highlights") or [])
        analysis = analyze_text_quality(project_text)

        project_quality = 0.0
        project_quality += analysis["impact_score"] * PROJECT_QUALITY_WEIGHTS["impact"]
        project_quality += analysis["action_verb_score"] * PROJECT_QUALITY_WEIGHTS["action_verb"]
        project_quality += analysis["technical_score"] * PROJECT_QUALITY_WEIGHTS["technical"]

        technologies = project.get("technologies") or []
        if technologies:
            project_quality += min(
                len(technologies) * PROJECT_SCORING["points_per_technology"],
                PROJECT_SCORING["max_technology_bonus"],
            )

        total_quality += min(project_quality, 100)
        logger.debug(f"Project '{project.get('name')}': quality = {min(project_quality, 100):.2f}")

        if not analysis["has_quantifiable_impact"]:
            insights.append(INSIGHTS["projects_metrics"].format(name=project.get("name") or "project"))

    quality_score = round_half_up(total_quality / len(projects))

    if len(projects) < PROJECT_SCORING["min_projects"]:
        insights.append(INSIGHTS["projects_breadth"])

    logger.info(f"Projects: quality = {quality_score}, quantity = {quantity_score}")
    return {
        "quality_score": min(quality_score, 100),
        "quantity_score": quantity_score,
        "insights": insights[:MAX_INSIGHTS_PER_DIMENSION],
    }


def classify_position(position: str) -> str:
    """Bucket a position title into internships/research/teaching/other."""
    position_lower = (position or "").lower()
    for bucket, keywords in EXPERIENCE_TYPES:
        if any(keyword in position_lower for keyword in keywords):
            return bucket
    return "other"


def analyze_experience_quality(experience: Optional[List[Dict[str, Any]]]) -> Dict[str, Any]:
    """
    Analyze experience quality (internships, research, TA, jobs).

    Formula:
    - Quantity: min(count * 30, 100)
    - Per entry: impact*0.45 + action_verb*0.35 + technical*0.2,
      +15 when achievements are listed, capped at 100
    - Quality: rounded mean of per-entry scores

    Returns:
        {"quality_score", "quantity_score", "insights", "breakdown"}
    """
    breakdown = {"internships": 0, "research": 0, "teaching": 0, "other": 0}

    if not experience:
        return {
            "quality_score": 0,
            "quantity_score": 0,
            "insights": [INSIGHTS["experience_empty"]],
            "breakdown": breakdown,
        }

    insights: List[str] = []
    total_quality = 0.0

    for entry in experience:
        breakdown[classify_position(entry.get("position"))] += 1

    quantity_score = min(len(experience) * EXPERIENCE_SCORING["points_per_entry"], 100)

    for entry in experience:
        achievements = entry.get("achievements") or []
        entry_text = _join_text(entry.get("responsibilities") or [], achievements)
        analysis = analyze_text_quality(entry_text)

        entry_quality = 0.0
        entry_quality += analysis["impact_score"] * EXPERIENCE_QUALITY_WEIGHTS["impact"]
        entry_quality += analysis["action_verb_score"] * EXPERIENCE_QUALITY_WEIGHTS["action_verb"]
        entry_quality += analysis["technical_score"] * EXPERIENCE_QUALITY_WEIGHTS["technical"]

        if achievements:
            entry_quality += EXPERIENCE_SCORING["achievements_bonus"]

        total_quality += min(entry_quality, 100)
        logger.debug(f"Experience '{entry.get('position')}': quality = {min(entry_quality, 100):.2f}")

        if not analysis["has_quantifiable_impact"] and not achievements:
            insights.append(
                INSIGHTS["experience_achievements"].format(position=entry.get("position") or "current")
            )

    quality_score = round_half_up(total_quality / len(experience))

    role_types = len([count for count in breakdown.values() if count > 0])
    if role_types < EXPERIENCE_SCORING["min_role_types"]:
        insights.append(INSIGHTS["experience_diversity"])

    logger.info(f"Experience: quality = {quality_score}, quantity = {quantity_score}")
    return {
        "quality_score": min(quality_score, 100),
        "quantity_score": quantity_score,
        "insights": insights[:MAX_INSIGHTS_PER_DIMENSION],
        "breakdown": breakdown,
    }


def skill_depth_points(count: int) -> int:
    for minimum, points in SKILL_DEPTH_TIERS:
        if count >= minimum:
            return points
    return 0


def analyze_skills_quality(skills: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Analyze skills coverage and depth.

    Formula:
    - Quantity: min(total_skills * 5, 100)
    - Coverage: (categories with any skill / 5) * 100
    - Depth: per category 3+ -> 20, 2 -> 10, 1 -> 5 (capped at 100)
    - Quality: round(coverage*0.6 + depth*0.4)

    Returns:
        {"quality_score", "quantity_score", "insights", "coverage"}
    """
    skills = skills or {}
    coverage = {
        key: len(skills.get(field) or []) for field, key in SKILL_CATEGORIES.items()
    }
    total_skills = sum(coverage.values())

    if total_skills == 0:
        return {
            "quality_score": 0,
            "quantity_score": 0,
            "insights": [INSIGHTS["skills_empty"]],
            "coverage": coverage,
        }

    categories_covered = len([count for count in coverage.values() if count > 0])
    quantity_score = min(total_skills * SKILLS_SCORING["points_per_skill"], 100)
    coverage_score = (categories_covered / len(coverage)) * 100
    depth_score = sum(skill_depth_points(count) for count in coverage.values())

    quality_score = round_half_up(
        coverage_score * SKILLS_SCORING["coverage_weight"]
        + min(depth_score, 100) * SKILLS_SCORING["depth_weight"]
    )

    insights: List[str] = []
    if coverage["languages"] == 0:
        insights.append(INSIGHTS["skills_languages"])
    if coverage["frameworks"] == 0:
        insights.append(INSIGHTS["skills_frameworks"])
    if coverage["devops"] == 0:
        insights.append(INSIGHTS["skills_devops"])
    if coverage["databases"] == 0:
        insights.append(INSIGHTS["skills_databases"])

    logger.info(f"Skills: quality = {quality_score}, quantity = {quantity_score} ({total_skills} skills)")
    return {
        "quality_score": min(quality_score, 100),
        "quantity_score": quantity_score,
        "insights": insights[:MAX_INSIGHTS_PER_DIMENSION],
        "coverage": coverage,
    }


def _has_value(basics: Dict[str, Any], field: str) -> bool:
    return bool(str(basics.get(field) or "").strip())


def analyze_links_quality(basics: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Analyze profile links and contact information.

    Additive score: github 25, linkedin 20, portfolio 25, email 15, phone 15.

    Returns:
        {"quality_score", "insights", "has_github", "has_linkedin",
         "has_portfolio", "has_email", "has_phone"}
    """
    basics = basics or {}
    presence = {field: _has_value(basics, field) for field in LINK_POINTS}
    flags = {f"has_{field}": present for field, present in presence.items()}

    if not any(presence.values()):
        return {"quality_score": 0, "insights": [INSIGHTS["links_empty"]], **flags}

    score = sum(LINK_POINTS[field] for field, present in presence.items() if present)

    insights: List[str] = []
    for field in ("github", "linkedin", "portfolio"):
        if not presence[field]:
            insights.append(INSIGHTS[f"links_{field}"])

    logger.info(f"Links: score = {score}")
    return {"quality_score": score, "insights": insights[:MAX_INSIGHTS_PER_DIMENSION], **flags}


def analyze_gpa_quality(gpa: Optional[float]) -> Dict[str, Any]:
    """
    Score GPA by threshold.

    Tiers: >=3.7 -> 100, >=3.3 -> 80, >=3.0 -> 60, >0 -> 40, absent/0 -> 0.

    Returns:
        {"score", "tier", "insights"}
    """
    if not gpa:
        return {
            "score": 0,
            "tier": "not_provided",
            "insights": [INSIGHTS["gpa_not_provided"]],
        }

    gpa = float(gpa)
    for minimum, score, tier in GPA_TIERS:
        if gpa >= minimum:
            logger.debug(f"GPA {gpa} >= {minimum}: {tier}")
            return {"score": score, "tier": tier, "insights": [INSIGHTS[f"gpa_{tier}"]]}

    score, tier = GPA_FLOOR
    return {"score": score, "tier": tier, "insights": [INSIGHTS[f"gpa_{tier}"]]}


def analyze_coursework_quality(education: Optional[List[Dict[str, Any]]]) -> Dict[str, Any]:
    """
    Analyze coursework listed in the first education entry.

    Formula:
    - Quantity: min(achievements * 20, 100)
    - Quality: round(relevant / achievements * 100), where an achievement is
      relevant if it mentions any RELEVANT_COURSEWORK_KEYWORDS phrase

    Returns:
        {"quality_score", "quantity_score", "insights"}
    """
    achievements = ((education or [{}])[0] or {}).get("achievements") or []

    if not achievements:
        return {
            "quality_score": 0,
            "quantity_score": 0,
            "insights": [INSIGHTS["coursework_empty"]],
        }

    quantity_score = min(len(achievements) * COURSEWORK_SCORING["points_per_achievement"], 100)

    relevance_count = 0
    for achievement in achievements:
        lower = str(achievement).lower()
        if any(keyword in lower for keyword in RELEVANT_COURSEWORK_KEYWORDS):
            relevance_count += 1

    quality_score = round_half_up((relevance_count / len(achievements)) * 100)

    insights: List[str] = []
    if len(achievements) < COURSEWORK_SCORING["min_achievements"]:
        insights.append(INSIGHTS["coursework_more"])

    logger.info(
        f"Coursework: quality = {quality_score}, quantity = {quantity_score} "
        f"({relevance_count}/{len(achievements)} relevant)"
    )
    return {
        "quality_score": quality_score,
        "quantity_score": quantity_score,
        "insights": insights[:MAX_INSIGHTS_PER_DIMENSION],
    }


def first_gpa(education: Optional[List[Dict[str, Any]]]) -> float:
    """GPA of the first education entry, 0 when absent."""
    return ((education or [{}])[0] or {}).get("gpa") or 0


def analyze_resume(resume: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Run every dimension scorer over a resume record."""
    resume = resume or {}
    education = resume.get("education")
    return {
        "projects": analyze_project_quality(resume.get("projects")),
        "experience": analyze_experience_quality(resume.get("experience")),
        "skills": analyze_skills_quality(resume.get("skills")),
        "links": analyze_links_quality(resume.get("basics")),
        "gpa": analyze_gpa_quality(first_gpa(education)),
        "coursework": analyze_coursework_quality(education),
    }
