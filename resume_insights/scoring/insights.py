"""
Actionable Insights

Flattens per-dimension insight strings into one ranked list with
priorities and ids that are unique within a single call.
"""

import logging
from typing import Any, Callable, Dict, List

from .config import DIMENSION_ORDER, PRIORITY_ORDER
from .quality_analysis import analyze_resume

logger = logging.getLogger(__name__)


def _quality_priority(analysis: Dict[str, Any]) -> str:
    return "high" if analysis["quality_score"] < 50 else "medium"


def _skills_priority(analysis: Dict[str, Any]) -> str:
    return "high" if analysis["quantity_score"] < 30 else "low"


PRIORITY_RULES: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "projects": _quality_priority,
    "experience": _quality_priority,
    "skills": _skills_priority,
    "links": lambda analysis: "medium",
    "gpa": lambda analysis: "low",
    "coursework": lambda analysis: "low",
}


def build_insights(analysis: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Build ranked insights from dimension analyses.

    Args:
        analysis: Output of analyze_resume (one entry per dimension)

    Returns:
        Insights sorted high -> medium -> low; equal priorities keep
        dimension order (projects, experience, skills, links, gpa, coursework)
    """
    insights: List[Dict[str, Any]] = []
    id_counter = 0

    for dimension in DIMENSION_ORDER:
        dimension_analysis = analysis.get(dimension)
        if not dimension_analysis:
            continue

        priority = PRIORITY_RULES[dimension](dimension_analysis)
        for text in dimension_analysis.get("insights", []):
            id_counter += 1
            insights.append(
                {
                    "id": f"insight_{id_counter}",
                    "category": dimension,
                    "insight": text,
                    "priority": priority,
                    "checked": False,
                }
            )

    # sorted() is stable, so dimension order survives within a priority
    ranked = sorted(insights, key=lambda item: PRIORITY_ORDER[item["priority"]])
    logger.info(f"Generated {len(ranked)} insights")
    return ranked


def generate_all_insights(resume: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Analyze a resume record and return its ranked insights."""
    return build_insights(analyze_resume(resume))
