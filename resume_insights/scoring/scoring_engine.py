"""
Deterministic Scoring Engine

Combines the six dimension analyses into a 0-100 resume score.
No AI/LLM is used in this module.
"""

import logging
from typing import Any, Dict, List

from .config import (
    CATEGORY_NAMES,
    COMBINED_WEIGHTS,
    DIMENSION_ORDER,
    SCORE_STATUS,
    SCORE_STATUS_FLOOR,
    WEIGHTS,
)
from .insights import build_insights
from .quality_analysis import analyze_resume, round_half_up

logger = logging.getLogger(__name__)

# Dimensions scored on a single axis
SINGLE_AXIS_DIMENSIONS = {"links": "quality_score", "gpa": "score"}


def calculate_combined_score(quality_score: float, quantity_score: float) -> int:
    """
    Blend quality and quantity into one 0-100 score.

    Formula: round(quality * 0.6 + quantity * 0.4)
    """
    return round_half_up(
        quality_score * COMBINED_WEIGHTS["quality"] + quantity_score * COMBINED_WEIGHTS["quantity"]
    )


def build_breakdown_entry(dimension: str, analysis: Dict[str, Any]) -> Dict[str, Any]:
    """Score one dimension and apply its weight."""
    if dimension in SINGLE_AXIS_DIMENSIONS:
        score = analysis[SINGLE_AXIS_DIMENSIONS[dimension]]
        quality_score = quantity_score = combined_score = score
    else:
        quality_score = analysis["quality_score"]
        quantity_score = analysis["quantity_score"]
        combined_score = calculate_combined_score(quality_score, quantity_score)

    weight = WEIGHTS[dimension]
    contribution = round_half_up(combined_score * weight / 100)

    logger.debug(
        f"{CATEGORY_NAMES[dimension]}: Q={quality_score} Qty={quantity_score} "
        f"combined={combined_score} x {weight}% = {contribution}"
    )
    return {
        "category": CATEGORY_NAMES[dimension],
        "quality_score": quality_score,
        "quantity_score": quantity_score,
        "combined_score": combined_score,
        "weight": weight,
        "contribution": contribution,
    }


def calculate_resume_score_detailed(resume: Dict[str, Any]) -> Dict[str, Any]:
    """
    Calculate the quality-based resume score.

    Args:
        resume: Resume record (basics, projects, experience, skills, education)

    Returns:
        {
            "total_score": int (0-100),
            "breakdown": [ScoreBreakdownEntry, ...],  # one per dimension
            "insights": [ActionableInsight, ...],
            "analysis": {dimension: analyzer output}
        }
    """
    logger.info("=" * 60)
    logger.info("Starting resume quality scoring")
    logger.info("=" * 60)

    analysis = analyze_resume(resume)
    breakdown = [build_breakdown_entry(dimension, analysis[dimension]) for dimension in DIMENSION_ORDER]
    total_score = max(0, min(100, sum(entry["contribution"] for entry in breakdown)))
    insights = build_insights(analysis)

    logger.info("=" * 60)
    logger.info(f"FINAL RESUME SCORE: {total_score}")
    logger.info("=" * 60)

    return {
        "total_score": total_score,
        "breakdown": breakdown,
        "insights": insights,
        "analysis": analysis,
    }


def calculate_resume_score(resume: Dict[str, Any]) -> int:
    """Total quality-based score only."""
    return calculate_resume_score_detailed(resume)["total_score"]


def get_score_status(total_score: float) -> Dict[str, str]:
    """
    Map a total score to a status band.

    Returns:
        {"label": "Excellent" | "Good" | "Fair" | "Needs Work", "level": slug}
    """
    for minimum, label, level in SCORE_STATUS:
        if total_score >= minimum:
            return {"label": label, "level": level}
    label, level = SCORE_STATUS_FLOOR
    return {"label": label, "level": level}


def get_improvement_message(total_score: float, breakdown: List[Dict[str, Any]]) -> str:
    """
    Suggest where the most points are left on the table.

    Picks the breakdown entry with the largest gap between its weight and
    its contribution; the first such entry wins ties.
    """
    if not breakdown:
        return "Upload a resume to get personalized improvement suggestions."

    weakest = max(breakdown, key=lambda entry: entry["weight"] - entry["contribution"])
    missing_points = weakest["weight"] - weakest["contribution"]

    if missing_points <= 0:
        return "Your resume scores full marks in every category. Keep it up to date."

    prefix = "Strong resume. " if total_score >= SCORE_STATUS[0][0] else ""
    return (
        f"{prefix}Focus on {weakest['category']} ({weakest['combined_score']}/100): "
        f"improving it could add up to {missing_points} points."
    )
