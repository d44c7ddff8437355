"""
Configuration for the resume quality scoring engine.
Adjust weights, keyword lists and insight wording here.
"""

import re

# Category weights for the total score (must sum to 100)
WEIGHTS = {
    "projects": 25,
    "experience": 25,
    "skills": 15,
    "links": 10,
    "gpa": 10,
    "coursework": 15,
}

# Display names used in the score breakdown
CATEGORY_NAMES = {
    "projects": "Projects",
    "experience": "Experience",
    "skills": "Skills",
    "links": "Links + Contact",
    "gpa": "GPA",
    "coursework": "Coursework",
}

# Order in which dimensions are scored and insights are emitted
DIMENSION_ORDER = ["projects", "experience", "skills", "links", "gpa", "coursework"]

# Quality vs quantity blend for combined scores
COMBINED_WEIGHTS = {
    "quality": 0.6,
    "quantity": 0.4,
}

# Patterns that indicate quantifiable impact (each counts once)
IMPACT_PATTERNS = [
    re.compile(r"\d+%"),  # Percentages
    re.compile(r"\$[\d,]+"),  # Dollar amounts
    re.compile(r"\d+[x×]", re.IGNORECASE),  # Multipliers (2x, 10x)
    re.compile(r"\d+\+?\s*(users|customers|clients|members)", re.IGNORECASE),
    re.compile(r"\d+\s*(ms|seconds|minutes|hours|days)", re.IGNORECASE),
    re.compile(r"\d+\s*(requests|queries|transactions)", re.IGNORECASE),
    re.compile(r"increased|decreased|improved|reduced|boosted|grew|saved", re.IGNORECASE),
]

# Strong action verbs that indicate leadership/initiative
ACTION_VERBS = [
    "led", "managed", "architected", "designed", "implemented", "built",
    "launched", "deployed", "optimized", "scaled", "mentored", "coordinated",
    "spearheaded", "pioneered", "established", "transformed", "automated",
    "streamlined", "developed", "created", "engineered", "delivered",
]

# Technical depth indicators (plain substrings)
TECHNICAL_KEYWORDS = [
    "api", "microservices", "database", "algorithm", "architecture",
    "infrastructure", "ci/cd", "deployment", "testing", "security",
    "scalability", "performance", "optimization", "integration", "migration",
]

# Points per match and cap for each text signal
TEXT_SCORING = {
    "impact_points": 20,
    "action_verb_points": 15,
    "technical_points": 12,
    "max": 100,
}

# Per-item quality blends
PROJECT_QUALITY_WEIGHTS = {"impact": 0.4, "action_verb": 0.3, "technical": 0.3}
EXPERIENCE_QUALITY_WEIGHTS = {"impact": 0.45, "action_verb": 0.35, "technical": 0.2}

PROJECT_SCORING = {
    "points_per_project": 25,
    "points_per_technology": 5,
    "max_technology_bonus": 20,
    "min_projects": 3,
}

EXPERIENCE_SCORING = {
    "points_per_entry": 30,
    "achievements_bonus": 15,
    "min_role_types": 2,
}

# Position keywords used to bucket experience entries (checked in order)
EXPERIENCE_TYPES = [
    ("internships", ["intern"]),
    ("research", ["research", "researcher"]),
    ("teaching", ["ta", "teaching", "tutor"]),
]

# Skill categories: resume field -> coverage key
SKILL_CATEGORIES = {
    "programming_languages": "languages",
    "frameworks": "frameworks",
    "databases": "databases",
    "devops_tools": "devops",
    "other": "other",
}

SKILLS_SCORING = {
    "points_per_skill": 5,
    "coverage_weight": 0.6,
    "depth_weight": 0.4,
}

# (minimum count, depth points) per skill category, checked top down
SKILL_DEPTH_TIERS = [(3, 20), (2, 10), (1, 5)]

# Contact and profile link points
LINK_POINTS = {
    "github": 25,
    "linkedin": 20,
    "portfolio": 25,
    "email": 15,
    "phone": 15,
}

# (minimum gpa, score, tier) checked top down; anything above zero below these is 40
GPA_TIERS = [
    (3.7, 100, "excellent"),
    (3.3, 80, "good"),
    (3.0, 60, "fair"),
]
GPA_FLOOR = (40, "needs_improvement")

COURSEWORK_SCORING = {
    "points_per_achievement": 20,
    "min_achievements": 5,
}

# Coursework phrases that count an achievement as relevant
RELEVANT_COURSEWORK_KEYWORDS = [
    "data structures", "algorithms", "machine learning", "database",
    "operating systems", "networks", "security", "software engineering",
    "artificial intelligence", "computer vision", "distributed systems",
]

MAX_INSIGHTS_PER_DIMENSION = 3

# Insight wording
INSIGHTS = {
    "projects_empty": "Add projects to showcase your hands-on experience",
    "projects_metrics": 'Add metrics to "{name}" (e.g., "improved load time by 40%")',
    "projects_breadth": "Add more projects to demonstrate breadth of experience",
    "experience_empty": "Gain experience through internships, research, or TA positions",
    "experience_achievements": "Add measurable achievements to your {position} role",
    "experience_diversity": "Diversify your experience with research, TA, or different role types",
    "skills_empty": "Add technical skills to your resume",
    "skills_languages": "Add programming languages you know",
    "skills_frameworks": "List frameworks you have worked with",
    "skills_devops": "Add DevOps/cloud tools (Docker, AWS, etc.)",
    "skills_databases": "Include databases you have experience with",
    "links_empty": "Add your contact details plus GitHub, LinkedIn, and portfolio links",
    "links_github": "Add your GitHub profile to showcase your code",
    "links_linkedin": "Add your LinkedIn profile for networking",
    "links_portfolio": "Create a portfolio website to stand out",
    "gpa_not_provided": "Include your GPA if it is 3.0 or above",
    "gpa_excellent": "Your GPA is excellent - highlight it prominently!",
    "gpa_good": "Your GPA is competitive for most roles",
    "gpa_fair": "Focus on projects and experience to supplement your GPA",
    "gpa_needs_improvement": "Emphasize skills and projects over GPA in applications",
    "coursework_empty": "Add relevant coursework or academic achievements",
    "coursework_more": "Add more relevant technical coursework",
}

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

# Score status bands, checked top down
SCORE_STATUS = [
    (80, "Excellent", "excellent"),
    (60, "Good", "good"),
    (40, "Fair", "fair"),
]
SCORE_STATUS_FLOOR = ("Needs Work", "needs_work")

# Completeness-based score (separate from the quality engine)
COMPLETENESS_WEIGHTS = {
    "coursework": 5,
    "skills": 20,
    "resume_completeness": 15,
    "gpa": 15,
    "projects": 25,
    "internships": 20,
}

COMPLETENESS_POINTS = {
    "github": 15,
    "linkedin": 10,
    "portfolio": 15,
    "projects": 20,
    "experience": 20,
    "certifications": 10,
    "extracurriculars": 10,
}

GPA_SCALE = {"min": 2.5, "max": 4.0}

# Technology hints for project domain diversity (checked in order)
PROJECT_DOMAINS = [
    ("Mobile", ["react native", "flutter", "swift", "kotlin"]),
    ("Data/ML", ["tensorflow", "pytorch", "pandas", "machine learning"]),
    ("Web", ["react", "vue", "angular", "next", "node"]),
]
