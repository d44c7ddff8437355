"""
Unit tests for the deterministic scoring engine.
"""

import unittest
import logging

from resume_insights.scoring import (
    WEIGHTS,
    calculate_completeness_score,
    calculate_resume_score,
    calculate_resume_score_detailed,
    get_improvement_message,
    get_score_status,
)
from resume_insights.scoring.scoring_engine import calculate_combined_score

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


# Sample resume data
SAMPLE_RESUME = {
    "basics": {
        "name": "Alex Gator",
        "github": "github.com/alexgator",
        "linkedin": "linkedin.com/in/alexgator",
    },
    "projects": [
        {
            "name": "Campus Navigator",
            "description": "Built a mobile app",
            "highlights": ["Reduced route lookup time by 40%"],
            "technologies": ["React Native", "Firebase"],
        },
        {
            "name": "Stock Predictor",
            "description": "Developed a forecasting model serving 200 users",
            "highlights": ["Deployed the API on AWS"],
            "technologies": ["Python", "TensorFlow", "Flask"],
        },
        {
            "name": "Portfolio Site",
            "description": "Personal website",
        },
        {
            "name": "Chess Engine",
            "description": "Chess engine in C++",
            "highlights": ["Implemented minimax search"],
            "technologies": [],
        },
    ],
    "experience": [
        {
            "position": "Software Engineering Intern",
            "company": "Gator Tech",
            "responsibilities": ["Maintained internal dashboards"],
            "achievements": ["Automated deployment pipeline, cutting release time by 3 hours"],
        }
    ],
    "skills": {
        "programming_languages": ["Python", "Java", "C++"],
        "frameworks": ["React", "Flask", "TensorFlow"],
        "databases": ["PostgreSQL", "MongoDB"],
    },
    "education": [
        {
            "institution": "University of Florida",
            "degree": "B.S. Computer Science",
            "gpa": 3.8,
            "achievements": [
                "Relevant Coursework: Data Structures, Operating Systems",
                "Machine Learning (A)",
                "Computer Security Honors Project",
                "Dean's List (4 semesters)",
                "Calculus III",
                "Chess Club President",
            ],
        }
    ],
}


class TestScoringEngine(unittest.TestCase):
    """Test the weighted total and breakdown."""

    def setUp(self):
        self.result = calculate_resume_score_detailed(SAMPLE_RESUME)
        self.breakdown = {entry["category"]: entry for entry in self.result["breakdown"]}

    def test_weights_sum_to_100(self):
        self.assertEqual(sum(WEIGHTS.values()), 100)

    def test_total_score(self):
        """13 + 8 + 8 + 5 + 10 + 11."""
        self.assertEqual(self.result["total_score"], 55)
        self.assertEqual(calculate_resume_score(SAMPLE_RESUME), 55)

    def test_breakdown_order_and_names(self):
        self.assertEqual(
            [entry["category"] for entry in self.result["breakdown"]],
            ["Projects", "Experience", "Skills", "Links + Contact", "GPA", "Coursework"],
        )

    def test_projects_entry(self):
        """Mean of 30.5, 35.6, 0 and 4.5 rounds to 18; four projects fill quantity."""
        projects = self.breakdown["Projects"]
        self.assertEqual(projects["quality_score"], 18)
        self.assertEqual(projects["quantity_score"], 100)
        self.assertEqual(projects["combined_score"], 51)
        self.assertEqual(projects["contribution"], 13)

    def test_two_axis_entries(self):
        experience = self.breakdown["Experience"]
        self.assertEqual(
            (experience["quality_score"], experience["quantity_score"], experience["combined_score"]),
            (32, 30, 31),
        )
        self.assertEqual(experience["contribution"], 8)

        skills = self.breakdown["Skills"]
        self.assertEqual(
            (skills["quality_score"], skills["quantity_score"], skills["combined_score"]),
            (56, 40, 50),
        )
        self.assertEqual(skills["contribution"], 8)

        coursework = self.breakdown["Coursework"]
        self.assertEqual(
            (coursework["quality_score"], coursework["quantity_score"], coursework["combined_score"]),
            (50, 100, 70),
        )
        self.assertEqual(coursework["contribution"], 11)

    def test_single_axis_entries(self):
        """Links and GPA report the same value on every axis."""
        links = self.breakdown["Links + Contact"]
        self.assertEqual(
            (links["quality_score"], links["quantity_score"], links["combined_score"]), (45, 45, 45)
        )
        self.assertEqual(links["contribution"], 5)

        gpa = self.breakdown["GPA"]
        self.assertEqual((gpa["quality_score"], gpa["combined_score"]), (100, 100))
        self.assertEqual(gpa["contribution"], 10)

    def test_combined_score_rounds_half_up(self):
        self.assertEqual(calculate_combined_score(18, 100), 51)
        self.assertEqual(calculate_combined_score(0, 0), 0)
        self.assertEqual(calculate_combined_score(100, 100), 100)

    def test_insights_are_ranked(self):
        """High first, then medium, then low; ids follow generation order."""
        insights = self.result["insights"]
        self.assertEqual(
            [insight["id"] for insight in insights],
            ["insight_1", "insight_2", "insight_3", "insight_5", "insight_4", "insight_6"],
        )
        self.assertEqual(
            [insight["priority"] for insight in insights],
            ["high", "high", "high", "medium", "low", "low"],
        )
        self.assertEqual(
            [insight["category"] for insight in insights],
            ["projects", "projects", "experience", "links", "skills", "gpa"],
        )
        self.assertIn('"Portfolio Site"', insights[0]["insight"])
        self.assertIn('"Chess Engine"', insights[1]["insight"])
        self.assertTrue(all(insight["checked"] is False for insight in insights))

    def test_analysis_is_returned(self):
        analysis = self.result["analysis"]
        self.assertEqual(analysis["experience"]["breakdown"]["internships"], 1)
        self.assertEqual(analysis["gpa"]["tier"], "excellent")
        self.assertTrue(analysis["links"]["has_github"])

    def test_is_deterministic(self):
        self.assertEqual(calculate_resume_score_detailed(SAMPLE_RESUME), self.result)


class TestEmptyResume(unittest.TestCase):
    """An empty record scores zero with one starter insight per dimension."""

    def test_empty_record(self):
        result = calculate_resume_score_detailed({})

        self.assertEqual(result["total_score"], 0)
        self.assertEqual(len(result["breakdown"]), 6)
        for entry in result["breakdown"]:
            self.assertEqual(entry["combined_score"], 0)
            self.assertEqual(entry["contribution"], 0)

        self.assertEqual(len(result["insights"]), 6)
        self.assertEqual(
            [insight["priority"] for insight in result["insights"]],
            ["high", "high", "high", "medium", "low", "low"],
        )

    def test_none_record(self):
        self.assertEqual(calculate_resume_score_detailed(None)["total_score"], 0)


class TestScoreStatus(unittest.TestCase):

    def test_bands(self):
        self.assertEqual(get_score_status(100)["label"], "Excellent")
        self.assertEqual(get_score_status(80)["label"], "Excellent")
        self.assertEqual(get_score_status(79)["label"], "Good")
        self.assertEqual(get_score_status(60)["label"], "Good")
        self.assertEqual(get_score_status(55)["label"], "Fair")
        self.assertEqual(get_score_status(40)["level"], "fair")
        self.assertEqual(get_score_status(39)["label"], "Needs Work")
        self.assertEqual(get_score_status(0)["level"], "needs_work")


class TestImprovementMessage(unittest.TestCase):

    def test_points_at_largest_gap(self):
        result = calculate_resume_score_detailed(SAMPLE_RESUME)
        message = get_improvement_message(result["total_score"], result["breakdown"])
        self.assertEqual(
            message, "Focus on Experience (31/100): improving it could add up to 17 points."
        )

    def test_strong_resume_prefix(self):
        breakdown = [
            {"category": "Projects", "combined_score": 90, "weight": 25, "contribution": 23},
            {"category": "GPA", "combined_score": 100, "weight": 10, "contribution": 10},
        ]
        message = get_improvement_message(85, breakdown)
        self.assertTrue(message.startswith("Strong resume. Focus on Projects (90/100)"))

    def test_full_marks(self):
        breakdown = [{"category": "GPA", "combined_score": 100, "weight": 10, "contribution": 10}]
        self.assertIn("full marks", get_improvement_message(100, breakdown))

    def test_no_breakdown(self):
        self.assertIn("Upload a resume", get_improvement_message(0, []))


class TestCompletenessScore(unittest.TestCase):
    """The completeness score is independent of the quality score."""

    def test_sample_resume(self):
        """coursework 100, skills 54, sections 65, GPA 87, projects 80, internships 50."""
        self.assertEqual(calculate_completeness_score(SAMPLE_RESUME), 69)

    def test_empty_resume(self):
        self.assertEqual(calculate_completeness_score({}), 0)
        self.assertEqual(calculate_completeness_score(None), 0)


if __name__ == "__main__":
    unittest.main()
