"""
Unit tests for the completeness score components.
"""

import unittest

from resume_insights.scoring import get_completeness_flags
from resume_insights.scoring.completeness import (
    categorize_project,
    completeness_points,
    coursework_points,
    gpa_points,
    internship_points,
    project_points,
    skills_points,
)


class TestCompletenessComponents(unittest.TestCase):

    def test_flags(self):
        flags = get_completeness_flags({
            "basics": {"github": "github.com/a", "portfolio": "  "},
            "certifications": ["AWS Cloud Practitioner"],
            "projects": [],
        })
        self.assertTrue(flags["has_github"])
        self.assertFalse(flags["has_portfolio"])
        self.assertFalse(flags["has_projects"])
        self.assertTrue(flags["has_certifications"])
        self.assertFalse(flags["has_extracurriculars"])

    def test_completeness_points(self):
        resume = {
            "basics": {"github": "g", "linkedin": "l", "portfolio": "p"},
            "projects": [{"name": "x"}],
            "experience": [{"position": "y"}],
            "certifications": ["c"],
            "extracurriculars": ["e"],
        }
        self.assertEqual(completeness_points(resume), 100)
        self.assertEqual(completeness_points({}), 0)

    def test_coursework_points(self):
        self.assertEqual(coursework_points({"education": [{"achievements": ["a", "b"]}]}), 40)
        self.assertEqual(coursework_points({"education": []}), 0)

    def test_skills_points(self):
        self.assertEqual(skills_points({}), 0)
        # one of five categories covered: 10, one skill: 3
        self.assertEqual(skills_points({"skills": {"other": ["Excel"]}}), 13)

    def test_gpa_points_scale(self):
        self.assertEqual(gpa_points({"education": [{"gpa": 4.0}]}), 100)
        self.assertEqual(gpa_points({"education": [{"gpa": 3.25}]}), 50)
        self.assertEqual(gpa_points({"education": [{"gpa": 2.0}]}), 0)
        self.assertEqual(gpa_points({"education": [{}]}), 0)

    def test_categorize_project(self):
        self.assertEqual(categorize_project(["React Native"]), "Mobile")
        self.assertEqual(categorize_project(["React", "Node.js"]), "Web")
        self.assertEqual(categorize_project(["PyTorch"]), "Data/ML")
        self.assertEqual(categorize_project([]), "Other")
        self.assertEqual(categorize_project(None), "Other")

    def test_project_points(self):
        projects = [{"name": f"p{i}", "technologies": []} for i in range(5)]
        # count 40 + one domain 10 + flat 20
        self.assertEqual(project_points({"projects": projects}), 70)
        self.assertEqual(project_points({}), 0)

    def test_internship_points(self):
        experience = [{"position": "SWE Intern"}] * 3 + [{"position": "Cashier"}]
        self.assertEqual(internship_points({"experience": experience}), 85)
        self.assertEqual(internship_points({"experience": [{"position": "Cashier"}]}), 0)


if __name__ == "__main__":
    unittest.main()
