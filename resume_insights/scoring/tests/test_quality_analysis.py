"""
Unit tests for text analysis and the dimension scorers.
"""

import unittest
import logging

from resume_insights.scoring import (
    analyze_coursework_quality,
    analyze_experience_quality,
    analyze_gpa_quality,
    analyze_links_quality,
    analyze_project_quality,
    analyze_skills_quality,
    analyze_text_quality,
)
from resume_insights.scoring.quality_analysis import classify_position, round_half_up

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


class TestTextQuality(unittest.TestCase):
    """Test impact, action verb and technical depth signals."""

    def test_impact_patterns_each_count_once(self):
        analysis = analyze_text_quality(
            "Improved load time by 40% for 5000 users, saving $20,000 and 15% on costs"
        )
        # percentage, dollar amount, user count, impact verb
        self.assertTrue(analysis["has_quantifiable_impact"])
        self.assertEqual(analysis["impact_score"], 80)

    def test_action_verbs_whole_words(self):
        analysis = analyze_text_quality("Led a team and built an API")
        self.assertEqual(analysis["action_verb_score"], 30)
        self.assertEqual(analysis["technical_score"], 12)
        self.assertEqual(analysis["impact_score"], 0)
        self.assertFalse(analysis["has_quantifiable_impact"])

        # "led" inside "enabled" is not a verb match
        self.assertEqual(analyze_text_quality("Enabled features")["action_verb_score"], 0)

    def test_scores_are_capped(self):
        text = "led managed architected designed implemented built launched deployed"
        self.assertEqual(analyze_text_quality(text)["action_verb_score"], 100)

    def test_empty_text(self):
        analysis = analyze_text_quality("")
        self.assertEqual(analysis["impact_score"], 0)
        self.assertEqual(analysis["action_verb_score"], 0)
        self.assertEqual(analysis["technical_score"], 0)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(7.5), 8)
        self.assertEqual(round_half_up(7.49), 7)


class TestProjects(unittest.TestCase):

    def test_empty_projects(self):
        for projects in (None, []):
            result = analyze_project_quality(projects)
            self.assertEqual(result["quality_score"], 0)
            self.assertEqual(result["quantity_score"], 0)
            self.assertEqual(result["insights"], ["Add projects to showcase your hands-on experience"])

    def test_single_project_with_metrics(self):
        """impact 40*0.4 + verbs 15*0.3 + tech 0 + 10 tech bonus = 30.5 -> 31."""
        result = analyze_project_quality([
            {
                "name": "Campus Navigator",
                "description": "Built a mobile app",
                "highlights": ["Reduced route lookup time by 40%"],
                "technologies": ["React Native", "Firebase"],
            }
        ])
        self.assertEqual(result["quality_score"], 31)
        self.assertEqual(result["quantity_score"], 25)
        self.assertEqual(result["insights"], ["Add more projects to demonstrate breadth of experience"])

    def test_insights_are_capped_at_three(self):
        projects = [{"name": f"Project {i}", "description": "A project"} for i in range(5)]
        result = analyze_project_quality(projects)
        self.assertEqual(len(result["insights"]), 3)
        self.assertEqual(result["quantity_score"], 100)
        self.assertIn('"Project 0"', result["insights"][0])


class TestExperience(unittest.TestCase):

    def test_empty_experience(self):
        result = analyze_experience_quality([])
        self.assertEqual(result["quality_score"], 0)
        self.assertEqual(result["quantity_score"], 0)
        self.assertEqual(len(result["insights"]), 1)
        self.assertEqual(result["breakdown"], {"internships": 0, "research": 0, "teaching": 0, "other": 0})

    def test_classify_position(self):
        self.assertEqual(classify_position("Software Engineering Intern"), "internships")
        self.assertEqual(classify_position("Undergraduate Research Assistant"), "research")
        self.assertEqual(classify_position("Teaching Assistant"), "teaching")
        self.assertEqual(classify_position("Backend Engineer"), "other")

    def test_entry_without_impact_or_achievements(self):
        """Responsibilities only: one insight for the role, one for diversity."""
        result = analyze_experience_quality([
            {"position": "Backend Engineer", "responsibilities": ["Wrote code"], "achievements": []}
        ])
        self.assertEqual(result["quality_score"], 0)
        self.assertEqual(result["quantity_score"], 30)
        self.assertEqual(
            result["insights"],
            [
                "Add measurable achievements to your Backend Engineer role",
                "Diversify your experience with research, TA, or different role types",
            ],
        )

    def test_achievements_bonus(self):
        """impact 20*0.45 + verbs 15*0.35 + tech 12*0.2 + 15 = 31.65 -> 32."""
        result = analyze_experience_quality([
            {
                "position": "Software Engineering Intern",
                "responsibilities": ["Maintained internal dashboards"],
                "achievements": ["Automated deployment pipeline, cutting release time by 3 hours"],
            }
        ])
        self.assertEqual(result["quality_score"], 32)
        self.assertEqual(result["breakdown"]["internships"], 1)


class TestSkills(unittest.TestCase):

    def test_missing_or_empty_skills(self):
        for skills in (None, {}, {"programming_languages": [], "frameworks": []}):
            result = analyze_skills_quality(skills)
            self.assertEqual(result["quality_score"], 0)
            self.assertEqual(result["quantity_score"], 0)
            self.assertEqual(result["insights"], ["Add technical skills to your resume"])

    def test_coverage_and_depth(self):
        """coverage 60, depth 20+20+10 = 50 -> round(36 + 20) = 56."""
        result = analyze_skills_quality({
            "programming_languages": ["Python", "Java", "C++"],
            "frameworks": ["React", "Flask", "TensorFlow"],
            "databases": ["PostgreSQL", "MongoDB"],
        })
        self.assertEqual(result["quality_score"], 56)
        self.assertEqual(result["quantity_score"], 40)
        self.assertEqual(result["insights"], ["Add DevOps/cloud tools (Docker, AWS, etc.)"])
        self.assertEqual(
            result["coverage"],
            {"languages": 3, "frameworks": 3, "databases": 2, "devops": 0, "other": 0},
        )

    def test_missing_categories_insight_order(self):
        result = analyze_skills_quality({"other": ["Excel"]})
        self.assertEqual(
            result["insights"],
            [
                "Add programming languages you know",
                "List frameworks you have worked with",
                "Add DevOps/cloud tools (Docker, AWS, etc.)",
            ],
        )


class TestLinks(unittest.TestCase):

    def test_all_links(self):
        result = analyze_links_quality({
            "github": "github.com/a",
            "linkedin": "linkedin.com/in/a",
            "portfolio": "a.dev",
            "email": "a@b.com",
            "phone": "555-0100",
        })
        self.assertEqual(result["quality_score"], 100)
        self.assertEqual(result["insights"], [])

    def test_partial_links(self):
        result = analyze_links_quality({"github": "github.com/a", "linkedin": "li/a", "email": "  "})
        self.assertEqual(result["quality_score"], 45)
        self.assertFalse(result["has_email"])
        self.assertEqual(result["insights"], ["Create a portfolio website to stand out"])

    def test_no_contact_details(self):
        for basics in (None, {}, {"github": " ", "email": ""}):
            result = analyze_links_quality(basics)
            self.assertEqual(result["quality_score"], 0)
            self.assertEqual(len(result["insights"]), 1)


class TestGPA(unittest.TestCase):

    def test_tier_boundaries(self):
        self.assertEqual(analyze_gpa_quality(3.7)["score"], 100)
        self.assertEqual(analyze_gpa_quality(3.69)["score"], 80)
        self.assertEqual(analyze_gpa_quality(3.3)["score"], 80)
        self.assertEqual(analyze_gpa_quality(3.0)["score"], 60)
        self.assertEqual(analyze_gpa_quality(2.5)["score"], 40)
        self.assertEqual(analyze_gpa_quality(0)["score"], 0)
        self.assertEqual(analyze_gpa_quality(None)["score"], 0)

    def test_tiers(self):
        self.assertEqual(analyze_gpa_quality(3.9)["tier"], "excellent")
        self.assertEqual(analyze_gpa_quality(2.1)["tier"], "needs_improvement")
        self.assertEqual(analyze_gpa_quality(0)["tier"], "not_provided")
        self.assertEqual(len(analyze_gpa_quality(3.5)["insights"]), 1)


class TestCoursework(unittest.TestCase):

    def test_no_education(self):
        for education in (None, [], [{"achievements": []}]):
            result = analyze_coursework_quality(education)
            self.assertEqual(result["quality_score"], 0)
            self.assertEqual(result["quantity_score"], 0)
            self.assertEqual(result["insights"], ["Add relevant coursework or academic achievements"])

    def test_relevance(self):
        result = analyze_coursework_quality([
            {"achievements": ["Data Structures", "Art History", "Computer Networks"]}
        ])
        self.assertEqual(result["quality_score"], 67)
        self.assertEqual(result["quantity_score"], 60)
        self.assertEqual(result["insights"], ["Add more relevant technical coursework"])

    def test_only_first_education_entry_counts(self):
        result = analyze_coursework_quality([
            {"achievements": ["Operating Systems"]},
            {"achievements": ["Machine Learning", "Algorithms"]},
        ])
        self.assertEqual(result["quantity_score"], 20)
        self.assertEqual(result["quality_score"], 100)


if __name__ == "__main__":
    unittest.main()
