import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent
for _path in (PROJECT_ROOT, TESTS_DIR):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

from app.scoring.jd_match import calculate_jd_match  # noqa: E402


def _resume() -> dict:
    return {
        "summary": "Python developer building React apps",
        "experience": [
            {
                "company": "Acme",
                "position": "Engineer",
                "description": ["Built Docker images for Python services"],
            }
        ],
        "education": [{"degree": "BSc Computer Science", "school": "State University"}],
        "skills": {"technical": ["Python", "React", "Docker"], "soft": []},
    }


class JDMatcherTests(unittest.TestCase):
    def test_match_score_counts_and_missing_keywords(self):
        result = calculate_jd_match(
            _resume(),
            {"title": "Engineer", "description": "We need Python and React experience with AWS and Kubernetes."},
        )
        self.assertEqual(result.score, 50)
        by_keyword = {match.keyword: match for match in result.matches}
        self.assertEqual(list(by_keyword), ["python", "react", "aws", "kubernetes"])
        self.assertTrue(by_keyword["python"].found)
        self.assertEqual(by_keyword["python"].count, 3)
        self.assertEqual(by_keyword["react"].count, 2)
        self.assertFalse(by_keyword["aws"].found)
        self.assertEqual(by_keyword["aws"].count, 0)
        self.assertEqual(result.missing, ["aws", "kubernetes"])

    def test_extra_lists_resume_terms_absent_from_posting(self):
        result = calculate_jd_match(_resume(), {"description": "Python and React."})
        self.assertIn("docker", result.extra)
        self.assertNotIn("python", result.extra)
        self.assertNotIn("react", result.extra)

    def test_extra_keeps_names_from_neighbouring_fields(self):
        resume = {
            "summary": "Engineer at Google",
            "experience": [{"position": "Senior Developer", "company": "Acme", "description": ["Built Things"]}],
            "skills": {"technical": ["Python"]},
        }
        result = calculate_jd_match(resume, "We need Python")
        self.assertEqual(result.extra, ["engineer", "google", "senior developer", "acme", "built things"])

    def test_counts_are_literal_and_non_overlapping(self):
        resume = {"summary": "C++ tooling, modern C++ and c++20", "skills": {"technical": ["Python"]}}
        result = calculate_jd_match(resume, "C++ role")
        by_keyword = {match.keyword: match for match in result.matches}
        self.assertEqual(by_keyword["c++"].count, 3)

    def test_empty_description_scores_zero(self):
        result = calculate_jd_match(_resume(), {"title": "Engineer", "description": ""})
        self.assertEqual(result.score, 0)
        self.assertEqual(result.matches, [])
        self.assertEqual(result.missing, [])

    def test_regex_metacharacters_in_keywords_are_literal(self):
        resume = {"skills": {"technical": ["C++", "Node.js"]}}
        result = calculate_jd_match(resume, "Experience with C++ and Node.js required")
        by_keyword = {match.keyword: match for match in result.matches}
        self.assertTrue(by_keyword["c++"].found)
        self.assertTrue(by_keyword["node.js"].found)
        self.assertFalse(by_keyword["experience"].found)
        self.assertGreaterEqual(result.score, 0)
        self.assertLessEqual(result.score, 100)

    def test_missing_resume_and_job_degrade_to_zero(self):
        result = calculate_jd_match(None, None)
        self.assertEqual(result.score, 0)
        self.assertEqual(result.extra, [])


if __name__ == "__main__":
    unittest.main()
