import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent
for _path in (PROJECT_ROOT, TESTS_DIR):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

from app.schemas.resume import ExperienceEntry  # noqa: E402
from app.scoring.metrics import (  # noqa: E402
    MAX_SUGGESTIONS,
    PREVIEW_CHARS,
    has_metric,
    scan_quantified_metrics,
)


class MetricsScannerTests(unittest.TestCase):
    def test_counts_bullets_with_and_without_metrics(self):
        result = scan_quantified_metrics(
            [{"company": "Acme", "description": ["Increased sales by 20%", "Managed the team"]}]
        )
        self.assertTrue(result.has_metrics)
        self.assertEqual(result.metric_count, 1)
        self.assertEqual(result.bullets_without_metrics, 1)
        self.assertEqual(len(result.suggestions), 1)
        self.assertIn('"Managed the team..."', result.suggestions[0])

    def test_suggestions_are_capped_and_previews_truncated(self):
        bullets = [
            f"Coordinated planning sessions between design and product leads for release {letter}"
            for letter in "abcdefg"
        ]
        result = scan_quantified_metrics([ExperienceEntry(company="Acme", description=bullets)])
        self.assertFalse(result.has_metrics)
        self.assertEqual(result.bullets_without_metrics, len(bullets))
        self.assertEqual(len(result.suggestions), MAX_SUGGESTIONS)
        for bullet, suggestion in zip(bullets, result.suggestions):
            self.assertTrue(suggestion.startswith(f'Add a metric to "{bullet[:PREVIEW_CHARS]}..."'))

    def test_blank_bullets_are_ignored(self):
        result = scan_quantified_metrics([{"description": ["", "   ", "Saved $2,000 monthly"]}])
        self.assertEqual(result.metric_count, 1)
        self.assertEqual(result.bullets_without_metrics, 0)
        self.assertEqual(result.suggestions, [])

    def test_missing_experience_yields_zeros(self):
        for value in (None, [], "not a list"):
            result = scan_quantified_metrics(value)
            self.assertFalse(result.has_metrics)
            self.assertEqual(result.metric_count, 0)
            self.assertEqual(result.bullets_without_metrics, 0)

    def test_metric_markers(self):
        self.assertTrue(has_metric("Grew revenue by 3 million"))
        self.assertTrue(has_metric("Cut spend by ten percent"))
        self.assertTrue(has_metric("Raised 50k"))
        self.assertFalse(has_metric("Improved onboarding docs"))


if __name__ == "__main__":
    unittest.main()
