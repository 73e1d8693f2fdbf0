import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent
for _path in (PROJECT_ROOT, TESTS_DIR):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

from app.scoring.overused_words import OVERUSED_PHRASES, detect_overused_words  # noqa: E402


class OverusedWordsTests(unittest.TestCase):
    def test_repeated_word_is_reported_with_suggestions(self):
        found = detect_overused_words("I led the team. I led the project.")
        self.assertEqual(len(found), 1)
        self.assertEqual(found[0].word, "led")
        self.assertEqual(found[0].count, 2)
        self.assertEqual(found[0].suggestions, list(OVERUSED_PHRASES["led"]))

    def test_single_use_is_not_reported(self):
        self.assertEqual(detect_overused_words("I led the team and managed the budget."), [])

    def test_matching_is_case_insensitive_and_whole_word(self):
        found = detect_overused_words("Led migrations. LED the rollout. Filled gaps. Scheduled releases.")
        self.assertEqual([(item.word, item.count) for item in found], [("led", 2)])

    def test_multi_word_phrases_and_declaration_order(self):
        text = (
            "Helped onboard hires. Worked on billing. Responsible for uptime. "
            "Helped the sales team. Responsible for hiring. Worked  on search."
        )
        found = detect_overused_words(text)
        self.assertEqual([item.word for item in found], ["responsible for", "helped", "worked on"])
        self.assertTrue(all(item.count == 2 for item in found))

    def test_empty_text(self):
        self.assertEqual(detect_overused_words(""), [])


if __name__ == "__main__":
    unittest.main()
