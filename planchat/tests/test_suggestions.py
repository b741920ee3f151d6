import unittest
from planchat.logic.suggestions.engine import suggest


class TestSuggestions(unittest.TestCase):

    def test_schedule_commands_in_catalogue_order(self):
        self.assertEqual(suggest("sch"), ["generate schedule", "show schedule"])

    def test_case_insensitive(self):
        self.assertEqual(suggest("SCH"), ["generate schedule", "show schedule"])
        self.assertEqual(suggest("math"), ['add subject "Math" hours 10 priority HIGH'])

    def test_two_characters_or_less_gives_nothing(self):
        self.assertEqual(suggest("xy"), [])
        self.assertEqual(suggest("sh"), [])
        self.assertEqual(suggest(""), [])

    def test_input_is_not_trimmed(self):
        # three raw characters activate matching, and the spaces take part in it
        self.assertEqual(suggest(" sc"), ["generate schedule", "show schedule"])
        self.assertEqual(suggest("   "), [])

    def test_capped_at_three_matches(self):
        catalogue = ["show a", "show b", "show c", "show d"]
        self.assertEqual(suggest("show", catalogue), ["show a", "show b", "show c"])

    def test_no_match(self):
        self.assertEqual(suggest("xyz"), [])

    def test_show_prefix(self):
        self.assertEqual(suggest("show"), ["show schedule", "show history"])


if __name__ == '__main__':
    unittest.main()
