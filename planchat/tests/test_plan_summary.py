import unittest

from planchat.domain.Course import Course, Priority
from planchat.domain.Plan import Plan
from planchat.logic.summary.plan_summary import format_hours, summarize_plan
from planchat.utilities.constants import EMPTY_PLAN_MESSAGE


class TestPlanSummary(unittest.TestCase):

    def test_no_plan(self):
        self.assertEqual(summarize_plan(None), [EMPTY_PLAN_MESSAGE])

    def test_plan_without_courses(self):
        self.assertEqual(summarize_plan(Plan([])), [EMPTY_PLAN_MESSAGE])

    def test_lines_in_plan_order(self):
        plan = Plan([
            Course("Math", 10, Priority.HIGH),
            Course("History", 4, Priority.MEDIUM),
            Course("Art", 2.5, Priority.LOW),
        ])
        self.assertEqual(summarize_plan(plan), [
            "3 Subject(s)",
            "🔴 Math (10h)",
            "🟡 History (4h)",
            "🟢 Art (2.5h)",
        ])

    def test_unknown_priority_glyph(self):
        plan = Plan.from_dict({"courses": [{"id": "Chem", "workloadHours": 3, "priority": "URGENT"}]})
        self.assertEqual(summarize_plan(plan), ["1 Subject(s)", "⚪ Chem (3h)"])

    def test_format_hours(self):
        self.assertEqual(format_hours(10.0), "10")
        self.assertEqual(format_hours(7.5), "7.5")


if __name__ == '__main__':
    unittest.main()
