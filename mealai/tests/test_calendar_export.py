import unittest
from datetime import date

from mealai.domain.MealPlan import MealPlan
from mealai.logic.export.calendar_export import (
    build_calendar,
    calendar_export_filename,
    event_date_for,
    meal_window,
)
from mealai.tests.sample_data import make_plan_dict

WEDNESDAY = date(2026, 10, 21)
MONDAY = date(2026, 10, 19)


def unfold(ics: str) -> str:
    return ics.replace("\r\n ", "")


def events(ics: str):
    blocks = unfold(ics).split("BEGIN:VEVENT\r\n")[1:]
    return [dict(line.split(":", 1) for line in b.split("END:VEVENT")[0].strip().split("\r\n")) for b in blocks]


class TestEventDates(unittest.TestCase):

    def test_upcoming_weekday(self):
        self.assertEqual(event_date_for("Monday", WEDNESDAY), date(2026, 10, 26))
        self.assertEqual(event_date_for("Sunday", WEDNESDAY), date(2026, 10, 25))
        self.assertEqual(event_date_for("Thursday", WEDNESDAY), date(2026, 10, 22))

    def test_same_weekday_is_today(self):
        self.assertEqual(event_date_for("Monday", MONDAY), MONDAY)
        self.assertEqual(event_date_for("Wednesday", WEDNESDAY), WEDNESDAY)

    def test_day_names_case_insensitive(self):
        self.assertEqual(event_date_for(" monday ", WEDNESDAY), date(2026, 10, 26))
        self.assertIsNone(event_date_for("Someday", WEDNESDAY))

    def test_meal_windows(self):
        self.assertEqual(meal_window("breakfast"), ("0800", "0900"))
        self.assertEqual(meal_window("lunch"), ("1200", "1300"))
        self.assertEqual(meal_window("dinner"), ("1800", "1900"))
        self.assertEqual(meal_window("snack"), ("1800", "1900"))


class TestCalendarExport(unittest.TestCase):

    def setUp(self):
        self.plan = MealPlan.from_dict(make_plan_dict())

    def test_structure(self):
        ics = build_calendar(self.plan, today=WEDNESDAY)
        lines = ics.split("\r\n")
        self.assertEqual(lines[0], "BEGIN:VCALENDAR")
        self.assertIn("VERSION:2.0", lines)
        self.assertEqual(lines[-2], "END:VCALENDAR")
        self.assertEqual(ics.count("BEGIN:VEVENT"), 21)
        self.assertEqual(ics.count("END:VEVENT"), 21)
        self.assertNotIn("TZID", ics)
        for line in lines:
            self.assertLessEqual(len(line.encode("utf-8")), 75)

    def test_monday_events_requested_on_wednesday(self):
        monday = [e for e in events(build_calendar(self.plan, today=WEDNESDAY))
                  if e["SUMMARY"].endswith("for Monday")]
        self.assertEqual(len(monday), 3)
        by_start = {e["DTSTART"]: e for e in monday}
        self.assertEqual(set(by_start), {"20261026T080000", "20261026T120000", "20261026T180000"})
        self.assertEqual(by_start["20261026T080000"]["DTEND"], "20261026T090000")
        self.assertEqual(by_start["20261026T120000"]["DTEND"], "20261026T130000")
        self.assertEqual(by_start["20261026T180000"]["DTEND"], "20261026T190000")

    def test_monday_events_requested_on_monday(self):
        starts = [e["DTSTART"] for e in events(build_calendar(self.plan, today=MONDAY))
                  if e["SUMMARY"].endswith("for Monday")]
        self.assertTrue(starts)
        self.assertTrue(all(s.startswith("20261019T") for s in starts))

    def test_summary_and_description(self):
        first = events(build_calendar(self.plan, today=WEDNESDAY))[0]
        self.assertEqual(first["SUMMARY"], "Breakfast: Japanese breakfast for Monday")
        self.assertEqual(
            first["DESCRIPTION"],
            "Prep: 20 min\\nCalories: 450\\nhttps://recipes.example.com/monday/breakfast",
        )
        self.assertEqual(first["UID"], "20261026-breakfast@mealai")
        self.assertEqual(first["DTSTAMP"], "20261021T000000")

    def test_description_without_optional_fields(self):
        data = make_plan_dict(meal_types=["dinner"], days=["Friday"])
        del data["days"][0]["meals"]["dinner"]["calories"]
        del data["days"][0]["meals"]["dinner"]["recipeUrl"]
        (event,) = events(build_calendar(MealPlan.from_dict(data), today=WEDNESDAY))
        self.assertEqual(event["DESCRIPTION"], "Prep: 20 min")
        self.assertEqual(event["DTSTART"], "20261023T180000")

    def test_non_text_recipe_url_is_ignored(self):
        data = make_plan_dict(meal_types=["dinner"], days=["Friday"])
        data["days"][0]["meals"]["dinner"]["recipeUrl"] = ["https://a.example.com", "https://b.example.com"]
        (event,) = events(build_calendar(MealPlan.from_dict(data), today=WEDNESDAY))
        self.assertEqual(event["DESCRIPTION"], "Prep: 20 min\\nCalories: 450")

    def test_missing_prep_time_left_out(self):
        data = make_plan_dict(meal_types=["dinner"], days=["Friday"])
        del data["days"][0]["meals"]["dinner"]["prepTime"]
        (event,) = events(build_calendar(MealPlan.from_dict(data), today=WEDNESDAY))
        self.assertNotIn("None", event["DESCRIPTION"])
        self.assertTrue(event["DESCRIPTION"].startswith("Calories: 450"))

    def test_text_is_escaped(self):
        data = make_plan_dict(meal_types=["lunch"], days=["Monday"])
        data["days"][0]["meals"]["lunch"]["name"] = "Rice, beans; salsa"
        (event,) = events(build_calendar(MealPlan.from_dict(data), today=WEDNESDAY))
        self.assertEqual(event["SUMMARY"], "Lunch: Rice\\, beans\\; salsa")

    def test_unknown_day_is_skipped(self):
        data = make_plan_dict(meal_types=["lunch"], days=["Monday", "Someday"])
        with self.assertLogs("mealai.logic.export.calendar_export", level="WARNING"):
            ics = build_calendar(MealPlan.from_dict(data), today=WEDNESDAY)
        self.assertEqual(ics.count("BEGIN:VEVENT"), 1)

    def test_deterministic(self):
        self.assertEqual(build_calendar(self.plan, today=WEDNESDAY), build_calendar(self.plan, today=WEDNESDAY))

    def test_filename(self):
        self.assertEqual(calendar_export_filename(WEDNESDAY), "meal-plan-2026-10-21.ics")


if __name__ == '__main__':
    unittest.main()
