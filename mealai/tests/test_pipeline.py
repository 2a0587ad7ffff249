import unittest

from mealai.domain.MealPlan import MealPlan
from mealai.domain.PlannerSession import PlannerSession
from mealai.logic.pipeline import generate_meal_plan, prepare_request, run_generation
from mealai.tests.sample_data import FakeRelay, make_completion, make_envelope, make_plan_dict
from mealai.utilities.errors import EmptyInputError, ParseError, RelayError
from mealai.utilities.validators import FormInput


class TestPipelineEndToEnd(unittest.TestCase):

    def setUp(self):
        self.form = FormInput(family_size=2, ages="30,32", dietary="none",
                              meals=["breakfast", "lunch", "dinner"])

    def test_two_adult_household(self):
        relay = FakeRelay(make_envelope(make_completion(fenced=True)))
        result = generate_meal_plan(self.form, relay)

        self.assertEqual(result.profile.total_daily_calories, 4400)
        self.assertEqual(result.profile.average_per_person, 2200)
        self.assertIn("4400 calories", result.request.prompt)
        self.assertIn("2200 calories/day", result.request.prompt)
        self.assertEqual(len(result.plan.days), 7)
        for day in result.plan.days:
            self.assertEqual(set(day.meals), {"breakfast", "lunch", "dinner"})
        self.assertEqual(relay.requests, [result.request])

    def test_simple_cooking_prompt(self):
        form = FormInput(family_size=2, ages="30,32", dietary="simple-cooking")
        _, request = prepare_request(form)
        self.assertIn("15 minutes or less prep time", request.prompt)

    def test_vegetarian_prompt_has_no_directive(self):
        form = FormInput(family_size=2, ages="30,32", dietary="vegetarian")
        _, request = prepare_request(form)
        self.assertIn("Dietary preference: vegetarian.", request.prompt)
        self.assertNotIn("IMPORTANT: All meals", request.prompt)
        self.assertNotIn("IMPORTANT: Do not include", request.prompt)

    def test_empty_ages_sends_nothing(self):
        relay = FakeRelay()
        form = FormInput(family_size=2, ages="n/a", meals=["dinner"])
        with self.assertRaises(EmptyInputError):
            generate_meal_plan(form, relay)
        self.assertEqual(relay.requests, [])

    def test_relay_error_propagates(self):
        relay = FakeRelay(error=RelayError(503, "API request failed"))
        with self.assertRaises(RelayError):
            generate_meal_plan(self.form, relay)

    def test_unparseable_completion(self):
        relay = FakeRelay(make_envelope("I could not make a plan, sorry."))
        with self.assertRaises(ParseError):
            generate_meal_plan(self.form, relay)

    def test_strict_mode_rejects_missing_meal(self):
        form = FormInput(family_size=1, ages="40", meals=["lunch", "dinner"])
        relay = FakeRelay(make_envelope(make_completion(meal_types=["dinner"])))
        with self.assertRaises(ParseError):
            generate_meal_plan(form, relay, strict=True)
        plan = generate_meal_plan(form, relay, strict=False).plan
        self.assertNotIn("lunch", plan.days[0].meals)


class TestSessionState(unittest.TestCase):

    def setUp(self):
        self.session = PlannerSession()
        self.form = FormInput()

    def test_failed_generation_keeps_previous_plan(self):
        run_generation(self.session, self.form, FakeRelay())
        previous = self.session.plan
        with self.assertRaises(ParseError):
            run_generation(self.session, self.form, FakeRelay(make_envelope("```json\n{\"days\": [\n```")))
        self.assertIs(self.session.plan, previous)

    def test_last_resolved_response_wins(self):
        # Without the in-flight flag, whichever response is stored last replaces the plan.
        first = MealPlan.from_dict(make_plan_dict(days=["Monday"]))
        second = MealPlan.from_dict(make_plan_dict(days=["Tuesday"]))
        profile = prepare_request(self.form)[0]
        self.session.replace_plan(self.form, profile, second)
        self.session.replace_plan(self.form, profile, first)
        self.assertIs(self.session.plan, first)

    def test_in_flight_flag_refuses_second_generation(self):
        self.assertTrue(self.session.begin_generation())
        self.assertTrue(self.session.in_flight)
        self.assertFalse(self.session.begin_generation())
        self.session.finish_generation()
        self.assertTrue(self.session.begin_generation())
        self.session.finish_generation()


if __name__ == '__main__':
    unittest.main()
