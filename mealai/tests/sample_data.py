"""Canned model output shared by the tests."""
import json

from mealai.utilities.constants import DAYS_OF_WEEK, MEAL_TYPES

CUISINE_BY_MEAL = {"breakfast": "Japanese", "lunch": "Mexican", "dinner": "Indian"}


def make_meal(day: str, meal_type: str, calories=True, url=True) -> dict:
    meal = {
        "name": f"{CUISINE_BY_MEAL.get(meal_type, 'Thai')} {meal_type} for {day}",
        "cuisine": CUISINE_BY_MEAL.get(meal_type, "Thai"),
        "description": f"A simple {meal_type} dish.",
        "prepTime": 20,
        "ingredients": ["rice", "eggs", "scallions", "soy sauce"],
    }
    if calories:
        meal["calories"] = 450
    if url:
        meal["recipeUrl"] = f"https://recipes.example.com/{day.lower()}/{meal_type}"
    return meal


def make_plan_dict(meal_types=MEAL_TYPES, days=DAYS_OF_WEEK) -> dict:
    return {
        "days": [
            {"day": day, "meals": {m: make_meal(day, m) for m in meal_types}}
            for day in days
        ],
        "groceryList": {
            "Proteins": ["2 lbs chicken breast", "1 dozen eggs"],
            "Vegetables": ["3 large tomatoes"],
            "Spices & Aromatics": ["1 bunch cilantro"],
            "Pantry": ["1 bottle soy sauce"],
        },
    }


def make_completion(meal_types=MEAL_TYPES, fenced=True) -> str:
    body = json.dumps(make_plan_dict(meal_types), indent=2)
    return f"```json\n{body}\n```" if fenced else body


def make_envelope(text: str) -> dict:
    return {
        "candidates": [
            {"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}
        ],
        "modelVersion": "gemini-2.0-flash",
    }


class FakeRelay:
    """Stands in for RelayClient; records every request it is given."""

    def __init__(self, envelope=None, error=None):
        self.envelope = envelope if envelope is not None else make_envelope(make_completion())
        self.error = error
        self.requests = []

    def send(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.envelope
