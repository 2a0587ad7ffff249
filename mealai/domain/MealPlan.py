"""MealPlan aggregate: ordered day plans plus a categorized grocery list."""
from typing import Dict, List, Optional

from mealai.domain.Meal import Meal

GroceryList = Dict[str, List[str]]


class DayPlan:
    def __init__(self, day: str, meals: Optional[Dict[str, Meal]] = None):
        self.day = day
        # insertion order is the order the model returned the meal types in
        self.meals: Dict[str, Meal] = dict(meals) if meals else {}

    def __repr__(self) -> str:
        return f"DayPlan({self.day}: {', '.join(self.meals)})"

    @staticmethod
    def from_dict(data: dict) -> "DayPlan":
        if not isinstance(data, dict):
            raise ValueError("day entry is not an object")
        day = data.get("day")
        if not isinstance(day, str) or not day.strip():
            raise ValueError("day entry has no day name")
        meals = data.get("meals")
        if not isinstance(meals, dict):
            raise ValueError(f"{day}: 'meals' must be an object")
        parsed = {}
        for meal_type, meal in meals.items():
            try:
                parsed[str(meal_type).lower()] = Meal.from_dict(meal)
            except ValueError as e:
                raise ValueError(f"{day} {meal_type}: {e}") from e
        return DayPlan(day.strip(), parsed)

    def to_dict(self) -> dict:
        return {"day": self.day, "meals": {k: m.to_dict() for k, m in self.meals.items()}}


class MealPlan:
    """A week of meals. Replaced wholesale on every generation, never edited in place."""

    def __init__(self, days: Optional[List[DayPlan]] = None, grocery_list: Optional[GroceryList] = None):
        self.days = days[:] if days else []
        self.grocery_list: GroceryList = dict(grocery_list) if grocery_list else {}

    def __repr__(self) -> str:
        return f"MealPlan({len(self.days)} days, {len(self.grocery_list)} grocery categories)"

    def meal_types(self) -> List[str]:
        seen: List[str] = []
        for day in self.days:
            for meal_type in day.meals:
                if meal_type not in seen:
                    seen.append(meal_type)
        return seen

    @staticmethod
    def from_dict(data: dict) -> "MealPlan":
        if not isinstance(data, dict):
            raise ValueError("plan is not an object")
        days = data.get("days")
        if not isinstance(days, list):
            raise ValueError("'days' must be a list")
        grocery = data.get("groceryList") or {}
        if not isinstance(grocery, dict):
            raise ValueError("'groceryList' must be an object")
        grocery_list: GroceryList = {}
        for category, items in grocery.items():
            if isinstance(items, str):
                items = [items]
            if not isinstance(items, list):
                raise ValueError(f"grocery category {category!r} must be a list")
            grocery_list[str(category)] = [str(i) for i in items if i is not None]
        return MealPlan([DayPlan.from_dict(d) for d in days], grocery_list)

    def to_dict(self) -> dict:
        return {
            "days": [d.to_dict() for d in self.days],
            "groceryList": {k: list(v) for k, v in self.grocery_list.items()},
        }
