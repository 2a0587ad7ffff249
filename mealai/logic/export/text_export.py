"""Plain-text export of a meal plan (for notes apps)."""
from __future__ import annotations
from datetime import date as _date
from typing import List, Optional

from mealai.domain.CalorieProfile import CalorieProfile
from mealai.domain.MealPlan import MealPlan
from mealai.utilities.constants import EXPORT_FILE_PREFIX, ISO_DATE_FORMAT

__all__ = ["build_text_export", "text_export_filename"]


def text_export_filename(today: Optional[_date] = None) -> str:
    today = today or _date.today()
    return f"{EXPORT_FILE_PREFIX}-{today.strftime(ISO_DATE_FORMAT)}.txt"


def build_text_export(plan: MealPlan, profile: Optional[CalorieProfile] = None,
                      today: Optional[_date] = None) -> str:
    """Render the plan as a sectioned document.

    Days and grocery categories keep the order they have in the plan;
    category names are written exactly as given.
    """
    today = today or _date.today()
    out: List[str] = [
        "WEEKLY MEAL PLAN",
        f"Generated: {today.strftime(ISO_DATE_FORMAT)}",
        "",
    ]
    if profile is not None:
        out += [
            "CALORIE TARGETS:",
            f"Total family daily needs: {profile.total_daily_calories} calories",
            f"Average per person: {profile.average_per_person} calories/day",
            "",
        ]

    for day in plan.days:
        out.append(day.day.upper())
        out.append("=" * len(day.day))
        for meal_type, meal in day.meals.items():
            out.append("")
            out.append(f"{meal_type.upper()}: {meal.name}")
            out.append(f"Description: {meal.description}")
            if meal.prep_time is not None:
                out.append(f"Prep time: {meal.prep_time} minutes")
            if meal.calories:
                out.append(f"Calories per serving: {meal.calories}")
            if meal.recipe_url:
                out.append(f"Recipe: {meal.recipe_url}")
            out.append(f"Ingredients: {', '.join(meal.ingredients)}")
        out.append("")

    out += ["", "SHOPPING LIST", "============="]
    for category, items in plan.grocery_list.items():
        out.append("")
        out.append(f"{category}:")
        out += [f"  • {item}" for item in items]
    return "\n".join(out) + "\n"
