"""Prompt construction.

Turns the household form and its calorie profile into the instruction text
sent to the model, ending with a JSON schema template whose meal keys come
from the selected meal types.
"""
from __future__ import annotations
import json
from typing import List, Optional

from mealai.domain.CalorieProfile import CalorieProfile
from mealai.domain.MealPlanRequest import MealPlanRequest
from mealai.utilities.config import DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_TEMPERATURE, INCLUDE_CALORIES
from mealai.utilities.constants import CUISINES, DIETARY_DIRECTIVES, DIETARY_OPTIONS, GROCERY_CATEGORIES
from mealai.utilities.errors import NoMealSelectedError
from mealai.utilities.validators import FormInput

__all__ = ["dietary_label", "dietary_directive", "build_schema_template", "build_prompt", "build_request"]


def dietary_label(dietary: str) -> str:
    if dietary == "none":
        return DIETARY_OPTIONS["none"]
    return dietary


def dietary_directive(dietary: str) -> Optional[str]:
    return DIETARY_DIRECTIVES.get(dietary)


def _meal_example(include_calories: bool) -> str:
    example = {
        "name": "...",
        "cuisine": "...",
        "description": "...",
        "prepTime": 30,
    }
    if include_calories:
        example["calories"] = 500
    example["recipeUrl"] = "https://..."
    example["ingredients"] = ["...", "..."]
    return json.dumps(example)


def build_schema_template(meal_types: List[str], include_calories: bool = True) -> str:
    """Literal JSON layout the model must follow; one meal key per selected meal type."""
    meal = _meal_example(include_calories)
    meal_lines = ",\n".join(f'        "{meal_type}": {meal}' for meal_type in meal_types)
    grocery_lines = ",\n".join(
        f'    {json.dumps(category)}: [{json.dumps(sample)}]'
        for category, sample in GROCERY_CATEGORIES.items()
    )
    return (
        "{\n"
        '  "days": [\n'
        "    {\n"
        '      "day": "Monday",\n'
        '      "meals": {\n'
        f"{meal_lines}\n"
        "      }\n"
        "    }\n"
        "  ],\n"
        '  "groceryList": {\n'
        f"{grocery_lines}\n"
        "  }\n"
        "}"
    )


def build_prompt(form: FormInput, profile: CalorieProfile, include_calories: bool = INCLUDE_CALORIES) -> str:
    """Render the full prompt. Pure: same inputs, same text."""
    meal_types = list(form.meals)
    if not meal_types:
        raise NoMealSelectedError()

    lines: List[str] = [
        f"Create a healthy 7-day meal plan for a family of {form.family_size} people (ages: {form.ages}).",
        f"Dietary preference: {dietary_label(form.dietary)}.",
    ]
    directive = dietary_directive(form.dietary)
    if directive:
        lines.append(directive)

    per_meal = profile.per_meal(len(meal_types))
    lines += [
        "",
        "CALORIC REQUIREMENTS:",
        f"- Total daily caloric need for the family: {profile.total_daily_calories} calories",
        f"- Average per person: {profile.average_per_person} calories/day",
        f"- Target calories per meal: approximately {per_meal} total calories for the family",
        f"- Ensure meals are nutritionally balanced and appropriate for ages: {form.ages}",
        "- Consider portion sizes appropriate for different ages "
        "(smaller portions for children, larger for teenagers/adults)",
        "",
        f"Include only these meals: {', '.join(meal_types)}.",
        "",
        "IMPORTANT: Include diverse ethnic cuisines throughout the week. "
        f"Draw from {', '.join(CUISINES)}, and other global cuisines.",
        "",
        "For each day (Monday-Sunday), provide for each included meal type:",
    ]
    fields = [
        "Meal name",
        "Cuisine type",
        "Brief description (1-2 sentences)",
        "Preparation time in minutes",
    ]
    if include_calories:
        fields.append("Estimated calories per serving")
    fields += [
        "A specific recipe URL from reputable cooking websites",
        "Key ingredients",
    ]
    lines += [f"{i}. {field}" for i, field in enumerate(fields, start=1)]
    lines += [
        "",
        "At the end, provide a consolidated grocery list organized by category "
        f"({', '.join(GROCERY_CATEGORIES)}) with specific quantities for {form.family_size} people.",
        "",
        "Respond ONLY with valid JSON. Do not add any text before or after it and do not wrap it "
        "in markdown code fences. Use this exact structure:",
        build_schema_template(meal_types, include_calories),
    ]
    return "\n".join(lines)


def build_request(form: FormInput, profile: CalorieProfile, *,
                  temperature: float = DEFAULT_TEMPERATURE,
                  max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
                  include_calories: bool = INCLUDE_CALORIES) -> MealPlanRequest:
    return MealPlanRequest(
        prompt=build_prompt(form, profile, include_calories=include_calories),
        meal_types=tuple(form.meals),
        temperature=temperature,
        max_output_tokens=max_output_tokens,
    )
