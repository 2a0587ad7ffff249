"""Calorie estimation.

Maps household ages to daily calorie targets using a fixed bracket table
(lower bound inclusive, upper bound exclusive) and aggregates them.
"""
from __future__ import annotations
import re
from typing import Iterable, List, Union

from mealai.domain.CalorieProfile import CalorieProfile
from mealai.utilities.constants import CALORIE_BRACKETS, SENIOR_CALORIES
from mealai.utilities.errors import EmptyInputError

__all__ = ["parse_ages", "calories_for_age", "estimate_calories"]

_LEADING_INT = re.compile(r"[+-]?\d+")


def parse_ages(ages: Union[str, Iterable]) -> List[int]:
    """Parse "5, 7, 35" (or an iterable of values) into ints, dropping what doesn't parse.

    A token counts when it starts with an integer, so "35yo" gives 35.
    """
    tokens = ages.split(",") if isinstance(ages, str) else list(ages)
    parsed: List[int] = []
    for token in tokens:
        if isinstance(token, bool):
            continue
        if isinstance(token, int):
            parsed.append(token)
            continue
        m = _LEADING_INT.match(str(token).strip())
        if m:
            parsed.append(int(m.group(0)))
    return parsed


def calories_for_age(age: int) -> int:
    for upper, calories in CALORIE_BRACKETS:
        if age < upper:
            return calories
    return SENIOR_CALORIES


def estimate_calories(ages: Union[str, Iterable]) -> CalorieProfile:
    """Return the CalorieProfile for the given ages.

    Raises EmptyInputError when no age parses.
    """
    parsed = parse_ages(ages)
    if not parsed:
        raise EmptyInputError()
    entries = tuple((age, calories_for_age(age)) for age in parsed)
    total = sum(c for _, c in entries)
    # half-up rounding
    average = int(total / len(entries) + 0.5)
    return CalorieProfile(entries=entries, total_daily_calories=total, average_per_person=average)
