"""Completion parsing.

Pulls the generated text out of the relay's completion envelope, strips the
code fences models add despite being told not to, and turns the JSON into a
MealPlan. Every failure is reported as ParseError.
"""
from __future__ import annotations
import json
import logging
import re
from json import JSONDecodeError
from typing import Any, Iterable, Optional

from mealai.domain.MealPlan import MealPlan
from mealai.utilities.constants import DAYS_OF_WEEK
from mealai.utilities.errors import ParseError

logger = logging.getLogger(__name__)

__all__ = ["extract_completion_text", "strip_code_fences", "parse_completion", "parse_meal_plan", "validate_plan"]

_LEADING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\r?\n?")
_TRAILING_FENCE = re.compile(r"\r?\n?```\s*$")


def extract_completion_text(envelope: Any) -> str:
    """Return the text of the first candidate (all of its text parts, joined)."""
    try:
        parts = envelope["candidates"][0]["content"]["parts"]
        texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
    except (KeyError, IndexError, TypeError) as e:
        raise ParseError("Completion envelope has no candidate text") from e
    if not texts:
        raise ParseError("Completion envelope has no candidate text")
    return "".join(texts)


def strip_code_fences(text: str) -> str:
    """Remove a leading ```/```json marker, a trailing ``` marker and surrounding whitespace."""
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_completion(text: str) -> Any:
    """Parse completion text as JSON after fence stripping."""
    if not isinstance(text, str):
        raise ParseError("Completion is not text")
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise ParseError("Completion is empty")
    try:
        return json.loads(cleaned)
    except JSONDecodeError as e:
        raise ParseError(f"Completion is not valid JSON: {e.msg} at line {e.lineno} column {e.colno}") from e


def validate_plan(plan: MealPlan, meal_types: Iterable[str]) -> None:
    """Raise ParseError unless the plan has 7 known days, each with exactly the requested meals."""
    wanted = {m.lower() for m in meal_types}
    problems = []
    if len(plan.days) != len(DAYS_OF_WEEK):
        problems.append(f"expected {len(DAYS_OF_WEEK)} days, got {len(plan.days)}")
    known = {d.lower() for d in DAYS_OF_WEEK}
    for day in plan.days:
        if day.day.lower() not in known:
            problems.append(f"unknown day {day.day!r}")
        got = set(day.meals)
        if got != wanted:
            missing = sorted(wanted - got)
            extra = sorted(got - wanted)
            if missing:
                problems.append(f"{day.day} is missing {', '.join(missing)}")
            if extra:
                problems.append(f"{day.day} has unrequested {', '.join(extra)}")
    if problems:
        raise ParseError("Meal plan does not match the request: " + "; ".join(problems))


def parse_meal_plan(text: str, meal_types: Optional[Iterable[str]] = None, strict: bool = False) -> MealPlan:
    """Parse completion text into a MealPlan.

    The structure (days list, day names, meal objects with names) is always
    checked. Day count and per-day meal keys are only enforced when strict is
    set; otherwise a plan missing a meal is accepted as returned.
    """
    data = parse_completion(text)
    try:
        plan = MealPlan.from_dict(data)
    except ValueError as e:
        raise ParseError(f"Completion does not describe a meal plan: {e}") from e
    if strict:
        if meal_types is None:
            meal_types = plan.meal_types()
        validate_plan(plan, meal_types)
    elif meal_types is not None:
        try:
            validate_plan(plan, meal_types)
        except ParseError as e:
            logger.warning("Accepting non-conforming meal plan: %s", e)
    return plan
