"""iCalendar export: one VEVENT per (day, meal type) of a plan.

Each plan day is placed on the next occurrence of that weekday counting from
today (today itself when it matches). Times are floating local times.
"""
from __future__ import annotations
import logging
from datetime import date as _date, timedelta
from typing import List, Optional

from mealai.domain.Meal import Meal
from mealai.domain.MealPlan import MealPlan
from mealai.utilities.constants import (
    CALENDAR_PRODID,
    DAYS_OF_WEEK,
    DEFAULT_MEAL_WINDOW,
    EXPORT_FILE_PREFIX,
    ISO_DATE_FORMAT,
    MEAL_TIME_WINDOWS,
    UID_DOMAIN,
)

logger = logging.getLogger(__name__)

__all__ = ["event_date_for", "meal_window", "build_calendar", "calendar_export_filename"]

CRLF = "\r\n"
_WEEKDAY_INDEX = {name.lower(): i for i, name in enumerate(DAYS_OF_WEEK)}  # Monday == 0


def calendar_export_filename(today: Optional[_date] = None) -> str:
    today = today or _date.today()
    return f"{EXPORT_FILE_PREFIX}-{today.strftime(ISO_DATE_FORMAT)}.ics"


def event_date_for(day_name: str, today: _date) -> Optional[_date]:
    """Next date on or after today falling on day_name; None for an unknown name."""
    target = _WEEKDAY_INDEX.get((day_name or "").strip().lower())
    if target is None:
        return None
    return today + timedelta(days=(target - today.weekday()) % 7)


def meal_window(meal_type: str) -> tuple[str, str]:
    return MEAL_TIME_WINDOWS.get(meal_type.lower(), DEFAULT_MEAL_WINDOW)


def _escape(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def _fold(line: str) -> str:
    """Fold a content line at 75 octets (RFC 5545 3.1)."""
    if len(line.encode("utf-8")) <= 75:
        return line
    chunks: List[str] = []
    current = ""
    limit = 75
    for ch in line:
        if len((current + ch).encode("utf-8")) > limit:
            chunks.append(current)
            current = ch
            limit = 74  # continuation lines start with a space
        else:
            current += ch
    chunks.append(current)
    return (CRLF + " ").join(chunks)


def _description(meal: Meal) -> str:
    parts = []
    if meal.prep_time is not None:
        parts.append(f"Prep: {meal.prep_time} min")
    if meal.calories:
        parts.append(f"Calories: {meal.calories}")
    if meal.recipe_url:
        parts.append(meal.recipe_url)
    return "\n".join(parts)


def build_calendar(plan: MealPlan, today: Optional[_date] = None) -> str:
    today = today or _date.today()
    stamp = today.strftime("%Y%m%d") + "T000000"
    lines: List[str] = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{CALENDAR_PRODID}",
        "CALSCALE:GREGORIAN",
    ]
    for day in plan.days:
        event_date = event_date_for(day.day, today)
        if event_date is None:
            logger.warning("Skipping calendar events for unknown day %r", day.day)
            continue
        date_str = event_date.strftime("%Y%m%d")
        for meal_type, meal in day.meals.items():
            start, end = meal_window(meal_type)
            lines += [
                "BEGIN:VEVENT",
                f"UID:{date_str}-{meal_type.lower()}@{UID_DOMAIN}",
                f"DTSTAMP:{stamp}",
                f"DTSTART:{date_str}T{start}00",
                f"DTEND:{date_str}T{end}00",
                f"SUMMARY:{_escape(meal_type.capitalize() + ': ' + meal.name)}",
                f"DESCRIPTION:{_escape(_description(meal))}",
                "END:VEVENT",
            ]
    lines.append("END:VCALENDAR")
    return CRLF.join(_fold(line) for line in lines) + CRLF
