"""Plan generation pipeline.

form -> calorie profile -> prompt -> relay -> completion text -> MealPlan.
Stages raise PlannerError subclasses; callers decide how to present them.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

from mealai.domain.CalorieProfile import CalorieProfile
from mealai.domain.MealPlan import MealPlan
from mealai.domain.MealPlanRequest import MealPlanRequest
from mealai.domain.PlannerSession import PlannerSession
from mealai.infra.relay_client import RelayClient
from mealai.logic.calories.estimator import estimate_calories
from mealai.logic.parsing.response_parser import extract_completion_text, parse_meal_plan
from mealai.logic.prompting.builder import build_request
from mealai.utilities.config import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_TEMPERATURE,
    INCLUDE_CALORIES,
    STRICT_PLAN_VALIDATION,
)
from mealai.utilities.validators import FormInput

logger = logging.getLogger(__name__)

__all__ = ["PlanResult", "prepare_request", "generate_meal_plan", "run_generation"]


@dataclass(frozen=True)
class PlanResult:
    profile: CalorieProfile
    request: MealPlanRequest
    plan: MealPlan


def prepare_request(form: FormInput, *, temperature: float = DEFAULT_TEMPERATURE,
                    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
                    include_calories: bool = INCLUDE_CALORIES) -> tuple[CalorieProfile, MealPlanRequest]:
    """Validate-and-build step; runs before anything is sent."""
    profile = estimate_calories(form.ages)
    request = build_request(form, profile, temperature=temperature,
                            max_output_tokens=max_output_tokens, include_calories=include_calories)
    return profile, request


def generate_meal_plan(form: FormInput, relay: RelayClient, *,
                       temperature: float = DEFAULT_TEMPERATURE,
                       max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
                       include_calories: bool = INCLUDE_CALORIES,
                       strict: bool = STRICT_PLAN_VALIDATION) -> PlanResult:
    profile, request = prepare_request(form, temperature=temperature, max_output_tokens=max_output_tokens,
                                       include_calories=include_calories)
    envelope = relay.send(request)
    text = extract_completion_text(envelope)
    plan = parse_meal_plan(text, meal_types=request.meal_types, strict=strict)
    logger.info("Generated meal plan: %d days, %d grocery categories", len(plan.days), len(plan.grocery_list))
    return PlanResult(profile=profile, request=request, plan=plan)


def run_generation(session: PlannerSession, form: FormInput, relay: RelayClient, **options) -> PlanResult:
    """Generate and store a plan in the session.

    The session keeps its previous plan when any stage fails.
    """
    result = generate_meal_plan(form, relay, **options)
    session.replace_plan(form, result.profile, result.plan)
    return result
