"""MealPlanRequest: a rendered prompt plus the generation parameters sent with it."""
from dataclasses import dataclass, field
from typing import Tuple

from mealai.utilities.config import DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_TEMPERATURE


@dataclass(frozen=True)
class MealPlanRequest:
    prompt: str
    meal_types: Tuple[str, ...] = field(default_factory=tuple)
    temperature: float = DEFAULT_TEMPERATURE
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS

    def to_body(self) -> dict:
        """Relay request body."""
        return {
            "prompt": self.prompt,
            "maxOutputTokens": self.max_output_tokens,
            "temperature": self.temperature,
        }
