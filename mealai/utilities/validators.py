"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing import List, Optional

from mealai.utilities.constants import DIETARY_OPTIONS, MEAL_TYPES
from mealai.utilities.errors import InputValidationError, NoMealSelectedError


class FormInput(BaseModel):
    """Schema for the household preferences form."""
    model_config = ConfigDict(populate_by_name=True)

    family_size: int = Field(2, ge=1, le=50, alias="familySize")
    ages: str = Field("30, 32", max_length=500)
    dietary: str = Field("none", alias="dietaryPreference")
    meals: List[str] = Field(default_factory=lambda: list(MEAL_TYPES), alias="mealSelection")

    @field_validator('ages')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()

    @field_validator('dietary')
    @classmethod
    def validate_dietary(cls, v):
        v = (v or "none").strip().lower()
        if v not in DIETARY_OPTIONS:
            raise ValueError(f"Unknown dietary preference: {v}")
        return v

    @field_validator('meals')
    @classmethod
    def validate_meals(cls, v):
        """Keep known meal types only, in canonical order, without duplicates."""
        chosen = {m.strip().lower() for m in v if m and m.strip()}
        unknown = chosen - set(MEAL_TYPES)
        if unknown:
            raise ValueError(f"Unknown meal type(s): {', '.join(sorted(unknown))}")
        ordered = [m for m in MEAL_TYPES if m in chosen]
        if not ordered:
            raise ValueError('Please select at least one meal type.')
        return ordered


class GenerateRequestBody(BaseModel):
    """Schema for the relay request body (camelCase on the wire)."""
    prompt: Optional[str] = None
    maxOutputTokens: Optional[int] = Field(None, ge=1, le=65536)
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0)


def parse_form_input(**fields) -> FormInput:
    """Build a FormInput, reporting problems as InputValidationError instead of a 422."""
    meals = fields.get('meals')
    if meals is not None and not [m for m in meals if m and m.strip()]:
        raise NoMealSelectedError()
    try:
        return FormInput(**fields)
    except ValidationError as e:
        messages = [err.get('msg', '').removeprefix('Value error, ') for err in e.errors()]
        raise InputValidationError('; '.join(m for m in messages if m) or 'Invalid form input') from e
