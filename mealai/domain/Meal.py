"""Meal domain entity: one dish of a generated plan (name, prep time, ingredients, links)."""
from typing import List, Optional, Any


def _to_int(value: Any) -> Optional[int]:
    """Coerce 30, 30.0, "30" or "30 minutes" to 30; anything else to None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        digits = ""
        for ch in value.strip():
            if not ch.isdigit():
                break
            digits += ch
        return int(digits) if digits else None
    return None


def _to_str(value: Any) -> Optional[str]:
    """Optional text fields: blank strings and non-strings become None."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class Meal:
    def __init__(self, name: str, description: str = "", prep_time: Optional[int] = None,
                 calories: Optional[int] = None, recipe_url: Optional[str] = None,
                 ingredients: Optional[List[str]] = None, cuisine: Optional[str] = None):
        self.name = name
        self.description = description
        self.prep_time = prep_time
        self.calories = calories
        self.recipe_url = recipe_url
        self.ingredients = ingredients[:] if ingredients else []
        self.cuisine = cuisine

    def __str__(self) -> str:
        return f"{self.name} - {self.prep_time} min - Ingredients: {', '.join(self.ingredients)}"

    __repr__ = __str__

    @property
    def recipe_link(self) -> Optional[str]:
        """recipe_url when it is a web address, else None (never a javascript: link)."""
        if self.recipe_url and self.recipe_url.lower().startswith(("http://", "https://")):
            return self.recipe_url
        return None

    def __eq__(self, other) -> bool:
        return isinstance(other, Meal) and self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data: dict) -> "Meal":
        """Build a Meal from the camelCase mapping the model returns.

        Raises ValueError when the mapping has no usable name.
        """
        if not isinstance(data, dict):
            raise ValueError("meal entry is not an object")
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError("meal entry has no name")
        ingredients = data.get("ingredients") or []
        if isinstance(ingredients, str):
            ingredients = [part.strip() for part in ingredients.split(",") if part.strip()]
        elif isinstance(ingredients, list):
            ingredients = [str(i) for i in ingredients if i is not None and str(i).strip()]
        else:
            raise ValueError("meal ingredients must be a list")
        return Meal(
            name=name.strip(),
            description=str(data.get("description") or ""),
            prep_time=_to_int(data.get("prepTime")),
            calories=_to_int(data.get("calories")) or None,
            recipe_url=_to_str(data.get("recipeUrl")),
            ingredients=ingredients,
            cuisine=_to_str(data.get("cuisine")),
        )

    def to_dict(self) -> dict:
        d = {
            "name": self.name,
            "description": self.description,
            "prepTime": self.prep_time,
            "ingredients": list(self.ingredients),
        }
        if self.calories:
            d["calories"] = self.calories
        if self.recipe_url:
            d["recipeUrl"] = self.recipe_url
        if self.cuisine:
            d["cuisine"] = self.cuisine
        return d
