"""CalorieProfile value object: per-age daily targets and household totals."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CalorieProfile:
    entries: Tuple[Tuple[int, int], ...]  # (age, daily calories), input order
    total_daily_calories: int
    average_per_person: int

    @property
    def count(self) -> int:
        return len(self.entries)

    def per_meal(self, meals_per_day: int) -> int:
        """Household calories per meal, rounded half up."""
        if meals_per_day <= 0:
            raise ValueError("meals_per_day must be positive")
        return int(self.total_daily_calories / meals_per_day + 0.5)

    def to_dict(self) -> dict:
        return {
            "calorieBreakdown": [{"age": a, "calories": c} for a, c in self.entries],
            "totalCalories": self.total_daily_calories,
            "averagePerPerson": self.average_per_person,
        }
