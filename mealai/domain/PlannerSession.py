"""PlannerSession: the in-memory application state of one planner page.

Holds the last submitted form, its calorie profile and the current plan.
A request-in-flight flag refuses a second generation while one is running,
so two responses can never race to overwrite the plan.
"""
import threading
from typing import Optional

from mealai.domain.CalorieProfile import CalorieProfile
from mealai.domain.MealPlan import MealPlan


class PlannerSession:
    def __init__(self):
        self.form = None
        self.profile: Optional[CalorieProfile] = None
        self.plan: Optional[MealPlan] = None
        self._in_flight = False
        self._lock = threading.Lock()

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def begin_generation(self) -> bool:
        """Set the in-flight flag; False if a generation is already running."""
        with self._lock:
            if self._in_flight:
                return False
            self._in_flight = True
            return True

    def finish_generation(self) -> None:
        with self._lock:
            self._in_flight = False

    def replace_plan(self, form, profile: CalorieProfile, plan: MealPlan) -> None:
        """Swap in a new plan wholesale; the last call wins."""
        self.form = form
        self.profile = profile
        self.plan = plan

    def reset(self) -> None:
        self.form = None
        self.profile = None
        self.plan = None
        self.finish_generation()
