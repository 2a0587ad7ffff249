from typing import Final

ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"

DAYS_OF_WEEK: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)

# Canonical order; the prompt schema and the export columns follow it.
MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")

# (exclusive upper age bound, daily calories); ages past the last bound get SENIOR_CALORIES
CALORIE_BRACKETS: Final[tuple[tuple[int, int], ...]] = (
    (4, 1200),    # toddlers
    (9, 1600),    # young children
    (14, 2000),   # pre-teens
    (19, 2400),   # teenagers
    (51, 2200),   # adults
)
SENIOR_CALORIES: Final[int] = 1800

DIETARY_OPTIONS: Final[dict[str, str]] = {
    "none": "No restrictions",
    "vegetarian": "Vegetarian",
    "vegan": "Vegan",
    "gluten-free": "Gluten-free",
    "dairy-free": "Dairy-free",
    "low-carb": "Low-carb",
    "keto": "Keto",
    "no-fish": "No Fish",
    "no-red-meat": "No Red Meat",
    "simple-cooking": "Simple Cooking (under 15 min prep)",
    "pescatarian": "Pescatarian",
    "paleo": "Paleo",
    "halal": "Halal",
    "kosher": "Kosher",
}

DIETARY_DIRECTIVES: Final[dict[str, str]] = {
    "simple-cooking": (
        "IMPORTANT: All meals must have 15 minutes or less prep time. Focus on quick recipes like "
        "salads, sandwiches, wraps, smoothie bowls, one-pot meals, quick stir-fries, and minimal-prep dishes."
    ),
    "no-fish": "IMPORTANT: Do not include any fish or seafood.",
    "no-red-meat": (
        "IMPORTANT: Do not include beef, pork, lamb, or other red meats. "
        "Chicken, turkey, fish, and plant-based proteins are fine."
    ),
}

CUISINES: Final[tuple[str, ...]] = (
    "Chinese", "Indian", "Thai", "Japanese", "Korean", "Mexican",
    "Mediterranean", "Middle Eastern", "Vietnamese",
)

GROCERY_CATEGORIES: Final[dict[str, str]] = {
    "Proteins": "2 lbs chicken breast",
    "Vegetables": "3 large tomatoes",
    "Fruits": "6 bananas",
    "Grains": "1 box pasta (16 oz)",
    "Dairy": "1 gallon milk",
    "Spices & Aromatics": "1 bunch cilantro",
    "Pantry": "1 bottle olive oil",
}

# Calendar windows (start, end); meal types not listed use DEFAULT_MEAL_WINDOW
MEAL_TIME_WINDOWS: Final[dict[str, tuple[str, str]]] = {
    "breakfast": ("0800", "0900"),
    "lunch": ("1200", "1300"),
}
DEFAULT_MEAL_WINDOW: Final[tuple[str, str]] = ("1800", "1900")

CALENDAR_PRODID: Final[str] = "-//Meal Planner//EN"
UID_DOMAIN: Final[str] = "mealai"

TEXT_MEDIA_TYPE: Final[str] = "text/plain"
CALENDAR_MEDIA_TYPE: Final[str] = "text/calendar"
EXPORT_FILE_PREFIX: Final[str] = "meal-plan"
