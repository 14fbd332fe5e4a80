"""Diet plan domain models."""

from dataclasses import dataclass

DEFAULT_TRAINER_NAME = "G-FORCE"

GENDER_CHOICES: tuple[str, ...] = ("Male", "Female", "Other")
GOAL_CHOICES: tuple[str, ...] = ("Fat Loss", "Muscle Gain", "Maintenance")
# (stored value, form label)
DIET_TYPE_CHOICES: tuple[tuple[str, str], ...] = (
    ("Veg", "Vegetarian"),
    ("Non-Veg", "Non-Vegetarian"),
    ("Veg + Egg", "Veg + Egg"),
    ("Vegan", "Vegan"),
)


@dataclass(frozen=True)
class MealSlot:
    """A fixed time of day in the meal schedule."""

    field: str
    label: str
    form_label: str
    placeholder: str


MEAL_SLOTS: tuple[MealSlot, ...] = (
    MealSlot(
        "early_morning",
        "Early Morning",
        "Early Morning / On Waking",
        "e.g., Lukewarm water + lemon + honey",
    ),
    MealSlot(
        "pre_workout",
        "Pre-Workout",
        "Pre-Workout",
        "e.g., Any citrus fruit + roasted seeds",
    ),
    MealSlot("post_workout", "Post-Workout", "Post-Workout", "e.g., Protein shake"),
    MealSlot(
        "breakfast",
        "Breakfast",
        "Breakfast",
        "e.g., 6 egg whites + oats 50g + walnuts 25g",
    ),
    MealSlot(
        "mid_morning",
        "Mid-Morning Snack",
        "Mid-Morning Snack",
        "e.g., Greek yogurt + berries",
    ),
    MealSlot(
        "lunch",
        "Lunch",
        "Lunch",
        "e.g., Grilled chicken 150g + brown rice 100g + vegetables",
    ),
    MealSlot(
        "evening_snack",
        "Evening Snack",
        "Evening Snack",
        "e.g., Handful of nuts + green tea",
    ),
    MealSlot(
        "dinner",
        "Dinner",
        "Dinner",
        "e.g., Grilled fish 150g + quinoa 80g + steamed vegetables",
    ),
    MealSlot(
        "bedtime",
        "Bedtime",
        "Bedtime Drink",
        "e.g., Casein protein shake or warm milk",
    ),
)


@dataclass(frozen=True)
class ClientProfile:
    """Who the plan is for."""

    name: str
    gender: str = ""
    age: str = ""
    weight: str = ""
    height: str = ""
    goal: str = ""
    diet_type: str = ""
    start_date: str = ""
    trainer_name: str = DEFAULT_TRAINER_NAME


@dataclass(frozen=True)
class NutritionTargets:
    """Daily macro targets, kept as the text the trainer typed."""

    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fat: str = ""
    water_intake: str = ""
    supplements: str = ""


@dataclass(frozen=True)
class MealSchedule:
    """Free-text meal descriptions for each slot."""

    early_morning: str = ""
    pre_workout: str = ""
    post_workout: str = ""
    breakfast: str = ""
    mid_morning: str = ""
    lunch: str = ""
    evening_snack: str = ""
    dinner: str = ""
    bedtime: str = ""

    def entries(self) -> list[tuple[str, str]]:
        """Return (label, description) pairs in schedule order."""
        return [(slot.label, getattr(self, slot.field)) for slot in MEAL_SLOTS]


@dataclass(frozen=True)
class DietPlan:
    """Snapshot of the form consumed by a single render."""

    profile: ClientProfile
    targets: NutritionTargets
    meals: MealSchedule
    notes: str = ""
