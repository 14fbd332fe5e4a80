"""Pydantic models for the diet plan form payload."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from diet_planner.domain.plans import (
    ClientProfile,
    DietPlan,
    MealSchedule,
    NutritionTargets,
)

_FORM_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    coerce_numbers_to_str=True,
    str_strip_whitespace=True,
)


class MealsPayload(BaseModel):
    """Meal descriptions keyed by slot."""

    model_config = _FORM_CONFIG

    early_morning: str = ""
    pre_workout: str = ""
    post_workout: str = ""
    breakfast: str = ""
    mid_morning: str = ""
    lunch: str = ""
    evening_snack: str = ""
    dinner: str = ""
    bedtime: str = ""


class DietPlanRequest(BaseModel):
    """Form snapshot posted by the generator page."""

    model_config = _FORM_CONFIG

    client_name: str = ""
    gender: str = ""
    age: str = ""
    weight: str = ""
    height: str = ""
    goal: str = ""
    diet_type: str = ""
    start_date: str = ""
    trainer_name: str = ""
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fat: str = ""
    water_intake: str = ""
    supplements: str = ""
    notes: str = ""
    meals: MealsPayload = Field(default_factory=MealsPayload)

    def to_domain(self, default_trainer_name: str) -> DietPlan:
        """Take the immutable snapshot consumed by the renderer."""
        return DietPlan(
            profile=ClientProfile(
                name=self.client_name,
                gender=self.gender,
                age=self.age,
                weight=self.weight,
                height=self.height,
                goal=self.goal,
                diet_type=self.diet_type,
                start_date=self.start_date,
                trainer_name=self.trainer_name or default_trainer_name,
            ),
            targets=NutritionTargets(
                calories=self.calories,
                protein=self.protein,
                carbs=self.carbs,
                fat=self.fat,
                water_intake=self.water_intake,
                supplements=self.supplements,
            ),
            meals=MealSchedule(**self.meals.model_dump()),
            notes=self.notes,
        )
