"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest
from PIL import Image
from reportlab.lib.utils import ImageReader

from diet_planner.config import Settings
from diet_planner.containers import AppContainer
from diet_planner.domain.assets import BackgroundAsset, LogoAsset
from diet_planner.domain.errors import AssetLoadError
from diet_planner.domain.plans import (
    ClientProfile,
    DietPlan,
    MealSchedule,
    NutritionTargets,
)
from diet_planner.services.plans import AssetLoader, DietPlanService
from diet_planner.services.renderer import DietPlanRenderer

FIXED_DAY = date(2025, 11, 1)


@dataclass
class FakeAssetLoader(AssetLoader):
    """In-memory brand images for tests."""

    calls: list[str] = field(default_factory=list)

    async def load_logo(self) -> LogoAsset:
        self.calls.append("logo")
        image = Image.new("RGBA", (200, 40), (164, 255, 46, 255))
        return LogoAsset(image=ImageReader(image), width=200, height=40)

    async def load_background(self) -> BackgroundAsset:
        self.calls.append("background")
        image = Image.new("RGBA", (60, 90), (255, 255, 255, 30))
        return BackgroundAsset(image=ImageReader(image), width=60, height=90)


@dataclass
class FailingAssetLoader(AssetLoader):
    """Asset loader whose logo cannot be decoded."""

    async def load_logo(self) -> LogoAsset:
        raise AssetLoadError("Could not load logo missing.svg")

    async def load_background(self) -> BackgroundAsset:
        raise AssetLoadError("Could not load background missing.png")


def make_plan(  # noqa: PLR0913
    name: str = "John Doe",
    age: str = "29",
    weight: str = "82",
    notes: str = "",
    supplements: str = "",
    meals: MealSchedule | None = None,
) -> DietPlan:
    return DietPlan(
        profile=ClientProfile(
            name=name,
            gender="Male",
            age=age,
            weight=weight,
            height="180",
            goal="Fat Loss",
            diet_type="Non-Veg",
            start_date="2025-11-03",
            trainer_name="Coach Sam",
        ),
        targets=NutritionTargets(
            calories="2200",
            protein="160",
            carbs="220",
            fat="70",
            water_intake="3.5",
            supplements=supplements,
        ),
        meals=meals or MealSchedule(breakfast="Oats 50g | Whey 1 scoop"),
        notes=notes,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def asset_loader() -> FakeAssetLoader:
    return FakeAssetLoader()


@pytest.fixture
def renderer() -> DietPlanRenderer:
    return DietPlanRenderer()


@pytest.fixture
def container(
    settings: Settings, asset_loader: FakeAssetLoader, renderer: DietPlanRenderer
) -> AppContainer:
    return AppContainer(
        settings=settings,
        asset_loader=asset_loader,
        renderer=renderer,
        diet_plan_service=DietPlanService(
            asset_loader=asset_loader,
            renderer=renderer,
            today=lambda: FIXED_DAY,
        ),
    )
