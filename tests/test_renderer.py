"""Tests for the PDF layout."""

import asyncio
import io
import re

import pytest
from reportlab.pdfgen.canvas import Canvas

from diet_planner.domain.assets import BrandAssets
from diet_planner.domain.plans import ClientProfile, MealSchedule, NutritionTargets
from diet_planner.services.renderer import (
    PAGE_HEIGHT,
    PAGE_WIDTH,
    DietPlanRenderer,
    PageDecorator,
    _section,
    client_info_rows,
    cover_fit,
    macro_rows,
    meal_rows,
)
from tests.conftest import FakeAssetLoader, make_plan


@pytest.fixture
def assets() -> BrandAssets:
    loader = FakeAssetLoader()
    return BrandAssets(
        logo=asyncio.run(loader.load_logo()),
        background=asyncio.run(loader.load_background()),
    )


def _count_pages(content: bytes) -> int:
    return len(re.findall(rb"/Type /Page\b", content))


def test_meal_rows_default_to_not_specified() -> None:
    rows = meal_rows(MealSchedule(lunch="Chicken 150g"))

    assert len(rows) == 9
    assert rows[0] == ("Early Morning", "Not specified")
    assert rows[5] == ("Lunch", "Chicken 150g")
    assert [value for _, value in rows].count("Not specified") == 8


def test_meal_rows_keep_slot_order() -> None:
    labels = [label for label, _ in meal_rows(MealSchedule())]

    assert labels == [
        "Early Morning",
        "Pre-Workout",
        "Post-Workout",
        "Breakfast",
        "Mid-Morning Snack",
        "Lunch",
        "Evening Snack",
        "Dinner",
        "Bedtime",
    ]


def test_meal_rows_break_metrics_at_pipes() -> None:
    rows = dict(meal_rows(MealSchedule(breakfast="Oats 50g | Whey")))

    assert rows["Breakfast"] == "Oats 50g |\nWhey"


def test_client_info_rows_fill_missing_optionals() -> None:
    rows = dict(client_info_rows(ClientProfile(name="Ana", age="31", weight="60")))

    assert rows["Weight"] == "60 kg"
    assert rows["Height"] == "N/A"
    assert rows["Gender"] == "N/A"
    assert rows["Goal"] == "N/A"
    assert rows["Diet Type"] == "N/A"
    assert rows["Start Date"] == "N/A"


def test_macro_rows_apply_units() -> None:
    rows = dict(
        macro_rows(NutritionTargets(calories="1800", protein="120", water_intake="3"))
    )

    assert rows == {
        "Calories": "1800 kcal",
        "Protein": "120g",
        "Carbs": "N/A",
        "Fat": "N/A",
        "Water Intake": "3L/day",
    }


def test_cover_fit_wide_image_fills_height() -> None:
    x, y, width, height = cover_fit(400, 100, 200, 300)

    assert height == 300
    assert width == 1200
    assert x == -500
    assert y == 0


def test_cover_fit_tall_image_fills_width() -> None:
    x, y, width, height = cover_fit(100, 1000, 200, 300)

    assert width == 200
    assert height == 2000
    assert x == 0
    assert y == -850


def test_render_short_plan(assets: BrandAssets) -> None:
    rendered = DietPlanRenderer().render(make_plan(), assets)

    assert rendered.content.startswith(b"%PDF")
    assert rendered.page_count == _count_pages(rendered.content)
    assert rendered.background_pages == tuple(range(1, rendered.page_count + 1))


def test_render_paints_each_page_once_across_page_breaks(
    assets: BrandAssets,
) -> None:
    long_meals = MealSchedule(
        **{
            field: " | ".join(f"Item {i} 100g" for i in range(12))
            for field in (
                "early_morning",
                "breakfast",
                "lunch",
                "dinner",
                "bedtime",
            )
        }
    )
    plan = make_plan(
        meals=long_meals,
        supplements="Multivitamin, Whey, Omega-3. " * 40,
        notes="\N{BULLET} Drink water before every meal.\n" * 150,
    )

    rendered = DietPlanRenderer().render(plan, assets)

    assert rendered.page_count >= 3
    assert rendered.page_count == _count_pages(rendered.content)
    expected = tuple(range(1, rendered.page_count + 1))
    assert rendered.background_pages == expected
    assert rendered.header_pages == expected


def test_render_skips_blank_optional_sections(assets: BrandAssets) -> None:
    renderer = DietPlanRenderer()

    without = renderer.render(make_plan(notes="", supplements=""), assets)
    blank = renderer.render(make_plan(notes="  \n ", supplements=" "), assets)

    assert blank.page_count == without.page_count


def test_page_decorator_ignores_repeat_calls_for_a_page(
    assets: BrandAssets,
) -> None:
    canvas = Canvas(io.BytesIO(), pagesize=(PAGE_WIDTH, PAGE_HEIGHT))
    decorator = PageDecorator(
        assets=assets, subtitle="Subtitle", footer_text="Prepared by Coach"
    )

    decorator(canvas, None)
    decorator.paint_background(canvas)
    decorator.paint_header(canvas)
    canvas.showPage()
    decorator(canvas, None)
    decorator(canvas, None)

    assert decorator.background_pages == [1, 2]
    assert decorator.header_pages == [1, 2]
    assert decorator.footer_pages == [1, 2]


def test_trainer_name_falls_back_to_default() -> None:
    renderer = DietPlanRenderer(default_trainer_name="Team G")

    assert renderer.trainer_name(ClientProfile(name="Ana", trainer_name=" ")) == (
        "Team G"
    )
    assert renderer.trainer_name(ClientProfile(name="Ana", trainer_name="Sam")) == (
        "Sam"
    )


def test_render_splits_a_meal_row_taller_than_a_page(assets: BrandAssets) -> None:
    lunch = " | ".join(f"Item {i} 100g" for i in range(90))

    rendered = DietPlanRenderer().render(
        make_plan(meals=MealSchedule(lunch=lunch)), assets
    )

    assert rendered.page_count >= 2
    assert rendered.page_count == _count_pages(rendered.content)
    expected = tuple(range(1, rendered.page_count + 1))
    assert rendered.background_pages == expected
    assert rendered.header_pages == expected


def test_section_heading_keeps_with_its_content() -> None:
    flowables = _section("DAILY MACROS TARGET")

    assert all(flowable.getKeepWithNext() for flowable in flowables)
