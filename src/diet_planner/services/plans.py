"""Diet plan generation service."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from diet_planner.domain.assets import BackgroundAsset, BrandAssets, LogoAsset
from diet_planner.domain.errors import MissingFieldsError
from diet_planner.domain.plans import DietPlan
from diet_planner.services.renderer import DietPlanRenderer

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in required fields (Name, Age, Weight)"
GENERATED_MESSAGE = "PDF generated successfully!"
GENERATION_FAILED_MESSAGE = "Failed to generate PDF. Please try again."

_WHITESPACE = re.compile(r"\s+")


class AssetLoader(Protocol):
    """Interface for decoding the brand images."""

    async def load_logo(self) -> LogoAsset:
        """Return the decoded header logo."""

    async def load_background(self) -> BackgroundAsset:
        """Return the decoded page background."""


@dataclass(frozen=True)
class GeneratedPlan:
    """A finished document ready for download."""

    file_name: str
    content: bytes
    page_count: int


def validate_required(plan: DietPlan) -> None:
    """Raise MissingFieldsError when name, age or weight is blank."""
    required = (
        ("Name", plan.profile.name),
        ("Age", plan.profile.age),
        ("Weight", plan.profile.weight),
    )
    missing = [label for label, value in required if not value.strip()]
    if missing:
        raise MissingFieldsError(missing)


def build_file_name(client_name: str, today: date) -> str:
    """Return {name_with_underscores}_DietPlan_{YYYY-MM-DD}.pdf."""
    slug = _WHITESPACE.sub("_", client_name.strip())
    return f"{slug}_DietPlan_{today.isoformat()}.pdf"


def _utc_today() -> date:
    return datetime.now(tz=UTC).date()


@dataclass
class DietPlanService:
    """Validates a snapshot, loads brand assets and renders the PDF."""

    asset_loader: AssetLoader
    renderer: DietPlanRenderer
    today: Callable[[], date] = _utc_today

    async def generate(self, plan: DietPlan) -> GeneratedPlan:
        """Produce the downloadable document for a plan snapshot."""
        validate_required(plan)
        logo = await self.asset_loader.load_logo()
        background = await self.asset_loader.load_background()
        rendered = self.renderer.render(
            plan, BrandAssets(logo=logo, background=background)
        )
        file_name = build_file_name(plan.profile.name, self.today())
        logger.info(
            "Generated diet plan",
            extra={"file_name": file_name, "page_count": rendered.page_count},
        )
        return GeneratedPlan(
            file_name=file_name,
            content=rendered.content,
            page_count=rendered.page_count,
        )
