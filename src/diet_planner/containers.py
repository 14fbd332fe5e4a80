"""Dependency container wiring for the application."""

from dataclasses import dataclass

from diet_planner.adapters.asset_loader import FileAssetLoader
from diet_planner.config import Settings
from diet_planner.services.plans import AssetLoader, DietPlanService
from diet_planner.services.renderer import DietPlanRenderer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    asset_loader: AssetLoader
    renderer: DietPlanRenderer
    diet_plan_service: DietPlanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    asset_loader = FileAssetLoader(
        logo_path=resolved_settings.logo_path,
        background_path=resolved_settings.background_path,
        background_opacity=resolved_settings.background_opacity,
    )
    renderer = DietPlanRenderer(
        brand_name=resolved_settings.brand_name,
        footer_tagline=resolved_settings.footer_tagline,
        default_trainer_name=resolved_settings.default_trainer_name,
    )
    diet_plan_service = DietPlanService(asset_loader=asset_loader, renderer=renderer)
    return AppContainer(
        settings=resolved_settings,
        asset_loader=asset_loader,
        renderer=renderer,
        diet_plan_service=diet_plan_service,
    )
