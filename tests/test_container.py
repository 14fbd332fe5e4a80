"""Tests for container wiring."""

from diet_planner.adapters.asset_loader import FileAssetLoader
from diet_planner.config import Settings
from diet_planner.containers import build_container


def test_build_container_wires_file_assets() -> None:
    settings = Settings(environment="test", background_opacity=0.3)
    container = build_container(settings)

    assert isinstance(container.asset_loader, FileAssetLoader)
    assert container.asset_loader.background_opacity == 0.3
    assert container.diet_plan_service.renderer is container.renderer
    assert container.settings.logo_path.name == "logo.svg"
