"""Filesystem-backed loader for the logo and background images."""

import asyncio
from dataclasses import dataclass
from pathlib import Path

from PIL import Image
from reportlab.lib.utils import ImageReader
from svglib.svglib import svg2rlg

from diet_planner.domain.assets import BackgroundAsset, LogoAsset
from diet_planner.domain.errors import AssetLoadError
from diet_planner.services.plans import AssetLoader


@dataclass
class FileAssetLoader(AssetLoader):
    """Decode brand images from local paths in a worker thread."""

    logo_path: Path
    background_path: Path
    background_opacity: float = 0.12

    async def load_logo(self) -> LogoAsset:
        """Load an SVG (as a vector drawing) or raster logo."""
        try:
            return await asyncio.to_thread(_decode_logo, self.logo_path)
        except AssetLoadError:
            raise
        except Exception as exc:
            raise AssetLoadError(f"Could not load logo {self.logo_path}") from exc

    async def load_background(self) -> BackgroundAsset:
        """Load the background and fade it to the configured opacity."""
        try:
            return await asyncio.to_thread(
                _decode_background, self.background_path, self.background_opacity
            )
        except Exception as exc:
            raise AssetLoadError(
                f"Could not load background {self.background_path}"
            ) from exc


def apply_opacity(image: Image.Image, opacity: float) -> Image.Image:
    """Return an RGBA copy with its alpha channel scaled by opacity."""
    factor = max(0.0, min(opacity, 1.0))
    faded = image.convert("RGBA")
    alpha = faded.getchannel("A").point(lambda value: round(value * factor))
    faded.putalpha(alpha)
    return faded


def _decode_logo(path: Path) -> LogoAsset:
    if not path.is_file():
        raise AssetLoadError(f"Logo not found: {path}")
    if path.suffix.lower() == ".svg":
        drawing = svg2rlg(str(path))
        if drawing is None or not drawing.width or not drawing.height:
            raise AssetLoadError(f"Logo is not a usable SVG: {path}")
        return LogoAsset(image=drawing, width=drawing.width, height=drawing.height)
    with Image.open(path) as source:
        image = source.convert("RGBA")
    return LogoAsset(image=ImageReader(image), width=image.width, height=image.height)


def _decode_background(path: Path, opacity: float) -> BackgroundAsset:
    with Image.open(path) as source:
        image = apply_opacity(source, opacity)
    return BackgroundAsset(
        image=ImageReader(image), width=image.width, height=image.height
    )
