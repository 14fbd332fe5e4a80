"""Decoded brand images ready for layout."""

from dataclasses import dataclass

from reportlab.graphics.shapes import Drawing
from reportlab.lib.utils import ImageReader


@dataclass(frozen=True)
class LogoAsset:
    """Header logo, either a vector drawing or a raster image."""

    image: Drawing | ImageReader
    width: float
    height: float

    @property
    def aspect(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class BackgroundAsset:
    """Full-bleed page background with opacity already applied."""

    image: ImageReader
    width: float
    height: float


@dataclass(frozen=True)
class BrandAssets:
    """Images painted on every generated document."""

    logo: LogoAsset
    background: BackgroundAsset
