"""Render local HTML documents to high-resolution JPEG images."""

from .config import OUTPUT_DIR, RenderSettings
from .paths import output_path_for
from .renderer import PlaywrightRenderer
from .runner import ConversionResult, ConversionRunner

__all__ = [
    "OUTPUT_DIR",
    "RenderSettings",
    "output_path_for",
    "PlaywrightRenderer",
    "ConversionResult",
    "ConversionRunner",
]
