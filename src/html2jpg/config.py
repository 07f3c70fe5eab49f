"""Fixed conversion settings and .env bootstrap."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

OUTPUT_DIR = Path("output")
IMAGE_SUFFIX = ".jpg"


@dataclass(frozen=True)
class RenderSettings:
    """Browser and capture parameters used for every conversion.

    A 1080x1920 viewport at scale factor 3 rasterises to 3240x5760, which
    keeps small text crisp in the JPEG.
    """

    viewport_width: int = 1080
    viewport_height: int = 1920
    device_scale_factor: int = 3
    image_type: str = "jpeg"
    quality: int = 100
    full_page: bool = False
    wait_until: str = "networkidle"
    browser_name: str = "chromium"
    headless: bool = True

    @property
    def viewport(self) -> dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}

    @property
    def raster_size(self) -> tuple[int, int]:
        return (
            self.viewport_width * self.device_scale_factor,
            self.viewport_height * self.device_scale_factor,
        )


def load_environment(env_file: Optional[Path] = None) -> bool:
    """Load logging variables from ``.env`` without overriding the process env."""
    path = env_file or Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(dotenv_path=path, override=False)
