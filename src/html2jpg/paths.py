"""Path bookkeeping for conversions."""

from __future__ import annotations

import re
from pathlib import Path

from .config import IMAGE_SUFFIX, OUTPUT_DIR

_HTML_SUFFIX = re.compile(r"\.html$", re.IGNORECASE)


def output_name_for(html_path: Path | str) -> str:
    """Return the image file name for ``html_path``.

    A trailing ``.html`` (any case) is replaced; any other name keeps its
    suffix and gets ``.jpg`` appended.
    """
    stem = _HTML_SUFFIX.sub("", Path(html_path).name)
    return f"{stem}{IMAGE_SUFFIX}"


def output_path_for(html_path: Path | str, output_dir: Path | str = OUTPUT_DIR) -> Path:
    return Path(output_dir) / output_name_for(html_path)


def file_url(html_path: Path | str) -> str:
    """Absolute ``file://`` URI for a local path, relative to the working directory."""
    return Path(html_path).resolve().as_uri()
