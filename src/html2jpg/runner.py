"""Sequential conversion loop over the command-line file list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import Callable, List, Protocol, Sequence

from .config import OUTPUT_DIR
from .logger import debug_detail, get_logger, step, success
from .paths import output_path_for


class Renderer(Protocol):
    """Anything that can turn one HTML file into one image file."""

    async def render(self, html_path: Path | str, output_path: Path | str) -> None:
        """Write the rendered image for ``html_path`` to ``output_path``."""


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one successful conversion."""

    html_path: str
    output_path: Path
    elapsed_seconds: float


class ConversionRunner:
    """Feed each input to the renderer in order, stopping at the first failure."""

    def __init__(
        self,
        renderer: Renderer,
        output_dir: Path | str = OUTPUT_DIR,
        logger: logging.LoggerAdapter | None = None,
        timer: Callable[[], float] = perf_counter,
    ) -> None:
        self._renderer = renderer
        self._output_dir = Path(output_dir)
        self._logger = logger or get_logger("runner")
        self._timer = timer

    def ensure_output_dir(self) -> bool:
        """Create the output directory if absent. Returns True when it was created."""
        if self._output_dir.is_dir():
            return False
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._logger.info("Created output directory: %s", self._output_dir)
        return True

    async def run(self, html_files: Sequence[str]) -> List[ConversionResult]:
        self.ensure_output_dir()
        step(f"Converting {len(html_files)} HTML file(s) to JPG...")

        results: List[ConversionResult] = []
        for html_file in html_files:
            output_path = output_path_for(html_file, self._output_dir)
            start = self._timer()
            await self._renderer.render(html_file, output_path)
            elapsed = self._timer() - start
            debug_detail(f"Rendered {html_file} in {elapsed:.2f}s")
            results.append(
                ConversionResult(
                    html_path=html_file,
                    output_path=output_path,
                    elapsed_seconds=elapsed,
                )
            )

        success(f"All conversions complete! Check {self._output_dir}/")
        return results
