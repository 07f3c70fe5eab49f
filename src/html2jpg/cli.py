"""Command-line entry point: ``html2jpg <html-file>...``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional, Sequence

from .config import OUTPUT_DIR, RenderSettings, load_environment
from .logger import configure_logging, logger
from .renderer import PlaywrightRenderer
from .runner import ConversionResult, ConversionRunner

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

HELP_FLAGS = frozenset({"-h", "--help"})

_SETTINGS = RenderSettings()

EPILOG = """
Examples:
  html2jpg omniflow_id.html
  html2jpg *.html
  html2jpg omniflow_id.html tot_invitation.html

Images are written to ./{output}/ at {raster[0]}x{raster[1]} ({viewport[width]}x{viewport[height]} viewport, {scale}x scale).
""".format(
    output=OUTPUT_DIR,
    raster=_SETTINGS.raster_size,
    viewport=_SETTINGS.viewport,
    scale=_SETTINGS.device_scale_factor,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2jpg",
        description="Render local HTML files to high-resolution JPEG screenshots.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("html_files", nargs="*", metavar="html-file", help="HTML file to convert")
    parser.add_argument("-h", "--help", action="store_true", help="Show this message and exit")
    return parser


async def convert(html_files: Sequence[str]) -> List[ConversionResult]:
    runner = ConversionRunner(PlaywrightRenderer(), OUTPUT_DIR)
    return await runner.run(html_files)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_environment()
    configure_logging()

    parser = build_parser()
    arguments = list(sys.argv[1:] if argv is None else argv)
    # A help flag anywhere wins over whatever else is on the line.
    if not arguments or HELP_FLAGS.intersection(arguments):
        parser.print_help()
        return EXIT_OK

    args = parser.parse_args(arguments)
    try:
        asyncio.run(convert(args.html_files))
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return EXIT_INTERRUPTED
    except Exception as exc:
        logger.error("Error: %s", exc)
        return EXIT_FAILURE
    return EXIT_OK
